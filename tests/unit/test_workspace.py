from pathlib import Path

import pytest

from kue.workspace import WorkspaceLoadError, load_workspace


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


SOLUTION = "\n".join(
    [
        "Microsoft Visual Studio Solution File, Format Version 12.00",
        'Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Core", "src\\Core\\Core.csproj", "{11111111-1111-1111-1111-111111111111}"',
        "EndProject",
        'Project("{2150E333-8FDC-42A3-9474-1A3956D46DE8}") = "Solution Items", "Solution Items", "{22222222-2222-2222-2222-222222222222}"',
        "EndProject",
        'Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Api", "src\\Api\\Api.csproj", "{33333333-3333-3333-3333-333333333333}"',
        "EndProject",
        "Global",
        "EndGlobal",
    ]
)


def test_ws_001_directory_workspace_lists_sources_in_sorted_walk_order(
    tmp_path: Path,
) -> None:
    root = tmp_path / "repo"
    _write_file(root / "Program.cs", "class Program { }")
    _write_file(root / "Models" / "Order.cs", "class Order { }")
    _write_file(root / "Models" / "notes.txt", "not source")
    _write_file(root / "bin" / "Debug" / "Generated.cs", "class Generated { }")
    _write_file(root / "obj" / "Temp.cs", "class Temp { }")

    workspace = load_workspace(root)

    assert workspace.root == root.resolve()
    assert [d.relative_path for d in workspace.documents] == [
        "Program.cs",
        "Models/Order.cs",
    ]
    assert workspace.documents[1].display_path == "/Models/Order.cs"


def test_ws_002_gitignore_patterns_exclude_documents(tmp_path: Path) -> None:
    root = tmp_path / "repo"
    _write_file(root / ".gitignore", "Generated/\n*.g.cs\n")
    _write_file(root / "Generated" / "Auto.cs", "class Auto { }")
    _write_file(root / "Models" / "Order.g.cs", "class OrderGen { }")
    _write_file(root / "Models" / "Order.cs", "class Order { }")

    workspace = load_workspace(root)

    assert [d.relative_path for d in workspace.documents] == ["Models/Order.cs"]


def test_ws_003_solution_loads_csharp_projects_relative_to_solution_dir(
    tmp_path: Path,
) -> None:
    root = tmp_path / "repo"
    _write_file(root / "App.sln", SOLUTION)
    _write_file(root / "src" / "Core" / "Core.csproj", "<Project />")
    _write_file(root / "src" / "Core" / "Entity.cs", "class Entity { }")
    _write_file(root / "src" / "Api" / "Api.csproj", "<Project />")
    _write_file(root / "src" / "Api" / "Controllers" / "Home.cs", "class Home { }")
    _write_file(root / "tools" / "Script.cs", "class Script { }")

    workspace = load_workspace(root / "App.sln")

    assert workspace.root == root.resolve()
    assert [project.name for project in workspace.projects] == ["Core", "Api"]
    assert [d.display_path for d in workspace.documents] == [
        "/src/Core/Entity.cs",
        "/src/Api/Controllers/Home.cs",
    ]
    assert workspace.documents[1].project == "Api"


def test_ws_004_missing_workspace_path_fails(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceLoadError, match="does not exist"):
        load_workspace(tmp_path / "missing.sln")


def test_ws_005_unsupported_workspace_file_fails(tmp_path: Path) -> None:
    readme = tmp_path / "README.md"
    _write_file(readme, "# readme")

    with pytest.raises(WorkspaceLoadError, match="Unsupported"):
        load_workspace(readme)


def test_ws_006_project_file_loads_its_directory(tmp_path: Path) -> None:
    root = tmp_path / "Lib"
    _write_file(root / "Lib.csproj", "<Project />")
    _write_file(root / "Thing.cs", "class Thing { }")

    workspace = load_workspace(root / "Lib.csproj")

    assert [project.name for project in workspace.projects] == ["Lib"]
    assert [d.relative_path for d in workspace.documents] == ["Thing.cs"]


def test_ws_007_nested_gitignore_applies_below_its_directory_and_can_reinclude(
    tmp_path: Path,
) -> None:
    root = tmp_path / "repo"
    _write_file(root / ".gitignore", "*.g.cs\n")
    _write_file(root / "Models" / ".gitignore", "!Keep.g.cs\nLocal/\n")
    _write_file(root / "Models" / "Keep.g.cs", "class Keep { }")
    _write_file(root / "Models" / "Order.g.cs", "class OrderGen { }")
    _write_file(root / "Models" / "Order.cs", "class Order { }")
    _write_file(root / "Models" / "Local" / "Scratch.cs", "class Scratch { }")
    _write_file(root / "Other" / "Local" / "Kept.cs", "class Kept { }")

    workspace = load_workspace(root)

    assert [d.relative_path for d in workspace.documents] == [
        "Models/Keep.g.cs",
        "Models/Order.cs",
        "Other/Local/Kept.cs",
    ]


def test_ws_008_project_below_root_honors_ancestor_gitignore(tmp_path: Path) -> None:
    root = tmp_path / "repo"
    _write_file(root / ".gitignore", "Generated/\n")
    _write_file(root / "App.sln", SOLUTION)
    _write_file(root / "src" / "Core" / "Core.csproj", "<Project />")
    _write_file(root / "src" / "Core" / "Entity.cs", "class Entity { }")
    _write_file(root / "src" / "Core" / "Generated" / "Auto.cs", "class Auto { }")

    workspace = load_workspace(root / "App.sln")

    assert [d.display_path for d in workspace.documents] == ["/src/Core/Entity.cs"]
