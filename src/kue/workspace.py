# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Workspace loading from solution files or plain directories."""

import logging
import re
from pathlib import Path

import pathspec

from kue.source import Document, Project, Workspace

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".cs"
SKIPPED_DIR_NAMES = frozenset({".git", ".vs", "bin", "obj", "node_modules"})
_SOLUTION_PROJECT_RE = re.compile(
    r'^Project\("\{[^}]*\}"\)\s*=\s*"(?P<name>[^"]*)"\s*,\s*"(?P<path>[^"]*)"'
)


class WorkspaceLoadError(RuntimeError):
    """Represent a failure to open the requested workspace."""


class IgnoreRules:
    """Layered .gitignore rules collected while walking down a source tree.

    Each layer holds the patterns of one .gitignore file together with the
    root-relative directory it lives in. Deeper layers take precedence, so a
    nested ``!pattern`` re-includes what a parent file ignores.
    """

    def __init__(self, layers: tuple[tuple[str, pathspec.GitIgnoreSpec], ...] = ()) -> None:
        self._layers = layers

    def descend(self, directory: Path, relative_dir: str) -> "IgnoreRules":
        """Return rules extended with the .gitignore file of a directory.

        Args:
            directory: Directory being entered.
            relative_dir: Its POSIX path relative to the rules root, ``""`` for the root.

        Returns:
            The same rules when the directory has no .gitignore file.

        Raises:
            OSError: If the .gitignore file cannot be read.
            UnicodeDecodeError: If the .gitignore file contains invalid UTF-8.
        """
        ignore_path = directory / ".gitignore"
        if not ignore_path.is_file():
            return self
        spec = pathspec.GitIgnoreSpec.from_lines(
            ignore_path.read_text(encoding="utf-8").splitlines()
        )
        logger.debug(f"Loaded ignore rules (path={ignore_path} patterns={len(spec.patterns)})")
        return IgnoreRules(self._layers + ((relative_dir, spec),))

    def ignores(self, relative_path: str, is_dir: bool) -> bool:
        """Check whether a root-relative POSIX path is ignored."""
        for base, spec in reversed(self._layers):
            if base:
                if not relative_path.startswith(f"{base}/"):
                    continue
                local = relative_path[len(base) + 1 :]
            else:
                local = relative_path
            result = spec.check_file(f"{local}/" if is_dir else local)
            if result.include is not None:
                return result.include
        return False


def load_workspace(path: Path) -> Workspace:
    """Open a workspace from a solution file, project file, or directory.

    Args:
        path: ``.sln`` file, ``.csproj`` file, or source directory.

    Returns:
        Loaded workspace with documents in deterministic order.

    Raises:
        WorkspaceLoadError: If the path does not exist or cannot be read.
    """
    path = path.resolve()
    if not path.exists():
        raise WorkspaceLoadError(f"Workspace path does not exist: {path}")

    if path.is_dir():
        root = path
        project_paths = [(path.name or str(path), path)]
    elif path.suffix.lower() == ".sln":
        root = path.parent
        project_paths = _read_solution_projects(path)
    elif path.suffix.lower() == ".csproj":
        root = path.parent
        project_paths = [(path.stem, path.parent)]
    else:
        raise WorkspaceLoadError(f"Unsupported workspace file: {path}")

    seen: set[Path] = set()
    projects: list[Project] = []
    for name, project_dir in project_paths:
        if not project_dir.is_dir():
            logger.warning(
                f"Skipping project with missing directory (project={name} path={project_dir})"
            )
            continue
        rules_root = root if project_dir.is_relative_to(root) else project_dir
        try:
            source_paths = _walk_sources(project_dir, rules_root)
        except (OSError, UnicodeDecodeError) as exc:
            raise WorkspaceLoadError(f"Failed to list sources of {name}: {exc}") from exc
        documents: list[Document] = []
        for source_path in source_paths:
            if source_path in seen:
                logger.debug(f"Document already loaded by another project (path={source_path})")
                continue
            seen.add(source_path)
            documents.append(
                Document(
                    path=source_path,
                    relative_path=_relative_posix(source_path, root),
                    project=name,
                )
            )
        projects.append(Project(name=name, documents=tuple(documents)))

    logger.info(
        f"Workspace loaded (root={root} projects={len(projects)} "
        f"documents={sum(len(p.documents) for p in projects)})"
    )
    return Workspace(root=root, projects=tuple(projects))


def _read_solution_projects(solution_path: Path) -> list[tuple[str, Path]]:
    """Read C# project entries from a solution file.

    Solution folders and non-C# projects are ignored.

    Raises:
        WorkspaceLoadError: If the solution file cannot be read.
    """
    try:
        lines = solution_path.read_text(encoding="utf-8-sig").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise WorkspaceLoadError(f"Failed to read solution {solution_path}: {exc}") from exc

    projects: list[tuple[str, Path]] = []
    for line in lines:
        match = _SOLUTION_PROJECT_RE.match(line.strip())
        if match is None:
            continue
        project_file = match.group("path").replace("\\", "/")
        if not project_file.lower().endswith(".csproj"):
            continue
        project_dir = (solution_path.parent / project_file).resolve().parent
        projects.append((match.group("name"), project_dir))
    logger.debug(f"Solution parsed (path={solution_path} projects={len(projects)})")
    return projects


def _rules_for(directory: Path, rules_root: Path) -> IgnoreRules:
    """Collect .gitignore rules from the rules root down to a directory."""
    rules = IgnoreRules().descend(rules_root, "")
    current = rules_root
    for part in directory.relative_to(rules_root).parts:
        current = current / part
        rules = rules.descend(current, current.relative_to(rules_root).as_posix())
    return rules


def _walk_sources(directory: Path, rules_root: Path) -> list[Path]:
    """Return C# source files beneath a directory in sorted walk order.

    Build output and tooling directories are never entered, and neither are
    directories a .gitignore file excludes.
    """
    sources: list[Path] = []
    queue: list[tuple[Path, IgnoreRules]] = [(directory, _rules_for(directory, rules_root))]
    while queue:
        current, rules = queue.pop(0)
        for child in sorted(current.iterdir(), key=lambda item: item.name):
            is_dir = child.is_dir()
            if is_dir and child.name in SKIPPED_DIR_NAMES:
                continue
            relative = child.relative_to(rules_root).as_posix()
            if rules.ignores(relative_path=relative, is_dir=is_dir):
                continue
            if is_dir:
                queue.append((child, rules.descend(child, relative)))
            elif child.suffix == SOURCE_SUFFIX:
                sources.append(child)
    return sources


def _relative_posix(path: Path, root: Path) -> str:
    if path.is_relative_to(root):
        return path.relative_to(root).as_posix()
    return path.as_posix().lstrip("/")
