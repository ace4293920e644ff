"""Shared fixtures: an in-memory parser for a tiny line-based class format.

Format understood by ``FakeParser``::

    using System;
    namespace Shop
    [Serializable]
    class Item : IThing, List<int>, A.B
        ... body lines ...
    end

``class`` lines may nest; ``end`` closes the innermost open class.
"""

from collections.abc import Iterator
from pathlib import Path

import pytest

from kue.source import BaseType, Document, ParsedSource


class FakeNode:
    def __init__(
        self,
        kind: str,
        lines: list[str],
        start: int,
        end: int | None = None,
        name: str = "",
        attributes: list[str] | None = None,
        bases: list[str] | None = None,
        namespace: str | None = None,
    ) -> None:
        self.kind = kind
        self._lines = lines
        self._start = start
        self.end = start if end is None else end
        self.name = name
        self._attributes = attributes or []
        self._bases = bases or []
        self._namespace = namespace
        self.children: list["FakeNode"] = []

    @property
    def start_line(self) -> int:
        return self._start

    def is_class_like(self) -> bool:
        return self.kind == "class"

    def is_using_directive(self) -> bool:
        return self.kind == "using"

    def descendants(self) -> Iterator["FakeNode"]:
        for child in self.children:
            yield child
            yield from child.descendants()

    def text(self) -> str:
        return "\n".join(self._lines[self._start : self.end + 1])

    def full_text(self) -> str:
        return self.text() + "\n"

    def identifier(self) -> str:
        return self.name

    def attributes(self) -> list[str]:
        return list(self._attributes)

    def base_types(self) -> list[BaseType]:
        types = []
        for text in self._bases:
            if "<" in text:
                kind = "generic"
            elif text.startswith("("):
                kind = "tuple"
            elif text.endswith("[]"):
                kind = "array"
            elif "." in text:
                kind = "qualified"
            else:
                kind = "named"
            types.append(BaseType(kind=kind, text=text))
        return types

    def enclosing_namespace(self) -> str | None:
        return self._namespace


class FakeParser:
    def __init__(self) -> None:
        self.parsed_texts: list[str] = []

    def parse(self, text: str) -> ParsedSource:
        self.parsed_texts.append(text)
        lines = text.split("\n")
        root = FakeNode("root", lines, 0, len(lines) - 1)
        stack = [root]
        namespace = None
        pending_attributes: list[str] = []
        attribute_start: int | None = None
        for index, line in enumerate(lines):
            stripped = line.strip()
            if stripped.startswith("using "):
                stack[-1].children.append(FakeNode("using", lines, index))
            elif stripped.startswith("namespace "):
                namespace = stripped.split(" ", 1)[1]
            elif stripped.startswith("[") and stripped.endswith("]"):
                pending_attributes.append(stripped[1:-1])
                if attribute_start is None:
                    attribute_start = index
            elif stripped.startswith("class "):
                header, _, bases = stripped[len("class ") :].partition(":")
                node = FakeNode(
                    "class",
                    lines,
                    attribute_start if attribute_start is not None else index,
                    name=header.strip(),
                    attributes=pending_attributes,
                    bases=[part.strip() for part in bases.split(",") if part.strip()],
                    namespace=namespace,
                )
                stack[-1].children.append(node)
                stack.append(node)
                pending_attributes = []
                attribute_start = None
            elif stripped == "end" and len(stack) > 1:
                stack.pop().end = index
        return ParsedSource(root=root)


@pytest.fixture
def fake_parser() -> FakeParser:
    return FakeParser()


@pytest.fixture
def make_document(tmp_path: Path):
    root = tmp_path / "workspace"

    def _make(relative_path: str, content: str, project: str = "App") -> Document:
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return Document(path=path, relative_path=relative_path, project=project)

    return _make
