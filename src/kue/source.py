# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Source parser interfaces and DTOs consumed by the scanning core."""

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Protocol


BaseTypeKind = Literal["named", "generic", "qualified", "tuple", "array", "other"]


@dataclass(frozen=True)
class BaseType:
    """Represent one entry of a declaration's base type list.

    Attributes:
        kind: Syntactic form of the base type reference.
        text: Exact source text of the reference.
    """

    kind: BaseTypeKind
    text: str


@dataclass(frozen=True)
class Document:
    """Represent one source file of a workspace.

    Attributes:
        path: Absolute file path.
        relative_path: Workspace-relative POSIX path.
        project: Name of the owning project.
    """

    path: Path
    relative_path: str
    project: str

    @property
    def display_path(self) -> str:
        """Return the root-prefixed, forward-slash path used in reports."""
        return "/" + self.relative_path.lstrip("/")

    def read_text(self) -> str:
        """Read the full document text.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        return self.path.read_text(encoding="utf-8-sig")


class SyntaxNode(Protocol):
    """Capability view of a parser node required by the core."""

    @property
    def start_line(self) -> int:
        """0-based line of the node start."""

    def is_class_like(self) -> bool:
        """Return whether the node is a class declaration eligible for matching."""

    def is_using_directive(self) -> bool:
        """Return whether the node is a using/import directive."""

    def descendants(self) -> Iterator["SyntaxNode"]:
        """Yield all descendant nodes in pre-order."""

    def text(self) -> str:
        """Return the node text without surrounding trivia."""

    def full_text(self) -> str:
        """Return the node text including leading and trailing trivia."""

    def identifier(self) -> str:
        """Return the declared identifier."""

    def attributes(self) -> list[str]:
        """Return attribute texts in source order."""

    def base_types(self) -> list[BaseType]:
        """Return base type references in source order."""

    def enclosing_namespace(self) -> str | None:
        """Return the nearest enclosing namespace name, if any."""


@dataclass(frozen=True)
class ParsedSource:
    """Represent one parsed document tree."""

    root: SyntaxNode
    has_errors: bool = False


class SourceParser(Protocol):
    """Language-specific parser contract."""

    def parse(self, text: str) -> ParsedSource:
        """Parse document text into a syntax tree."""


@dataclass(frozen=True)
class Project:
    """Represent one project and its documents."""

    name: str
    documents: tuple[Document, ...]


@dataclass(frozen=True)
class Workspace:
    """Represent the full collection of projects under analysis.

    Attributes:
        root: Directory all relative paths are computed against.
        projects: Projects in load order.
    """

    root: Path
    projects: tuple[Project, ...]

    @property
    def documents(self) -> list[Document]:
        """Return every document across projects, in project order."""
        return [document for project in self.projects for document in project.documents]
