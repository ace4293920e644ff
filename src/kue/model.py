# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for keyword usage reports."""

import posixpath
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

RecordKind = Literal["class_containing_keyword"]

CLASS_CONTAINING_KEYWORD: RecordKind = "class_containing_keyword"
ROOT_FOLDER = "/"


@dataclass(frozen=True)
class ClassRecord:
    """Represent one class declaration whose source contains the keyword.

    Attributes:
        file: Root-prefixed, forward-slash workspace path.
        line: Declaration start line (1-based).
        match: Keyword that produced the match.
        class_name: Declared class identifier.
        containing_class: Full class source text including trivia.
        attributes: Attribute texts in source order.
        interfaces: Simple and generic base type texts in source order.
        usings: Using directives of the enclosing document.
        namespace: Nearest enclosing namespace; ``None`` when global.
        references: Paths of documents mentioning ``class_name``; ``None`` when
            reference resolution is disabled.
        kind: Fixed record kind tag.
    """

    file: str
    line: int
    match: str
    class_name: str
    containing_class: str
    attributes: tuple[str, ...] = ()
    interfaces: tuple[str, ...] = ()
    usings: tuple[str, ...] = ()
    namespace: str | None = None
    references: tuple[str, ...] | None = None
    kind: RecordKind = CLASS_CONTAINING_KEYWORD

    @property
    def folder(self) -> str:
        """Return the folder key this record is grouped under."""
        return folder_key(self.file)

    @property
    def anchor(self) -> str:
        """Return the in-document navigation anchor (not guaranteed unique)."""
        return f"{self.class_name.lower()}-{self.line}"

    @property
    def line_count(self) -> int:
        """Return the number of lines of the full class text."""
        return self.containing_class.count("\n") + 1


@dataclass(frozen=True)
class Summary:
    """Represent run totals.

    Attributes:
        total_classes: Number of matched classes.
        total_lines: Sum of the matched classes' line counts.
        documents_scanned: Documents read and parsed successfully.
        skipped_documents: Documents skipped due to read failures.
    """

    total_classes: int = 0
    total_lines: int = 0
    documents_scanned: int = 0
    skipped_documents: int = 0


@dataclass(frozen=True)
class AggregatedModel:
    """Represent the immutable snapshot consumed by all renderers."""

    keyword: str
    groups: Mapping[str, tuple[ClassRecord, ...]]
    summary: Summary

    def sorted_groups(self) -> list[tuple[str, tuple[ClassRecord, ...]]]:
        """Return folder groups ordered by folder key."""
        return sorted(self.groups.items(), key=lambda item: item[0])


def folder_key(display_path: str) -> str:
    """Return the normalized parent directory of a display path.

    Args:
        display_path: Root-prefixed, forward-slash workspace path.

    Returns:
        Parent directory, or ``ROOT_FOLDER`` for files at the workspace root.
    """
    parent = posixpath.dirname(display_path.replace("\\", "/"))
    if parent in {"", "/"}:
        return ROOT_FOLDER
    return parent


def folder_anchor(folder: str) -> str:
    """Return the navigation anchor of a folder section."""
    return folder.replace(" ", "-").replace("/", "-").replace("\\", "-")
