# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Keyword scanning over parsed workspace documents."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import cached_property

from kue.source import Document, ParsedSource, SourceParser, SyntaxNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanError:
    """Represent a document skipped during scanning."""

    file_path: str
    message: str


@dataclass(frozen=True)
class ParsedDocument:
    """Represent one document together with its parsed tree."""

    document: Document
    source: ParsedSource

    @cached_property
    def usings(self) -> tuple[str, ...]:
        """Return every using directive of the document in source order."""
        return tuple(
            node.text()
            for node in self.source.root.descendants()
            if node.is_using_directive()
        )


@dataclass(frozen=True)
class ScanMatch:
    """Represent one class declaration whose full text contains the keyword."""

    parsed: ParsedDocument
    node: SyntaxNode

    @property
    def document(self) -> Document:
        return self.parsed.document


@dataclass
class KeywordScanner:
    """Find class declarations containing a keyword, one document at a time.

    Attributes:
        parser: Language parser used to build syntax trees.
        errors: Documents skipped because their text could not be read.
        documents_scanned: Number of documents read and parsed.
    """

    parser: SourceParser
    errors: list[ScanError] = field(default_factory=list)
    documents_scanned: int = 0

    def scan(self, documents: Iterable[Document], keyword: str) -> Iterator[ScanMatch]:
        """Yield matching class declarations in document then declaration order.

        The test is an exact, case-sensitive substring check on the full class
        text, so matches inside comments, strings, or longer identifiers count.

        Args:
            documents: Documents in workspace order.
            keyword: Text searched for in each class declaration.

        Yields:
            Matches in discovery order.
        """
        for document in documents:
            try:
                text = document.read_text()
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning(
                    f"Skipping document due to read failure (file_path={document.relative_path} error={exc})"
                )
                self.errors.append(
                    ScanError(file_path=document.relative_path, message=str(exc))
                )
                continue

            source = self.parser.parse(text)
            if source.has_errors:
                logger.debug(
                    f"Document parsed with syntax errors (file_path={document.relative_path})"
                )
            self.documents_scanned += 1
            parsed = ParsedDocument(document=document, source=source)
            for node in source.root.descendants():
                if node.is_class_like() and keyword in node.full_text():
                    yield ScanMatch(parsed=parsed, node=node)
