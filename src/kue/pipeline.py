# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Scan, extract, and aggregate pipeline."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from kue.aggregator import ReportAggregator
from kue.extractor import extract_record
from kue.model import AggregatedModel
from kue.references import find_references
from kue.scanner import KeywordScanner
from kue.source import Document, SourceParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanOptions:
    """Describe one keyword scan.

    Attributes:
        keyword: Case-sensitive text searched for in class declarations.
        include_references: Whether to resolve naive cross-document references.
    """

    keyword: str
    include_references: bool = False


def build_model(
    documents: Sequence[Document], parser: SourceParser, options: ScanOptions
) -> AggregatedModel:
    """Run the scan pipeline over documents and return the aggregated model.

    Args:
        documents: Workspace documents in scan order.
        parser: Parser used to build syntax trees.
        options: Scan options.

    Returns:
        Immutable snapshot for rendering.
    """
    scanner = KeywordScanner(parser=parser)
    aggregator = ReportAggregator(keyword=options.keyword)
    for match in scanner.scan(documents, options.keyword):
        references = None
        if options.include_references:
            references = find_references(
                class_name=match.node.identifier(),
                documents=documents,
                origin=match.document,
            )
        aggregator.add(extract_record(match, options.keyword, references=references))
    aggregator.record_documents(
        scanned=scanner.documents_scanned, skipped=len(scanner.errors)
    )
    model = aggregator.snapshot()
    logger.info(
        f"Scan completed (keyword={options.keyword!r} classes={model.summary.total_classes} "
        f"documents={model.summary.documents_scanned} skipped={model.summary.skipped_documents})"
    )
    return model
