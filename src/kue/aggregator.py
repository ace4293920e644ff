# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Folder grouping and totals for class records."""

import logging
from types import MappingProxyType

from kue.model import AggregatedModel, ClassRecord, Summary

logger = logging.getLogger(__name__)


class ReportAggregator:
    """Accumulate class records into folder groups and run totals."""

    def __init__(self, keyword: str) -> None:
        self._keyword = keyword
        self._groups: dict[str, list[ClassRecord]] = {}
        self._total_classes = 0
        self._total_lines = 0
        self._documents_scanned = 0
        self._skipped_documents = 0

    def add(self, record: ClassRecord) -> None:
        """Append a record to its folder group, preserving discovery order."""
        self._groups.setdefault(record.folder, []).append(record)
        self._total_classes += 1
        self._total_lines += record.line_count

    def record_documents(self, scanned: int, skipped: int) -> None:
        """Record document counters reported by the scanner."""
        self._documents_scanned += scanned
        self._skipped_documents += skipped

    def snapshot(self) -> AggregatedModel:
        """Return an immutable model of everything accumulated so far."""
        summary = Summary(
            total_classes=self._total_classes,
            total_lines=self._total_lines,
            documents_scanned=self._documents_scanned,
            skipped_documents=self._skipped_documents,
        )
        logger.debug(
            f"Aggregation snapshot (folders={len(self._groups)} classes={summary.total_classes} "
            f"lines={summary.total_lines})"
        )
        return AggregatedModel(
            keyword=self._keyword,
            groups=MappingProxyType(
                {folder: tuple(records) for folder, records in self._groups.items()}
            ),
            summary=summary,
        )
