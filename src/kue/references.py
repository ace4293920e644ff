# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Naive textual cross-document reference lookup."""

import logging
from collections.abc import Sequence

from kue.source import Document

logger = logging.getLogger(__name__)


def find_references(
    class_name: str, documents: Sequence[Document], origin: Document
) -> tuple[str, ...]:
    """Return display paths of other documents whose text contains a class name.

    The lookup is a literal, case-sensitive substring search without word
    boundaries: a class ``Item`` is reported as referenced by a document that
    only mentions ``ItemBuilder``. Each document is re-read per call.

    Args:
        class_name: Identifier searched for.
        documents: All workspace documents in scan order.
        origin: Document declaring the class; never reported.

    Returns:
        Referencing document paths in scan order.
    """
    references: list[str] = []
    for document in documents:
        if document == origin:
            continue
        try:
            text = document.read_text()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                f"Skipping document during reference lookup (file_path={document.relative_path} error={exc})"
            )
            continue
        if class_name in text:
            references.append(document.display_path)
    return tuple(references)
