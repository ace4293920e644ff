# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Class record extraction from scan matches."""

from kue.model import ClassRecord
from kue.scanner import ScanMatch

RECORDED_BASE_TYPE_KINDS = frozenset({"named", "generic"})


def extract_record(
    match: ScanMatch,
    keyword: str,
    references: tuple[str, ...] | None = None,
) -> ClassRecord:
    """Build the metadata record of one matching class.

    Args:
        match: Scanned class declaration and its document.
        keyword: Keyword that produced the match.
        references: Referencing document paths, or ``None`` when reference
            resolution is disabled.

    Returns:
        Immutable class record.
    """
    node = match.node
    return ClassRecord(
        file=match.document.display_path,
        line=node.start_line + 1,
        match=keyword,
        class_name=node.identifier(),
        containing_class=node.full_text(),
        attributes=tuple(node.attributes()),
        interfaces=tuple(
            base.text
            for base in node.base_types()
            if base.kind in RECORDED_BASE_TYPE_KINDS
        ),
        usings=match.parsed.usings,
        namespace=node.enclosing_namespace(),
        references=references,
    )
