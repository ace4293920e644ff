# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Structured-data (JSON) rendering of the aggregated model."""

import json
from typing import Any

from kue.model import AggregatedModel, ClassRecord


def record_payload(record: ClassRecord) -> dict[str, Any]:
    """Return the JSON mapping of one record with its fixed field names."""
    return {
        "file": record.file,
        "line": record.line,
        "match": record.match,
        "className": record.class_name,
        "containingClass": record.containing_class,
        "attributes": list(record.attributes),
        "interfaces": list(record.interfaces),
        "usings": list(record.usings),
        "namespace": record.namespace,
        "references": list(record.references) if record.references is not None else None,
        "kind": record.kind,
    }


def render_json(model: AggregatedModel) -> str:
    """Render the folder to record-list map as indented JSON.

    Args:
        model: Aggregated model snapshot.

    Returns:
        JSON text with folders in ascending order and a trailing newline.
    """
    payload = {
        folder: [record_payload(record) for record in records]
        for folder, records in model.sorted_groups()
    }
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
