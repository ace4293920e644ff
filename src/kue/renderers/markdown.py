# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Markdown rendering of the aggregated model."""

import re

from kue.model import AggregatedModel, ClassRecord, folder_anchor
from kue.renderers.common import RenderOptions, joined, source_link

_BACKTICK_RUN_RE = re.compile(r"`+")


def render_markdown(model: AggregatedModel, options: RenderOptions) -> str:
    """Render the summary document.

    Args:
        model: Aggregated model snapshot.
        options: Rendering switches.

    Returns:
        Markdown text with a table of contents and one collapsible entry per
        class.
    """
    groups = model.sorted_groups()
    summary = model.summary
    lines = [
        f"# Keyword Usage Summary for '{model.keyword}'",
        "",
        f"**Total Classes:** {summary.total_classes}  ",
        f"**Total Lines of Code (LOC):** {summary.total_lines}  ",
    ]
    if summary.skipped_documents:
        lines.append(f"**Skipped Documents:** {summary.skipped_documents}  ")
    lines.extend(["", "## Table of Contents", ""])
    for folder, records in groups:
        lines.append(f"- [{folder}](#{folder_anchor(folder)})")
        for record in records:
            lines.append(f"  - [{record.class_name}](#{record.anchor})")

    for folder, records in groups:
        lines.extend(["", f'## Folder: {folder} <a name="{folder_anchor(folder)}"></a>', ""])
        for record in records:
            lines.extend(_render_record(record, options))
    return "\n".join(lines) + "\n"


def _render_record(record: ClassRecord, options: RenderOptions) -> list[str]:
    link = ""
    if options.github_base_url is not None:
        link = f" [(GitHub)]({source_link(options.github_base_url, record)})"
    namespace = f"`{record.namespace}`" if record.namespace is not None else "_(global)_"
    lines = [
        f'<a name="{record.anchor}"></a>',
        f"<details><summary><strong>{record.class_name}</strong> in `{record.file}` "
        f"(line {record.line}){link}</summary>",
        "",
        f"- **Namespace:** {namespace}",
        f"- **Attributes:** `{joined(record.attributes)}`",
        f"- **Interfaces:** `{joined(record.interfaces)}`",
    ]
    if record.references is not None:
        lines.append(f"- **References:** `{joined(record.references)}`")
    fence = _code_fence(record.containing_class)
    lines.extend(
        [
            "",
            f"{fence}csharp",
            record.containing_class.strip("\n"),
            fence,
            "",
            "</details>",
            "",
        ]
    )
    return lines


def _code_fence(source: str) -> str:
    """Return a backtick fence longer than any backtick run in ``source``."""
    longest = max((len(run) for run in _BACKTICK_RUN_RE.findall(source)), default=0)
    return "`" * max(3, longest + 1)
