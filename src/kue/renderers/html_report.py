# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Browsable HTML rendering of the aggregated model."""

import html

from kue.model import AggregatedModel, ClassRecord, folder_anchor
from kue.renderers.common import RenderOptions, joined, source_link

HIGHLIGHT_JS_BASE = "https://cdnjs.cloudflare.com/ajax/libs/highlight.js/11.7.0"

_HEAD = f"""<!DOCTYPE html>
<html><head><meta charset="UTF-8"><title>Keyword Usage Report</title>
<link rel="stylesheet" href="{HIGHLIGHT_JS_BASE}/styles/github-dark.min.css">
<script src="{HIGHLIGHT_JS_BASE}/highlight.min.js"></script>
<script>hljs.highlightAll();</script>
<style>body{{font-family:sans-serif;padding:1em;}} summary{{cursor:pointer;}} pre{{padding:10px;border-radius:6px;}} #searchBox{{margin-bottom:1em;padding:0.5em;width:100%;max-width:400px;}}</style>
</head><body>"""

_FILTER_SCRIPT = (
    "<script>function filterEntries() { "
    "const q = document.getElementById('searchBox').value.toLowerCase(); "
    "document.querySelectorAll('[data-class]').forEach(e => { "
    "e.style.display = e.dataset.class.toLowerCase().includes(q) ? '' : 'none'; }); }"
    "</script>"
)


def _esc(value: object) -> str:
    return html.escape(str(value), quote=True)


def render_html(model: AggregatedModel, options: RenderOptions) -> str:
    """Render the browsable report.

    Every interpolated value is HTML-escaped, including the embedded class
    source.

    Args:
        model: Aggregated model snapshot.
        options: Rendering switches.

    Returns:
        Standalone HTML document with a class-name filter.
    """
    groups = model.sorted_groups()
    summary = model.summary
    totals = (
        f"<strong>Total Classes:</strong> {summary.total_classes}<br/>"
        f"<strong>Total LOC:</strong> {summary.total_lines}"
    )
    if summary.skipped_documents:
        totals += f"<br/><strong>Skipped Documents:</strong> {summary.skipped_documents}"
    parts = [
        _HEAD,
        f"<h1>Keyword Usage Summary for '{_esc(model.keyword)}'</h1>",
        f"<p>{totals}</p>",
        "<input id='searchBox' type='text' placeholder='Search class names...' "
        "oninput='filterEntries()'/>",
        "<h2>Table of Contents</h2><ul id='tocList'>",
    ]
    for folder, records in groups:
        parts.append(
            f"<li><a href='#{_esc(folder_anchor(folder))}'>{_esc(folder)}</a><ul>"
        )
        for record in records:
            parts.append(
                f"<li class='entry' data-class='{_esc(record.class_name)}'>"
                f"<a href='#{_esc(record.anchor)}'>{_esc(record.class_name)}</a></li>"
            )
        parts.append("</ul></li>")
    parts.append("</ul>")
    parts.append(_FILTER_SCRIPT)

    for folder, records in groups:
        parts.append(f"<h2 id='{_esc(folder_anchor(folder))}'>Folder: {_esc(folder)}</h2>")
        for record in records:
            parts.extend(_render_record(record, options))
    parts.append("</body></html>")
    return "\n".join(parts) + "\n"


def _render_record(record: ClassRecord, options: RenderOptions) -> list[str]:
    link = ""
    if options.github_base_url is not None:
        url = source_link(options.github_base_url, record)
        link = f" <a href='{_esc(url)}'>(GitHub)</a>"
    namespace = (
        _esc(record.namespace) if record.namespace is not None else "<em>(global)</em>"
    )
    parts = [
        f"<div class='class-entry' id='{_esc(record.anchor)}' "
        f"data-class='{_esc(record.class_name)}'>",
        f"<details><summary><strong>{_esc(record.class_name)}</strong> in "
        f"<code>{_esc(record.file)}</code> (line {record.line}){link}</summary>",
        f"<ul><li><strong>Namespace:</strong> {namespace}</li>",
        f"<li><strong>Attributes:</strong> {_esc(joined(record.attributes))}</li>",
        f"<li><strong>Interfaces:</strong> {_esc(joined(record.interfaces))}</li>",
    ]
    if record.references is not None:
        parts.append(
            f"<li><strong>References:</strong> {_esc(joined(record.references))}</li>"
        )
    parts.append("</ul>")
    parts.append(
        "<pre><code class='language-csharp'>"
        f"{_esc(record.containing_class.strip(chr(10)))}</code></pre></details></div>"
    )
    return parts
