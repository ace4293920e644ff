# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Report renderers for the keyword usage extractor."""

from kue.renderers.common import RenderOptions
from kue.renderers.html_report import render_html
from kue.renderers.json_report import render_json
from kue.renderers.markdown import render_markdown

__all__ = ["RenderOptions", "render_html", "render_json", "render_markdown"]
