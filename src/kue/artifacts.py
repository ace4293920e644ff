# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Rendering and writing of the three report artifacts."""

import logging
from pathlib import Path

from kue.model import AggregatedModel
from kue.renderers import RenderOptions, render_html, render_json, render_markdown

logger = logging.getLogger(__name__)

JSON_ARTIFACT = "keyword_usage_output.json"
MARKDOWN_ARTIFACT = "keyword_usage_summary.md"
HTML_ARTIFACT = "keyword_usage_summary.html"
ARTIFACT_NAMES = (JSON_ARTIFACT, MARKDOWN_ARTIFACT, HTML_ARTIFACT)


def render_artifacts(model: AggregatedModel, options: RenderOptions) -> dict[str, str]:
    """Render all artifacts keyed by their fixed file names, in write order."""
    return {
        JSON_ARTIFACT: render_json(model),
        MARKDOWN_ARTIFACT: render_markdown(model, options),
        HTML_ARTIFACT: render_html(model, options),
    }


def write_artifacts(
    model: AggregatedModel, options: RenderOptions, output_dir: Path
) -> list[Path]:
    """Render and write every artifact into a directory.

    Artifacts are written one after another; files written before a failure
    are left in place.

    Args:
        model: Aggregated model snapshot.
        options: Rendering switches.
        output_dir: Destination directory.

    Returns:
        Written artifact paths in write order.

    Raises:
        OSError: If an artifact cannot be written.
    """
    written: list[Path] = []
    for name, content in render_artifacts(model, options).items():
        path = output_dir / name
        path.write_text(content, encoding="utf-8")
        logger.debug(f"Artifact written (path={path} bytes={len(content.encode('utf-8'))})")
        written.append(path)
    return written
