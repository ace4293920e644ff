# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""CLI for extracting classes that contain a keyword into report artifacts."""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from kue.artifacts import ARTIFACT_NAMES, write_artifacts
from kue.model import AggregatedModel
from kue.parsers import CSharpParser, ParserUnavailableError
from kue.pipeline import ScanOptions, build_model
from kue.renderers import RenderOptions
from kue.workspace import WorkspaceLoadError, load_workspace

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


class _StreamArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports errors on a caller-provided stream."""

    def __init__(self, *args, stream: TextIO | None = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._stream = stream

    def error(self, message: str) -> NoReturn:
        stream = self._stream if self._stream is not None else sys.stderr
        self.print_usage(stream)
        stream.write(f"{self.prog}: error: {message}\n")
        raise SystemExit(2)


def _build_option_parser(stream: TextIO | None = None) -> _StreamArgumentParser:
    parser = _StreamArgumentParser(prog="kue", add_help=False, stream=stream)
    parser.add_argument(
        "--with-references",
        action="store_true",
        help="List other documents mentioning each matched class name.",
    )
    parser.add_argument(
        "--github",
        metavar="BASE_URL",
        default=None,
        help="Base URL for source links, e.g. https://github.com/user/repo/blob/main/.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def build_parser(stream: TextIO | None = None) -> argparse.ArgumentParser:
    """Build the CLI parser.

    Args:
        stream: Stream receiving argument errors; defaults to ``sys.stderr``.

    Returns:
        Configured argument parser instance.
    """
    parser = _StreamArgumentParser(
        prog="kue",
        description="Report C# classes whose source contains a keyword.",
        parents=[_build_option_parser()],
        stream=stream,
    )
    parser.add_argument("workspace", help="Solution file, project file, or directory.")
    parser.add_argument("keyword", help="Case-sensitive text to search for.")
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run the keyword usage extraction.

    The first two arguments are always the workspace and the keyword, so a
    keyword such as ``--`` or ``-1`` is searched for verbatim. Options follow.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    if len(argv) < 2:
        stdout.write(build_parser(stream=stderr).format_usage())
        return 0
    workspace_arg, keyword = argv[0], argv[1]
    try:
        args = _build_option_parser(stream=stderr).parse_args(argv[2:])
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        workspace = load_workspace(Path(workspace_arg))
    except WorkspaceLoadError as exc:
        logger.warning(f"Workspace load failed (path={workspace_arg} error={exc})")
        stderr.write(f"{exc}\n")
        return 2

    try:
        source_parser = CSharpParser()
    except ParserUnavailableError as exc:
        logger.warning(f"Parser unavailable (error={exc})")
        stderr.write(f"{exc}\n")
        return 2

    model = build_model(
        documents=workspace.documents,
        parser=source_parser,
        options=ScanOptions(
            keyword=keyword, include_references=args.with_references
        ),
    )

    target_dir = Path.cwd()
    try:
        write_artifacts(
            model, RenderOptions(github_base_url=args.github), output_dir=target_dir
        )
    except OSError as exc:
        logger.warning(f"Failed to write artifacts (output_dir={target_dir} error={exc})")
        stderr.write(f"Failed to write artifacts: {exc}\n")
        return 2

    _write_summary(model=model, stdout=stdout)
    return 0


def _write_summary(model: AggregatedModel, stdout: TextIO) -> None:
    """Write per-folder match counts and the completion line.

    Args:
        model: Aggregated model snapshot.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    if model.groups:
        table = Table(show_header=True, expand=False)
        table.add_column("folder", overflow="fold")
        table.add_column("classes", justify="right")
        table.add_column("lines", justify="right")
        for folder, records in model.sorted_groups():
            table.add_row(
                folder,
                str(len(records)),
                str(sum(record.line_count for record in records)),
            )
        console.print(table)
    console.print(
        f"Extraction complete. Output written to {', '.join(ARTIFACT_NAMES)}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
