# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Options and helpers shared by the report renderers."""

from dataclasses import dataclass

from kue.model import ClassRecord


@dataclass(frozen=True)
class RenderOptions:
    """Describe rendering switches.

    Attributes:
        github_base_url: Base URL for external source links; ``None`` disables
            the links.
    """

    github_base_url: str | None = None


def source_link(base_url: str, record: ClassRecord) -> str:
    """Return the external source link of a record.

    Args:
        base_url: Repository browse URL such as
            ``https://github.com/user/repo/blob/main/``.
        record: Record to link to.

    Returns:
        ``base_url`` joined with the record's file path and ``#L<line>``.
    """
    return f"{base_url.rstrip('/')}/{record.file.lstrip('/')}#L{record.line}"


def joined(values: tuple[str, ...] | None) -> str:
    return ", ".join(values or ())
