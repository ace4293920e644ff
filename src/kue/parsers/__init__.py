# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Source parser implementations for the keyword usage extractor."""

from kue.parsers.csharp import CSharpParser, ParserUnavailableError

__all__ = ["CSharpParser", "ParserUnavailableError"]
