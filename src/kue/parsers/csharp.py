# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""C# source parser built on tree-sitter."""

import logging
from collections.abc import Iterator

import tree_sitter_c_sharp
from tree_sitter import Language, Node, Parser

from kue.source import BaseType, BaseTypeKind, ParsedSource

logger = logging.getLogger(__name__)

CLASS_NODE_TYPES = frozenset({"class_declaration"})
NAMESPACE_NODE_TYPES = frozenset(
    {"namespace_declaration", "file_scoped_namespace_declaration"}
)
_BASE_TYPE_KINDS: dict[str, BaseTypeKind] = {
    "identifier": "named",
    "generic_name": "generic",
    "qualified_name": "qualified",
    "alias_qualified_name": "qualified",
    "tuple_type": "tuple",
    "array_type": "array",
}


class ParserUnavailableError(RuntimeError):
    """Represent a failure to load the tree-sitter C# grammar."""


class CSharpNode:
    """Adapt a tree-sitter node to the core's syntax node capabilities."""

    def __init__(self, node: Node, source: bytes) -> None:
        self._node = node
        self._source = source

    @property
    def start_line(self) -> int:
        return self._node.start_point[0]

    def is_class_like(self) -> bool:
        return self._node.type in CLASS_NODE_TYPES

    def is_using_directive(self) -> bool:
        return self._node.type == "using_directive"

    def descendants(self) -> Iterator["CSharpNode"]:
        stack = list(reversed(self._node.named_children))
        while stack:
            current = stack.pop()
            yield CSharpNode(current, self._source)
            stack.extend(reversed(current.named_children))

    def text(self) -> str:
        return self._decode(self._node.start_byte, self._node.end_byte)

    def full_text(self) -> str:
        """Return the node text with its leading and trailing trivia.

        Leading trivia covers preceding comments and the whitespace after the
        end of the previous token's line; trailing trivia runs through the
        end of the closing line.
        """
        start = self._leading_trivia_start()
        end = self._trailing_trivia_end()
        return self._decode(start, end)

    def identifier(self) -> str:
        name = self._node.child_by_field_name("name")
        if name is None:
            name = next(
                (child for child in self._node.named_children if child.type == "identifier"),
                None,
            )
        if name is None:
            return ""
        return self._decode(name.start_byte, name.end_byte)

    def attributes(self) -> list[str]:
        texts: list[str] = []
        for child in self._node.named_children:
            if child.type != "attribute_list":
                continue
            for attribute in child.named_children:
                if attribute.type == "attribute":
                    texts.append(self._decode(attribute.start_byte, attribute.end_byte))
        return texts

    def base_types(self) -> list[BaseType]:
        base_list = next(
            (child for child in self._node.named_children if child.type == "base_list"),
            None,
        )
        if base_list is None:
            return []
        types: list[BaseType] = []
        for child in base_list.named_children:
            if child.type == "comment":
                continue
            if child.type == "primary_constructor_base_type":
                # Base class invoked with primary constructor arguments.
                inner = child.child_by_field_name("type") or next(
                    iter(child.named_children), None
                )
                if inner is None:
                    continue
                child = inner
            types.append(
                BaseType(
                    kind=_BASE_TYPE_KINDS.get(child.type, "other"),
                    text=self._decode(child.start_byte, child.end_byte),
                )
            )
        return types

    def enclosing_namespace(self) -> str | None:
        cursor = self._node.parent
        while cursor is not None:
            if cursor.type in NAMESPACE_NODE_TYPES:
                return self._namespace_name(cursor)
            if cursor.type == "compilation_unit":
                # Older grammars keep file-scoped namespace members as siblings.
                for child in cursor.named_children:
                    if child.type == "file_scoped_namespace_declaration":
                        return self._namespace_name(child)
            cursor = cursor.parent
        return None

    def _namespace_name(self, node: Node) -> str | None:
        name = node.child_by_field_name("name")
        if name is None:
            return None
        return self._decode(name.start_byte, name.end_byte)

    def _leading_trivia_start(self) -> int:
        comments: list[Node] = []
        previous: Node | None = None
        cursor: Node | None = self._node
        while cursor is not None and previous is None:
            sibling = cursor.prev_sibling
            while sibling is not None and sibling.type == "comment":
                comments.append(sibling)
                sibling = sibling.prev_sibling
            previous = sibling
            cursor = cursor.parent
        if previous is None:
            return 0
        end = previous.end_byte
        # Comments opening on the previous token's line trail that token.
        for comment in reversed(comments):
            if b"\n" in self._source[end : comment.start_byte]:
                break
            end = comment.end_byte
        newline = self._source.find(b"\n", end, self._node.start_byte)
        if newline == -1:
            return self._node.start_byte
        return newline + 1

    def _trailing_trivia_end(self) -> int:
        end = self._node.end_byte
        newline = self._source.find(b"\n", end)
        if newline == -1:
            newline = len(self._source)
            rest = self._source[end:newline]
        else:
            rest = self._source[end:newline]
            newline += 1
        stripped = rest.strip()
        if not stripped or stripped.startswith(b"//"):
            return newline
        return end

    def _decode(self, start: int, end: int) -> str:
        return self._source[start:end].decode("utf-8", errors="replace")


class CSharpParser:
    """Parse C# documents with the tree-sitter C# grammar."""

    def __init__(self) -> None:
        """Load the C# grammar.

        Raises:
            ParserUnavailableError: If the grammar cannot be loaded.
        """
        try:
            self._parser = Parser(Language(tree_sitter_c_sharp.language()))
        except (TypeError, ValueError) as exc:
            raise ParserUnavailableError(
                f"Could not load tree-sitter C# grammar: {exc}"
            ) from exc
        logger.debug("Loaded tree-sitter parser for c_sharp")

    def parse(self, text: str) -> ParsedSource:
        """Parse C# text into a syntax tree.

        Args:
            text: Full document text.

        Returns:
            Parsed tree wrapped in core capability adapters.
        """
        source = text.encode("utf-8")
        tree = self._parser.parse(source)
        return ParsedSource(
            root=CSharpNode(tree.root_node, source),
            has_errors=tree.root_node.has_error,
        )
