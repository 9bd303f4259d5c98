# core/structural_parser/swift_structural_parser.py
"""
Tree-sitter-based StructuralParser implementation for Swift.

It uses the `tree_sitter` core library together with `tree_sitter_swift`.
The Swift grammar reports classes, structs, enums, actors and extensions all
as "class_declaration"; the separate struct/enum kinds are listed as well so
older grammar releases keep working.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

import tree_sitter_swift as tsswift
from tree_sitter import Language, Node, Parser, Tree

# local imports
from ... import logger
from ...utils import split_lines

# Declarations that may enclose an instruction marker.
DECLARATION_KINDS = frozenset({
    "function_declaration",
    "init_declaration",
    "deinit_declaration",
    "subscript_declaration",
    "property_declaration",
    "class_declaration",
    "struct_declaration",
    "enum_declaration",
    "protocol_declaration",
})

# Parents under which a property_declaration is a type member.
MEMBER_CONTAINERS = frozenset({
    "class_body",
    "enum_class_body",
    "protocol_body",
})

# Declarations that introduce a type name.
TYPE_KINDS = frozenset({
    "class_declaration",
    "struct_declaration",
    "enum_declaration",
})


class SwiftStructuralParser:
    """
    Swift StructuralParser backed by Tree-sitter.

    The grammar is loaded on construction; Language() raises ValueError when
    the compiled grammar does not match the installed tree-sitter ABI.
    """

    def __init__(self) -> None:
        self._language = Language(tsswift.language())

    # ---------- Public API ----------

    def enclosing_declaration(self, text: str, offset: int) -> Optional[str]:
        tree = self._parse(text)
        if tree is None:
            return None

        best: Optional[Node] = None
        for node in self._walk(tree.root_node):
            if not self._is_enclosing_kind(node):
                continue
            if not (node.start_byte <= offset <= node.end_byte):
                continue
            if best is None or (node.end_byte - node.start_byte) < (best.end_byte - best.start_byte):
                best = node

        if best is None:
            return None

        # Whole lines, so the result lines up with the brace heuristic.
        lines = split_lines(text)
        start_row = best.start_point[0]
        end_row = best.end_point[0]
        return "\n".join(lines[start_row : end_row + 1])

    def last_type_before(self, text: str, cutoff: int) -> Optional[str]:
        tree = self._parse(text)
        if tree is None:
            return None

        source = text.encode("utf-8")
        found: Optional[str] = None

        # Pre-order walk visits nodes by start offset; the last hit wins,
        # which is not necessarily the lexically innermost type.
        for node in self._walk(tree.root_node):
            if node.type in TYPE_KINDS and node.start_byte <= cutoff:
                name = self._node_name(node, source)
                if name:
                    found = name
        return found

    # ---------- Internal helpers ----------

    def _parse(self, text: str) -> Optional[Tree]:
        # One parser per call.
        parser = Parser(self._language)
        try:
            return parser.parse(text.encode("utf-8"))
        except (ValueError, RuntimeError) as exc:
            logger.debug(f"Swift parse failed: {exc}")
            return None

    @staticmethod
    def _is_enclosing_kind(node: Node) -> bool:
        """
        Type and function declarations qualify. A property only qualifies as
        a type member or when it has a computed body; local `let`/`var`
        statements inside function bodies never do.
        """
        if node.type not in DECLARATION_KINDS:
            return False
        if node.type != "property_declaration":
            return True
        if node.parent is not None and node.parent.type in MEMBER_CONTAINERS:
            return True
        return any(child.type == "computed_property" for child in node.named_children)

    @staticmethod
    def _walk(root: Node) -> Iterator[Node]:
        """Depth-first, pre-order, children in source order."""
        stack: List[Node] = [root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.named_children))

    @staticmethod
    def _node_name(node: Node, source: bytes) -> Optional[str]:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        return source[name_node.start_byte : name_node.end_byte].decode("utf-8", errors="replace").strip()


__all__ = [
    "DECLARATION_KINDS",
    "MEMBER_CONTAINERS",
    "TYPE_KINDS",
    "SwiftStructuralParser",
]
