"""Tree-sitter nodes paired with the path that led to them."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from tree_sitter import Node

if TYPE_CHECKING:
    from .options import ResolutionOptions


class NodePath:
    """A syntax node plus a link to its parent path.

    Tree-sitter nodes cannot carry extra attributes, so per-file data such as
    the resolution options lives on the root path of each parsed file. Every
    path handed out by ``get`` or ``named_children`` keeps a reference to the
    path it was reached from, which lets callers walk back up to that root.
    """

    __slots__ = ("node", "parent_path", "options")

    def __init__(
        self,
        node: Node,
        parent_path: NodePath | None = None,
        options: ResolutionOptions | None = None,
    ):
        self.node = node
        self.parent_path = parent_path
        self.options = options

    def __repr__(self) -> str:
        row, column = self.node.start_point
        return f"NodePath({self.node.type} at {row + 1}:{column})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodePath):
            return NotImplemented
        return self.node == other.node

    def __hash__(self) -> int:
        return hash((self.node.start_byte, self.node.end_byte, self.node.type))

    @property
    def type(self) -> str:
        return self.node.type

    @property
    def text(self) -> str:
        raw = self.node.text
        if raw is None:
            return ""
        return raw.decode("utf-8", errors="replace")

    @property
    def line(self) -> int:
        """1-based line on which the node starts."""
        return self.node.start_point[0] + 1

    def get(self, *fields: str) -> NodePath | None:
        """Follow a chain of grammar field names.

        Returns None as soon as one of the fields is absent.
        """
        path: NodePath | None = self
        for field_name in fields:
            child = path.node.child_by_field_name(field_name)
            if child is None:
                return None
            path = NodePath(child, path)
        return path

    def named_children(self, node_type: str | None = None) -> list[NodePath]:
        """Wrap the named children, optionally filtered by node type."""
        return [
            NodePath(child, self)
            for child in self.node.named_children
            if node_type is None or child.type == node_type
        ]

    def has_token(self, token: str) -> bool:
        """Check whether an anonymous keyword/punctuation child is present."""
        return any(not child.is_named and child.type == token for child in self.node.children)

    def ancestors(self) -> Iterator[NodePath]:
        """Yield this path and each parent path up to the root."""
        path: NodePath | None = self
        while path is not None:
            yield path
            path = path.parent_path


def binding_name(path: NodePath) -> str:
    """Name of an identifier or string-literal module export name."""
    if path.type == "string":
        return path.text[1:-1]
    return path.text


def string_value(path: NodePath | None) -> str | None:
    """Value of a string literal node without its quotes."""
    if path is None or path.type != "string":
        return None
    return path.text[1:-1]
