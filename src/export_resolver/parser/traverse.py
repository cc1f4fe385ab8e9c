"""Shallow visitor-based traversal over tree-sitter trees."""

from .nodepath import NodePath

# Bodies of these nodes are never entered: they hold no module-level bindings.
SKIPPED_NODE_TYPES = frozenset({
    "function_declaration",
    "function_expression",
    "function",
    "generator_function_declaration",
    "generator_function",
    "arrow_function",
    "method_definition",
    "class_declaration",
    "abstract_class_declaration",
    "class",
    "internal_module",
    "module",
    "ambient_declaration",
})


class ShallowVisitor:
    """Base class for traversal hooks.

    Subclasses define ``visit_<node type>`` methods. A hook that returns
    ``False`` stops the traversal from descending into that node; any other
    return value lets it continue into the node's children.
    """

    def hook_for(self, node_type: str):
        return getattr(self, f"visit_{node_type}", None)


def traverse_shallow(root: NodePath, visitor: ShallowVisitor) -> None:
    """Visit ``root`` and its descendants in document order.

    Function, class and namespace bodies are skipped unless a hook for the
    node type asks to descend into them.
    """
    stack = [root]
    while stack:
        path = stack.pop()
        hook = visitor.hook_for(path.type)
        if hook is not None:
            if hook(path) is False:
                continue
        elif path.type in SKIPPED_NODE_TYPES:
            continue
        stack.extend(reversed(path.named_children()))
