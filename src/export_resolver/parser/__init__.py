"""Parser layer: tree-sitter grammars, node paths and shallow traversal."""

from .builder import ModuleParser, build_parser, find_syntax_error
from .languages import (
    LANGUAGE_CONFIGS,
    LanguageConfig,
    get_language_config,
    get_language_for_file,
)
from .nodepath import NodePath, binding_name, string_value
from .options import ResolutionOptions
from .traverse import SKIPPED_NODE_TYPES, ShallowVisitor, traverse_shallow

__all__ = [
    # Languages
    "LANGUAGE_CONFIGS",
    "LanguageConfig",
    "get_language_config",
    "get_language_for_file",
    # Parser
    "ModuleParser",
    "ResolutionOptions",
    "build_parser",
    "find_syntax_error",
    # Nodes
    "NodePath",
    "binding_name",
    "string_value",
    # Traversal
    "SKIPPED_NODE_TYPES",
    "ShallowVisitor",
    "traverse_shallow",
]
