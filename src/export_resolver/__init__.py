"""Resolve JavaScript and TypeScript exports to their defining syntax nodes."""

from .config import ResolverSettings, setup_logging
from .errors import (
    ExportResolverError,
    SourceSyntaxError,
    UnresolvableModuleError,
    UnsupportedLanguageError,
)
from .parser import NodePath, ResolutionOptions, build_parser, traverse_shallow
from .resolver import (
    ExportResolver,
    ModuleLocator,
    SourceLoader,
    find_exported_value,
    imported_name,
    options_of,
    parse_module,
    resolve_import_binding,
    resolve_imported_value,
)

__all__ = [
    # Config
    "ResolverSettings",
    "setup_logging",
    # Errors
    "ExportResolverError",
    "SourceSyntaxError",
    "UnresolvableModuleError",
    "UnsupportedLanguageError",
    # Parser
    "NodePath",
    "ResolutionOptions",
    "build_parser",
    "traverse_shallow",
    # Resolution
    "ExportResolver",
    "ModuleLocator",
    "SourceLoader",
    "find_exported_value",
    "imported_name",
    "options_of",
    "parse_module",
    "resolve_import_binding",
    "resolve_imported_value",
]
