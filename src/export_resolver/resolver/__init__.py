"""Cross-file export resolution."""

from .exports import (
    DEFAULT_MAX_DEPTH,
    ExportKind,
    ExportResolver,
    ResolveRequest,
    classify_export,
    find_exported_value,
    get_default_resolver,
    resolve_imported_value,
)
from .imports import imported_name, resolve_import_binding
from .loader import SourceLoader, parse_module
from .locator import DEFAULT_EXTENSIONS, DEFAULT_IGNORED_SOURCES, ModuleLocator, normalize_specifier
from .options import options_of

__all__ = [
    # Locating
    "DEFAULT_EXTENSIONS",
    "DEFAULT_IGNORED_SOURCES",
    "ModuleLocator",
    "normalize_specifier",
    # Loading
    "SourceLoader",
    "parse_module",
    "options_of",
    # Exports
    "DEFAULT_MAX_DEPTH",
    "ExportKind",
    "ExportResolver",
    "ResolveRequest",
    "classify_export",
    "find_exported_value",
    "get_default_resolver",
    "resolve_imported_value",
    # Imports
    "imported_name",
    "resolve_import_binding",
]
