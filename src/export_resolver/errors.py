"""Exception hierarchy for export resolution."""

from pathlib import Path


class ExportResolverError(Exception):
    """Base class for all errors raised by export_resolver."""


class UnresolvableModuleError(ExportResolverError):
    """Raised when a module specifier does not map to a file."""

    def __init__(self, specifier: str, base_dir: Path | str | None = None):
        self.specifier = specifier
        self.base_dir = base_dir
        message = f"Cannot resolve module '{specifier}'"
        if base_dir is not None:
            message += f" from {base_dir}"
        super().__init__(message)


class UnsupportedLanguageError(ExportResolverError):
    """Raised when no grammar is registered for a language name."""


class SourceSyntaxError(ExportResolverError):
    """Raised when a source file does not parse cleanly."""

    def __init__(self, filename: Path | str | None, line: int, column: int, snippet: str = ""):
        self.filename = filename
        self.line = line
        self.column = column
        self.snippet = snippet
        location = f"{filename or '<source>'}:{line}:{column}"
        message = f"Syntax error at {location}"
        if snippet:
            message += f": {snippet!r}"
        super().__init__(message)
