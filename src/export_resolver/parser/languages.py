"""Language configurations for Tree-sitter parsing."""

from dataclasses import dataclass
from pathlib import Path

import tree_sitter_javascript as tsjs
import tree_sitter_typescript as tsts
from tree_sitter import Language


@dataclass
class LanguageConfig:
    """Configuration for an ECMAScript dialect."""

    name: str
    extensions: tuple[str, ...]
    language: Language


def _create_language_configs() -> dict[str, LanguageConfig]:
    """Create language configurations for supported dialects."""
    return {
        "javascript": LanguageConfig(
            name="javascript",
            # JSX is part of the JavaScript grammar
            extensions=(".js", ".jsx", ".mjs", ".cjs"),
            language=Language(tsjs.language()),
        ),
        "typescript": LanguageConfig(
            name="typescript",
            extensions=(".ts", ".mts", ".cts"),
            language=Language(tsts.language_typescript()),
        ),
        "tsx": LanguageConfig(
            name="tsx",
            extensions=(".tsx",),
            language=Language(tsts.language_tsx()),
        ),
    }


# Singleton instance of language configs
LANGUAGE_CONFIGS = _create_language_configs()

DEFAULT_LANGUAGE = "javascript"

# Flow-annotated .js files fail the JavaScript grammar but parse as TSX
FLOW_FALLBACK_LANGUAGE = "tsx"

# Map file extensions to language names
EXTENSION_TO_LANGUAGE: dict[str, str] = {}
for lang_name, config in LANGUAGE_CONFIGS.items():
    for ext in config.extensions:
        EXTENSION_TO_LANGUAGE[ext] = lang_name


def get_language_for_file(file_path: Path | str) -> str | None:
    """Get the language name for a file based on its extension.

    Args:
        file_path: Path to the file

    Returns:
        Language name or None if not supported
    """
    path = Path(file_path)
    ext = path.suffix.lower()
    return EXTENSION_TO_LANGUAGE.get(ext)


def get_language_config(language: str) -> LanguageConfig | None:
    """Get the language configuration for a language.

    Args:
        language: Language name

    Returns:
        LanguageConfig or None if not supported
    """
    return LANGUAGE_CONFIGS.get(language)

