"""Tree-sitter parser construction for ECMAScript modules."""

import logging
from collections.abc import Iterator

from tree_sitter import Node, Parser

from ..errors import SourceSyntaxError, UnsupportedLanguageError
from .languages import (
    DEFAULT_LANGUAGE,
    FLOW_FALLBACK_LANGUAGE,
    LanguageConfig,
    get_language_config,
    get_language_for_file,
)
from .nodepath import NodePath
from .options import ResolutionOptions

logger = logging.getLogger(__name__)

# Parser objects are reusable; trees are not cached.
_PARSERS: dict[str, Parser] = {}


def _get_parser(config: LanguageConfig) -> Parser:
    parser = _PARSERS.get(config.name)
    if parser is None:
        parser = Parser(config.language)
        _PARSERS[config.name] = parser
    return parser


def _walk_children(node: Node) -> Iterator[Node]:
    """Recursively yield all children of a node."""
    yield node
    for child in node.children:
        yield from _walk_children(child)


def find_syntax_error(root: Node) -> Node | None:
    """Return the first ERROR or MISSING node in document order."""
    if not root.has_error:
        return None
    for node in _walk_children(root):
        if node.is_error or node.is_missing:
            return node
    return root


class ModuleParser:
    """Parses source text into a tree whose root carries ``options``."""

    def __init__(
        self,
        config: LanguageConfig,
        options: ResolutionOptions,
        fallback: LanguageConfig | None = None,
    ):
        self.config = config
        self.options = options
        self.fallback = fallback
        self._parser = _get_parser(config)

    @property
    def language(self) -> str:
        return self.config.name

    def parse(self, source: str | bytes) -> NodePath:
        """Parse source text.

        Args:
            source: Module source code

        Returns:
            Path to the ``program`` node, with the parser's options attached

        Raises:
            SourceSyntaxError: If the tree contains ERROR or MISSING nodes, and
                so does the fallback grammar's tree when there is one
        """
        if isinstance(source, str):
            source = source.encode("utf-8")
        tree = self._parser.parse(source)

        error_node = find_syntax_error(tree.root_node)
        if error_node is not None and self.fallback is not None:
            retry = _get_parser(self.fallback).parse(source)
            if find_syntax_error(retry.root_node) is None:
                logger.debug(f"Parsed {self.options.filename or '<source>'} with the {self.fallback.name} grammar")
                tree, error_node = retry, None
        if error_node is not None:
            row, column = error_node.start_point
            snippet = source[error_node.start_byte : error_node.end_byte][:40]
            raise SourceSyntaxError(
                self.options.filename,
                row + 1,
                column,
                snippet.decode("utf-8", errors="replace"),
            )

        return NodePath(tree.root_node, options=self.options)


def build_parser(options: ResolutionOptions) -> ModuleParser:
    """Build a parser for the grammar the options select.

    ``options.language`` wins; otherwise the grammar is chosen from the
    filename's extension, falling back to JavaScript. An inferred JavaScript
    grammar gets TSX as a fallback, which accepts Flow type annotations.
    """
    language = options.language
    if language is None and options.filename is not None:
        language = get_language_for_file(options.filename)
    if language is None:
        language = DEFAULT_LANGUAGE

    config = get_language_config(language)
    if config is None:
        raise UnsupportedLanguageError(f"No grammar registered for language '{language}'")

    fallback = None
    if options.language is None and config.name == DEFAULT_LANGUAGE:
        fallback = get_language_config(FLOW_FALLBACK_LANGUAGE)

    logger.debug(f"Using {config.name} grammar for {options.filename or '<source>'}")
    return ModuleParser(config, options, fallback)
