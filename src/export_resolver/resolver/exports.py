"""Resolving exported names to the nodes that define them.

A request starts at an import or export statement and a name. The statement's
module is located, loaded and searched for an export of that name. Exports
that forward to yet another module (``export {X} from './x'`` and
``export * from './x'``) continue the search there, with a single visited set
shared by every module the request enters so that re-export cycles end.

The search is depth first. Instead of recursing, each module being searched
is a generator frame on an explicit stack: a frame yields a
``ResolveRequest`` when it needs another module and is resumed with that
module's result. Deep barrel chains therefore never run into the interpreter's
recursion limit, and the order in which modules are entered is the same as
for the recursive formulation.
"""

import logging
from collections.abc import Generator
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import NamedTuple

from ..config import ResolverSettings, setup_logging
from ..parser.nodepath import NodePath, binding_name, string_value
from ..parser.traverse import ShallowVisitor, traverse_shallow
from .loader import SourceLoader
from .locator import ModuleLocator
from .options import options_of

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 1000


class ExportKind(str, Enum):
    """Shapes of ``export`` statements the search distinguishes."""

    DECLARATION = "declaration"  # export const/function/class X
    SPECIFIERS = "specifiers"  # export { X } / export { X } from './x'
    DEFAULT = "default"  # export default ...
    WILDCARD = "wildcard"  # export * from './x'
    NAMESPACE = "namespace"  # export * as ns from './x'


class ResolveRequest(NamedTuple):
    """A frame's request to resolve ``name`` through another statement."""

    edge: NodePath
    name: str


Frame = Generator[ResolveRequest, NodePath | None, NodePath | None]


def classify_export(statement: NodePath) -> ExportKind | None:
    """Classify an ``export_statement``.

    Returns None for forms that bind no value: type-only exports and
    TypeScript's ``export =`` / ``export as namespace``.
    """
    if statement.has_token("default"):
        return ExportKind.DEFAULT
    if statement.get("declaration") is not None:
        return ExportKind.DECLARATION
    if statement.has_token("type"):
        return None
    if statement.has_token("*"):
        return ExportKind.WILDCARD
    if statement.named_children("namespace_export"):
        return ExportKind.NAMESPACE
    if statement.named_children("export_clause"):
        return ExportKind.SPECIFIERS
    return None


class _ExportCollector(ShallowVisitor):
    """Collects export statements without descending into them."""

    def __init__(self):
        self.statements: list[NodePath] = []

    def visit_export_statement(self, path: NodePath) -> bool:
        self.statements.append(path)
        return False


def _match_declaration(statement: NodePath, name: str) -> NodePath | None:
    declaration = statement.get("declaration")
    declared = declaration.get("name")
    if declared is not None and declared.text == name:
        return declaration

    match = None
    if declared is None:
        for declarator in declaration.named_children("variable_declarator"):
            bound = declarator.get("name")
            value = declarator.get("value")
            if bound is not None and bound.type == "identifier" and bound.text == name and value is not None:
                match = value
    return match


def _exported_specifiers(statement: NodePath):
    """Yield (exported name, local path) for each value specifier."""
    for clause in statement.named_children("export_clause"):
        for specifier in clause.named_children("export_specifier"):
            if specifier.has_token("type") or specifier.has_token("typeof"):
                continue
            local = specifier.get("name")
            if local is None:
                continue
            exported = specifier.get("alias") or local
            yield binding_name(exported), local


class ExportResolver:
    """Finds the node behind an imported or re-exported name.

    Soft failures (missing options, ignored or unresolvable modules, cycles,
    no matching export) all produce None. Errors reading or parsing a module
    propagate.
    """

    def __init__(
        self,
        locator: ModuleLocator | None = None,
        loader: SourceLoader | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.locator = locator or ModuleLocator()
        self.loader = loader or SourceLoader()
        self.max_depth = max_depth

    @classmethod
    def from_settings(cls, settings: ResolverSettings) -> "ExportResolver":
        """Build a resolver from settings and apply their log level."""
        setup_logging(settings.log_level)
        locator = ModuleLocator(
            extensions=tuple(settings.extensions),
            ignored_sources=frozenset(settings.ignored_sources),
        )
        return cls(locator=locator, max_depth=settings.max_depth)

    def resolve(
        self,
        edge: NodePath,
        name: str,
        visited: set[Path] | None = None,
    ) -> NodePath | None:
        """Resolve ``name`` as exported by the module ``edge`` refers to.

        Args:
            edge: Path to an import or export statement with a source string
            name: Exported name to look for; ``"default"`` for default exports
            visited: Modules already entered by this request. The set is
                mutated in place, so a caller-owned set shows every module
                the request touched.

        Returns:
            Path to the defining node, or None
        """
        if visited is None:
            visited = set()
        return self._run(self._resolve_frame(edge, name, visited), visited)

    def find_exported_value(
        self,
        program: NodePath,
        name: str,
        visited: set[Path] | None = None,
    ) -> NodePath | None:
        """Search an already parsed module for an export of ``name``."""
        if visited is None:
            visited = set()
        return self._run(self._search_frame(program, name), visited)

    def _run(self, first: Frame, visited: set[Path]) -> NodePath | None:
        stack: list[Frame] = [first]
        value: NodePath | None = None

        while stack:
            try:
                request = stack[-1].send(value)
            except StopIteration as stop:
                stack.pop()
                value = stop.value
                continue

            value = None
            if len(stack) >= self.max_depth:
                logger.warning(
                    f"Re-export chain deeper than {self.max_depth} modules, "
                    f"giving up on '{request.name}'"
                )
                continue
            stack.append(self._resolve_frame(request.edge, request.name, visited))

        return value

    def _resolve_frame(self, edge: NodePath, name: str, visited: set[Path]) -> Frame:
        options = options_of(edge)
        source = string_value(edge.get("source"))
        if source is None:
            return None

        resolved = self.locator.locate_for(source, options)
        if resolved is None:
            return None

        if resolved in visited:
            logger.debug(f"Already visited {resolved}, skipping")
            return None
        visited.add(resolved)

        program = self.loader.load(resolved, options)
        return (yield from self._search_frame(program, name))

    def _search_frame(self, program: NodePath, name: str) -> Frame:
        collector = _ExportCollector()
        traverse_shallow(program, collector)

        # Later matches overwrite earlier ones.
        result: NodePath | None = None
        for statement in collector.statements:
            kind = classify_export(statement)

            if kind is ExportKind.DECLARATION:
                match = _match_declaration(statement, name)
                if match is not None:
                    result = match

            elif kind is ExportKind.SPECIFIERS:
                has_source = statement.get("source") is not None
                for exported, local in _exported_specifiers(statement):
                    if exported != name:
                        continue
                    if has_source:
                        result = yield ResolveRequest(statement, binding_name(local))
                    else:
                        result = local

            elif kind is ExportKind.DEFAULT:
                if name == "default":
                    result = statement.get("declaration") or statement.get("value")

            elif kind is ExportKind.WILDCARD:
                resolved = yield ResolveRequest(statement, name)
                if resolved is not None:
                    result = resolved

            elif kind is ExportKind.NAMESPACE:
                for namespace in statement.named_children("namespace_export"):
                    alias = namespace.named_children()
                    if alias and binding_name(alias[-1]) == name:
                        result = namespace

        return result


@lru_cache(maxsize=1)
def get_default_resolver() -> ExportResolver:
    """Resolver configured from the environment, created on first use.

    The settings are read once: later changes to ``EXPORT_RESOLVER_*``
    variables or to ``.env`` are ignored until ``get_default_resolver.cache_clear()``
    is called.
    """
    return ExportResolver.from_settings(ResolverSettings())


def resolve_imported_value(
    edge: NodePath,
    name: str,
    visited: set[Path] | None = None,
) -> NodePath | None:
    """Resolve ``name`` through ``edge`` with the default resolver.

    Args:
        edge: Path to an import or export statement with a source string
        name: Exported name, or ``"default"``
        visited: Optional caller-owned set of already entered module paths

    Returns:
        Path to the node that defines the name, or None
    """
    return get_default_resolver().resolve(edge, name, visited)


def find_exported_value(
    program: NodePath,
    name: str,
    visited: set[Path] | None = None,
) -> NodePath | None:
    """Search a parsed module with the default resolver."""
    return get_default_resolver().find_exported_value(program, name, visited)
