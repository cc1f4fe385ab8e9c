"""Resolving the local bindings an ``import`` statement introduces."""

from pathlib import Path

from ..parser.nodepath import NodePath, binding_name
from .exports import ExportResolver, get_default_resolver


def imported_name(import_statement: NodePath, local: str) -> str | None:
    """Return the export name that ``local`` is bound to.

    ``import Button from './b'`` binds ``Button`` to ``"default"``;
    ``import {Button as B} from './b'`` binds ``B`` to ``"Button"``.
    Namespace imports, type-only imports and names the statement does not
    bind give None.
    """
    if import_statement.has_token("type") or import_statement.has_token("typeof"):
        return None

    for clause in import_statement.named_children("import_clause"):
        for child in clause.named_children():
            if child.type == "identifier" and child.text == local:
                return "default"
            if child.type != "named_imports":
                continue
            for specifier in child.named_children("import_specifier"):
                if specifier.has_token("type") or specifier.has_token("typeof"):
                    continue
                imported = specifier.get("name")
                if imported is None:
                    continue
                bound = specifier.get("alias") or imported
                if bound.text == local:
                    return binding_name(imported)
    return None


def resolve_import_binding(
    import_statement: NodePath,
    local: str,
    visited: set[Path] | None = None,
    resolver: ExportResolver | None = None,
) -> NodePath | None:
    """Resolve a name bound by ``import_statement`` to its definition."""
    name = imported_name(import_statement, local)
    if name is None:
        return None
    resolver = resolver or get_default_resolver()
    return resolver.resolve(import_statement, name, visited)
