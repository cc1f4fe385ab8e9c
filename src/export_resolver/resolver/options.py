"""Recovering per-file options from anywhere inside a parsed tree."""

from ..parser.nodepath import NodePath
from ..parser.options import ResolutionOptions


def options_of(path: NodePath) -> ResolutionOptions:
    """Return the options attached to the ``program`` root above ``path``.

    Paths that never reach a program node, or whose program carries no
    options, get empty options.
    """
    for ancestor in path.ancestors():
        if ancestor.type == "program":
            return ancestor.options or ResolutionOptions()
    return ResolutionOptions()
