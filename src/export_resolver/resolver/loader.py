"""Reading and parsing module files."""

import logging
from pathlib import Path

from ..parser.builder import build_parser
from ..parser.nodepath import NodePath
from ..parser.options import ResolutionOptions

logger = logging.getLogger(__name__)


class SourceLoader:
    """Loads a module file into a freshly parsed tree.

    Read and parse failures are not caught here: an ``OSError``,
    ``UnicodeDecodeError`` or ``SourceSyntaxError`` aborts the whole
    resolution request.
    """

    encoding = "utf-8"

    def load(self, path: Path, base_options: ResolutionOptions) -> NodePath:
        """Parse ``path`` with ``base_options`` retargeted to it.

        Args:
            path: Absolute path of the module file
            base_options: Options of the file whose import led here

        Returns:
            Path to the new tree's ``program`` node
        """
        code = Path(path).read_text(encoding=self.encoding)
        parser = build_parser(base_options.for_file(Path(path)))
        logger.debug(f"Parsing {path} as {parser.language}")
        return parser.parse(code)


def parse_module(
    filename: Path | str,
    root: Path | str | None = None,
    **parser_options,
) -> NodePath:
    """Load a file to start resolving from.

    ``root`` defaults to the file's own directory.
    """
    filename = Path(filename).resolve()
    options = ResolutionOptions(
        filename=filename,
        root=Path(root) if root is not None else filename.parent,
        **parser_options,
    )
    return SourceLoader().load(filename, options)
