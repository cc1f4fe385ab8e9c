"""Locating the file a module specifier refers to."""

import json
import logging
from pathlib import Path

from ..errors import UnresolvableModuleError
from ..parser.options import ResolutionOptions

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx", ".mjs")
DEFAULT_IGNORED_SOURCES: frozenset[str] = frozenset({"react"})


def normalize_specifier(specifier: str) -> str:
    """Confine a specifier to the configured root.

    Every ``../`` segment is dropped and the remainder is made explicitly
    relative, so ``"../lib/button"`` becomes ``"./lib/button"`` and a bare
    ``"utils"`` becomes ``"./utils"``.
    """
    stripped = specifier.replace("../", "")
    if stripped.startswith("./"):
        return stripped
    return f"./{stripped}"


class ModuleLocator:
    """Maps import specifiers to canonical absolute file paths.

    Lookup follows Node's file resolution for relative paths: the exact file,
    then the file with each extension appended, then the directory's
    ``package.json`` ``main`` entry, then ``index`` with each extension.
    """

    def __init__(
        self,
        extensions: tuple[str, ...] | list[str] = DEFAULT_EXTENSIONS,
        ignored_sources: frozenset[str] | set[str] | list[str] = DEFAULT_IGNORED_SOURCES,
    ):
        self.extensions = tuple(extensions)
        self.ignored_sources = frozenset(ignored_sources)

    def is_ignored(self, specifier: str) -> bool:
        return specifier in self.ignored_sources

    def base_dir(self, options: ResolutionOptions) -> Path | None:
        """Directory lookups start from; relative roots are taken from the cwd."""
        if options.root is None:
            return None
        return Path(options.root).resolve()

    def locate(self, specifier: str, base_dir: Path | str) -> Path:
        """Resolve a specifier to an absolute file path.

        Args:
            specifier: Module specifier as written in the source
            base_dir: Directory the specifier is resolved against

        Returns:
            Canonical absolute path of the module file

        Raises:
            UnresolvableModuleError: If no matching file exists
        """
        if self.is_ignored(specifier):
            raise UnresolvableModuleError(specifier, base_dir)

        candidate = Path(base_dir) / normalize_specifier(specifier)
        found = self._load_as_file(candidate) or self._load_as_directory(candidate)
        if found is None:
            raise UnresolvableModuleError(specifier, base_dir)
        return found.resolve()

    def locate_for(self, specifier: str, options: ResolutionOptions) -> Path | None:
        """Resolve a specifier using a file's options, or return None.

        None covers every soft failure: an ignored specifier, options
        without ``filename`` or ``root``, and an unresolvable specifier.
        """
        if self.is_ignored(specifier):
            logger.debug(f"Not following ignored module '{specifier}'")
            return None
        if not options.filename or not options.root:
            logger.debug(f"No filename/root configured, cannot resolve '{specifier}'")
            return None

        try:
            return self.locate(specifier, self.base_dir(options))
        except UnresolvableModuleError as e:
            logger.debug(str(e))
            return None

    def _load_as_file(self, candidate: Path) -> Path | None:
        if candidate.is_file():
            return candidate
        for ext in self.extensions:
            path = candidate.with_name(candidate.name + ext)
            if path.is_file():
                return path
        return None

    def _load_as_directory(self, candidate: Path) -> Path | None:
        if not candidate.is_dir():
            return None

        main = self._package_main(candidate / "package.json")
        if main:
            target = candidate / main
            found = self._load_as_file(target) or self._load_index(target)
            if found is not None:
                return found

        return self._load_index(candidate)

    def _load_index(self, directory: Path) -> Path | None:
        if not directory.is_dir():
            return None
        return self._load_as_file(directory / "index")

    def _package_main(self, package_json: Path) -> str | None:
        if not package_json.is_file():
            return None
        try:
            data = json.loads(package_json.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable {package_json}: {e}")
            return None
        main = data.get("main") if isinstance(data, dict) else None
        return main if isinstance(main, str) else None
