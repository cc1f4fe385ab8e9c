"""Shared fixtures: small module trees written to a temporary directory."""

from pathlib import Path

import pytest

from export_resolver import NodePath, SourceLoader, parse_module


class CountingLoader(SourceLoader):
    """SourceLoader that records every file it parses."""

    def __init__(self):
        self.loaded: list[Path] = []

    def load(self, path, base_options):
        self.loaded.append(Path(path))
        return super().load(path, base_options)


@pytest.fixture
def project(tmp_path):
    """Write ``{relative path: source}`` into a fresh root and return it."""

    def write(files: dict[str, str | bytes]) -> Path:
        for relative, content in files.items():
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return tmp_path

    return write


@pytest.fixture
def entry():
    """Parse a file and return its n-th top-level statement of a given type."""

    def find(root: Path, filename: str, node_type: str = "export_statement", index: int = 0) -> NodePath:
        program = parse_module(root / filename, root=root)
        return program.named_children(node_type)[index]

    return find


@pytest.fixture
def counting_loader():
    return CountingLoader()
