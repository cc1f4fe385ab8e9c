"""Tests for the parser layer: grammars, options and traversal."""

from pathlib import Path

import pytest

from export_resolver import (
    ResolutionOptions,
    SourceSyntaxError,
    UnsupportedLanguageError,
    build_parser,
    options_of,
    parse_module,
)
from export_resolver.parser import NodePath, ShallowVisitor, get_language_for_file, traverse_shallow


class TestBuildParser:
    """Tests for grammar selection and parsing."""

    @pytest.mark.parametrize(
        "filename, language",
        [
            ("a.js", "javascript"),
            ("a.jsx", "javascript"),
            ("a.mjs", "javascript"),
            ("a.ts", "typescript"),
            ("a.tsx", "tsx"),
            ("a.unknown", "javascript"),
        ],
    )
    def test_language_from_filename(self, filename, language):
        """Test the grammar follows the file extension."""
        parser = build_parser(ResolutionOptions(filename=Path("/src") / filename))
        assert parser.language == language

    def test_language_override(self):
        """Test an explicit language wins over the extension."""
        parser = build_parser(ResolutionOptions(filename=Path("/src/a.js"), language="tsx"))
        assert parser.language == "tsx"

    def test_unsupported_language(self):
        """Test an unknown language name raises."""
        with pytest.raises(UnsupportedLanguageError):
            build_parser(ResolutionOptions(language="cobol"))

    def test_parse_attaches_options(self):
        """Test the program node carries the parser's options."""
        options = ResolutionOptions(filename=Path("/src/a.js"), root=Path("/src"))
        program = build_parser(options).parse("export const a = 1;\n")

        assert program.type == "program"
        assert program.options is options

    def test_syntax_error_location(self):
        """Test syntax errors report the file and line."""
        options = ResolutionOptions(filename=Path("/src/bad.js"))

        with pytest.raises(SourceSyntaxError) as exc_info:
            build_parser(options).parse("const ok = 1;\nexport const = ;\n")

        assert exc_info.value.filename == Path("/src/bad.js")
        assert exc_info.value.line == 2

    def test_flow_annotations_fall_back_to_tsx(self):
        """Test Flow syntax in an inferred JavaScript file parses as TSX."""
        options = ResolutionOptions(filename=Path("/src/Button.js"))

        program = build_parser(options).parse("type Props = { color: string };\nexport const size: number = 1;\n")

        assert program.type == "program"
        assert program.named_children()[-1].type == "export_statement"

    def test_explicit_javascript_has_no_fallback(self):
        """Test an explicitly chosen grammar is used without fallback."""
        options = ResolutionOptions(filename=Path("/src/Button.js"), language="javascript")

        with pytest.raises(SourceSyntaxError):
            build_parser(options).parse("type Props = { color: string };\n")

    def test_get_language_for_file(self):
        """Test extension lookup."""
        assert get_language_for_file("Button.TSX") == "tsx"
        assert get_language_for_file("style.css") is None


class TestParseModule:
    """Tests for parse_module."""

    def test_defaults_root_to_parent(self, project):
        """Test the root defaults to the file's directory."""
        root = project({"src/a.ts": "export const a: number = 1;\n"})

        program = parse_module(root / "src/a.ts")

        assert program.options.filename == (root / "src/a.ts").resolve()
        assert Path(program.options.root) == (root / "src").resolve()

    def test_extra_parser_options_are_kept(self, project):
        """Test unknown option keys are carried through."""
        root = project({"a.js": "export const a = 1;\n"})

        program = parse_module(root / "a.js", root=root, plugins=["jsx"])

        assert program.options.model_extra == {"plugins": ["jsx"]}
        assert program.options.for_file(root / "b.js").model_extra == {"plugins": ["jsx"]}


class TestOptionsOf:
    """Tests for recovering options from nested paths."""

    def test_nested_path(self):
        """Test options are found from deep inside the tree."""
        options = ResolutionOptions(filename=Path("/src/a.js"), root=Path("/src"))
        program = build_parser(options).parse("export const a = { b: [1, 2] };\n")

        value = program.named_children()[0].get("declaration").named_children()[0].get("value")

        assert value.type == "object"
        assert options_of(value) is options

    def test_detached_path(self):
        """Test a path without a program ancestor gets empty options."""
        options = ResolutionOptions(filename=Path("/src/a.js"), root=Path("/src"))
        program = build_parser(options).parse("export const a = 1;\n")
        detached = NodePath(program.node.named_children[0])

        assert options_of(detached) == ResolutionOptions()

    def test_program_without_options(self):
        """Test a program that carries no options gets empty options."""
        program = build_parser(ResolutionOptions()).parse("const a = 1;\n")

        assert options_of(NodePath(program.node)) == ResolutionOptions()


class TestTraverseShallow:
    """Tests for the shallow traversal engine."""

    class _Recorder(ShallowVisitor):
        def __init__(self):
            self.returns = 0
            self.identifiers: list[str] = []

        def visit_return_statement(self, path):
            self.returns += 1

        def visit_identifier(self, path):
            self.identifiers.append(path.text)

    def test_function_bodies_are_skipped(self):
        """Test traversal does not enter function or class bodies."""
        program = build_parser(ResolutionOptions()).parse(
            "function f() { return inner; }\n"
            "class C { m() { return other; } }\n"
            "const top = () => { return arrow; };\n"
            "use(top);\n"
        )
        recorder = self._Recorder()

        traverse_shallow(program, recorder)

        assert recorder.returns == 0
        assert recorder.identifiers == ["top", "use", "top"]

    def test_hook_can_stop_descent(self):
        """Test a hook returning False skips the node's children."""

        class StopAtCalls(self._Recorder):
            def visit_call_expression(self, path):
                return False

        program = build_parser(ResolutionOptions()).parse("const a = b;\nuse(c);\n")
        recorder = StopAtCalls()

        traverse_shallow(program, recorder)

        assert recorder.identifiers == ["a", "b"]
