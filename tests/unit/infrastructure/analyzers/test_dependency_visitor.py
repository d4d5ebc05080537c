"""Tests for infrastructure/analyzers/dependency_visitor.py."""

import ast
import logging
from pathlib import Path

import pytest

from wiregen.domain.model.configuration import MarkerNames
from wiregen.domain.model.scan_result import ScanResult
from wiregen.infrastructure.analyzers.base import SourceIndex
from wiregen.infrastructure.analyzers.dependency_visitor import DependencyVisitor


def scan(code: str, markers: MarkerNames | None = None) -> ScanResult:
    """Run the visitor over code."""
    visitor = DependencyVisitor(SourceIndex(Path("app.py"), code), markers)
    visitor.visit(ast.parse(code))
    return visitor.result


class TestBindings:
    """Tests for @bind / @singleton extraction."""

    def test_bind_with_types(self) -> None:
        result = scan("@bind(ServiceA, ServiceB)\nclass Impl:\n    pass\n")

        assert [(b.type, b.implementation) for b in result.bindings] == [
            ("ServiceA", "Impl"),
            ("ServiceB", "Impl"),
        ]
        assert not any(b.is_singleton for b in result.bindings)

    def test_bind_called_without_arguments_is_self_binding(self) -> None:
        result = scan("@bind()\nclass Clock:\n    pass\n")

        assert len(result.bindings) == 1
        assert result.bindings[0].type == "Clock"
        assert result.bindings[0].is_self_binding

    def test_bare_bind_is_self_binding(self) -> None:
        result = scan("@bind\nclass Clock:\n    pass\n")

        assert [b.type for b in result.bindings] == ["Clock"]

    def test_singleton_applies_to_every_binding(self) -> None:
        result = scan("@singleton\n@bind(A, B)\nclass Impl:\n    pass\n")

        assert all(b.is_singleton for b in result.bindings)
        assert len(result.bindings) == 2

    def test_singleton_without_bind_declares_nothing(self) -> None:
        result = scan("@singleton\nclass Impl:\n    pass\n")

        assert result.bindings == ()

    def test_qualified_markers(self) -> None:
        result = scan("@wiregen.singleton\n@wiregen.bind(A)\nclass Impl:\n    pass\n")

        assert len(result.bindings) == 1
        assert result.bindings[0].is_singleton

    def test_type_text_kept_verbatim(self) -> None:
        result = scan("@bind(repos.Repository[User])\nclass UserRepo:\n    pass\n")

        assert result.bindings[0].type == "repos.Repository[User]"

    def test_location_points_at_class_statement(self) -> None:
        result = scan("@bind(A)\nclass Impl:\n    pass\n")

        location = result.bindings[0].location
        assert (location.line, location.column) == (2, 1)
        assert location.offset == len("@bind(A)\n")
        assert location.file == "app.py"

    def test_nested_classes_are_scanned(self) -> None:
        code = """
class Outer:
    @bind(A)
    class Inner:
        pass
"""
        result = scan(code)

        assert [(b.type, b.implementation) for b in result.bindings] == [("A", "Outer.Inner")]

    def test_nested_self_binding_uses_dotted_path(self) -> None:
        code = """
class Outer:
    class Middle:
        @bind()
        class Inner:
            pass
"""
        result = scan(code)

        assert [(b.type, b.implementation) for b in result.bindings] == [
            ("Outer.Middle.Inner", "Outer.Middle.Inner")
        ]

    def test_sibling_after_nested_class_is_top_level(self) -> None:
        code = """
class Outer:
    class Inner:
        pass

@bind()
class Clock:
    pass
"""
        result = scan(code)

        assert [b.implementation for b in result.bindings] == ["Clock"]

    def test_function_local_class_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        code = """
def factory():
    @bind()
    class Local:
        pass
    return Local
"""
        with caplog.at_level(logging.WARNING, logger="wiregen"):
            result = scan(code)

        assert result.bindings == ()
        assert "function-local class Local" in caplog.text

    def test_class_in_async_method_skipped(self) -> None:
        code = """
class Service:
    async def build(self):
        @bind(A)
        class Local:
            pass
"""
        assert scan(code).bindings == ()

    def test_other_decorators_ignored(self) -> None:
        result = scan("@dataclass\nclass Impl:\n    pass\n")

        assert result.is_empty

    def test_custom_marker_names(self) -> None:
        markers = MarkerNames(bind="provides", singleton="shared", inject="Wire")
        code = """
@shared
@provides(A)
class Impl:
    dep: B = Wire()
    other: C = Inject()
"""
        result = scan(code, markers)

        assert [(b.type, b.is_singleton) for b in result.bindings] == [("A", True)]
        assert [i.type for i in result.injections] == ["B"]


class TestInjections:
    """Tests for Inject() extraction."""

    def test_annotated_inject(self) -> None:
        code = """
class Consumer:
    service: ServiceA = Inject()
"""
        result = scan(code)

        assert [i.type for i in result.injections] == ["ServiceA"]
        location = result.injections[0].location
        assert (location.line, location.column) == (3, 5)

    def test_explicit_argument_wins_over_annotation(self) -> None:
        result = scan("class C:\n    service: Base = Inject(Concrete)\n")

        assert [i.type for i in result.injections] == ["Concrete"]

    def test_unannotated_inject_with_argument(self) -> None:
        result = scan("class C:\n    clock = Inject(Clock)\n")

        assert [i.type for i in result.injections] == ["Clock"]

    def test_unannotated_inject_without_argument_skipped(self) -> None:
        result = scan("class C:\n    clock = Inject()\n")

        assert result.injections == ()

    def test_string_annotation_unquoted(self) -> None:
        result = scan('class C:\n    service: "ServiceA" = Inject()\n')

        assert [i.type for i in result.injections] == ["ServiceA"]

    def test_generic_annotation_verbatim(self) -> None:
        result = scan("class C:\n    repo: Repository[ User ] = Inject()\n")

        assert [i.type for i in result.injections] == ["Repository[ User ]"]

    def test_qualified_inject(self) -> None:
        result = scan("class C:\n    service: A = wiregen.Inject()\n")

        assert [i.type for i in result.injections] == ["A"]

    def test_plain_annotations_ignored(self) -> None:
        result = scan("class C:\n    name: str = 'x'\n    other: A = make()\n")

        assert result.injections == ()

    def test_duplicate_sites_all_recorded(self) -> None:
        code = """
class C:
    a: A = Inject()
    b: A = Inject()
"""
        result = scan(code)

        assert [i.location.line for i in result.injections] == [3, 4]

    def test_module_level_inject_ignored(self) -> None:
        result = scan("service: A = Inject()\nclock = Inject(Clock)\n")

        assert result.injections == ()

    def test_inject_in_function_body_ignored(self) -> None:
        code = """
class C:
    def method(self):
        local: A = Inject()
        other = Inject(B)
"""
        assert scan(code).injections == ()

    def test_inject_in_nested_class_body_recorded(self) -> None:
        code = """
class Outer:
    class Inner:
        dep: A = Inject()
"""
        result = scan(code)

        assert [i.type for i in result.injections] == ["A"]
        assert result.injections[0].location.line == 4

    def test_column_counts_utf8_bytes(self) -> None:
        code = 'class C: x = "é"; service: A = Inject()\n'
        result = scan(code)

        location = result.injections[0].location
        # "é" is two bytes: character column would be 19
        assert location.column == 20
        assert location.offset == 19

    def test_crlf_line_offsets(self) -> None:
        code = "import x\r\nclass C:\r\n    a: A = Inject()\r\n"
        result = scan(code)

        location = result.injections[0].location
        assert location.line == 3
        assert location.offset == len(b"import x\r\nclass C:\r\n") + 4
