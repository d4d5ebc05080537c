"""Dependency visitor: extracts bindings and injection sites from one module AST."""

from __future__ import annotations

import ast
import logging
from typing import TYPE_CHECKING

from wiregen.domain.model.binding import Binding
from wiregen.domain.model.configuration import MarkerNames
from wiregen.domain.model.injection import InjectedDependency
from wiregen.domain.model.scan_result import ScanResult
from wiregen.infrastructure.analyzers.base import is_marker_call
from wiregen.infrastructure.analyzers.decorator_analyzer import DecoratorAnalyzer

if TYPE_CHECKING:
    from wiregen.domain.model.decorator import Decorator
    from wiregen.infrastructure.analyzers.base import SourceIndex

logger = logging.getLogger(__name__)


class DependencyVisitor(ast.NodeVisitor):
    """Walks a module and collects marker declarations.

    Recognised declarations:
        @bind / @bind()         class bound under its own name
        @bind(A, B)             one binding per argument, same implementation
        @singleton              singleton lifetime for all bindings of the class
        attr: T = Inject()      injection site of type T (annotation as written)
        attr = Inject(T)        injection site of type T (argument as written)

    Nested classes are bound under their dotted path ("Outer.Inner"), the
    name generated code can reach them by. Classes local to a function
    cannot be reached and are skipped. Injection sites count only as
    direct statements of a class body, where Inject acts as a descriptor.

    One visitor per file: results accumulate in ``bindings`` and ``injections``.
    """

    def __init__(self, source: SourceIndex, markers: MarkerNames | None = None) -> None:
        """Initialize visitor for one file.

        Args:
            source: Indexed source of the file being visited
            markers: Marker names to recognise (default names if None)
        """
        self._source = source
        self._markers = markers or MarkerNames()
        self._decorator_analyzer = DecoratorAnalyzer()
        self._class_path: list[str] = []
        self._function_depth = 0
        self.bindings: list[Binding] = []
        self.injections: list[InjectedDependency] = []

    @property
    def result(self) -> ScanResult:
        """Collected declarations as an immutable result."""
        return ScanResult(bindings=tuple(self.bindings), injections=tuple(self.injections))

    def visit_ClassDef(self, node: ast.ClassDef) -> None:  # noqa: N802
        decorators = self._decorator_analyzer.analyze(node.decorator_list, self._source)
        bind = self._find(decorators, self._markers.bind)
        if bind is not None:
            self._add_bindings(node, bind, decorators)
        for statement in node.body:
            self._collect_injection(statement)

        self._class_path.append(node.name)
        self.generic_visit(node)
        self._class_path.pop()

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:  # noqa: N802
        self._function_depth += 1
        self.generic_visit(node)
        self._function_depth -= 1

    visit_AsyncFunctionDef = visit_FunctionDef  # noqa: N815

    def _add_bindings(
        self, node: ast.ClassDef, bind: Decorator, decorators: tuple[Decorator, ...]
    ) -> None:
        location = self._source.location(node)
        if self._function_depth:
            logger.warning(
                "%s: @%s on function-local class %s skipped", location, bind.name, node.name
            )
            return

        qualified_name = ".".join([*self._class_path, node.name])
        is_singleton = self._find(decorators, self._markers.singleton) is not None
        # No arguments: the class is its own contract
        types = bind.arguments or (qualified_name,)
        for type_name in types:
            self.bindings.append(
                Binding(
                    type=type_name,
                    implementation=qualified_name,
                    location=location,
                    is_singleton=is_singleton,
                )
            )
        if bind.keywords:
            logger.debug(
                "%s: keyword arguments of @%s ignored: %s",
                location,
                bind.name,
                ", ".join(bind.keywords),
            )

    def _collect_injection(self, statement: ast.stmt) -> None:
        inject = self._markers.inject
        match statement:
            case ast.AnnAssign(annotation=annotation, value=ast.Call(args=args) as call) if (
                is_marker_call(call, inject)
            ):
                # Explicit key wins: it is what the descriptor resolves at runtime
                self._add_injection(statement, args[0] if args else annotation)
            case ast.Assign(value=ast.Call(args=[type_node, *_]) as call) if is_marker_call(
                call, inject
            ):
                self._add_injection(statement, type_node)
            case ast.Assign(value=ast.Call() as call) if is_marker_call(call, inject):
                logger.debug(
                    "%s: %s() without type annotation skipped",
                    self._source.location(statement),
                    inject,
                )

    def _add_injection(self, node: ast.stmt, type_node: ast.expr) -> None:
        match type_node:
            case ast.Constant(value=str(forward_ref)):
                # "ServiceA": the generated code needs the name, not the string
                type_text = forward_ref.strip()
            case _:
                type_text = self._source.segment(type_node)
        if not type_text:
            logger.debug("%s: empty injection type skipped", self._source.location(node))
            return
        self.injections.append(
            InjectedDependency(type=type_text, location=self._source.location(node))
        )

    @staticmethod
    def _find(decorators: tuple[Decorator, ...], marker: str) -> Decorator | None:
        return next((d for d in decorators if d.short_name == marker), None)
