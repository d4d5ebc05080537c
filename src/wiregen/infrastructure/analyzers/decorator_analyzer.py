"""Decorator analyzer."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from wiregen.domain.model.decorator import Decorator
from wiregen.infrastructure.analyzers.base import dotted_name

if TYPE_CHECKING:
    from wiregen.infrastructure.analyzers.base import SourceIndex


class DecoratorAnalyzer:
    """Extracts decorators from Python AST.

    Stateless analyzer - no state between analyze() calls.
    """

    def analyze(
        self,
        decorator_list: list[ast.expr],
        source: SourceIndex,
    ) -> tuple[Decorator, ...]:
        """Extract decorators from decorator list.

        Args:
            decorator_list: List of decorator expressions from AST
            source: Indexed source of the file being analyzed

        Returns:
            Tuple of Decorator objects

        Raises:
            TypeError: If source is None (FAIL-FIRST)
        """
        # FAIL-FIRST: validate required parameters
        if source is None:
            raise TypeError("source must not be None")

        return tuple(self._analyze_decorator(node, source) for node in decorator_list)

    def _analyze_decorator(self, node: ast.expr, source: SourceIndex) -> Decorator:
        """Analyze single decorator expression.

        Args:
            node: Decorator AST expression
            source: Indexed source

        Returns:
            Decorator object
        """
        match node:
            case ast.Call(func=func, args=args, keywords=keywords):
                # @decorator(...) or @module.decorator(...)
                return Decorator(
                    name=dotted_name(func) or source.segment(func),
                    arguments=tuple(self._positional(arg, source) for arg in args),
                    keywords=tuple(self._keyword(kw, source) for kw in keywords),
                    called=True,
                    location=source.location(node),
                )
            case _:
                # @decorator, @module.decorator or a complex expression
                return Decorator(
                    name=dotted_name(node) or source.segment(node),
                    location=source.location(node),
                )

    def _positional(self, arg: ast.expr, source: SourceIndex) -> str:
        if isinstance(arg, ast.Starred):
            return f"*{source.segment(arg.value)}"
        return source.segment(arg)

    def _keyword(self, kw: ast.keyword, source: SourceIndex) -> str:
        if kw.arg is None:
            # **kwargs unpacking
            return f"**{source.segment(kw.value)}"
        return f"{kw.arg}={source.segment(kw.value)}"
