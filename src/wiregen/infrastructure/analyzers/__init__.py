"""AST analyzers for extracting dependency markers from Python code."""

from wiregen.infrastructure.analyzers.base import (
    SourceIndex,
    dotted_name,
    is_marker_call,
    short_name,
)
from wiregen.infrastructure.analyzers.decorator_analyzer import DecoratorAnalyzer
from wiregen.infrastructure.analyzers.dependency_visitor import DependencyVisitor

__all__ = [
    # Base utilities
    "SourceIndex",
    "dotted_name",
    "is_marker_call",
    "short_name",
    # Analyzers
    "DecoratorAnalyzer",
    "DependencyVisitor",
]
