"""Infrastructure layer: AST analysis and persistence adapters."""
