"""Application layer: scanning, validation, code generation and reporting."""
