"""Domain layer: models, exceptions and ports. No I/O."""
