"""Application layer: order use cases and entry validation."""
