"""Domain layer: errors and pure locale helpers."""
