"""Event descriptions and frame view models."""
