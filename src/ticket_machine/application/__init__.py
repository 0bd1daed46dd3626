"""Application layer - use cases wiring the domain together."""
