"""Application layer wiring domain services to infrastructure."""
