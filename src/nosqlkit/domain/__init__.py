"""Domain layer: entities and pure services."""
