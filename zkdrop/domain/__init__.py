"""Domain layer: value objects, enums and protocols."""
