"""Core: configuration, constants, enums, errors, result type, container."""
