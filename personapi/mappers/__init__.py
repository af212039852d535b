"""Entity <-> DTO mappers."""
