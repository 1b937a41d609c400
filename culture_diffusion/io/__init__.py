"""Output naming and persisted schemas."""
