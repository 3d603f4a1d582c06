"""Application use cases (orchestration over ports)."""
