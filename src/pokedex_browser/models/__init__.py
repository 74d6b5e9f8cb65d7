"""Domain and state models."""
