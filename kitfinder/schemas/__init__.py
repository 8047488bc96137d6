"""API / catalog schemas."""
