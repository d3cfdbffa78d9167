"""Core data model, signature fingerprinting, row mapping and update policy."""
