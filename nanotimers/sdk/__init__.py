"""Configuration, identifiers, logging and the per-thread timer registry."""
