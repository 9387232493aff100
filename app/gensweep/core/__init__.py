"""Configuration and path handling for gensweep."""
