"""Configuration loading and path policy."""
