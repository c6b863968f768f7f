"""Configuration layer: environment settings and logging setup."""
