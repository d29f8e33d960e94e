"""Application configuration and logging setup."""
