"""Typed settings loaded from environment / .env."""
