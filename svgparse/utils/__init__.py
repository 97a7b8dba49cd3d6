"""Shared helpers. No parser imports."""
