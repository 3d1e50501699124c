"""Builders for the GitHub payloads: check-run output and fallback comment."""
