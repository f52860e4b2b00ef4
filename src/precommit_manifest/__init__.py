"""Pinned pre-commit hook manifest and tools that keep it well-formed."""
