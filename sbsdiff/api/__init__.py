"""API layer for sbsdiff."""
