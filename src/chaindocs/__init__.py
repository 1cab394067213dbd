"""Regenerate machine-derived sections of chain documentation."""
