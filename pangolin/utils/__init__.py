"""Utility helpers shared by the packers and the CLI."""
