"""Shared models used across the viewer."""
