"""Thin-lens camera."""
