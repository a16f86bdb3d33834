"""Example scene catalog and backgrounds."""
