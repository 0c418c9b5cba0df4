"""Core encoding, builder, and artifact-writing helpers."""
