"""Adapters connecting flatgelf to logging and record sinks."""
