"""Core infrastructure: exceptions and security primitives."""
