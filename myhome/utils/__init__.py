"""Utility helpers: email transport, template rendering and image processing."""
