"""Core helpers: security primitives and the identity gate."""
