"""Service layer: owner-scoped stores and authentication."""
