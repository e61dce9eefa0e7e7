"""Database initializers."""
