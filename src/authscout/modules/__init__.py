"""Core scanning modules."""
