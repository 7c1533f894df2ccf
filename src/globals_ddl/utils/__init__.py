"""Utility helpers shared across globals-ddl."""
