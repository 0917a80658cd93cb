"""Komplist: a small task management REST backend."""
