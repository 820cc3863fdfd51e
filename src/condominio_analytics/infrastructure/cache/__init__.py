"""Caché de respuestas."""
