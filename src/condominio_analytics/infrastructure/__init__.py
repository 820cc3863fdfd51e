"""Capa de infraestructura."""
