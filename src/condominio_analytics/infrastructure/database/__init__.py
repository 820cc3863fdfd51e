"""Acceso a base de datos."""
