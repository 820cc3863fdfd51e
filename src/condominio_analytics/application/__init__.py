"""Capa de aplicación."""
