"""Analítica financiera de cuotas para conjuntos residenciales."""

__version__ = "0.1.0"
