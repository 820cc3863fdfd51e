"""Servicios del dominio."""
from condominio_analytics.domain.services.calculadora_cartera import CalculadoraCartera
from condominio_analytics.domain.services.escaner_mora import EscanerMora

__all__ = ["CalculadoraCartera", "EscanerMora"]
