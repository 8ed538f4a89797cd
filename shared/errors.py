"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Entrada invalida del usuario (precio, cantidad, nombre, descripcion)."""


class InvalidMenuSelectionError(ValidationError):
    """Seleccion de menu fuera de rango o no numerica."""


class ServiceError(Exception):
    """Fallo inesperado del servicio de inventario."""
