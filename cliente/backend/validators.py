"""Validaciones para entradas del cliente."""

from __future__ import annotations

import math

from parametros import MENU_OPCIONES
from shared.errors import InvalidMenuSelectionError, ValidationError

_OPCIONES_VALIDAS = frozenset(numero for numero, _ in MENU_OPCIONES)


def parse_menu_option(raw: str) -> int:
    """Convierte la seleccion del menu en entero dentro del rango valido."""
    text = raw.strip()
    try:
        opcion = int(text)
    except ValueError as exc:
        raise InvalidMenuSelectionError("Opción no válida.") from exc

    if opcion not in _OPCIONES_VALIDAS:
        raise InvalidMenuSelectionError("Opción no válida.")
    return opcion


def parse_token(raw: str, campo: str) -> str:
    """Toma la primera palabra de la entrada, como una lectura por token."""
    parts = raw.split()
    if not parts:
        raise ValidationError(f"El {campo} no puede estar vacio.")
    return parts[0]


def parse_precio(raw: str) -> float:
    """Convierte el precio a float finito y no negativo."""
    text = raw.strip().replace(",", ".")
    try:
        precio = float(text)
    except ValueError as exc:
        raise ValidationError(f"Precio invalido: {raw.strip()!r}.") from exc

    if not math.isfinite(precio) or precio < 0:
        raise ValidationError("El precio debe ser un numero finito mayor o igual a 0.")
    return precio


def parse_cantidad(raw: str) -> int:
    """Convierte la cantidad a entero no negativo."""
    text = raw.strip()
    try:
        cantidad = int(text)
    except ValueError as exc:
        raise ValidationError(f"Cantidad invalida: {text!r}.") from exc

    if cantidad < 0:
        raise ValidationError("La cantidad debe ser mayor o igual a 0.")
    return cantidad


def parse_descripcion(raw: str) -> str:
    """Valida una descripcion de linea completa (puede contener espacios)."""
    descripcion = raw.strip()
    if not descripcion:
        raise ValidationError("La descripcion no puede estar vacia.")
    return descripcion
