"""Modelos de dominio de inventario."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(slots=True)
class Producto:
    """Representa un producto en inventario."""

    nombre: str
    precio: float
    cantidad: int


@dataclass(slots=True)
class Solicitud:
    """Solicitud de compra pendiente de procesar."""

    id: int
    descripcion: str


@dataclass(slots=True)
class Cliente:
    """Cliente en espera de ser atendido."""

    id: int
    nombre: str


class TipoCambio(str, Enum):
    """Tipo de mutacion registrada en el historial."""

    AGREGAR = "agregar"
    ELIMINAR = "eliminar"


@dataclass(frozen=True, slots=True)
class Cambio:
    """Entrada del historial: tipo de cambio y copia del producto afectado."""

    tipo: TipoCambio
    producto: Producto
