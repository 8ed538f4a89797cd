"""DTOs del protocolo cliente-servidor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(slots=True)
class ProductData:
    """Datos de un producto tal como viajan entre cliente y servidor."""

    nombre: str
    precio: float
    cantidad: int


@dataclass(slots=True)
class RequestData:
    """Solicitud de compra registrada por un cliente."""

    descripcion: str
    id: int = 0


@dataclass(slots=True)
class ClientData:
    """Cliente en la lista de espera."""

    nombre: str
    id: int = 0


@dataclass(slots=True)
class ChangeData:
    """Entrada del historial de cambios de inventario."""

    tipo: str
    producto: ProductData


class UndoStatus(str, Enum):
    """Resultado posible de deshacer la ultima accion."""

    SIN_CAMBIOS = "sin_cambios"
    AGREGADO_ELIMINADO = "agregado_eliminado"
    AGREGADO_NO_ENCONTRADO = "agregado_no_encontrado"
    ELIMINADO_RESTAURADO = "eliminado_restaurado"


@dataclass(slots=True)
class UndoResponse:
    """Respuesta de deshacer con el producto afectado, si lo hubo."""

    estado: UndoStatus
    producto: ProductData | None = None
