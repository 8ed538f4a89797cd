"""Servicio en memoria para inventario, solicitudes, clientes e historial."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass

from servidor.domain.models import Cambio, Cliente, Producto, Solicitud, TipoCambio

from .inventory_utils import copy_producto, find_product, find_product_index, sorted_by_nombre

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UndoOutcome:
    """Resultado de deshacer: la entrada consumida y si se aplico su inverso."""

    cambio: Cambio
    aplicado: bool


class InventoryLedgerService:
    """Propietario exclusivo de productos, solicitudes, clientes en espera e historial.

    Cada registro o eliminacion exitosa de un producto agrega una entrada al
    historial con una copia del producto. ``undo_last`` consume solo la
    entrada mas reciente y aplica su inverso; no existe rehacer.
    """

    def __init__(self) -> None:
        self._productos: list[Producto] = []
        self._solicitudes: deque[Solicitud] = deque()
        self._clientes_en_espera: deque[Cliente] = deque()
        self._historial: list[Cambio] = []
        self._next_solicitud_id = 1
        self._next_cliente_id = 1

    # Inventario

    def register_product(self, producto: Producto) -> Producto:
        """Agrega el producto al final del inventario y registra el cambio."""
        stored = copy_producto(producto)
        self._productos.append(stored)
        self._historial.append(Cambio(TipoCambio.AGREGAR, copy_producto(stored)))
        LOGGER.info("Producto agregado: %s", stored.nombre)
        return copy_producto(stored)

    def remove_product(self, nombre: str) -> Producto | None:
        """Elimina el primer producto con ese nombre; None si no existe."""
        index = find_product_index(self._productos, nombre)
        if index is None:
            LOGGER.info("Producto no encontrado para eliminar: %s", nombre)
            return None

        removed = self._productos[index]
        self._historial.append(Cambio(TipoCambio.ELIMINAR, copy_producto(removed)))
        del self._productos[index]
        LOGGER.info("Producto eliminado: %s", nombre)
        return copy_producto(removed)

    def find_product(self, nombre: str) -> Producto | None:
        """Retorna una copia del primer producto con ese nombre, o None."""
        producto = find_product(self._productos, nombre)
        if producto is None:
            LOGGER.info("Producto no encontrado: %s", nombre)
            return None
        return copy_producto(producto)

    def list_products(self) -> list[Producto]:
        """Lista copias de los productos ordenadas por nombre.

        El orden almacenado no se modifica.
        """
        return [copy_producto(producto) for producto in sorted_by_nombre(self._productos)]

    # Solicitudes

    def register_request(self, solicitud: Solicitud) -> Solicitud:
        """Encola una solicitud al final; asigna id si viene en 0."""
        if solicitud.id == 0:
            solicitud = Solicitud(id=self._next_solicitud_id, descripcion=solicitud.descripcion)
            self._next_solicitud_id += 1
        self._solicitudes.append(solicitud)
        LOGGER.info("Solicitud registrada: id=%s", solicitud.id)
        return solicitud

    def process_request(self) -> Solicitud | None:
        """Retira y retorna la primera solicitud; None si la cola esta vacia."""
        if not self._solicitudes:
            return None
        solicitud = self._solicitudes.popleft()
        LOGGER.info("Solicitud procesada: id=%s", solicitud.id)
        return solicitud

    def peek_current_request(self) -> Solicitud | None:
        """Retorna la primera solicitud sin retirarla."""
        if not self._solicitudes:
            return None
        return self._solicitudes[0]

    def list_requests(self) -> list[Solicitud]:
        """Lista las solicitudes pendientes en orden de llegada."""
        return list(self._solicitudes)

    # Clientes en espera

    def register_client(self, cliente: Cliente) -> Cliente:
        """Encola un cliente al final; asigna id si viene en 0."""
        if cliente.id == 0:
            cliente = Cliente(id=self._next_cliente_id, nombre=cliente.nombre)
            self._next_cliente_id += 1
        self._clientes_en_espera.append(cliente)
        LOGGER.info("Cliente registrado: id=%s", cliente.id)
        return cliente

    def attend_client(self) -> Cliente | None:
        """Retira y retorna el primer cliente en espera; None si no hay."""
        if not self._clientes_en_espera:
            return None
        cliente = self._clientes_en_espera.popleft()
        LOGGER.info("Cliente atendido: id=%s", cliente.id)
        return cliente

    def list_waiting(self) -> list[Cliente]:
        """Lista los clientes en espera en orden de llegada."""
        return list(self._clientes_en_espera)

    # Historial

    def list_history(self) -> list[Cambio]:
        """Retorna el historial de cambios, del mas antiguo al mas reciente."""
        return [Cambio(cambio.tipo, copy_producto(cambio.producto)) for cambio in self._historial]

    def undo_last(self) -> UndoOutcome | None:
        """Deshace el cambio mas reciente del historial; None si esta vacio."""
        if not self._historial:
            LOGGER.info("No hay cambios para deshacer.")
            return None

        cambio = self._historial.pop()
        nombre = cambio.producto.nombre

        if cambio.tipo is TipoCambio.AGREGAR:
            index = find_product_index(self._productos, nombre)
            if index is None:
                LOGGER.warning(
                    "Deshacer agregado sin efecto: %s ya no esta en inventario.",
                    nombre,
                )
                return UndoOutcome(cambio=cambio, aplicado=False)
            del self._productos[index]
            LOGGER.info("Deshacer: producto agregado eliminado: %s", nombre)
            return UndoOutcome(cambio=cambio, aplicado=True)

        self._productos.append(copy_producto(cambio.producto))
        LOGGER.info("Deshacer: producto eliminado restaurado: %s", nombre)
        return UndoOutcome(cambio=cambio, aplicado=True)

    def counts(self) -> tuple[int, int, int, int]:
        """Retorna tamanios de (productos, solicitudes, clientes, historial)."""
        return (
            len(self._productos),
            len(self._solicitudes),
            len(self._clientes_en_espera),
            len(self._historial),
        )
