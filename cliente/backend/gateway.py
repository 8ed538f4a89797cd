"""Gateway de comunicacion cliente-servidor."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol, TypeVar

from servidor.domain.models import Cambio, Cliente, Producto, Solicitud, TipoCambio
from servidor.services.inventory_ledger import InventoryLedgerService
from shared.errors import ServiceError
from shared.protocol import (
    ChangeData,
    ClientData,
    ProductData,
    RequestData,
    UndoResponse,
    UndoStatus,
)

LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")


class ServerGateway(Protocol):
    """Interfaz de acceso del cliente a servicios del servidor."""

    def register_product(self, product: ProductData) -> ProductData:
        """Registra un producto en inventario."""

    def remove_product(self, nombre: str) -> ProductData | None:
        """Elimina un producto por nombre."""

    def find_product(self, nombre: str) -> ProductData | None:
        """Consulta un producto por nombre."""

    def list_products(self) -> list[ProductData]:
        """Lista productos ordenados por nombre."""

    def register_request(self, request: RequestData) -> RequestData:
        """Registra una solicitud de compra."""

    def process_request(self) -> RequestData | None:
        """Procesa la primera solicitud pendiente."""

    def peek_current_request(self) -> RequestData | None:
        """Consulta la solicitud en proceso."""

    def list_requests(self) -> list[RequestData]:
        """Lista solicitudes pendientes."""

    def register_client(self, client: ClientData) -> ClientData:
        """Registra un cliente en espera."""

    def attend_client(self) -> ClientData | None:
        """Atiende al primer cliente en espera."""

    def list_waiting(self) -> list[ClientData]:
        """Lista clientes en espera."""

    def list_history(self) -> list[ChangeData]:
        """Lista el historial de cambios de inventario."""

    def undo_last(self) -> UndoResponse:
        """Deshace el ultimo cambio de inventario."""


class LocalServerGateway:
    """Implementacion local del gateway usando servicios en memoria."""

    def __init__(
        self,
        ledger_service: InventoryLedgerService | None = None,
    ) -> None:
        self._ledger = ledger_service or InventoryLedgerService()

    def register_product(self, product: ProductData) -> ProductData:
        """Registra un producto y retorna la copia almacenada."""
        stored = self._call(
            lambda: self._ledger.register_product(
                Producto(nombre=product.nombre, precio=product.precio, cantidad=product.cantidad)
            ),
            "No fue posible registrar el producto.",
        )
        return _to_product_data(stored)

    def remove_product(self, nombre: str) -> ProductData | None:
        """Elimina el primer producto con ese nombre."""
        removed = self._call(
            lambda: self._ledger.remove_product(nombre),
            "No fue posible eliminar el producto.",
        )
        return None if removed is None else _to_product_data(removed)

    def find_product(self, nombre: str) -> ProductData | None:
        """Busca el primer producto con ese nombre."""
        producto = self._call(
            lambda: self._ledger.find_product(nombre),
            "No fue posible consultar el producto.",
        )
        return None if producto is None else _to_product_data(producto)

    def list_products(self) -> list[ProductData]:
        """Lista productos ordenados por nombre."""
        productos = self._call(
            self._ledger.list_products,
            "No fue posible listar los productos.",
        )
        return [_to_product_data(producto) for producto in productos]

    def register_request(self, request: RequestData) -> RequestData:
        """Encola una solicitud."""
        solicitud = self._call(
            lambda: self._ledger.register_request(
                Solicitud(id=request.id, descripcion=request.descripcion)
            ),
            "No fue posible registrar la solicitud.",
        )
        return _to_request_data(solicitud)

    def process_request(self) -> RequestData | None:
        """Retira la primera solicitud pendiente."""
        solicitud = self._call(
            self._ledger.process_request,
            "No fue posible procesar la solicitud.",
        )
        return None if solicitud is None else _to_request_data(solicitud)

    def peek_current_request(self) -> RequestData | None:
        """Consulta la primera solicitud sin retirarla."""
        solicitud = self._call(
            self._ledger.peek_current_request,
            "No fue posible consultar la solicitud en proceso.",
        )
        return None if solicitud is None else _to_request_data(solicitud)

    def list_requests(self) -> list[RequestData]:
        """Lista solicitudes en orden de llegada."""
        solicitudes = self._call(
            self._ledger.list_requests,
            "No fue posible listar las solicitudes.",
        )
        return [_to_request_data(solicitud) for solicitud in solicitudes]

    def register_client(self, client: ClientData) -> ClientData:
        """Encola un cliente en espera."""
        cliente = self._call(
            lambda: self._ledger.register_client(Cliente(id=client.id, nombre=client.nombre)),
            "No fue posible registrar el cliente.",
        )
        return _to_client_data(cliente)

    def attend_client(self) -> ClientData | None:
        """Retira el primer cliente en espera."""
        cliente = self._call(
            self._ledger.attend_client,
            "No fue posible atender al cliente.",
        )
        return None if cliente is None else _to_client_data(cliente)

    def list_waiting(self) -> list[ClientData]:
        """Lista clientes en espera en orden de llegada."""
        clientes = self._call(
            self._ledger.list_waiting,
            "No fue posible consultar la lista de espera.",
        )
        return [_to_client_data(cliente) for cliente in clientes]

    def list_history(self) -> list[ChangeData]:
        """Lista el historial de cambios del mas antiguo al mas reciente."""
        historial = self._call(
            self._ledger.list_history,
            "No fue posible consultar el historial.",
        )
        return [_to_change_data(cambio) for cambio in historial]

    def undo_last(self) -> UndoResponse:
        """Deshace el ultimo cambio y traduce el resultado a DTO."""
        outcome = self._call(
            self._ledger.undo_last,
            "No fue posible deshacer la ultima accion.",
        )
        if outcome is None:
            return UndoResponse(estado=UndoStatus.SIN_CAMBIOS)

        producto = _to_product_data(outcome.cambio.producto)
        if outcome.cambio.tipo is TipoCambio.ELIMINAR:
            return UndoResponse(estado=UndoStatus.ELIMINADO_RESTAURADO, producto=producto)
        if outcome.aplicado:
            return UndoResponse(estado=UndoStatus.AGREGADO_ELIMINADO, producto=producto)
        return UndoResponse(estado=UndoStatus.AGREGADO_NO_ENCONTRADO, producto=producto)

    @staticmethod
    def _call(operation: Callable[[], _T], error_message: str) -> _T:
        """Ejecuta una operacion del servidor envolviendo fallos inesperados."""
        try:
            return operation()
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado en el servicio de inventario.")
            raise ServiceError(error_message) from exc


def _to_product_data(producto: Producto) -> ProductData:
    return ProductData(nombre=producto.nombre, precio=producto.precio, cantidad=producto.cantidad)


def _to_request_data(solicitud: Solicitud) -> RequestData:
    return RequestData(descripcion=solicitud.descripcion, id=solicitud.id)


def _to_client_data(cliente: Cliente) -> ClientData:
    return ClientData(nombre=cliente.nombre, id=cliente.id)


def _to_change_data(cambio: Cambio) -> ChangeData:
    return ChangeData(tipo=cambio.tipo.value, producto=_to_product_data(cambio.producto))
