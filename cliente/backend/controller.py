"""Controlador principal del cliente."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from shared.protocol import ClientData, ProductData, RequestData, UndoStatus

from .formatters import (
    format_precio,
    format_product_line,
    format_product_lines,
    format_request_lines,
    format_waiting_lines,
)
from .gateway import LocalServerGateway, ServerGateway

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

LOGGER = logging.getLogger(__name__)


class AppController:
    """Coordina acciones de la sesion y servicios de inventario.

    Cada accion retorna las lineas de texto a mostrar al usuario; la
    presentacion (consola o ventana) decide como mostrarlas.
    """

    def __init__(self, gateway: ServerGateway | None = None) -> None:
        self._gateway = gateway or LocalServerGateway()

    def on_register_product(self, nombre: str, precio: float, cantidad: int) -> list[str]:
        """Registra un producto en inventario."""
        LOGGER.info("Accion ejecutada: registrar producto")
        stored = self._gateway.register_product(
            ProductData(nombre=nombre, precio=precio, cantidad=cantidad)
        )
        return [f"Producto agregado: {stored.nombre}"]

    def on_remove_product(self, nombre: str) -> list[str]:
        """Elimina el primer producto con el nombre indicado."""
        LOGGER.info("Accion ejecutada: eliminar producto")
        if self._gateway.remove_product(nombre) is None:
            return ["Producto no encontrado."]
        return [f"Producto eliminado: {nombre}"]

    def on_query_product(self, nombre: str) -> list[str]:
        """Muestra los datos del primer producto con el nombre indicado."""
        LOGGER.info("Accion ejecutada: consultar producto")
        product = self._gateway.find_product(nombre)
        if product is None:
            return ["Producto no encontrado."]
        return [format_product_line(product)]

    def on_list_products(self) -> list[str]:
        LOGGER.info("Accion ejecutada: listar productos")
        return format_product_lines(self._gateway.list_products())

    def on_register_request(self, descripcion: str) -> list[str]:
        LOGGER.info("Accion ejecutada: registrar solicitud")
        request = self._gateway.register_request(RequestData(descripcion=descripcion))
        return [f"Solicitud registrada: {request.descripcion}"]

    def on_process_request(self) -> list[str]:
        LOGGER.info("Accion ejecutada: procesar solicitud")
        request = self._gateway.process_request()
        if request is None:
            return ["No hay solicitudes pendientes."]
        return [f"Procesando solicitud: {request.descripcion}"]

    def on_peek_request(self) -> list[str]:
        LOGGER.info("Accion ejecutada: consultar solicitud en proceso")
        request = self._gateway.peek_current_request()
        if request is None:
            return ["No hay solicitudes en proceso."]
        return [f"Solicitud en proceso: {request.descripcion}"]

    def on_list_requests(self) -> list[str]:
        LOGGER.info("Accion ejecutada: listar solicitudes pendientes")
        return format_request_lines(self._gateway.list_requests())

    def on_register_client(self, nombre: str) -> list[str]:
        LOGGER.info("Accion ejecutada: registrar cliente en espera")
        client = self._gateway.register_client(ClientData(nombre=nombre))
        return [f"Cliente registrado: {client.nombre}"]

    def on_attend_client(self) -> list[str]:
        LOGGER.info("Accion ejecutada: atender cliente")
        client = self._gateway.attend_client()
        if client is None:
            return ["No hay clientes en espera."]
        return [f"Atendiendo cliente: {client.nombre}"]

    def on_list_waiting(self) -> list[str]:
        LOGGER.info("Accion ejecutada: consultar lista de espera")
        return format_waiting_lines(self._gateway.list_waiting())

    def on_undo(self) -> list[str]:
        """Deshace el ultimo cambio de inventario.

        Si el producto agregado ya no existe, la entrada se consume sin
        mensaje para el usuario.
        """
        LOGGER.info("Accion ejecutada: deshacer ultima accion")
        response = self._gateway.undo_last()
        if response.estado is UndoStatus.SIN_CAMBIOS or response.producto is None:
            return ["No hay cambios para deshacer."]

        nombre = response.producto.nombre
        if response.estado is UndoStatus.AGREGADO_ELIMINADO:
            return [f"Deshacer: Producto agregado eliminado: {nombre}"]
        if response.estado is UndoStatus.ELIMINADO_RESTAURADO:
            return [f"Deshacer: Producto eliminado restaurado: {nombre}"]
        return []

    def history_lines(self) -> list[str]:
        """Describe el historial de cambios, del mas reciente al mas antiguo."""
        history = self._gateway.list_history()
        if not history:
            return ["No hay cambios registrados."]
        return [
            f"{change.tipo.capitalize()}: {change.producto.nombre} "
            f"({format_precio(change.producto.precio)}, {change.producto.cantidad})"
            for change in reversed(history)
        ]

    def on_exit(
        self,
        app: QApplication | Callable[[], None] | None = None,
    ) -> list[str]:
        """Cierra la sesion."""
        LOGGER.info("Accion ejecutada: salir")

        if callable(app):
            app()
        elif app is not None:
            app.quit()
        return ["Saliendo del sistema..."]
