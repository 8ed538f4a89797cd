"""Menu interactivo de texto sobre entrada y salida estandar."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO, TypeVar

from cliente.backend.controller import AppController
from cliente.backend.validators import (
    parse_cantidad,
    parse_descripcion,
    parse_menu_option,
    parse_precio,
    parse_token,
)
from parametros import (
    MENU_OPCIONES,
    OPCION_ATENDER_CLIENTE,
    OPCION_CONSULTAR_PRODUCTO,
    OPCION_CONSULTAR_SOLICITUD,
    OPCION_DESHACER,
    OPCION_ELIMINAR_PRODUCTO,
    OPCION_LISTA_ESPERA,
    OPCION_LISTAR_PRODUCTOS,
    OPCION_LISTAR_SOLICITUDES,
    OPCION_PROCESAR_SOLICITUD,
    OPCION_REGISTRAR_CLIENTE,
    OPCION_REGISTRAR_PRODUCTO,
    OPCION_REGISTRAR_SOLICITUD,
    OPCION_SALIR,
)
from shared.errors import InvalidMenuSelectionError, ServiceError, ValidationError

LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")


class ConsoleMenu:
    """Bucle de sesion: muestra el menu, lee la opcion y ejecuta la accion."""

    def __init__(
        self,
        controller: AppController,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._controller = controller
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._actions: dict[int, Callable[[], list[str]]] = {
            OPCION_REGISTRAR_PRODUCTO: self._register_product,
            OPCION_ELIMINAR_PRODUCTO: self._remove_product,
            OPCION_CONSULTAR_PRODUCTO: self._query_product,
            OPCION_LISTAR_PRODUCTOS: controller.on_list_products,
            OPCION_REGISTRAR_SOLICITUD: self._register_request,
            OPCION_PROCESAR_SOLICITUD: controller.on_process_request,
            OPCION_CONSULTAR_SOLICITUD: controller.on_peek_request,
            OPCION_LISTAR_SOLICITUDES: controller.on_list_requests,
            OPCION_REGISTRAR_CLIENTE: self._register_client,
            OPCION_ATENDER_CLIENTE: controller.on_attend_client,
            OPCION_LISTA_ESPERA: controller.on_list_waiting,
            OPCION_DESHACER: controller.on_undo,
        }

    def run(self) -> int:
        """Ejecuta el menu hasta elegir Salir o agotar la entrada."""
        while True:
            self._print_menu()
            try:
                opcion = self._ask("Seleccione una opción: ", parse_menu_option, reprompt=False)
            except InvalidMenuSelectionError as exc:
                self._write(str(exc))
                continue
            except EOFError:
                LOGGER.info("Fin de entrada, cerrando sesion.")
                self._write_lines(self._controller.on_exit())
                return 0

            if opcion == OPCION_SALIR:
                self._write_lines(self._controller.on_exit())
                return 0

            try:
                self._write_lines(self._actions[opcion]())
            except EOFError:
                LOGGER.info("Fin de entrada durante una accion, cerrando sesion.")
                self._write_lines(self._controller.on_exit())
                return 0
            except ServiceError as exc:
                self._write(f"Error: {exc}")

    def _register_product(self) -> list[str]:
        nombre = self._ask("Ingrese nombre del producto: ", lambda raw: parse_token(raw, "nombre"))
        precio = self._ask("Ingrese precio del producto: ", parse_precio)
        cantidad = self._ask("Ingrese cantidad del producto: ", parse_cantidad)
        return self._controller.on_register_product(nombre, precio, cantidad)

    def _remove_product(self) -> list[str]:
        nombre = self._ask(
            "Ingrese nombre del producto a eliminar: ",
            lambda raw: parse_token(raw, "nombre"),
        )
        return self._controller.on_remove_product(nombre)

    def _query_product(self) -> list[str]:
        nombre = self._ask(
            "Ingrese nombre del producto a consultar: ",
            lambda raw: parse_token(raw, "nombre"),
        )
        return self._controller.on_query_product(nombre)

    def _register_request(self) -> list[str]:
        descripcion = self._ask("Ingrese descripción de la solicitud: ", parse_descripcion)
        return self._controller.on_register_request(descripcion)

    def _register_client(self) -> list[str]:
        nombre = self._ask(
            "Ingrese nombre del cliente en espera: ",
            lambda raw: parse_token(raw, "nombre"),
        )
        return self._controller.on_register_client(nombre)

    def _ask(
        self,
        prompt: str,
        parser: Callable[[str], _T],
        reprompt: bool = True,
    ) -> _T:
        """Lee una linea y la convierte; repite la pregunta si es invalida.

        Lanza EOFError cuando la entrada se agota.
        """
        while True:
            self._stdout.write(prompt)
            self._stdout.flush()
            raw = self._stdin.readline()
            if not raw:
                self._stdout.write("\n")
                raise EOFError
            try:
                return parser(raw)
            except ValidationError as exc:
                if not reprompt:
                    raise
                LOGGER.info("Entrada invalida: %s", exc)
                self._write(str(exc))

    def _print_menu(self) -> None:
        self._write("\n---- Menú del Sistema de Gestión ----")
        for numero, etiqueta in MENU_OPCIONES:
            self._write(f"{numero}. {etiqueta}")

    def _write_lines(self, lines: list[str]) -> None:
        for line in lines:
            self._write(line)

    def _write(self, line: str) -> None:
        self._stdout.write(f"{line}\n")
