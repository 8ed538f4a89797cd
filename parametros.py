"""Parametros globales del proyecto."""

from __future__ import annotations

import logging

APP_NAME = "Sistema de Gestion"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR")

OPCION_REGISTRAR_PRODUCTO = 1
OPCION_ELIMINAR_PRODUCTO = 2
OPCION_CONSULTAR_PRODUCTO = 3
OPCION_LISTAR_PRODUCTOS = 4
OPCION_REGISTRAR_SOLICITUD = 5
OPCION_PROCESAR_SOLICITUD = 6
OPCION_CONSULTAR_SOLICITUD = 7
OPCION_LISTAR_SOLICITUDES = 8
OPCION_REGISTRAR_CLIENTE = 9
OPCION_ATENDER_CLIENTE = 10
OPCION_LISTA_ESPERA = 11
OPCION_DESHACER = 12
OPCION_SALIR = 13

MENU_OPCIONES: tuple[tuple[int, str], ...] = (
    (OPCION_REGISTRAR_PRODUCTO, "Registrar Producto"),
    (OPCION_ELIMINAR_PRODUCTO, "Eliminar Producto"),
    (OPCION_CONSULTAR_PRODUCTO, "Consultar Producto"),
    (OPCION_LISTAR_PRODUCTOS, "Listar Productos"),
    (OPCION_REGISTRAR_SOLICITUD, "Registrar Solicitud"),
    (OPCION_PROCESAR_SOLICITUD, "Procesar Solicitud"),
    (OPCION_CONSULTAR_SOLICITUD, "Consultar Solicitud en Proceso"),
    (OPCION_LISTAR_SOLICITUDES, "Listar Solicitudes Pendientes"),
    (OPCION_REGISTRAR_CLIENTE, "Registrar Cliente en Espera"),
    (OPCION_ATENDER_CLIENTE, "Atender Cliente"),
    (OPCION_LISTA_ESPERA, "Consultar Lista de Espera"),
    (OPCION_DESHACER, "Deshacer Última Acción"),
    (OPCION_SALIR, "Salir"),
)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configura logging para salida en consola (stderr)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
    )
