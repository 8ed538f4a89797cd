"""Inicializacion de la aplicacion de cliente."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from cliente.backend.controller import AppController
from cliente.backend.gateway import LocalServerGateway
from cliente.frontend.console_menu import ConsoleMenu
from parametros import APP_NAME, DEFAULT_LOG_LEVEL, LOG_LEVEL_CHOICES, configure_logging
from servidor.services.inventory_ledger import InventoryLedgerService

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos CLI para elegir interfaz y nivel de log."""
    parser = argparse.ArgumentParser(
        description=f"{APP_NAME}: inventario, solicitudes y clientes en espera en memoria.",
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Abre la ventana grafica en lugar del menu de consola.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        default=DEFAULT_LOG_LEVEL,
        help="Nivel de log emitido en stderr.",
    )
    return parser.parse_args(argv)


def build_controller() -> AppController:
    """Construye el controller con un inventario vacio para esta sesion."""
    gateway = LocalServerGateway(ledger_service=InventoryLedgerService())
    return AppController(gateway=gateway)


def run_gui(controller: AppController) -> int:
    """Ejecuta la aplicacion grafica."""
    from PyQt6.QtWidgets import QApplication

    from cliente.frontend.main_window import MainWindow

    app = QApplication(sys.argv)
    window = MainWindow(controller=controller)
    window.show()
    LOGGER.info("Aplicacion grafica iniciada.")
    return app.exec()


def main(argv: Sequence[str] | None = None) -> int:
    """Punto de entrada CLI."""
    args = parse_args(argv)
    configure_logging(args.log_level)
    controller = build_controller()

    if args.gui:
        return run_gui(controller)

    LOGGER.info("Menu de consola iniciado.")
    return ConsoleMenu(controller).run()


if __name__ == "__main__":
    raise SystemExit(main())
