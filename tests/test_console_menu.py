"""Tests del menu interactivo de consola."""

from __future__ import annotations

import io
import unittest
from unittest import mock

from cliente.backend.controller import AppController
from cliente.backend.gateway import LocalServerGateway
from cliente.frontend.console_menu import ConsoleMenu
from servidor.services.inventory_ledger import InventoryLedgerService
from shared.errors import ServiceError


class ConsoleMenuTests(unittest.TestCase):
    """Valida sesiones completas sobre streams en memoria."""

    def _run(self, *lines: str) -> tuple[int, str, InventoryLedgerService]:
        ledger = InventoryLedgerService()
        controller = AppController(gateway=LocalServerGateway(ledger_service=ledger))
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()

        status = ConsoleMenu(controller, stdin=stdin, stdout=stdout).run()
        return status, stdout.getvalue(), ledger

    def test_exit_option_returns_zero(self) -> None:
        """La opcion 13 termina la sesion con codigo 0."""
        status, output, _ = self._run("13")

        self.assertEqual(status, 0)
        self.assertIn("---- Menú del Sistema de Gestión ----", output)
        self.assertIn("12. Deshacer Última Acción", output)
        self.assertTrue(output.rstrip().endswith("Saliendo del sistema..."))

    def test_register_remove_undo_session(self) -> None:
        """Sesion completa: registrar Widget, eliminarlo, deshacer y listar."""
        status, output, ledger = self._run(
            "1", "Widget", "9.99", "5",
            "2", "Widget",
            "4",
            "12",
            "4",
            "13",
        )

        self.assertEqual(status, 0)
        self.assertIn("Producto agregado: Widget", output)
        self.assertIn("Producto eliminado: Widget", output)
        self.assertIn("No hay productos registrados.", output)
        self.assertIn("Deshacer: Producto eliminado restaurado: Widget", output)
        self.assertIn("Producto: Widget, Precio: 9.99, Cantidad: 5", output)
        self.assertEqual(ledger.counts(), (1, 0, 0, 1))

    def test_invalid_menu_selection_redisplays_menu(self) -> None:
        """Opciones invalidas muestran error y el menu vuelve a mostrarse."""
        status, output, _ = self._run("99", "abc", "13")

        self.assertEqual(status, 0)
        self.assertEqual(output.count("Opción no válida."), 2)
        self.assertEqual(output.count("---- Menú del Sistema de Gestión ----"), 3)

    def test_invalid_price_and_quantity_reprompt(self) -> None:
        """Precio o cantidad invalidos repiten la pregunta del mismo campo."""
        status, output, ledger = self._run("1", "Widget", "barato", "9.99", "-3", "5", "13")

        self.assertEqual(status, 0)
        self.assertEqual(output.count("Ingrese precio del producto: "), 2)
        self.assertEqual(output.count("Ingrese cantidad del producto: "), 2)
        self.assertIn("Precio invalido: 'barato'.", output)
        self.assertEqual(ledger.find_product("Widget").cantidad, 5)

    def test_request_description_keeps_spaces(self) -> None:
        """La descripcion de una solicitud se lee como linea completa."""
        _, output, _ = self._run("5", "Cotizar frenos de disco", "7", "6", "6", "13")

        self.assertIn("Solicitud registrada: Cotizar frenos de disco", output)
        self.assertIn("Solicitud en proceso: Cotizar frenos de disco", output)
        self.assertIn("Procesando solicitud: Cotizar frenos de disco", output)
        self.assertIn("No hay solicitudes pendientes.", output)

    def test_client_name_is_single_token(self) -> None:
        """El nombre del cliente toma solo la primera palabra."""
        _, output, ledger = self._run("9", "Ana Maria", "11", "10", "10", "13")

        self.assertIn("Cliente registrado: Ana", output)
        self.assertIn("Cliente en espera: Ana", output)
        self.assertIn("Atendiendo cliente: Ana", output)
        self.assertIn("No hay clientes en espera.", output)
        self.assertEqual(ledger.counts()[2], 0)

    def test_end_of_input_closes_session(self) -> None:
        """Agotar la entrada, incluso a mitad de una accion, cierra la sesion."""
        status, output, ledger = self._run("1", "Widget")

        self.assertEqual(status, 0)
        self.assertIn("Saliendo del sistema...", output)
        self.assertEqual(ledger.counts(), (0, 0, 0, 0))

    def test_service_error_is_reported_and_loop_continues(self) -> None:
        """Un ServiceError se informa y el menu sigue activo."""
        ledger = InventoryLedgerService()
        controller = AppController(gateway=LocalServerGateway(ledger_service=ledger))
        stdin = io.StringIO("4\n13\n")
        stdout = io.StringIO()

        with mock.patch.object(
            controller,
            "on_list_products",
            side_effect=ServiceError("No fue posible listar los productos."),
        ):
            status = ConsoleMenu(controller, stdin=stdin, stdout=stdout).run()

        self.assertEqual(status, 0)
        self.assertIn("Error: No fue posible listar los productos.", stdout.getvalue())
        self.assertIn("Saliendo del sistema...", stdout.getvalue())


if __name__ == "__main__":
    unittest.main()
