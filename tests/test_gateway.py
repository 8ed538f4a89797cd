"""Tests del gateway local cliente-servidor."""

from __future__ import annotations

import unittest
from unittest import mock

from cliente.backend.gateway import LocalServerGateway
from servidor.services.inventory_ledger import InventoryLedgerService
from shared.errors import ServiceError
from shared.protocol import ClientData, ProductData, RequestData, UndoStatus


class LocalServerGatewayTests(unittest.TestCase):
    """Valida traduccion a DTOs y manejo de fallos del servicio."""

    def setUp(self) -> None:
        self.ledger = InventoryLedgerService()
        self.gateway = LocalServerGateway(ledger_service=self.ledger)

    def test_register_and_list_products_as_dtos(self) -> None:
        """Debe retornar ProductData ordenados por nombre."""
        self.gateway.register_product(ProductData("Banana", 2.0, 1))
        self.gateway.register_product(ProductData("Apple", 1.0, 1))

        self.assertEqual(
            self.gateway.list_products(),
            [ProductData("Apple", 1.0, 1), ProductData("Banana", 2.0, 1)],
        )

    def test_remove_and_find_not_found_return_none(self) -> None:
        """Nombres inexistentes se reportan como None, sin excepcion."""
        self.assertIsNone(self.gateway.remove_product("Nada"))
        self.assertIsNone(self.gateway.find_product("Nada"))

    def test_undo_statuses(self) -> None:
        """Debe mapear cada resultado de deshacer a su UndoStatus."""
        self.assertEqual(self.gateway.undo_last().estado, UndoStatus.SIN_CAMBIOS)

        self.gateway.register_product(ProductData("Widget", 9.99, 5))
        self.gateway.remove_product("Widget")

        restored = self.gateway.undo_last()
        self.assertEqual(restored.estado, UndoStatus.ELIMINADO_RESTAURADO)
        self.assertEqual(restored.producto, ProductData("Widget", 9.99, 5))

        removed = self.gateway.undo_last()
        self.assertEqual(removed.estado, UndoStatus.AGREGADO_ELIMINADO)
        self.assertEqual(self.gateway.list_products(), [])

    def test_undo_add_without_product_reports_not_found_status(self) -> None:
        """Deshacer un agregado cuyo producto ya no existe no lo aplica."""
        self.gateway.register_product(ProductData("Widget", 9.99, 5))
        self.ledger._productos.clear()  # noqa: SLF001

        response = self.gateway.undo_last()

        self.assertEqual(response.estado, UndoStatus.AGREGADO_NO_ENCONTRADO)
        self.assertEqual(self.gateway.list_history(), [])

    def test_history_uses_tipo_values(self) -> None:
        """El historial expone el tipo como texto."""
        self.gateway.register_product(ProductData("Widget", 9.99, 5))
        self.gateway.remove_product("Widget")

        self.assertEqual([c.tipo for c in self.gateway.list_history()], ["agregar", "eliminar"])

    def test_queues_round_trip_through_gateway(self) -> None:
        """Solicitudes y clientes se procesan en orden de llegada."""
        self.gateway.register_request(RequestData("Cotizar frenos"))
        self.gateway.register_client(ClientData("Ana"))

        self.assertEqual(self.gateway.peek_current_request().descripcion, "Cotizar frenos")
        self.assertEqual(self.gateway.list_requests()[0].id, 1)
        self.assertEqual(self.gateway.process_request().descripcion, "Cotizar frenos")
        self.assertIsNone(self.gateway.process_request())
        self.assertEqual(self.gateway.list_waiting(), [ClientData("Ana", 1)])
        self.assertEqual(self.gateway.attend_client().nombre, "Ana")
        self.assertIsNone(self.gateway.attend_client())

    def test_unexpected_failure_is_wrapped_in_service_error(self) -> None:
        """Errores inesperados del servicio deben envolverse en ServiceError."""
        with mock.patch.object(self.ledger, "list_products", side_effect=RuntimeError("boom")):
            with self.assertLogs("cliente.backend.gateway", level="ERROR"):
                with self.assertRaises(ServiceError) as ctx:
                    self.gateway.list_products()

        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)

    def test_service_error_is_propagated_unchanged(self) -> None:
        """ServiceError del servicio no debe re-envolverse."""
        original = ServiceError("fallo conocido")
        with mock.patch.object(self.ledger, "undo_last", side_effect=original):
            with self.assertRaises(ServiceError) as ctx:
                self.gateway.undo_last()

        self.assertIs(ctx.exception, original)


if __name__ == "__main__":
    unittest.main()
