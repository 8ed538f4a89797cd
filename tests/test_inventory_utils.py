"""Tests para utilidades de inventario."""

from __future__ import annotations

import unittest

from servidor.domain.models import Producto
from servidor.services.inventory_utils import (
    copy_producto,
    find_product,
    find_product_index,
    sorted_by_nombre,
)


class InventoryUtilsTests(unittest.TestCase):
    """Valida funciones utilitarias de inventario."""

    def test_find_product_index_returns_first_match(self) -> None:
        """Debe retornar el indice del primer producto con nombre exacto."""
        productos = [Producto("a", 1.0, 1), Producto("b", 2.0, 2), Producto("b", 3.0, 3)]

        self.assertEqual(find_product_index(productos, "b"), 1)
        self.assertIsNone(find_product_index(productos, "B"))

    def test_find_product_returns_same_object(self) -> None:
        """Debe retornar el objeto almacenado, no una copia."""
        productos = [Producto("a", 1.0, 1)]

        self.assertIs(find_product(productos, "a"), productos[0])
        self.assertIsNone(find_product([], "a"))

    def test_sorted_by_nombre_is_ordinal_and_stable(self) -> None:
        """Debe ordenar por codigo de caracter y conservar orden entre iguales."""
        productos = [Producto("b", 1.0, 1), Producto("B", 1.0, 1), Producto("b", 2.0, 1)]

        ordenados = sorted_by_nombre(productos)

        self.assertEqual(
            [(p.nombre, p.precio) for p in ordenados],
            [("B", 1.0), ("b", 1.0), ("b", 2.0)],
        )
        self.assertEqual(productos[0].nombre, "b")

    def test_copy_producto_is_independent(self) -> None:
        """La copia debe ser igual en valor pero no el mismo objeto."""
        original = Producto("a", 1.0, 1)
        copia = copy_producto(original)

        self.assertEqual(copia, original)
        self.assertIsNot(copia, original)


if __name__ == "__main__":
    unittest.main()
