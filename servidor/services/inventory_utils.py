"""Utilidades para busqueda y ordenamiento de productos en inventario."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from servidor.domain.models import Producto


def copy_producto(producto: Producto) -> Producto:
    """Retorna una copia independiente del producto."""
    return replace(producto)


def find_product_index(productos: list[Producto], nombre: str) -> int | None:
    """Retorna el indice del primer producto con el nombre exacto, o None."""
    for index, producto in enumerate(productos):
        if producto.nombre == nombre:
            return index
    return None


def find_product(productos: list[Producto], nombre: str) -> Producto | None:
    """Retorna el primer producto con el nombre exacto, o None."""
    index = find_product_index(productos, nombre)
    if index is None:
        return None
    return productos[index]


def sorted_by_nombre(productos: Iterable[Producto]) -> list[Producto]:
    """Ordena por nombre (ordinal, sensible a mayusculas) sin mutar la entrada."""
    return sorted(productos, key=lambda producto: producto.nombre)
