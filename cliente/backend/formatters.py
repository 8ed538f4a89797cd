"""Formato de lineas de texto para mostrar inventario, solicitudes y clientes."""

from __future__ import annotations

from shared.protocol import ClientData, ProductData, RequestData


def format_precio(precio: float) -> str:
    """Formatea con hasta seis cifras significativas, sin ceros sobrantes."""
    return f"{precio:g}"


def format_product_line(product: ProductData) -> str:
    """Linea ``Producto: X, Precio: P, Cantidad: Q``."""
    return (
        f"Producto: {product.nombre}, "
        f"Precio: {format_precio(product.precio)}, "
        f"Cantidad: {product.cantidad}"
    )


def format_product_lines(products: list[ProductData]) -> list[str]:
    if not products:
        return ["No hay productos registrados."]
    return [format_product_line(product) for product in products]


def format_request_lines(requests: list[RequestData]) -> list[str]:
    if not requests:
        return ["No hay solicitudes pendientes."]
    return [f"Solicitud pendiente: {request.descripcion}" for request in requests]


def format_waiting_lines(clients: list[ClientData]) -> list[str]:
    if not clients:
        return ["No hay clientes en espera."]
    return [f"Cliente en espera: {client.nombre}" for client in clients]
