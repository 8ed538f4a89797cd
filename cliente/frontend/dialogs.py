"""Helpers de dialogos para frontend."""

from __future__ import annotations

from PyQt6.QtWidgets import QInputDialog, QMessageBox, QWidget

from cliente.backend.validators import parse_token
from shared.errors import ValidationError


def show_error(parent: QWidget | None, title: str, message: str) -> None:
    """Muestra un dialogo de error."""
    QMessageBox.critical(parent, title, message)


def ask_name(parent: QWidget | None, title: str, label: str) -> str | None:
    """Pide un nombre de una palabra; None si el usuario cancela."""
    while True:
        text, accepted = QInputDialog.getText(parent, title, label)
        if not accepted:
            return None
        try:
            return parse_token(text, "nombre")
        except ValidationError as exc:
            show_error(parent, title, str(exc))


def ask_text(parent: QWidget | None, title: str, label: str) -> str | None:
    """Pide un texto libre; None si el usuario cancela."""
    text, accepted = QInputDialog.getText(parent, title, label)
    if not accepted:
        return None
    return text


def ask_precio(parent: QWidget | None, title: str) -> float | None:
    """Pide un precio no negativo con dos decimales."""
    value, accepted = QInputDialog.getDouble(
        parent, title, "Precio del producto:", 0.0, 0.0, 1e12, 2
    )
    return value if accepted else None


def ask_cantidad(parent: QWidget | None, title: str) -> int | None:
    """Pide una cantidad entera no negativa."""
    value, accepted = QInputDialog.getInt(
        parent, title, "Cantidad del producto:", 0, 0, 2_147_483_647
    )
    return value if accepted else None
