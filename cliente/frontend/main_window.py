"""Ventana principal del sistema de gestion."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont, QGuiApplication
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.controller import AppController
from cliente.backend.validators import parse_descripcion
from cliente.frontend.dialogs import ask_cantidad, ask_name, ask_precio, ask_text, show_error
from parametros import APP_NAME
from shared.errors import ServiceError, ValidationError


class MainWindow(QMainWindow):
    """Ventana principal con las acciones de inventario, solicitudes y clientes."""

    def __init__(self, controller: AppController) -> None:
        super().__init__()
        self._controller = controller
        self._output: QPlainTextEdit
        self._history: QPlainTextEdit
        self._exit_button: QPushButton

        self.setWindowTitle(APP_NAME)
        screen = QGuiApplication.primaryScreen()
        geo = screen.availableGeometry()
        w = int(geo.width() * 0.65)
        h = int(geo.height() * 0.75)
        self.resize(w, h)
        self.setMinimumSize(int(w * 0.70), int(h * 0.70))
        self._build_ui()
        self._apply_styles()
        self._refresh_history()

    def _build_ui(self) -> None:
        """Construye tarjeta de acciones y paneles de resultado e historial."""
        page = QWidget(self)
        self.setCentralWidget(page)
        root_layout = QHBoxLayout(page)
        root_layout.setContentsMargins(32, 32, 32, 32)
        root_layout.setSpacing(24)

        card = QFrame(page)
        card.setObjectName("mainCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(28, 28, 28, 28)
        card_layout.setSpacing(12)

        title_label = QLabel(APP_NAME, card)
        title_label.setObjectName("titleLabel")
        title_label.setFont(QFont("Segoe UI", 20, QFont.Weight.Bold))
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        card_layout.addWidget(title_label)
        card_layout.addSpacing(8)

        grid = QGridLayout()
        grid.setSpacing(10)
        actions: list[tuple[str, Callable[[], list[str] | None]]] = [
            ("Registrar Producto", self._register_product),
            ("Eliminar Producto", self._remove_product),
            ("Consultar Producto", self._query_product),
            ("Listar Productos", self._controller.on_list_products),
            ("Registrar Solicitud", self._register_request),
            ("Procesar Solicitud", self._controller.on_process_request),
            ("Solicitud en Proceso", self._controller.on_peek_request),
            ("Solicitudes Pendientes", self._controller.on_list_requests),
            ("Registrar Cliente", self._register_client),
            ("Atender Cliente", self._controller.on_attend_client),
            ("Lista de Espera", self._controller.on_list_waiting),
            ("Deshacer Última Acción", self._controller.on_undo),
        ]
        for index, (text, action) in enumerate(actions):
            button = self._build_button(text)
            button.clicked.connect(self._make_handler(action))
            grid.addWidget(button, index // 2, index % 2)
        card_layout.addLayout(grid)

        card_layout.addSpacing(8)
        self._exit_button = self._build_button("Salir")
        self._exit_button.setObjectName("exitButton")
        self._exit_button.clicked.connect(self._on_exit_clicked)
        card_layout.addWidget(self._exit_button)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(38)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(0, 0, 0, 38))
        card.setGraphicsEffect(shadow)

        panels_layout = QVBoxLayout()
        panels_layout.addWidget(QLabel("Resultado", page))
        self._output = QPlainTextEdit(page)
        self._output.setReadOnly(True)
        panels_layout.addWidget(self._output, 3)
        panels_layout.addWidget(QLabel("Historial de cambios", page))
        self._history = QPlainTextEdit(page)
        self._history.setReadOnly(True)
        panels_layout.addWidget(self._history, 2)

        root_layout.addWidget(card)
        root_layout.addLayout(panels_layout, 1)

    def _apply_styles(self) -> None:
        """Aplica estilos QSS de la interfaz."""
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #eef1f4;
            }
            QFrame#mainCard {
                background-color: #ffffff;
                border-radius: 18px;
                min-width: 420px;
            }
            QPlainTextEdit {
                background-color: #ffffff;
                border: 1px solid #d1d5db;
                border-radius: 10px;
                font-family: "Consolas";
                font-size: 13px;
                padding: 8px;
            }
            QPushButton {
                background-color: #C80202;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 14px;
                font-weight: 600;
                min-height: 44px;
                padding: 8px 12px;
            }
            QPushButton:hover {
                background-color: #A30202;
            }
            QPushButton:pressed {
                background-color: #820101;
            }
            QPushButton#exitButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#exitButton:hover {
                background-color: #d1d5db;
            }
            """
        )

    def _make_handler(
        self,
        action: Callable[[], list[str] | None],
    ) -> Callable[[bool], None]:
        """Envuelve una accion para mostrar su resultado o el error."""

        def handler(_checked: bool = False) -> None:
            try:
                lines = action()
            except (ValidationError, ServiceError) as exc:
                show_error(self, "Error", str(exc))
                return
            if lines is None:
                return
            self._output.setPlainText("\n".join(lines))
            self._refresh_history()

        return handler

    def _register_product(self) -> list[str] | None:
        title = "Registrar Producto"
        nombre = ask_name(self, title, "Nombre del producto:")
        if nombre is None:
            return None
        precio = ask_precio(self, title)
        if precio is None:
            return None
        cantidad = ask_cantidad(self, title)
        if cantidad is None:
            return None
        return self._controller.on_register_product(nombre, precio, cantidad)

    def _remove_product(self) -> list[str] | None:
        nombre = ask_name(self, "Eliminar Producto", "Nombre del producto a eliminar:")
        return None if nombre is None else self._controller.on_remove_product(nombre)

    def _query_product(self) -> list[str] | None:
        nombre = ask_name(self, "Consultar Producto", "Nombre del producto a consultar:")
        return None if nombre is None else self._controller.on_query_product(nombre)

    def _register_request(self) -> list[str] | None:
        text = ask_text(self, "Registrar Solicitud", "Descripción de la solicitud:")
        if text is None:
            return None
        return self._controller.on_register_request(parse_descripcion(text))

    def _register_client(self) -> list[str] | None:
        nombre = ask_name(self, "Registrar Cliente", "Nombre del cliente en espera:")
        return None if nombre is None else self._controller.on_register_client(nombre)

    def _refresh_history(self) -> None:
        self._history.setPlainText("\n".join(self._controller.history_lines()))

    def _on_exit_clicked(self, _checked: bool = False) -> None:
        """Solicita al controller el cierre de la app."""
        self._controller.on_exit(QApplication.instance())

    @staticmethod
    def _build_button(text: str) -> QPushButton:
        """Construye un boton estandar de accion."""
        button = QPushButton(text)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        return button
