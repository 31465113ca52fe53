"""Main PyQt window for the line items form."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Dict, Optional, Tuple

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QAbstractItemView,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from invoice_items import config
from invoice_items.formatting import format_currency, format_number
from invoice_items.models.item import Item, NUMERIC_FIELDS
from invoice_items.models.ledger import Ledger, LedgerSession
from invoice_items.printing.document_printer import DocumentPrinter

logger = logging.getLogger(__name__)

HEADERS = ["#", "Descripción", "Cant.", "Precio Unit.", "Desc. %", "Subtotal", ""]
COL_ID, COL_DESCRIPTION, COL_QUANTITY, COL_UNIT_PRICE, COL_DISCOUNT, COL_SUBTOTAL, COL_DELETE = range(7)

FIELD_COLUMNS = {
    "description": COL_DESCRIPTION,
    "quantity": COL_QUANTITY,
    "unit_price": COL_UNIT_PRICE,
    "discount": COL_DISCOUNT,
}

INVALID_INPUT_STYLE = "border: 1px solid #c0392b;"


@dataclass
class _RowWidgets:
    row: int
    editors: Dict[str, QLineEdit]


class MainWindow(QMainWindow):
    """UI controller that ties the ledger session to the form widgets."""

    def __init__(self, session: Optional[LedgerSession] = None) -> None:
        super().__init__()
        self.setWindowTitle(config.WINDOW_TITLE)
        self.setMinimumSize(1000, 560)

        self.session = session or LedgerSession()
        self._rows: Dict[int, _RowWidgets] = {}
        # Numeric inputs show what was typed, not the coerced value.
        self._raw_text: Dict[Tuple[int, str], str] = {}

        self._build_ui()
        self.session.subscribe(self._on_ledger_changed)
        self._rebuild_rows(self.session.ledger)
        self._update_totals()

    def _build_ui(self) -> None:
        """Construct all widgets and layouts."""
        central = QWidget()
        root_layout = QVBoxLayout()

        # Header
        header_layout = QHBoxLayout()
        title_layout = QVBoxLayout()
        title = QLabel(config.WINDOW_TITLE)
        title_font = QFont()
        title_font.setPointSize(16)
        title_font.setBold(True)
        title.setFont(title_font)
        subtitle = QLabel(config.WINDOW_SUBTITLE)
        subtitle.setWordWrap(True)
        title_layout.addWidget(title)
        title_layout.addWidget(subtitle)

        self.add_button = QPushButton("Añadir línea")
        self.add_button.clicked.connect(self._on_add_clicked)
        header_layout.addLayout(title_layout, 1)
        header_layout.addWidget(self.add_button, alignment=Qt.AlignTop)

        # Items table
        self.table = QTableWidget(0, len(HEADERS))
        self.table.setHorizontalHeaderLabels(HEADERS)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionMode(QAbstractItemView.NoSelection)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(COL_DESCRIPTION, QHeaderView.Stretch)

        # Summary
        summary_group = QGroupBox("Resumen")
        summary_layout = QGridLayout()
        self.subtotal_value = QLabel()
        self.tax_value = QLabel()
        self.total_value = QLabel()
        total_font = QFont()
        total_font.setPointSize(14)
        total_font.setBold(True)
        self.total_value.setFont(total_font)
        for label in (self.subtotal_value, self.tax_value, self.total_value):
            label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        summary_layout.addWidget(QLabel("Subtotal"), 0, 0)
        summary_layout.addWidget(self.subtotal_value, 0, 1)
        summary_layout.addWidget(QLabel(config.TAX_LABEL), 1, 0)
        summary_layout.addWidget(self.tax_value, 1, 1)
        summary_layout.addWidget(QLabel("Total"), 2, 0)
        summary_layout.addWidget(self.total_value, 2, 1)
        summary_group.setLayout(summary_layout)

        self.print_button = QPushButton("Imprimir")
        self.print_button.setStyleSheet("font-size: 16px; padding: 10px;")
        self.print_button.clicked.connect(self._on_print_clicked)

        bottom_layout = QHBoxLayout()
        bottom_layout.addStretch()
        bottom_layout.addWidget(summary_group)
        bottom_layout.addWidget(self.print_button, alignment=Qt.AlignBottom)

        root_layout.addLayout(header_layout)
        root_layout.addWidget(self.table, 1)
        root_layout.addLayout(bottom_layout)

        central.setLayout(root_layout)
        self.setCentralWidget(central)

    def field_editor(self, item_id: int, field: str) -> QLineEdit:
        """Return the input widget bound to one field of a line."""
        return self._rows[item_id].editors[field]

    def row_ids(self) -> Tuple[int, ...]:
        return tuple(sorted(self._rows, key=lambda item_id: self._rows[item_id].row))

    def _rebuild_rows(self, ledger: Ledger) -> None:
        self._rows.clear()
        present = {item.id for item in ledger}
        self._raw_text = {key: text for key, text in self._raw_text.items() if key[0] in present}
        self.table.setRowCount(0)
        self.table.setRowCount(len(ledger))
        for row, item in enumerate(ledger):
            id_cell = QTableWidgetItem(str(item.id))
            id_cell.setTextAlignment(Qt.AlignCenter)
            self.table.setItem(row, COL_ID, id_cell)

            editors: Dict[str, QLineEdit] = {}
            for field, column in FIELD_COLUMNS.items():
                editor = QLineEdit()
                if field == "description":
                    editor.setText(item.description)
                    editor.setPlaceholderText(config.DESCRIPTION_PLACEHOLDER)
                else:
                    raw = self._raw_text.get((item.id, field))
                    editor.setText(raw if raw is not None else format_number(getattr(item, field)))
                    editor.setAlignment(Qt.AlignRight)
                editor.setAccessibleName(f"{HEADERS[column]} línea {item.id}")
                editor.textEdited.connect(partial(self._on_field_edited, item.id, field))
                self.table.setCellWidget(row, column, editor)
                editors[field] = editor

            self.table.setItem(row, COL_SUBTOTAL, QTableWidgetItem())

            delete_button = QPushButton("×")
            delete_button.setAccessibleName(f"Eliminar línea {item.id}")
            delete_button.clicked.connect(partial(self._on_remove_clicked, item.id))
            self.table.setCellWidget(row, COL_DELETE, delete_button)

            self._rows[item.id] = _RowWidgets(row=row, editors=editors)
            self._refresh_row(item)
        self.table.resizeColumnToContents(COL_ID)

    def _refresh_row(self, item: Item) -> None:
        widgets = self._rows[item.id]
        subtotal_cell = self.table.item(widgets.row, COL_SUBTOTAL)
        subtotal_cell.setText(format_currency(item.line_subtotal))
        subtotal_cell.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)

        invalid = item.invalid_fields()
        for field in NUMERIC_FIELDS:
            widgets.editors[field].setStyleSheet(INVALID_INPUT_STYLE if field in invalid else "")

    def _update_totals(self) -> None:
        totals = self.session.totals
        self.subtotal_value.setText(format_currency(totals.subtotal))
        self.tax_value.setText(format_currency(totals.tax))
        self.total_value.setText(format_currency(totals.total))

    def _on_ledger_changed(self, ledger: Ledger) -> None:
        # Field edits keep the same lines; only outputs are redrawn so the
        # focused editor is not replaced while typing.
        if tuple(item.id for item in ledger) == self.row_ids():
            for item in ledger:
                self._refresh_row(item)
        else:
            self._rebuild_rows(ledger)
        self._update_totals()

    def _on_add_clicked(self) -> None:
        item = self.session.add()
        self.field_editor(item.id, "description").setFocus()

    def _on_field_edited(self, item_id: int, field: str, text: str) -> None:
        if field in NUMERIC_FIELDS:
            self._raw_text[(item_id, field)] = text
        self.session.update(item_id, field, text)

    def _on_remove_clicked(self, item_id: int, checked: bool = False) -> None:
        self.session.remove(item_id)

    def _on_print_clicked(self) -> None:
        ledger = self.session.ledger
        if not len(ledger):
            logger.info("Print requested with no lines")
            QMessageBox.information(self, "Nada que imprimir", "Añade al menos una línea al documento.")
            return

        printer = DocumentPrinter()
        if not printer.print_document(ledger):
            QMessageBox.critical(self, "Error de impresión", "La impresora no está disponible.")
            return

        QMessageBox.information(self, "Impreso", "Documento enviado a la impresora.")
