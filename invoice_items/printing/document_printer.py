"""Document printing via QTextDocument to the configured printer."""

from __future__ import annotations

import logging
from html import escape
from typing import List

from PyQt5.QtGui import QTextDocument
from PyQt5.QtPrintSupport import QPrinter, QPrinterInfo

from invoice_items import config
from invoice_items.formatting import format_currency, format_quantity
from invoice_items.models.ledger import Ledger

logger = logging.getLogger(__name__)


class DocumentPrinter:
    """Render the ledger as HTML and print it."""

    def __init__(self, printer_name: str | None = None) -> None:
        self.printer_name = printer_name if printer_name is not None else config.PRINTER_NAME

    def build_html(self, ledger: Ledger) -> str:
        rows: List[str] = []
        for item in ledger:
            rows.append(
                f"<tr><td>{item.id}</td>"
                f"<td>{escape(item.description)}</td>"
                f"<td align='right'>{format_quantity(item.quantity)}</td>"
                f"<td align='right'>{format_currency(item.unit_price)}</td>"
                f"<td align='right'>{format_quantity(item.discount)}%</td>"
                f"<td align='right'>{format_currency(item.line_subtotal)}</td></tr>"
            )
        totals = ledger.compute_totals()

        return f"""
        <html>
        <head>
            <style>
                body {{ font-family: 'Arial'; font-size: 10pt; }}
                h2 {{ margin: 0 0 8px 0; }}
                table {{ width: 100%; border-collapse: collapse; }}
                th, td {{ padding: 3px 4px; }}
                .totals td {{ padding-top: 4px; }}
            </style>
        </head>
        <body>
            <h2>{escape(config.DOCUMENT_TITLE)}</h2>
            <table>
                <tr><th align='left'>#</th><th align='left'>Descripción</th><th align='right'>Cant.</th><th align='right'>Precio Unit.</th><th align='right'>Desc. %</th><th align='right'>Subtotal</th></tr>
                {''.join(rows)}
            </table>
            <hr />
            <table class='totals'>
                <tr><td>Subtotal</td><td align='right'>{format_currency(totals.subtotal)}</td></tr>
                <tr><td>{escape(config.TAX_LABEL)}</td><td align='right'>{format_currency(totals.tax)}</td></tr>
                <tr><td><b>Total</b></td><td align='right'><b>{format_currency(totals.total)}</b></td></tr>
            </table>
        </body>
        </html>
        """

    def _printer_info(self) -> QPrinterInfo:
        if self.printer_name:
            return QPrinterInfo.printerInfo(self.printer_name)
        return QPrinterInfo.defaultPrinter()

    def print_document(self, ledger: Ledger) -> bool:
        """Send the document to the printer; returns True on success."""
        info = self._printer_info()
        if info.isNull():
            logger.warning("Printer %r is not available", self.printer_name or "default")
            return False

        printer = QPrinter(info, QPrinter.HighResolution)
        if not printer.isValid():
            logger.warning("Printer %r is not valid", info.printerName())
            return False

        doc = QTextDocument()
        doc.setHtml(self.build_html(ledger))
        doc.print_(printer)
        if printer.printerState() == QPrinter.Error:
            logger.warning("Printing to %r failed", info.printerName())
            return False
        logger.info("Printed %d lines to %r", len(ledger), info.printerName())
        return True
