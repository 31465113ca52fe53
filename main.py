"""Entry point for the line items form desktop app."""

from PyQt5.QtWidgets import QApplication
import sys

from invoice_items.logging_setup import configure_logging
from invoice_items.ui.main_window import MainWindow


def main() -> None:
    configure_logging()
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
