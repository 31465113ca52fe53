"""Configuration constants for the line items form."""

from typing import Dict, List, Union

# VAT applied to the discounted subtotal.
TAX_RATE: float = 0.21

# Label shown next to the tax amount.
TAX_LABEL: str = "IVA 21%"

# Currency suffix used by the fixed es-ES formatting rule.
CURRENCY_SYMBOL: str = "€"

# Lines the form starts with.
SEED_ITEMS: List[Dict[str, Union[int, float, str]]] = [
    {
        "id": 1,
        "description": (
            "Mantenimiento de estructuras metálicas con pintura anticorrosiva "
            "y preparación de superficie."
        ),
        "quantity": 2,
        "unit_price": 180.5,
        "discount": 5,
    },
    {
        "id": 2,
        "description": "Suministro e instalación de luminarias LED industriales de alta eficiencia.",
        "quantity": 8,
        "unit_price": 95.25,
        "discount": 0,
    },
]

WINDOW_TITLE: str = "Ítems del Documento"

WINDOW_SUBTITLE: str = (
    "Optimiza la captura de partidas y evita desbordamientos o "
    "solapamientos en cualquier tamaño de pantalla."
)

DESCRIPTION_PLACEHOLDER: str = "Ej: Mantenimiento de estructuras metálicas con pintura anticorrosiva"

# Header printed on top of the document.
DOCUMENT_TITLE: str = "Ítems del Documento"

# Name of the printer to target; empty string keeps Qt's default printer.
PRINTER_NAME: str = ""

LOG_LEVEL: str = "INFO"
