"""
Receipts component - Receipt numbering, CSV rows and printable PDFs.
"""

from ._impl import (
    ReceiptService,
    format_receipt_date,
    next_receipt_number,
    receipt_rows,
    registration_rows,
)
from .models import ReceiptLayout, ReceiptNumbering
from .pdf import render_receipt_pdf
from .ports import ReceiptRepoPort

__all__ = [
    "ReceiptService",
    "ReceiptNumbering",
    "ReceiptLayout",
    "ReceiptRepoPort",
    "next_receipt_number",
    "format_receipt_date",
    "receipt_rows",
    "registration_rows",
    "render_receipt_pdf",
]
