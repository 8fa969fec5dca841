"""
Printable membership receipt.

One A4 page: the chamber letterhead, the receipt number and date, the
payer's details, a tick box per wing and the amount collected. Core PDF
fonts only cover latin-1, so text is reduced to that first.
"""

from __future__ import annotations

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from src.domain.entities import Receipt

from ._impl import format_receipt_date
from .models import ReceiptLayout

FONT = "Helvetica"
MARGIN_MM = 20
LINE_MM = 7


def _latin1(text: str) -> str:
    return text.encode("latin-1", "replace").decode("latin-1")


class ReceiptPDF(FPDF):
    def __init__(self, layout: ReceiptLayout) -> None:
        super().__init__(orientation="P", unit="mm", format="A4")
        self.layout = layout
        self.set_margins(MARGIN_MM, MARGIN_MM, MARGIN_MM)
        self.set_auto_page_break(auto=False)

    def line_text(self, text: str, size: int = 11, style: str = "", align: str = "L") -> None:
        self.set_font(FONT, style, size)
        self.cell(0, LINE_MM, _latin1(text), align=align, new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def header(self) -> None:
        self.line_text(self.layout.issuer, size=14, style="B", align="C")
        for line in self.layout.address_lines:
            self.line_text(line, size=10, align="C")
        self.ln(4)
        self.line_text("Membership Receipt", size=13, style="B", align="C")
        self.ln(4)

    def wings(self, selected: str) -> None:
        self.set_font(FONT, "", 10)
        for wing in self.layout.wings:
            mark = "[x]" if wing == selected else "[ ]"
            self.cell(45, LINE_MM, _latin1(f"{mark} {wing} Wing"))
        self.ln(LINE_MM)


def render_receipt_pdf(receipt: Receipt, layout: ReceiptLayout) -> bytes:
    pdf = ReceiptPDF(layout)
    pdf.add_page()

    pdf.line_text(f"Receipt No: {receipt.receipt_number}")
    pdf.line_text(f"Date: {format_receipt_date(receipt.date)}")
    pdf.ln(3)
    pdf.line_text(f"Business Name/Person Name: {receipt.name}")
    pdf.line_text(f"Phone Number: {receipt.phone}")
    pdf.line_text(f"Address: {receipt.address}")
    pdf.line_text(f"Amount: {receipt.amount}")
    pdf.ln(3)
    if layout.wings:
        pdf.wings(receipt.wing)
    else:
        pdf.line_text(f"Wing: {receipt.wing}")
    pdf.ln(6)
    pdf.line_text(f"Rs {receipt.amount} /-", size=14, style="B")
    if layout.collected_by:
        pdf.line_text(f"Collected By: {layout.collected_by}", size=10, align="R")

    return bytes(pdf.output())
