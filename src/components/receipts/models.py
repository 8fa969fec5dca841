"""
Receipts component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReceiptNumbering:
    prefix: str = "TEC"
    width: int = 6

    def format(self, number: int) -> str:
        return f"{self.prefix}{number:0{self.width}d}"


@dataclass(frozen=True)
class ReceiptLayout:
    """Letterhead printed on every receipt PDF."""

    issuer: str
    address_lines: tuple[str, ...] = ()
    wings: tuple[str, ...] = ()
    collected_by: str = ""
