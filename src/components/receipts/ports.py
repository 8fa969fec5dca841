"""
Receipts component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import Receipt


class ReceiptRepoPort(Protocol):
    def save(self, receipt: Receipt) -> Receipt: ...
    def list_all(self) -> list[Receipt]: ...
    def get_by_number(self, receipt_number: str) -> Receipt | None: ...
    def last_receipt_number(self) -> str | None: ...
