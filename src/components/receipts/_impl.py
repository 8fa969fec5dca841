"""
ReceiptService - Donation receipts with sequential numbers.

Numbers look like ``TEC000042``: the configured prefix followed by a
zero-padded integer one greater than the highest issued so far.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from src.domain.entities import BusinessCategory, Event, EventRegistration, Receipt

from .models import ReceiptNumbering
from .ports import ReceiptRepoPort

logger = logging.getLogger(__name__)


def next_receipt_number(last: str | None, numbering: ReceiptNumbering) -> str:
    if not last:
        return numbering.format(1)
    digits = last.removeprefix(numbering.prefix)
    return numbering.format(int(digits) + 1)


def format_receipt_date(value: date) -> str:
    """Indian locale short date, e.g. 5/1/2024."""
    return f"{value.day}/{value.month}/{value.year}"


def receipt_rows(receipts: list[Receipt]) -> list[dict[str, Any]]:
    return [
        {
            "id": r.receipt_number,
            "name": r.name,
            "phone": r.phone,
            "wing": r.wing,
            "date": format_receipt_date(r.date),
            "amount": r.amount,
            "address": r.address,
        }
        for r in receipts
    ]


def registration_rows(
    event: Event,
    registrations: list[EventRegistration],
    categories: list[BusinessCategory],
) -> list[dict[str, Any]]:
    names = {c.id: c.name for c in categories}
    return [
        {
            "id": str(r.id),
            "name": r.name,
            "email": r.email,
            "phone": r.phone,
            "business_name": r.business_name,
            "is_member": r.is_member,
            "location": r.location,
            "created_at": r.created_at.isoformat(),
            "event": event.title,
            "category": names.get(r.category_id, ""),
        }
        for r in registrations
    ]


class ReceiptService:
    def __init__(self, repo: ReceiptRepoPort, numbering: ReceiptNumbering) -> None:
        self._repo = repo
        self._numbering = numbering

    def list_receipts(self) -> list[Receipt]:
        return self._repo.list_all()

    def get_by_number(self, receipt_number: str) -> Receipt | None:
        return self._repo.get_by_number(receipt_number)

    def create_receipt(
        self,
        name: str,
        phone: str,
        wing: str,
        date: date,
        amount: int,
        address: str,
    ) -> Receipt:
        number = next_receipt_number(self._repo.last_receipt_number(), self._numbering)
        receipt = self._repo.save(
            Receipt(
                receipt_number=number,
                name=name,
                phone=phone,
                wing=wing,
                date=date,
                amount=amount,
                address=address,
            )
        )
        logger.info("Receipt issued: %s", receipt.receipt_number)
        return receipt
