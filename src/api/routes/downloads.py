"""
CSV and PDF downloads for the back office.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from src.api.deps import (
    get_catalog_service,
    get_event_service,
    get_receipt_layout,
    get_receipt_service,
    parse_uuid,
    require_admin,
)
from src.components.catalog import CatalogService
from src.components.events import EVENT_NOT_FOUND, EventService
from src.components.receipts import (
    ReceiptLayout,
    ReceiptService,
    receipt_rows,
    registration_rows,
    render_receipt_pdf,
)
from src.core.services.export import CSV_CONTENT_TYPE, convert_to_csv

router = APIRouter(dependencies=[Depends(require_admin)])


def _csv_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=CSV_CONTENT_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/receipts")
def download_receipts(receipts: ReceiptService = Depends(get_receipt_service)) -> Response:
    rows = receipt_rows(receipts.list_receipts())
    return _csv_response(convert_to_csv(rows), "receipts.csv")


@router.get("/receipts/{receipt_number}.pdf")
def download_receipt_pdf(
    receipt_number: str,
    receipts: ReceiptService = Depends(get_receipt_service),
    layout: ReceiptLayout = Depends(get_receipt_layout),
) -> Response:
    receipt = receipts.get_by_number(receipt_number)
    if receipt is None:
        raise HTTPException(status_code=404, detail="Receipt not found")

    return Response(
        content=render_receipt_pdf(receipt, layout),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{receipt_number}.pdf"'},
    )


@router.get("/registrations/{event_id}")
def download_registrations(
    event_id: str,
    events: EventService = Depends(get_event_service),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Response:
    event = events.get(parse_uuid(event_id))
    if event is None:
        raise HTTPException(status_code=404, detail=EVENT_NOT_FOUND.message)

    rows = registration_rows(event, events.registrations(event.id), catalog.list_categories())
    return _csv_response(convert_to_csv(rows), f"{event.slug}-registrations.csv")
