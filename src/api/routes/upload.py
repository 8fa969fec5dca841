"""
Image upload endpoint and local upload serving.

Uploads go to the configured store (local filesystem or S3). Files kept on
the local filesystem are served back from ``/uploads/...``.
"""

import mimetypes

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse, Response

from src.adapters.fs.filestore import FileSystemStore
from src.api.deps import get_current_user, get_upload_service, get_upload_store
from src.api.schemas import UploadResponse
from src.components.uploads import IMAGE_EXTENSIONS, UploadService
from src.core.ports.storage import UploadStorePort
from src.domain.entities import User

router = APIRouter()


@router.post("/api/upload", response_model=UploadResponse)
def upload_image(
    folder: str | None = None,
    file: UploadFile | None = File(default=None),
    current_user: User = Depends(get_current_user),
    service: UploadService = Depends(get_upload_service),
) -> UploadResponse | JSONResponse:
    """Upload an image into ``?folder=``; returns its public URL."""
    # One byte past the limit is enough to reject an oversized body
    content = file.file.read(service.max_upload_bytes + 1) if file is not None else b""
    mime_type = (file.content_type if file else None) or "application/octet-stream"
    filename = (file.filename if file else None) or "unnamed"

    url, errors = service.upload(folder, filename, mime_type, content)
    if errors:
        return JSONResponse(status_code=400, content={"error": errors[0].message})

    assert url is not None
    return UploadResponse(url=url)


@router.get("/uploads/{path:path}")
def serve_upload(
    path: str,
    store: UploadStorePort = Depends(get_upload_store),
) -> Response:
    if not isinstance(store, FileSystemStore):
        raise HTTPException(status_code=404, detail="Not found")

    try:
        data = store.get(path)
    except (FileNotFoundError, ValueError):
        raise HTTPException(status_code=404, detail="Not found") from None

    media_type = mimetypes.guess_type(path)[0]
    if media_type not in IMAGE_EXTENSIONS:
        media_type = "application/octet-stream"
    return Response(
        content=data,
        media_type=media_type,
        headers={"X-Content-Type-Options": "nosniff"},
    )
