"""
Upload routes
"""

from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from ..core.exceptions import UnsupportedFileError
from ..core.logging import get_logger
from ..models import FileSummary
from ..services.capture import capture_file
from ..services.session import AnalysisSession
from .deps import get_session

router = APIRouter(prefix="/files", tags=["files"])
logger = get_logger(__name__, component="files_route")


@router.get("", response_model=List[FileSummary])
async def list_files(session: AnalysisSession = Depends(get_session)):
    """List the files queued for analysis"""
    return session.snapshot().files


@router.post("", response_model=List[FileSummary])
async def upload_files(
    files: List[UploadFile] = File(...),
    session: AnalysisSession = Depends(get_session),
):
    """Capture uploaded exam pages and queue them for analysis"""
    captured = []
    for upload in files:
        data = await upload.read()
        try:
            captured.append(capture_file(upload.filename or "", upload.content_type, data))
        except UnsupportedFileError as e:
            raise HTTPException(status_code=400, detail=str(e))

    session.add_files(captured)
    logger.info("Files queued", extra={"count": len(captured), "total_files": len(session.files)})
    return [
        FileSummary(id=f.id, name=f.name, mime_type=f.mime_type, size_bytes=f.size_bytes)
        for f in captured
    ]


@router.delete("/{file_id}")
async def delete_file(file_id: str, session: AnalysisSession = Depends(get_session)):
    """Remove a queued file"""
    if not session.remove_file(file_id):
        raise HTTPException(status_code=404, detail="File not found")
    return {"deleted": file_id}
