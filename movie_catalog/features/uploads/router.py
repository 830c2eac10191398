"""API router for media uploads.

Endpoints:
    POST /uploads/presign - Presigned PUT URL for a poster or backdrop
"""

from __future__ import annotations

from fastapi import APIRouter

from movie_catalog.core.dependencies.auth import AuthUserDep
from movie_catalog.core.dependencies.storage import StorageDep
from movie_catalog.features.uploads.schemas import PresignRequest, PresignResponse
from movie_catalog.features.uploads.service import UploadService

router = APIRouter(prefix="/uploads", tags=["uploads"])


@router.post(
    "/presign",
    response_model=PresignResponse,
    summary="Create an upload URL",
    description="Upload the file with PUT to `upload_url`, then set `key` on the movie.",
    responses={503: {"description": "Object storage not configured"}},
)
async def presign_upload(
    payload: PresignRequest,
    user: AuthUserDep,
    storage: StorageDep,
) -> PresignResponse:
    return await UploadService(storage).presign(payload, user_id=user.user_id)
