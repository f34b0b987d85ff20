from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from marquee.repositories.playlist_storage import BrightnessSetting
from marquee.services.playlist_service import PlaylistService

router = APIRouter(prefix="/brightness", tags=["brightness"])


def _get_playlist_service(request: Request) -> PlaylistService:
    svc = getattr(getattr(request.app, "state", None), "playlist_service", None)
    if not svc:
        raise RuntimeError("PlaylistService not configured")
    return svc


@router.get("", response_model=BrightnessSetting)
def get_brightness(request: Request):
    return {"brightness": _get_playlist_service(request).current_brightness()}


@router.put("", response_model=BrightnessSetting)
def put_brightness(setting: BrightnessSetting, request: Request):
    # Only brightness.json is rewritten; the playlist file stays untouched.
    if not _get_playlist_service(request).set_brightness(setting.brightness):
        raise HTTPException(500, "Brightness could not be saved")
    return setting
