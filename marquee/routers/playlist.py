from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from marquee.domain.models import DisplayContent, Playlist
from marquee.services.playlist_service import PlaylistEditError, PlaylistService

router = APIRouter(prefix="/playlist", tags=["playlist"])


def _get_playlist_service(request: Request) -> PlaylistService:
    svc = getattr(getattr(request.app, "state", None), "playlist_service", None)
    if not svc:
        raise RuntimeError("PlaylistService not configured")
    return svc


def _saved_or_500(playlist: Playlist | None) -> Playlist:
    if playlist is None:
        raise HTTPException(500, "Playlist could not be saved")
    return playlist


@router.get("", response_model=Playlist)
def get_playlist(request: Request):
    return _get_playlist_service(request).current_playlist()


@router.put("")
def put_playlist(playlist: Playlist, request: Request):
    if not _get_playlist_service(request).replace_playlist(playlist):
        raise HTTPException(500, "Playlist could not be saved")
    return {"ok": True}


@router.post("/items", response_model=Playlist)
def add_item(content: DisplayContent, request: Request):
    return _saved_or_500(_get_playlist_service(request).add_item(content))


@router.delete("/items/{index}", response_model=Playlist)
def remove_item(index: int, request: Request):
    svc = _get_playlist_service(request)
    try:
        updated = svc.remove_item(index)
    except PlaylistEditError as exc:
        raise HTTPException(404, str(exc))
    return _saved_or_500(updated)


@router.post("/active/{index}", response_model=Playlist)
def select_item(index: int, request: Request):
    svc = _get_playlist_service(request)
    try:
        updated = svc.select(index)
    except PlaylistEditError as exc:
        raise HTTPException(404, str(exc))
    return _saved_or_500(updated)
