"""Encode, decode and resolve media reference tokens over HTTP."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from tunequeue.dependencies import get_media_resolver
from tunequeue.logging import get_logger
from tunequeue.logging_events import log_event
from tunequeue.playback.media_id import DEFAULT_MEDIA_ID, parse_media_id, to_media_id
from tunequeue.playback.resolver import MediaResolver
from tunequeue.schemas import (
    AudioPayload,
    DecodedMediaId,
    EncodedMediaId,
    MediaIdPayload,
    MediaItemsResponse,
    QueueTitleResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/media", tags=["Media"])


@router.get("/decode", response_model=DecodedMediaId)
async def decode_media_id(token: str | None = Query(default=None)) -> DecodedMediaId:
    """Decode a token, reporting whether the default reference was substituted."""

    parsed = parse_media_id(token)
    media_id = parsed if parsed is not None else DEFAULT_MEDIA_ID
    return DecodedMediaId(
        media_id=MediaIdPayload.from_media_id(media_id),
        valid=parsed is not None,
        has_index=media_id.has_index,
    )


@router.post("/encode", response_model=EncodedMediaId, status_code=status.HTTP_200_OK)
async def encode_media_id(payload: MediaIdPayload) -> EncodedMediaId:
    return EncodedMediaId(token=payload.to_media_id().to_token())


@router.get("/items", response_model=MediaItemsResponse)
async def media_items(
    token: str | None = Query(default=None),
    resolver: MediaResolver = Depends(get_media_resolver),
) -> MediaItemsResponse:
    media_id = to_media_id(token)
    items = await resolver.items(media_id)
    log_event(
        logger,
        "api.media.items",
        type=media_id.type.value,
        count=None if items is None else len(items),
    )
    return MediaItemsResponse(
        media_id=MediaIdPayload.from_media_id(media_id),
        items=None if items is None else [AudioPayload.from_audio(audio) for audio in items],
    )


@router.get("/title", response_model=QueueTitleResponse)
async def media_title(
    token: str | None = Query(default=None),
    resolver: MediaResolver = Depends(get_media_resolver),
) -> QueueTitleResponse:
    queue_title = await resolver.title(to_media_id(token))
    return QueueTitleResponse.from_queue_title(queue_title)


__all__ = ["router"]
