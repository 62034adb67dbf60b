"""HTTP routers exposed by tunequeue."""

from tunequeue.api.media import router as media_router

__all__ = ["media_router"]
