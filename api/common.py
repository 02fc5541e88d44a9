"""Shared pieces of the resource routers."""

from typing import Optional, Union

from fastapi import HTTPException
from pydantic import BaseModel

from biztime.db import BizTimeDatabase

# Global database instance (will be set during app initialization)
biztime_db: Optional[BizTimeDatabase] = None


class StatusResponse(BaseModel):
    """Response model for deletions."""

    status: str


def set_biztime_db(db: Optional[BizTimeDatabase]) -> None:
    """Set the global database instance."""
    global biztime_db
    biztime_db = db


def get_biztime_db() -> BizTimeDatabase:
    """FastAPI dependency returning the database set at startup."""
    if biztime_db is None:
        raise HTTPException(status_code=500, detail="BizTimeDatabase not initialized")
    return biztime_db


def not_found(key: Union[str, int]) -> HTTPException:
    """404 for a missing primary key."""
    return HTTPException(
        status_code=404, detail=f"Can't find record with primary key {key}"
    )
