# RSVP 응답 스키마

from typing import Optional

from pydantic import BaseModel


class RsvpResult(BaseModel):
    message: str
    status: Optional[str] = None
    rsvp_count: int


class RsvpStatusOut(BaseModel):
    is_rsvped: bool
    status: Optional[str] = None
