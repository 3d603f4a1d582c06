"""Community vote and content report API schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ReportReasonLiteral = Literal["spam", "inappropriate", "copyright", "other"]


class VoteRequest(BaseModel):
    """Request body for toggling the caller's vote."""

    vote_type: Literal["upvote"] = "upvote"


class VoteResponse(BaseModel):
    """Vote totals; user_vote is null for anonymous callers and non-voters."""

    model_config = ConfigDict(from_attributes=True)

    upvotes: int
    score: int
    user_vote: str | None = None


class ReportRequest(BaseModel):
    reason: ReportReasonLiteral
    description: str | None = Field(default=None, max_length=1000)


class ReportSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    status: str


class ReportResponse(BaseModel):
    """Acknowledgement of a filed report."""

    message: str = "Report submitted successfully"
    report: ReportSummary
