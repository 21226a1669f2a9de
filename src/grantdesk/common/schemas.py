"""Shared Pydantic schemas for Grantdesk."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    service: str = "grantdesk"


class ErrorDetail(BaseModel):
    message: str
    code: str = ""


class ErrorEnvelope(BaseModel):
    kind: Literal["error"] = "error"
    error: ErrorDetail


class GrantMessage(BaseModel):
    message: str
    subscriptions: list[str] = Field(default_factory=list)


class SuccessEnvelope(BaseModel):
    kind: Literal["success"] = "success"
    data: GrantMessage
