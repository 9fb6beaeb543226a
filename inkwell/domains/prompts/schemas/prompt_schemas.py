"""Prompt request/response schemas."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class PromptCreate(BaseModel):
    text: str = Field(min_length=1)
    category: Optional[str] = Field(default=None, max_length=64)
    scheduled_date: Optional[date] = None


class PromptHistoryFilter(BaseModel):
    limit: Optional[int] = Field(default=None, ge=1, le=100)


class PromptResponse(BaseModel):
    id: str
    text: str
    category: Optional[str]
    scheduled_date: Optional[date]
    is_used: bool
    created_at: str
