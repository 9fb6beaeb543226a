"""Journal request/response schemas."""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from inkwell.domains.prompts.schemas.prompt_schemas import PromptResponse


class JournalEntryCreate(BaseModel):
    content: str
    prompt_id: str = Field(min_length=1)
    mood: Optional[str] = Field(default=None, max_length=64)


class JournalEntryUpdate(BaseModel):
    content: str
    mood: Optional[str] = Field(default=None, max_length=64)


class JournalEntryListFilter(BaseModel):
    on_date: Optional[date] = Field(default=None, alias="date")


class JournalEntryResponse(BaseModel):
    id: str
    content: str
    entry_date: date
    word_count: int
    mood: Optional[str]
    user_id: str
    prompt: Optional[PromptResponse]
    created_at: str
    updated_at: str


class JournalStatsResponse(BaseModel):
    total_entries: int
    total_words: int
    average_words_per_entry: float
    entries_by_mood: Dict[str, int]


class JournalCalendarResponse(BaseModel):
    year: int
    month: int
    dates: List[date]
