# schemas/app_view.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

Mode = Literal["add", "search"]
NoticeKind = Literal["success", "error", "info"]


class FormValues(BaseModel):
    first_name: str = ""
    last_name: str = ""
    account_number: str = ""
    amount: str = ""
    created_by: str = ""


class FormPatch(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    account_number: Optional[str] = None
    amount: Optional[str] = None
    created_by: Optional[str] = None


class ModeIn(BaseModel):
    mode: Mode


class SearchIn(BaseModel):
    query: Optional[str] = Field(default=None, description="비우면 전체 목록")


class NotificationOut(BaseModel):
    kind: NoticeKind
    message: str
    duration_ms: int
    created_at: datetime


class ResultRow(BaseModel):
    id: int
    name: str
    account: str
    amount: Decimal
    amount_display: str
    note: Optional[str] = None
    deleting: bool = False
    delete_disabled: bool = False


class AppViewResponse(BaseModel):
    mode: Mode
    form: FormValues
    query: str
    submitting: bool = False
    loading: bool = False
    deleting_id: Optional[int] = None
    submit_disabled: bool = False
    search_disabled: bool = False
    results: List[ResultRow] = []
    notifications: List[NotificationOut] = []
