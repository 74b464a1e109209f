# schemas/customer.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class CustomerCreate(BaseModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    account_number: str = Field(..., min_length=1)
    amount: Decimal
    created_by: Optional[str] = None
    phone_number: Optional[str] = None


class CustomerResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    phone_number: Optional[str] = None
    account_number: str
    created_by: Optional[str] = None
    amount: Decimal
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
