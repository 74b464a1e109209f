# tests/fakes.py
from __future__ import annotations

from decimal import Decimal
from typing import List

from core.exceptions import StoreError
from schemas.customer import CustomerCreate, CustomerResponse


def make_record(first="Somchai", last="Test", account="123-456-789", amount="5000", note="scam report"):
    return CustomerCreate(
        first_name=first,
        last_name=last,
        account_number=account,
        amount=Decimal(amount),
        created_by=note,
    )


class FakeStore:
    """In-memory stand-in for CustomerStore that records every call."""

    def __init__(self, rows: List[CustomerResponse] | None = None) -> None:
        self.rows: List[CustomerResponse] = list(rows or [])
        self.insert_calls: List[CustomerCreate] = []
        self.search_calls: List[str] = []
        self.remove_calls: List[int] = []
        self.fail_on: set[str] = set()
        self._next_id = max((r.id for r in self.rows), default=0) + 1

    async def insert(self, record: CustomerCreate) -> CustomerResponse:
        self.insert_calls.append(record)
        if "insert" in self.fail_on:
            raise StoreError("insert", ConnectionError("db down"))
        row = CustomerResponse(id=self._next_id, **record.model_dump())
        self._next_id += 1
        self.rows.insert(0, row)
        return row

    async def search(self, query: str = "") -> List[CustomerResponse]:
        self.search_calls.append(query)
        if "search" in self.fail_on:
            raise StoreError("search", ConnectionError("db down"))
        q = query.strip().lower()
        if not q:
            return list(self.rows)
        return [
            r for r in self.rows
            if q in r.first_name.lower() or q in r.last_name.lower() or q in r.account_number.lower()
        ]

    async def remove(self, customer_id: int) -> None:
        self.remove_calls.append(customer_id)
        if "remove" in self.fail_on:
            raise StoreError("remove", ConnectionError("db down"))
        self.rows = [r for r in self.rows if r.id != customer_id]


def response(id: int, first: str, last: str = "Test", account: str = "000", amount: str = "100", note: str = "n"):
    return CustomerResponse(
        id=id,
        first_name=first,
        last_name=last,
        account_number=account,
        amount=Decimal(amount),
        created_by=note,
    )
