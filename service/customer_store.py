# service/customer_store.py
from __future__ import annotations

import logging
from typing import Callable, List

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import StoreError
from crud import customer as crud
from schemas.customer import CustomerCreate, CustomerResponse

log = logging.getLogger("customer_store")


class CustomerStore:
    """
    Async handle over the customers table.

    Every call opens its own session and runs the blocking SQLAlchemy work in
    the threadpool. Backend failures surface as a single StoreError type.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    # -------------------------
    # sync bodies (threadpool)
    # -------------------------
    def _insert(self, record: CustomerCreate) -> CustomerResponse:
        with self._session_factory() as db:
            try:
                obj = crud.create(db, record.model_dump())
                return CustomerResponse.model_validate(obj)
            except SQLAlchemyError as e:
                db.rollback()
                raise StoreError("insert", e) from e

    def _search(self, query: str) -> List[CustomerResponse]:
        with self._session_factory() as db:
            try:
                rows = crud.search(db, query)
                return [CustomerResponse.model_validate(r) for r in rows]
            except SQLAlchemyError as e:
                raise StoreError("search", e) from e

    def _remove(self, customer_id: int) -> None:
        with self._session_factory() as db:
            try:
                crud.remove(db, customer_id)
            except SQLAlchemyError as e:
                db.rollback()
                raise StoreError("remove", e) from e

    def _ping(self) -> None:
        with self._session_factory() as db:
            try:
                crud.ping(db)
            except SQLAlchemyError as e:
                raise StoreError("ping", e) from e

    # -------------------------
    # public (async)
    # -------------------------
    async def insert(self, record: CustomerCreate) -> CustomerResponse:
        return await run_in_threadpool(self._insert, record)

    async def search(self, query: str = "") -> List[CustomerResponse]:
        return await run_in_threadpool(self._search, query)

    async def remove(self, customer_id: int) -> None:
        await run_in_threadpool(self._remove, customer_id)

    async def ping(self) -> None:
        await run_in_threadpool(self._ping)


_STORE: CustomerStore | None = None


def get_store() -> CustomerStore:
    global _STORE
    if _STORE is None:
        from database.session import SessionLocal
        _STORE = CustomerStore(SessionLocal)
    return _STORE
