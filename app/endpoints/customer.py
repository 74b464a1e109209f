# app/endpoints/customer.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from core.exceptions import StoreError
from schemas.customer import CustomerCreate, CustomerResponse
from service.customer_store import CustomerStore, get_store

router = APIRouter(prefix="/customers", tags=["Customer"])
log = logging.getLogger("customer_store")


@router.post("/", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(payload: CustomerCreate, store: CustomerStore = Depends(get_store)):
    try:
        return await store.insert(payload)
    except StoreError as e:
        log.exception("insert failed: %s", e.cause)
        raise HTTPException(status_code=503, detail="save failed")


@router.get("/", response_model=list[CustomerResponse])
async def search_customers(
    q: Optional[str] = Query(None, description="first/last name or account number (blank = all)"),
    store: CustomerStore = Depends(get_store),
):
    try:
        return await store.search(q or "")
    except StoreError as e:
        log.exception("search failed: %s", e.cause)
        raise HTTPException(status_code=503, detail="search failed")


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: int, store: CustomerStore = Depends(get_store)):
    try:
        await store.remove(customer_id)
    except StoreError as e:
        log.exception("delete failed id=%s: %s", customer_id, e.cause)
        raise HTTPException(status_code=503, detail="delete failed")
    return None
