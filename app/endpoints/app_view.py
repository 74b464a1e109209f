# app/endpoints/app_view.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from core.exceptions import InvalidActionError
from schemas.app_view import AppViewResponse, FormPatch, ModeIn, SearchIn
from service.app_state import AppStateController
from service.customer_store import CustomerStore, get_store
from service.session_registry import ControllerRegistry, get_registry
from service.view import render

router = APIRouter(prefix="/app", tags=["화면 상태"])


async def get_controller(
    client_id: str,
    registry: ControllerRegistry = Depends(get_registry),
    store: CustomerStore = Depends(get_store),
) -> AppStateController:
    return registry.get(client_id, store)


def _view(ctl: AppStateController) -> AppViewResponse:
    return render(ctl.state, ctl.drain_notifications())


# 1) 현재 화면
@router.get("/{client_id}", response_model=AppViewResponse)
async def get_view(ctl: AppStateController = Depends(get_controller)):
    return _view(ctl)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_view(client_id: str, registry: ControllerRegistry = Depends(get_registry)):
    registry.drop(client_id)
    return None


# 2) 모드 전환 (search 로 가면 자동 조회)
@router.post("/{client_id}/mode", response_model=AppViewResponse)
async def set_mode(payload: ModeIn, ctl: AppStateController = Depends(get_controller)):
    await ctl.set_mode(payload.mode)
    return _view(ctl)


# 3) 입력 폼
@router.patch("/{client_id}/form", response_model=AppViewResponse)
async def update_form(payload: FormPatch, ctl: AppStateController = Depends(get_controller)):
    ctl.update_form(**payload.model_dump(exclude_none=True))
    return _view(ctl)


@router.post("/{client_id}/form/reset", response_model=AppViewResponse)
async def reset_form(ctl: AppStateController = Depends(get_controller)):
    ctl.reset_form()
    return _view(ctl)


@router.post("/{client_id}/submit", response_model=AppViewResponse)
async def submit(ctl: AppStateController = Depends(get_controller)):
    try:
        await ctl.submit()
    except InvalidActionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _view(ctl)


# 4) 검색
@router.post("/{client_id}/search", response_model=AppViewResponse)
async def search(payload: SearchIn, ctl: AppStateController = Depends(get_controller)):
    try:
        await ctl.search(payload.query)
    except InvalidActionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _view(ctl)


@router.post("/{client_id}/list-all", response_model=AppViewResponse)
async def list_all(ctl: AppStateController = Depends(get_controller)):
    try:
        await ctl.list_all()
    except InvalidActionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _view(ctl)


# 5) 삭제 (confirmed=false 면 아무 것도 하지 않음)
@router.post("/{client_id}/records/{customer_id}/delete", response_model=AppViewResponse)
async def delete_record(
    customer_id: int,
    confirmed: bool = Query(False, description="사용자 확인 여부"),
    ctl: AppStateController = Depends(get_controller),
):
    try:
        await ctl.delete(customer_id, confirm=lambda _id: confirmed)
    except InvalidActionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _view(ctl)
