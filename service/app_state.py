# service/app_state.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Callable, List, Literal, Optional, Protocol, Sequence, Tuple, Union

from core.exceptions import FormValidationError, InvalidActionError, StoreError
from schemas.customer import CustomerCreate, CustomerResponse

log = logging.getLogger("app_state")

Mode = Literal["add", "search"]
NoticeKind = Literal["success", "error", "info"]

# ======================
# UI messages (th)
# ======================
MSG_FILL_ALL_FIELDS = "กรุณากรอกข้อมูลให้ครบทุกช่อง"
MSG_AMOUNT_NOT_NUMBER = "กรุณากรอกจำนวนเงินเป็นตัวเลข"
MSG_SAVE_OK = "บันทึกข้อมูลสำเร็จ"
MSG_SAVE_FAILED = "เกิดข้อผิดพลาดในการบันทึกข้อมูล"
MSG_SEARCH_FAILED = "เกิดข้อผิดพลาดในการค้นหา"
MSG_NO_RESULTS = "ไม่พบข้อมูล"
MSG_DELETE_OK = "ลบข้อมูลสำเร็จ"
MSG_DELETE_FAILED = "เกิดข้อผิดพลาดในการลบข้อมูล"

# toast auto-dismiss (ms)
_DURATIONS = {"success": 2000, "error": 4000, "info": 4000}


class RecordStore(Protocol):
    async def insert(self, record: CustomerCreate) -> CustomerResponse: ...
    async def search(self, query: str = "") -> List[CustomerResponse]: ...
    async def remove(self, customer_id: int) -> None: ...


@dataclass(frozen=True)
class Notification:
    kind: NoticeKind
    message: str
    duration_ms: int
    created_at: datetime


@dataclass(frozen=True)
class FormFields:
    first_name: str = ""
    last_name: str = ""
    account_number: str = ""
    amount: str = ""
    created_by: str = ""

    def missing(self) -> List[str]:
        return [f.name for f in fields(self) if not getattr(self, f.name).strip()]


@dataclass(frozen=True)
class AddView:
    submitting: bool = False

    @property
    def mode(self) -> Mode:
        return "add"


@dataclass(frozen=True)
class SearchView:
    results: Tuple[CustomerResponse, ...] = ()
    loading: bool = False
    deleting_id: Optional[int] = None

    @property
    def mode(self) -> Mode:
        return "search"


View = Union[AddView, SearchView]


@dataclass(frozen=True)
class AppState:
    view: View = field(default_factory=AddView)
    form: FormFields = field(default_factory=FormFields)
    query: str = ""

    @property
    def mode(self) -> Mode:
        return self.view.mode


def validate_form(form: FormFields) -> CustomerCreate:
    missing = form.missing()
    if missing:
        raise FormValidationError(missing, MSG_FILL_ALL_FIELDS)
    try:
        amount = Decimal(form.amount.strip())
    except InvalidOperation:
        raise FormValidationError(["amount"], MSG_AMOUNT_NOT_NUMBER) from None
    if not amount.is_finite():
        raise FormValidationError(["amount"], MSG_AMOUNT_NOT_NUMBER)
    return CustomerCreate(
        first_name=form.first_name.strip(),
        last_name=form.last_name.strip(),
        account_number=form.account_number.strip(),
        amount=amount,
        created_by=form.created_by.strip(),
    )


class AppStateController:
    """
    One client's form / search screen.

    State is a single AppState whose `view` is either AddView or SearchView,
    so a delete marker can only exist while searching. Busy flags are advisory;
    overlapping searches are resolved by a request token: only the latest
    issued search may apply its result.
    """

    def __init__(self, store: RecordStore) -> None:
        self._store = store
        self.state = AppState()
        self._notifications: List[Notification] = []
        self._search_token = 0

    # -------------------------
    # notifications
    # -------------------------
    def _notify(self, kind: NoticeKind, message: str) -> None:
        self._notifications.append(
            Notification(
                kind=kind,
                message=message,
                duration_ms=_DURATIONS[kind],
                created_at=datetime.now(timezone.utc),
            )
        )

    def drain_notifications(self) -> List[Notification]:
        out, self._notifications = self._notifications, []
        return out

    # -------------------------
    # sync edits
    # -------------------------
    def _set_view(self, view: View) -> None:
        self.state = replace(self.state, view=view)

    def update_form(self, **values: str) -> FormFields:
        self.state = replace(self.state, form=replace(self.state.form, **values))
        return self.state.form

    def reset_form(self) -> None:
        self.state = replace(self.state, form=FormFields())

    def set_query(self, query: str) -> None:
        self.state = replace(self.state, query=query)

    async def set_mode(self, mode: Mode) -> None:
        if mode == "add":
            if not isinstance(self.state.view, AddView):
                self._set_view(AddView())
            return
        if mode == "search":
            if not isinstance(self.state.view, SearchView):
                self._set_view(SearchView())
            await self.search()
            return
        raise InvalidActionError(f"unknown mode: {mode}")

    # -------------------------
    # add
    # -------------------------
    async def submit(self) -> bool:
        if not isinstance(self.state.view, AddView):
            raise InvalidActionError("submit is only available in add mode")

        try:
            record = validate_form(self.state.form)
        except FormValidationError as e:
            self._notify("error", str(e))
            return False

        self._set_view(AddView(submitting=True))
        try:
            created = await self._store.insert(record)
        except StoreError as e:
            log.exception("insert failed: %s", e.cause)
            self._notify("error", MSG_SAVE_FAILED)
            return False
        else:
            log.info("customer report saved id=%s", created.id)
            self._notify("success", MSG_SAVE_OK)
            self.reset_form()
            return True
        finally:
            if isinstance(self.state.view, AddView):
                self._set_view(AddView(submitting=False))

    # -------------------------
    # search
    # -------------------------
    async def search(self, query: Optional[str] = None) -> Optional[Sequence[CustomerResponse]]:
        """Blank query lists every record. Returns None when the result went stale."""
        if not isinstance(self.state.view, SearchView):
            raise InvalidActionError("search is only available in search mode")
        if query is not None:
            self.set_query(query)
        view = self.state.view

        self._search_token += 1
        token = self._search_token
        self._set_view(replace(view, loading=True))

        try:
            rows = await self._store.search(self.state.query.strip())
        except StoreError as e:
            log.exception("search failed: %s", e.cause)
            if not self._is_current(token):
                return None
            self._set_view(replace(self.state.view, loading=False))
            self._notify("error", MSG_SEARCH_FAILED)
            return None

        if not self._is_current(token):
            log.info("dropping stale search result token=%d latest=%d", token, self._search_token)
            return None

        self._set_view(replace(self.state.view, results=tuple(rows), loading=False))
        if not rows:
            self._notify("info", MSG_NO_RESULTS)
        return rows

    async def list_all(self) -> Optional[Sequence[CustomerResponse]]:
        return await self.search("")

    def _is_current(self, token: int) -> bool:
        return token == self._search_token and isinstance(self.state.view, SearchView)

    # -------------------------
    # delete
    # -------------------------
    async def delete(self, customer_id: int, confirm: Callable[[int], bool]) -> bool:
        view = self.state.view
        if not isinstance(view, SearchView):
            raise InvalidActionError("delete is only available in search mode")
        if not confirm(customer_id):
            return False

        self._set_view(replace(view, deleting_id=customer_id))
        try:
            await self._store.remove(customer_id)
        except StoreError as e:
            log.exception("delete failed id=%s: %s", customer_id, e.cause)
            self._notify("error", MSG_DELETE_FAILED)
            return False
        else:
            self._notify("success", MSG_DELETE_OK)
            current = self.state.view
            if isinstance(current, SearchView):
                self._set_view(replace(
                    current,
                    results=tuple(r for r in current.results if r.id != customer_id),
                ))
            return True
        finally:
            current = self.state.view
            if isinstance(current, SearchView) and current.deleting_id == customer_id:
                self._set_view(replace(current, deleting_id=None))
