# service/view.py
from __future__ import annotations

from dataclasses import asdict
from decimal import Decimal
from typing import Iterable, List

from schemas.app_view import AppViewResponse, FormValues, NotificationOut, ResultRow
from schemas.customer import CustomerResponse
from service.app_state import AddView, AppState, Notification, SearchView


def format_amount(amount: Decimal) -> str:
    """5000 -> '5,000.00' (results table column)."""
    return f"{amount:,.2f}"


def _row(rec: CustomerResponse, *, deleting_id) -> ResultRow:
    return ResultRow(
        id=rec.id,
        name=f"{rec.first_name} {rec.last_name}".strip(),
        account=rec.account_number,
        amount=rec.amount,
        amount_display=format_amount(rec.amount),
        note=rec.created_by,
        deleting=rec.id == deleting_id,
        delete_disabled=deleting_id is not None,
    )


def render(state: AppState, notifications: Iterable[Notification] = ()) -> AppViewResponse:
    view = state.view
    out = AppViewResponse(
        mode=state.mode,
        form=FormValues(**asdict(state.form)),
        query=state.query,
        notifications=[NotificationOut(**asdict(n)) for n in notifications],
    )

    if isinstance(view, AddView):
        out.submitting = view.submitting
        out.submit_disabled = view.submitting
    elif isinstance(view, SearchView):
        rows: List[ResultRow] = [_row(r, deleting_id=view.deleting_id) for r in view.results]
        out.loading = view.loading
        out.search_disabled = view.loading
        out.deleting_id = view.deleting_id
        out.results = rows
    return out
