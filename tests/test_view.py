from __future__ import annotations

from decimal import Decimal

from service.app_state import AddView, AppState, FormFields, SearchView
from service.view import format_amount, render
from fakes import response


def test_format_amount():
    assert format_amount(Decimal("5000")) == "5,000.00"
    assert format_amount(Decimal("-12.5")) == "-12.50"


def test_add_view_disables_submit_while_submitting():
    out = render(AppState(view=AddView(submitting=True), form=FormFields(first_name="S")))

    assert out.mode == "add"
    assert out.submit_disabled is True
    assert out.form.first_name == "S"
    assert out.results == []
    assert out.deleting_id is None


def test_search_view_marks_deleting_row():
    state = AppState(
        view=SearchView(results=(response(2, "B"), response(1, "A")), deleting_id=1),
        query="x",
    )

    out = render(state)

    assert out.mode == "search"
    assert [(r.id, r.deleting, r.delete_disabled) for r in out.results] == [
        (2, False, True),
        (1, True, True),
    ]
    assert out.results[1].name == "A Test"


def test_search_view_loading_disables_search():
    out = render(AppState(view=SearchView(loading=True)))

    assert out.loading is True
    assert out.search_disabled is True
