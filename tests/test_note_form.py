import pytest

from notes_web.api.schemas.note import (
    NoteActionData,
    NoteDraft,
    NoteFieldErrors,
    first_invalid_field,
    parse_note_form,
)

TITLE_ERROR = {"errors": {"title": "Title is required"}}
BODY_ERROR = {"errors": {"body": "Body is required"}}


@pytest.mark.parametrize("form", [
    {},
    {"body": "x"},
    {"title": "", "body": "x"},
    {"title": "", "body": ""},
    {"title": None, "body": "x"},
])
def test_missing_title_reports_only_title(form):
    result = parse_note_form(form)
    assert isinstance(result, NoteActionData)
    assert result.to_json() == TITLE_ERROR


@pytest.mark.parametrize("form", [
    {"title": "Groceries"},
    {"title": "Groceries", "body": ""},
    {"title": "Groceries", "body": 42},
])
def test_missing_body_reports_body(form):
    result = parse_note_form(form)
    assert isinstance(result, NoteActionData)
    assert result.to_json() == BODY_ERROR


def test_valid_form_keeps_values_untouched():
    result = parse_note_form({"title": "  Groceries ", "body": "Milk, eggs"})
    assert result == NoteDraft(title="  Groceries ", body="Milk, eggs")


def test_whitespace_counts_as_content():
    assert isinstance(parse_note_form({"title": " ", "body": " "}), NoteDraft)


def test_focus_prefers_title():
    both = NoteActionData(errors=NoteFieldErrors(title="Title is required", body="Body is required"))
    assert first_invalid_field(both) == "title"
    assert first_invalid_field(parse_note_form({"title": "t"})) == "body"


def test_no_focus_without_errors():
    assert first_invalid_field(None) is None
    assert first_invalid_field(NoteActionData(errors=NoteFieldErrors())) is None
