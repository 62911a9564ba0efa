"""
Unit tests for the errors module (exceptions.py, handlers.py, manager.py).

Covers:
- Default and custom attributes of all exception classes (parametrized)
- Field error collection for validation failures
- FastAPI integration through setup_errors
"""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from transmit.config import BaseAppSettings
from transmit.errors import (
    ForbiddenError,
    InternalError,
    NotFoundError,
    TransmitError,
    UnauthorizedError,
    UnprocessableEntityError,
    WrongArgumentsError,
    create_error_payload,
    setup_errors,
)
from transmit.errors.handlers import _collect_field_errors


@pytest.mark.parametrize(
    "exc_cls,http_code,message",
    [
        (TransmitError, 400, "Error"),
        (ForbiddenError, 403, "Forbidden"),
        (InternalError, 500, "Internal Error"),
        (NotFoundError, 404, "Resource Not Found"),
        (UnauthorizedError, 401, "Unauthorized"),
        (UnprocessableEntityError, 422, "Unprocessable Entity"),
        (WrongArgumentsError, 400, "Wrong Arguments"),
    ],
)
def test_exception_defaults(exc_cls, http_code, message):
    """Test the default status and message of each exception."""
    err = exc_cls()
    assert err.http_code == http_code
    assert err.message == message
    assert str(err) == message
    assert err.to_dict() == {"http_code": http_code, "message": message}


def test_exception_custom_values():
    """Test a custom message and status."""
    err = TransmitError("Payment Required", 402)
    assert err.http_code == 402
    assert err.message == "Payment Required"


@pytest.mark.parametrize("exc_cls", [TransmitError, NotFoundError, ForbiddenError])
def test_empty_message_is_kept(exc_cls):
    """Test that an empty message is not replaced by the default."""
    err = exc_cls("")
    assert err.message == ""
    assert err.to_dict()["message"] == ""


def test_subclass_custom_message_keeps_code():
    """Test that a custom message keeps the class status."""
    err = NotFoundError("Book 7 does not exist")
    assert err.http_code == 404
    assert err.message == "Book 7 does not exist"


def test_create_error_payload():
    """Test the single error envelope."""
    assert create_error_payload(403, "Forbidden") == {
        "errors": {"http_code": 403, "message": "Forbidden"}
    }


def test_collect_field_errors_drops_location():
    """Test that the location prefix is dropped from field paths."""
    errors = _collect_field_errors(
        [
            {"loc": ("body", "title"), "msg": "Field required"},
            {"loc": ("body", "author", "name"), "msg": "String too short"},
            {"loc": ("query", "year"), "msg": "Input should be a valid integer"},
        ]
    )
    assert errors == {
        "title": "Field required",
        "author.name": "String too short",
        "year": "Input should be a valid integer",
    }


def test_collect_field_errors_keeps_first_message():
    """Test that a repeated field keeps its first message."""
    errors = _collect_field_errors(
        [
            {"loc": ("body", "title"), "msg": "first"},
            {"loc": ("body", "title"), "msg": "second"},
        ]
    )
    assert errors == {"title": "first"}


def test_collect_field_errors_without_field():
    """Test that an error without a field is keyed as request."""
    assert _collect_field_errors([{"loc": ("body",), "msg": "Invalid JSON"}]) == {
        "request": "Invalid JSON"
    }


class BookIn(BaseModel):
    title: str
    year: int


@pytest.fixture
def client():
    app = FastAPI()
    setup_errors(app, BaseAppSettings(), logging.getLogger("test.errors"))

    @app.get("/missing")
    def missing():
        raise NotFoundError("Book 7 does not exist")

    @app.get("/forbidden")
    def forbidden():
        raise ForbiddenError()

    @app.post("/books")
    def create(book: BookIn):
        return book

    @app.get("/crash")
    def crash():
        raise RuntimeError("boom")

    return TestClient(app, raise_server_exceptions=False)


def test_transmit_error_handler(client):
    """Test that a raised error is rendered with its status."""
    response = client.get("/missing")
    assert response.status_code == 404
    assert response.json() == {
        "errors": {"http_code": 404, "message": "Book 7 does not exist"}
    }


def test_subclass_is_dispatched_to_base_handler(client):
    """Test that subclasses use the base handler."""
    response = client.get("/forbidden")
    assert response.status_code == 403
    assert response.json()["errors"]["message"] == "Forbidden"


def test_validation_error_handler(client):
    """Test that validation failures become a 422 field map."""
    response = client.post("/books", json={"year": "not a year"})

    assert response.status_code == 422
    errors = response.json()["errors"]
    assert set(errors) == {"title", "year"}
    assert all(isinstance(message, str) for message in errors.values())


def test_unhandled_exception_handler(client, caplog):
    """Test that unexpected exceptions become a logged 500."""
    with caplog.at_level(logging.ERROR, logger="test.errors"):
        response = client.get("/crash")

    assert response.status_code == 500
    assert response.json() == {
        "errors": {"http_code": 500, "message": "Internal Error"}
    }
    assert "Unhandled exception: boom" in caplog.text
