"""Tests for txview/exceptions.py: exception hierarchy."""

from __future__ import annotations

import pytest

from txview.exceptions import (
    ConfigError,
    ConnectionFailedError,
    CredentialMissingError,
    HomeDirUnsetError,
    HTTPStatusError,
    MalformedResponseError,
    MissingFieldError,
    NetworkTimeoutError,
    ParseError,
    RemoteError,
    TransportError,
    TxviewError,
    TypeMismatchError,
    UnsupportedChainError,
)


def test_txview_error_base() -> None:
    e = TxviewError("base error")
    assert e.exit_code == 1
    assert e.error_code == "unknown_error"
    assert str(e) == "base error"
    assert e.details == {}


def test_to_dict() -> None:
    e = MissingFieldError("Missing field 'result.to'", details={"field": "result.to"})
    assert e.to_dict() == {
        "error": "missing_field",
        "message": "Missing field 'result.to'",
        "details": {"field": "result.to"},
    }


@pytest.mark.parametrize(
    "cls, parent, exit_code",
    [
        (UnsupportedChainError, TxviewError, 2),
        (RemoteError, TxviewError, 2),
        (NetworkTimeoutError, TransportError, 3),
        (ConnectionFailedError, TransportError, 3),
        (MalformedResponseError, ParseError, 4),
        (MissingFieldError, ParseError, 4),
        (TypeMismatchError, ParseError, 4),
        (HomeDirUnsetError, ConfigError, 5),
        (CredentialMissingError, ConfigError, 5),
    ],
)
def test_hierarchy_and_exit_codes(cls: type, parent: type, exit_code: int) -> None:
    e = cls("boom")
    assert isinstance(e, parent)
    assert isinstance(e, TxviewError)
    assert e.exit_code == exit_code


def test_error_codes_are_unique() -> None:
    classes = [
        TxviewError, UnsupportedChainError, RemoteError, TransportError,
        NetworkTimeoutError, ConnectionFailedError, HTTPStatusError, ParseError,
        MalformedResponseError, MissingFieldError, TypeMismatchError, ConfigError,
        HomeDirUnsetError, CredentialMissingError,
    ]
    codes = [c.error_code for c in classes]
    assert len(codes) == len(set(codes))


def test_http_status_error_carries_status() -> None:
    e = HTTPStatusError("server said no", status_code=503)
    assert e.status_code == 503
    assert e.details == {"status_code": 503}
    assert e.exit_code == 3


def test_http_status_error_rejects_unknown_keywords() -> None:
    with pytest.raises(TypeError):
        HTTPStatusError("server said no", status_code=503, retry_after=5)  # type: ignore[call-arg]
