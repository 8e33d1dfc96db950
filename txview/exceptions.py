"""
Custom exception hierarchy for txview.

Each exception maps to a specific CLI exit code and JSON error_code field.
cli.py catches all TxviewError subclasses and writes them as JSON to stderr.

Exit code mapping:
  1 — TxviewError (generic CLI error)
  2 — UnsupportedChainError, RemoteError (bad chain, node/explorer refused)
  3 — TransportError (timeout, connection refused, HTTP status)
  4 — ParseError (response body does not match the expected schema)
  5 — ConfigError (home dir unset, credential file missing)
"""


class TxviewError(Exception):
    """Base exception for all txview errors."""

    exit_code: int = 1
    error_code: str = "unknown_error"

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class UnsupportedChainError(TxviewError):
    """Chain name is not in the registry."""

    exit_code = 2
    error_code = "unsupported_chain"


class RemoteError(TxviewError):
    """Node or explorer answered with an error payload instead of a result."""

    exit_code = 2
    error_code = "remote_error"


class TransportError(TxviewError):
    """HTTP round trip failed."""

    exit_code = 3
    error_code = "transport_error"


class NetworkTimeoutError(TransportError):
    """Request timed out."""

    error_code = "network_timeout"


class ConnectionFailedError(TransportError):
    """Could not connect to the endpoint."""

    error_code = "connection_failed"


class HTTPStatusError(TransportError):
    """Endpoint returned a non-2xx status."""

    error_code = "http_status"

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message, details={"status_code": status_code})
        self.status_code = status_code


class ParseError(TxviewError):
    """Response body does not match the schema for the chain family."""

    exit_code = 4
    error_code = "parse_error"


class MalformedResponseError(ParseError):
    """Response body is not a JSON object."""

    error_code = "malformed_response"


class MissingFieldError(ParseError):
    """A required field is absent."""

    error_code = "missing_field"


class TypeMismatchError(ParseError):
    """A field holds a JSON value of the wrong type."""

    error_code = "type_mismatch"


class ConfigError(TxviewError):
    """Credential could not be loaded."""

    exit_code = 5
    error_code = "config_error"


class HomeDirUnsetError(ConfigError):
    """$HOME is not set, so the default config path cannot be built."""

    error_code = "home_unset"


class CredentialMissingError(ConfigError):
    """Credential file is missing, unreadable or empty."""

    error_code = "credential_missing"
