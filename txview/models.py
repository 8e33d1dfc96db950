"""
Response models for txview.

Two independent schemas, one per chain family:

- ReceiptResponse: JSON-RPC envelope around an eth_getTransactionReceipt
  result. Numeric fields are 0x-prefixed hex strings.
- ExplorerResponse: Blockscout-style gettxinfo envelope. Numeric fields are
  decimal strings and topic slots may be null.

Decoding is strict on shape only: names are case-sensitive, unknown fields are
ignored, missing or mistyped fields raise ParseError subclasses carrying the
dotted path of the offending field. String values are kept exactly as
received so that to_dict() gives them back unchanged.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from txview.chains import Family
from txview.exceptions import (
    MalformedResponseError,
    MissingFieldError,
    RemoteError,
    TypeMismatchError,
)

# ── Field decoding helpers ────────────────────────────────────────────────────


def _join(path: str, key: str | int) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}" if path else key


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _mismatch(path: str, expected: str, value: Any) -> TypeMismatchError:
    got = _json_type(value)
    return TypeMismatchError(
        f"Field {path!r}: expected {expected}, got {got}",
        details={"field": path, "expected": expected, "got": got},
    )


def _require(raw: dict[str, Any], key: str, path: str) -> Any:
    if key not in raw:
        field_path = _join(path, key)
        raise MissingFieldError(f"Missing field {field_path!r}", details={"field": field_path})
    return raw[key]


def _object(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise _mismatch(path or "<root>", "object", value)
    return value


def _str(raw: dict[str, Any], key: str, path: str) -> str:
    value = _require(raw, key, path)
    if not isinstance(value, str):
        raise _mismatch(_join(path, key), "string", value)
    return value


def _optional_str(raw: dict[str, Any], key: str, path: str) -> str | None:
    value = raw.get(key)
    if value is not None and not isinstance(value, str):
        raise _mismatch(_join(path, key), "string or null", value)
    return value


def _bool(raw: dict[str, Any], key: str, path: str) -> bool:
    value = _require(raw, key, path)
    if not isinstance(value, bool):
        raise _mismatch(_join(path, key), "boolean", value)
    return value


def _int(raw: dict[str, Any], key: str, path: str) -> int:
    value = _require(raw, key, path)
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, int):
        raise _mismatch(_join(path, key), "integer", value)
    return value


def _list(raw: dict[str, Any], key: str, path: str) -> list[Any]:
    value = _require(raw, key, path)
    if not isinstance(value, list):
        raise _mismatch(_join(path, key), "array", value)
    return value


# ── Receipt style (JSON-RPC) ──────────────────────────────────────────────────


@dataclass(frozen=True)
class ReceiptLog:
    """One log entry of a transaction receipt."""

    address: str
    block_hash: str
    block_number: str
    data: str
    log_index: str
    removed: bool
    topics: tuple[str, ...]
    transaction_hash: str
    transaction_index: str

    @classmethod
    def from_dict(cls, raw: Any, path: str = "log") -> ReceiptLog:
        raw = _object(raw, path)
        topics = []
        for i, topic in enumerate(_list(raw, "topics", path)):
            if not isinstance(topic, str):
                raise _mismatch(_join(_join(path, "topics"), i), "string", topic)
            topics.append(topic)
        return cls(
            address=_str(raw, "address", path),
            block_hash=_str(raw, "blockHash", path),
            block_number=_str(raw, "blockNumber", path),
            data=_str(raw, "data", path),
            log_index=_str(raw, "logIndex", path),
            removed=_bool(raw, "removed", path),
            topics=tuple(topics),
            transaction_hash=_str(raw, "transactionHash", path),
            transaction_index=_str(raw, "transactionIndex", path),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "blockHash": self.block_hash,
            "blockNumber": self.block_number,
            "data": self.data,
            "logIndex": self.log_index,
            "removed": self.removed,
            "topics": list(self.topics),
            "transactionHash": self.transaction_hash,
            "transactionIndex": self.transaction_index,
        }


@dataclass(frozen=True)
class ReceiptTransaction:
    """The `result` object of eth_getTransactionReceipt."""

    block_hash: str
    block_number: str
    contract_address: str | None
    cumulative_gas_used: str
    effective_gas_price: str
    from_addr: str
    gas_used: str
    logs: tuple[ReceiptLog, ...]
    logs_bloom: str
    status: str  # "0x1" success, "0x0" failure
    to_addr: str | None  # null for contract creation
    transaction_hash: str
    transaction_index: str
    tx_type: str

    @classmethod
    def from_dict(cls, raw: Any, path: str = "result") -> ReceiptTransaction:
        raw = _object(raw, path)
        logs_path = _join(path, "logs")
        to_addr = _require(raw, "to", path)
        if to_addr is not None and not isinstance(to_addr, str):
            raise _mismatch(_join(path, "to"), "string or null", to_addr)
        return cls(
            block_hash=_str(raw, "blockHash", path),
            block_number=_str(raw, "blockNumber", path),
            contract_address=_optional_str(raw, "contractAddress", path),
            cumulative_gas_used=_str(raw, "cumulativeGasUsed", path),
            effective_gas_price=_str(raw, "effectiveGasPrice", path),
            from_addr=_str(raw, "from", path),
            gas_used=_str(raw, "gasUsed", path),
            logs=tuple(
                ReceiptLog.from_dict(log, _join(logs_path, i))
                for i, log in enumerate(_list(raw, "logs", path))
            ),
            logs_bloom=_str(raw, "logsBloom", path),
            status=_str(raw, "status", path),
            to_addr=to_addr,
            transaction_hash=_str(raw, "transactionHash", path),
            transaction_index=_str(raw, "transactionIndex", path),
            tx_type=_str(raw, "type", path),
        )

    @property
    def succeeded(self) -> bool:
        return self.status == "0x1"

    def to_dict(self) -> dict[str, Any]:
        return {
            "blockHash": self.block_hash,
            "blockNumber": self.block_number,
            "contractAddress": self.contract_address,
            "cumulativeGasUsed": self.cumulative_gas_used,
            "effectiveGasPrice": self.effective_gas_price,
            "from": self.from_addr,
            "gasUsed": self.gas_used,
            "logs": [log.to_dict() for log in self.logs],
            "logsBloom": self.logs_bloom,
            "status": self.status,
            "to": self.to_addr,
            "transactionHash": self.transaction_hash,
            "transactionIndex": self.transaction_index,
            "type": self.tx_type,
        }


@dataclass(frozen=True)
class ReceiptResponse:
    """JSON-RPC envelope: {jsonrpc, id, result}."""

    family: ClassVar[Family] = Family.RECEIPT

    jsonrpc: str
    id: int
    result: ReceiptTransaction

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ReceiptResponse:
        error = raw.get("error")
        if error is not None:
            message = error.get("message") if isinstance(error, dict) else str(error)
            raise RemoteError(
                f"JSON-RPC error: {message}",
                details={"error": error},
            )
        if raw.get("result", {}) is None:
            # Unknown or still-pending transactions have no receipt yet.
            raise TypeMismatchError(
                "Transaction receipt not found (unknown or pending transaction)",
                details={"field": "result", "expected": "object", "got": "null"},
            )
        return cls(
            jsonrpc=_str(raw, "jsonrpc", ""),
            id=_int(raw, "id", ""),
            result=ReceiptTransaction.from_dict(_require(raw, "result", "")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"jsonrpc": self.jsonrpc, "id": self.id, "result": self.result.to_dict()}


# ── Explorer style (REST) ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class ExplorerLog:
    """One log entry as the explorer reports it. Topic slots may be None."""

    address: str
    data: str
    topics: tuple[str | None, ...]

    @classmethod
    def from_dict(cls, raw: Any, path: str = "log") -> ExplorerLog:
        raw = _object(raw, path)
        topics: list[str | None] = []
        for i, topic in enumerate(_list(raw, "topics", path)):
            if topic is not None and not isinstance(topic, str):
                raise _mismatch(_join(_join(path, "topics"), i), "string or null", topic)
            topics.append(topic)
        return cls(
            address=_str(raw, "address", path),
            data=_str(raw, "data", path),
            topics=tuple(topics),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"address": self.address, "data": self.data, "topics": list(self.topics)}


@dataclass(frozen=True)
class ExplorerTransaction:
    """The `result` object of the explorer's gettxinfo action."""

    revert_reason: str
    block_number: str
    confirmations: str
    from_addr: str
    gas_limit: str
    gas_price: str
    gas_used: str
    hash: str
    input: str
    logs: tuple[ExplorerLog, ...]
    success: bool
    timestamp: str
    to_addr: str
    value: str

    @classmethod
    def from_dict(cls, raw: Any, path: str = "result") -> ExplorerTransaction:
        raw = _object(raw, path)
        logs_path = _join(path, "logs")
        return cls(
            revert_reason=_str(raw, "revertReason", path),
            block_number=_str(raw, "blockNumber", path),
            confirmations=_str(raw, "confirmations", path),
            from_addr=_str(raw, "from", path),
            gas_limit=_str(raw, "gasLimit", path),
            gas_price=_str(raw, "gasPrice", path),
            gas_used=_str(raw, "gasUsed", path),
            hash=_str(raw, "hash", path),
            input=_str(raw, "input", path),
            logs=tuple(
                ExplorerLog.from_dict(log, _join(logs_path, i))
                for i, log in enumerate(_list(raw, "logs", path))
            ),
            success=_bool(raw, "success", path),
            timestamp=_str(raw, "timeStamp", path),
            to_addr=_str(raw, "to", path),
            value=_str(raw, "value", path),
        )

    @property
    def succeeded(self) -> bool:
        return self.success is True

    def to_dict(self) -> dict[str, Any]:
        return {
            "revertReason": self.revert_reason,
            "blockNumber": self.block_number,
            "confirmations": self.confirmations,
            "from": self.from_addr,
            "gasLimit": self.gas_limit,
            "gasPrice": self.gas_price,
            "gasUsed": self.gas_used,
            "hash": self.hash,
            "input": self.input,
            "logs": [log.to_dict() for log in self.logs],
            "success": self.success,
            "timeStamp": self.timestamp,
            "to": self.to_addr,
            "value": self.value,
        }


@dataclass(frozen=True)
class ExplorerResponse:
    """Explorer envelope: {result, status}."""

    family: ClassVar[Family] = Family.EXPLORER

    result: ExplorerTransaction
    status: str

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ExplorerResponse:
        if raw.get("result") is None and raw.get("status") == "0":
            message = raw.get("message") or "explorer returned status 0"
            raise RemoteError(f"Explorer error: {message}", details={"message": message})
        return cls(
            result=ExplorerTransaction.from_dict(_require(raw, "result", "")),
            status=_str(raw, "status", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"result": self.result.to_dict(), "status": self.status}


ParsedResponse = Union[ReceiptResponse, ExplorerResponse]

_MODELS: dict[Family, type[ReceiptResponse] | type[ExplorerResponse]] = {
    Family.RECEIPT: ReceiptResponse,
    Family.EXPLORER: ExplorerResponse,
}


def parse(raw_text: str, family: Family) -> ParsedResponse:
    """
    Decode a response body into the model for `family`.

    The caller keeps `raw_text` for the raw echo; it is never modified here.

    Raises:
        MalformedResponseError: body is not a JSON object
        RemoteError: body is an error payload from the node/explorer
        MissingFieldError: a required field is absent
        TypeMismatchError: a field has the wrong JSON type
    """
    try:
        payload = json.loads(raw_text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise MalformedResponseError(
            f"Response is not valid JSON: {e}",
            details={"body": raw_text[:200]},
        ) from e
    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"Response is a JSON {_json_type(payload)}, expected an object",
            details={"body": raw_text[:200]},
        )
    return _MODELS[family].from_dict(payload)
