"""Pytest fixtures shared across all txview tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

TX_HASH = "0x" + "de" * 2 + "ad" * 28 + "be" + "ef"
BLOCK_HASH = "0x" + "ab" * 32
FROM_ADDR = "0xd8da6bf26964af9d7eed9e03e53415d37aa96045"
TO_ADDR = "0x28c6c06298d514db089934071355e5743bf21d60"
TOPIC_TRANSFER = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
LOGS_BLOOM = "0x" + "00" * 256


# ── Receipt-style payloads ────────────────────────────────────────────────────


def make_receipt_log(**overrides: Any) -> dict[str, Any]:
    log = {
        "address": TO_ADDR,
        "blockHash": BLOCK_HASH,
        "blockNumber": "0x10",
        "data": "0x0000000000000000000000000000000000000000000000000de0b6b3a7640000",
        "logIndex": "0x0",
        "removed": False,
        "topics": [TOPIC_TRANSFER, "0x" + "00" * 12 + FROM_ADDR[2:]],
        "transactionHash": TX_HASH,
        "transactionIndex": "0x3",
    }
    log.update(overrides)
    return log


def make_receipt(**overrides: Any) -> dict[str, Any]:
    """eth_getTransactionReceipt response as Infura returns it."""
    result = {
        "blockHash": BLOCK_HASH,
        "blockNumber": "0x10",
        "contractAddress": None,
        "cumulativeGasUsed": "0x1a2b3c",
        "effectiveGasPrice": "0x4a817c800",
        "from": FROM_ADDR,
        "gasUsed": "0x5208",
        "logs": [make_receipt_log()],
        "logsBloom": LOGS_BLOOM,
        "status": "0x1",
        "to": TO_ADDR,
        "transactionHash": TX_HASH,
        "transactionIndex": "0x3",
        "type": "0x2",
    }
    result.update(overrides)
    return {"jsonrpc": "2.0", "id": 1, "result": result}


# ── Explorer-style payloads ───────────────────────────────────────────────────


def make_explorer(**overrides: Any) -> dict[str, Any]:
    """gettxinfo response as the sandverse explorer returns it."""
    result = {
        "revertReason": "",
        "blockNumber": "123",
        "confirmations": "42",
        "from": FROM_ADDR,
        "gasLimit": "30000",
        "gasPrice": "1000000000",
        "gasUsed": "21000",
        "hash": "0x1234",
        "input": "0x",
        "logs": [
            {"address": TO_ADDR, "data": "0x01", "topics": ["0xabc", None]},
        ],
        "success": True,
        "timeStamp": "1700000000",
        "to": TO_ADDR,
        "value": "255",
    }
    result.update(overrides)
    return {"message": "OK", "result": result, "status": "1"}


@pytest.fixture
def receipt_payload() -> dict[str, Any]:
    return make_receipt()


@pytest.fixture
def receipt_text(receipt_payload: dict[str, Any]) -> str:
    return json.dumps(receipt_payload)


@pytest.fixture
def explorer_payload() -> dict[str, Any]:
    return make_explorer()


@pytest.fixture
def explorer_text(explorer_payload: dict[str, Any]) -> str:
    return json.dumps(explorer_payload)


@pytest.fixture
def credential_file(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """$HOME pointing at a temp dir with the credential file in place."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("TXVIEW_API_KEY", raising=False)
    monkeypatch.delenv("TXVIEW_CONFIG_PATH", raising=False)
    path = tmp_path / ".config" / "txview" / "config"
    path.parent.mkdir(parents=True)
    path.write_text("KEY123")
    return path
