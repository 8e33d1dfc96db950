"""
Request builder: turns (chain, tx hash, credential) into an outbound request.

Receipt-style chains get a JSON-RPC POST to the Infura endpoint with the
credential in the path. Explorer-style chains get a GET against the fixed
explorer API with the hash as a query parameter. The hash is passed through
untouched; a malformed hash is the remote side's problem.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable

from txview.chains import Chain, Family
from txview.exceptions import CredentialMissingError

JSONRPC_VERSION = "2.0"
RECEIPT_METHOD = "eth_getTransactionReceipt"
REQUEST_ID = 1


@dataclass(frozen=True)
class OutboundRequest:
    """A fully-formed HTTP request, ready for the transport."""

    method: str  # "GET" | "POST"
    url: str
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    json_body: dict[str, Any] | None = None

    @property
    def content(self) -> bytes | None:
        """Serialized body, compact and in insertion order."""
        if self.json_body is None:
            return None
        return json.dumps(self.json_body, separators=(",", ":")).encode("utf-8")


def build_request(chain: Chain, tx_hash: str, credential: str | None = None) -> OutboundRequest:
    """
    Build the request for one transaction lookup.

    Args:
        chain: Resolved chain descriptor
        tx_hash: 0x-prefixed transaction hash (not validated)
        credential: API key; required for receipt-style chains, ignored otherwise

    Raises:
        CredentialMissingError: receipt-style chain without a credential
    """
    if chain.family is Family.RECEIPT:
        if not credential:
            raise CredentialMissingError(
                f"{chain.display_name} needs an Infura API key",
                details={"chain": chain.key},
            )
        return OutboundRequest(
            method="POST",
            url=chain.url(credential),
            headers={"Content-Type": "application/json"},
            json_body={
                "jsonrpc": JSONRPC_VERSION,
                "method": RECEIPT_METHOD,
                "params": [tx_hash],
                "id": REQUEST_ID,
            },
        )

    return OutboundRequest(
        method="GET",
        url=chain.url(),
        params={
            "module": "transaction",
            "action": "gettxinfo",
            "txhash": tx_hash,
        },
    )


def prepare_request(
    chain: Chain, tx_hash: str, load_credential: Callable[[], str]
) -> OutboundRequest:
    """Build a request, calling `load_credential` only when the chain needs one."""
    credential = load_credential() if chain.needs_credential else None
    return build_request(chain, tx_hash, credential)
