"""
Chain registry for txview.

Every supported chain is an immutable descriptor tagged with a response
family. The request builder and the renderer dispatch on the family; only URL
templating looks at the individual chain.

Usage:
    from txview.chains import resolve_chain
    chain = resolve_chain("eth-mainnet")
    url = chain.url(credential="KEY123")
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from txview.exceptions import UnsupportedChainError


class Family(str, Enum):
    """Upstream API shape a chain answers with."""

    RECEIPT = "receipt"  # JSON-RPC eth_getTransactionReceipt, hex numbers
    EXPLORER = "explorer"  # Blockscout-style REST gettxinfo, decimal numbers


@dataclass(frozen=True)
class Chain:
    """A supported chain."""

    key: str  # CLI identifier, e.g. "eth-mainnet"
    display_name: str  # e.g. "EthMainnet"
    description: str
    family: Family
    url_template: str

    @property
    def needs_credential(self) -> bool:
        return self.family is Family.RECEIPT

    def url(self, credential: str | None = None) -> str:
        """Build the endpoint URL. Receipt-style templates embed the credential."""
        if self.needs_credential:
            return self.url_template.format(credential=credential or "")
        return self.url_template


INFURA_URL = "https://{network}.infura.io/v3/{{credential}}"
SANDVERSE_EXPLORER_URL = "https://explorer.sandverse.oasys.games/api"

CHAINS: dict[str, Chain] = {
    c.key: c
    for c in (
        Chain(
            "eth-mainnet",
            "EthMainnet",
            "Ethereum main-net",
            Family.RECEIPT,
            INFURA_URL.format(network="mainnet"),
        ),
        Chain(
            "eth-goerli",
            "EthGoerli",
            "Ethereum test-net",
            Family.RECEIPT,
            INFURA_URL.format(network="goerli"),
        ),
        Chain(
            "eth-sepolia",
            "EthSepolia",
            "Ethereum test-net",
            Family.RECEIPT,
            INFURA_URL.format(network="sepolia"),
        ),
        Chain(
            "linea-mainnet",
            "LineaMainnet",
            "Linea main-net",
            Family.RECEIPT,
            INFURA_URL.format(network="linea-mainnet"),
        ),
        Chain(
            "linea-goerli",
            "LineaGoerli",
            "Linea test-net",
            Family.RECEIPT,
            INFURA_URL.format(network="linea-goerli"),
        ),
        Chain(
            "oas-sandverse",
            "OasSandverse",
            "Oasys sandverse test-net",
            Family.EXPLORER,
            SANDVERSE_EXPLORER_URL,
        ),
    )
}

SUPPORTED_CHAINS = list(CHAINS)


def resolve_chain(name: str) -> Chain:
    """
    Look up a chain by CLI key or display name.

    Raises:
        UnsupportedChainError: name is not in the registry
    """
    chain = CHAINS.get(name)
    if chain is not None:
        return chain
    for candidate in CHAINS.values():
        if candidate.display_name == name:
            return candidate
    raise UnsupportedChainError(
        f"Unsupported chain: {name!r}. Supported: {SUPPORTED_CHAINS}",
        details={"chain": name},
    )
