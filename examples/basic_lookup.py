"""Basic transaction lookup example.

This script demonstrates how to use txview as a library instead of a CLI.
"""

import asyncio
import sys

from txview.chains import resolve_chain
from txview.config import load_credential
from txview.models import parse
from txview.request import prepare_request
from txview.transport import execute


async def lookup(chain_name: str, tx_hash: str) -> None:
    chain = resolve_chain(chain_name)
    request = prepare_request(chain, tx_hash, load_credential)
    raw_text = await execute(request)
    response = parse(raw_text, chain.family)

    tx = response.result
    print(f"Chain: {chain.display_name} ({chain.family.value} family)")
    print(f"Succeeded: {tx.succeeded}")
    print(f"Gas used: {tx.gas_used}")
    print(f"Logs: {len(tx.logs)}")


def main():
    """Look up a transaction on the Oasys sandverse explorer (no API key needed)."""
    tx_hash = sys.argv[1] if len(sys.argv) > 1 else "0x" + "00" * 32
    asyncio.run(lookup("oas-sandverse", tx_hash))


if __name__ == "__main__":
    main()
