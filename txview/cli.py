"""Click CLI entry point for txview.

The command is a thin orchestration wrapper: lookup, request building,
transport, parsing and rendering live in chains, request, transport, models
and output.

Exit codes:
  0 — report printed
  2 — unsupported chain, or the node/explorer returned an error payload
  3 — transport error (timeout, connection failure, HTTP status)
  4 — response did not match the expected schema
  5 — config error (HOME unset, credential file missing)
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys

import click

from txview import __version__
from txview.chains import CHAINS, SUPPORTED_CHAINS, resolve_chain
from txview.config import load_credential
from txview.exceptions import TxviewError
from txview.models import parse
from txview.output import SECTIONS, format_report, render, render_request_header
from txview.request import prepare_request
from txview.transport import execute

logger = logging.getLogger(__name__)

HELP = """View the details of a transaction.

CHAIN_NAME selects the chain to search. TX_HASH is the transaction hash to
search, as a 0x-prefixed hex string.

Ethereum-compatible chains (everything except oas-sandverse) are queried
through Infura. Save your Infura API key in $HOME/.config/txview/config,
or export TXVIEW_API_KEY. You can get a key from <https://infura.io/>.
""" + "\n\b\nSupported chains:\n" + "\n".join(
    f"  {chain.key:<15} {chain.description}" for chain in CHAINS.values()
)


# ── Error handler ─────────────────────────────────────────────────────────────


def _output_error(err: TxviewError | Exception) -> None:
    """Write error JSON to stderr."""
    if isinstance(err, TxviewError):
        payload = err.to_dict()
        exit_code = err.exit_code
    else:
        payload = {"error": "unknown_error", "message": str(err), "details": {}}
        exit_code = 1
    sys.stderr.write(json.dumps(payload) + "\n")
    sys.stderr.flush()
    sys.exit(exit_code)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ── Command ───────────────────────────────────────────────────────────────────


@click.command(help=HELP)
@click.version_option(version=__version__, prog_name="txview")
@click.argument("chain_name", type=click.Choice(SUPPORTED_CHAINS))
@click.argument("tx_hash")
@click.option(
    "--section",
    type=click.Choice(SECTIONS),
    default="all",
    show_default=True,
    help="Only print one section of the report",
)
@click.option(
    "--config",
    "config_path",
    envvar="TXVIEW_CONFIG_PATH",
    default=None,
    help="Credential file path (default: ~/.config/txview/config)",
)
@click.option("--no-color", is_flag=True, envvar="TXVIEW_NO_COLOR", help="Disable styling")
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP activity to stderr")
def cli(
    chain_name: str,
    tx_hash: str,
    section: str,
    config_path: str | None,
    no_color: bool,
    verbose: bool,
) -> None:
    _setup_logging(verbose)
    color = not no_color

    try:
        chain = resolve_chain(chain_name)
        click.echo(format_report(render_request_header(chain, tx_hash), color), nl=False)

        request = prepare_request(chain, tx_hash, lambda: load_credential(config_path))
        raw_text = asyncio.run(execute(request))
        logger.debug("Parsing %s response", chain.family.value)
        response = parse(raw_text, chain.family)
    except TxviewError as e:
        _output_error(e)
        return

    click.echo(format_report(render(response, raw_text, section), color), nl=False)


if __name__ == "__main__":
    cli()
