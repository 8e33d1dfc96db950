"""Report rendering for txview.

Turns a parsed response plus the raw body into the sectioned text report.

Design rules:
- Sections always come in the same order: block, transaction, log, raw.
- String values are shown double-quoted with JSON escaping.
- Numeric strings go through format_numeric(); the base is fixed by the
  chain family (16 for receipts, 10 for the explorer), never guessed per field.
- A number that does not parse is not an error: it is printed as-is under a
  "(Hex)" label.
- The raw response is echoed verbatim as the last section.

render() returns lines; format_report() styles them with Rich and returns a
string. The caller writes to stdout.
"""

from __future__ import annotations

import io
import json
import re

from rich.console import Console

from txview.chains import Chain
from txview.models import ExplorerResponse, ParsedResponse, ReceiptResponse

SECTIONS = ("all", "block", "transaction", "log", "raw")

RULE = "=" * 75
BLOCK_BANNER = "===========================  Block Information  ==========================="
TRANSACTION_BANNER = "========================  Transaction Information  ========================"
LOG_BANNER = "============================  Log Information  ============================"
RAW_BANNER = "==============================  Raw Response  =============================="

U64_MAX = 2**64 - 1

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")
_DEC_DIGITS = re.compile(r"^[0-9]+$")


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _unquote(value: str) -> str:
    return value.replace('"', "")


def _parse_u64(digits: str, base: int) -> int | None:
    pattern = _HEX_DIGITS if base == 16 else _DEC_DIGITS
    if not pattern.match(digits):
        return None
    number = int(digits, base)
    return number if number <= U64_MAX else None


# ── Numeric fields ───────────────────────────────────────────────────────────


def format_numeric(label: str, value: str, base: int) -> str:
    """
    Format a numeric string as a hex/decimal pair.

    Base 16 values drop their 0x prefix; base 10 values keep the received
    decimal string next to an uppercase hex rendering. Anything that is not a valid u64 in `base`
    falls back to the string itself under a "(Hex)" label.

    >>> format_numeric("Block Number", "0x10", 16)
    'Block Number (Hex/Dec) : "10" / 16'
    >>> format_numeric("Gas Used", "21000", 10)
    'Gas Used (Hex/Dec) : "5208" / 21000'
    """
    if base == 16:
        digits = value[2:] if value[:2] in ("0x", "0X") else value
        number = _parse_u64(digits, 16)
        if number is None:
            return f"{label} (Hex) : {_quote(digits)}"
        return f"{label} (Hex/Dec) : {_quote(digits)} / {number}"
    if base == 10:
        number = _parse_u64(value, 10)
        if number is None:
            return f"{label} (Hex) : {_quote(value)}"
        return f"{label} (Hex/Dec) : {_quote(format(number, 'X'))} / {value}"
    raise ValueError(f"Unsupported base {base}; expected 10 or 16")


def _status_line(succeeded: bool, shown: str) -> str:
    return f"Status : {'Success' if succeeded else 'Fail'} ({shown})"


# ── Header ───────────────────────────────────────────────────────────────────


def render_request_header(chain: Chain, tx_hash: str) -> list[str]:
    """Lines echoing what is about to be looked up."""
    return [
        RULE,
        "Requested Transaction Information",
        "",
        f"Chain  : {chain.display_name}",
        f"TxHash : {tx_hash}",
        RULE,
    ]


# ── Receipt style ────────────────────────────────────────────────────────────


def _receipt_block(response: ReceiptResponse) -> list[str]:
    tx = response.result
    return [
        f"Block hash : {_quote(_unquote(tx.block_hash))}",
        format_numeric("Block Number", tx.block_number, 16),
    ]


def _receipt_transaction(response: ReceiptResponse) -> list[str]:
    tx = response.result
    lines = [
        _status_line(tx.succeeded, tx.status),
        f"Transaction hash : {_quote(_unquote(tx.transaction_hash))}",
        f"Transaction Index : {_quote(tx.transaction_index)}",
        f"From address : {_quote(_unquote(tx.from_addr))}",
        "To address : "
        + (_quote(_unquote(tx.to_addr)) if tx.to_addr is not None else "None"),
        format_numeric("Gas Used", tx.gas_used, 16),
        format_numeric("Cumulative Gas Used", tx.cumulative_gas_used, 16),
        format_numeric("Effective Gas Price", tx.effective_gas_price, 16),
    ]
    if tx.contract_address is not None:
        lines.append(f"Contract Address : {_quote(_unquote(tx.contract_address))}")
    return lines


def _receipt_logs(response: ReceiptResponse) -> list[str]:
    lines: list[str] = []
    for index, log in enumerate(response.result.logs):
        lines += [
            f"Log Index : {index}",
            f"Address : {_quote(log.address)}",
            f"Block Hash : {_quote(log.block_hash)}",
            f"Block Number : {_quote(log.block_number)}",
            f"Data : {_quote(log.data)}",
            f"Log Index : {_quote(log.log_index)}",
            f"Removed : {'true' if log.removed else 'false'}",
            "Topics : ",
        ]
        lines += [f"\tTopic {i} : {_quote(topic)}" for i, topic in enumerate(log.topics)]
        lines += [
            "",
            f"Transaction Hash : {_quote(log.transaction_hash)}",
            f"Transaction Index : {_quote(log.transaction_index)}",
            "",
            "",
        ]
    lines.append(f"logsBloom : {_quote(response.result.logs_bloom)}")
    return lines


# ── Explorer style ───────────────────────────────────────────────────────────


def _explorer_block(response: ExplorerResponse) -> list[str]:
    return [format_numeric("Block Number", response.result.block_number, 10)]


def _explorer_transaction(response: ExplorerResponse) -> list[str]:
    tx = response.result
    return [
        _status_line(tx.succeeded, "true" if tx.success else "false"),
        f"Transaction hash : {_quote(_unquote(tx.hash))}",
        # The explorer payload has no index; the block number takes its slot.
        f"Transaction Index : {_quote(tx.block_number)}",
        f"From address : {_quote(_unquote(tx.from_addr))}",
        f"To address : {_quote(_unquote(tx.to_addr))}",
        format_numeric("Gas Used", tx.gas_used, 10),
        format_numeric("Gas Limit", tx.gas_limit, 10),
        format_numeric("Gas Price", tx.gas_price, 10),
        format_numeric("Value", tx.value, 10),
    ]


def _explorer_logs(response: ExplorerResponse) -> list[str]:
    lines: list[str] = []
    for index, log in enumerate(response.result.logs):
        lines += [
            f"Log {index}",
            f"Address : {_quote(log.address)}",
            f"Data : {_quote(log.data)}",
            "Topics : ",
        ]
        lines += [
            f"\tTopic {i} : {_quote(topic) if topic is not None else 'None'}"
            for i, topic in enumerate(log.topics)
        ]
        lines.append("")
    return lines


# ── Report ───────────────────────────────────────────────────────────────────


def render(response: ParsedResponse, raw_text: str, section: str = "all") -> list[str]:
    """
    Render the report for a parsed response.

    Args:
        response: ReceiptResponse or ExplorerResponse
        raw_text: Body exactly as received; echoed in the last section
        section: "all" | "block" | "transaction" | "log" | "raw"

    Returns:
        Report lines, without trailing newlines.

    Raises:
        ValueError: Unknown section.
    """
    section = section.lower()
    if section not in SECTIONS:
        raise ValueError(f"Unknown section {section!r}. Valid: {list(SECTIONS)}")

    if isinstance(response, ReceiptResponse):
        block, transaction, logs = (
            _receipt_block(response),
            _receipt_transaction(response),
            _receipt_logs(response),
        )
    else:
        block, transaction, logs = (
            _explorer_block(response),
            _explorer_transaction(response),
            _explorer_logs(response),
        )

    def wanted(name: str) -> bool:
        return section in ("all", name)

    lines: list[str] = ["", ""]
    if wanted("block"):
        lines += [BLOCK_BANNER, *block, ""]
    if wanted("transaction"):
        lines += [TRANSACTION_BANNER, *transaction, ""]
    if wanted("log"):
        lines += [LOG_BANNER, "", *logs, ""]
    if wanted("raw"):
        lines += [RAW_BANNER, raw_text]
    return lines


def format_report(lines: list[str], color: bool = True) -> str:
    """
    Join report lines into one string, styling banners when `color` is set.

    Only banners go through Rich; every other line is written untouched so
    tabs and response content survive exactly.
    """
    buf = io.StringIO()
    console = Console(
        file=buf,
        force_terminal=color,
        color_system="standard" if color else None,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
    )
    for line in lines:
        if color and line.startswith("====="):
            console.print(line, style="bold cyan")
        else:
            buf.write(line + "\n")
    return buf.getvalue()


# ── Utility ──────────────────────────────────────────────────────────────────


def mask_api_key(key: str) -> str:
    """
    Mask an API key for safe display.

    'abcdefg123' → 'abcd****'
    '' → '****'
    """
    if not key:
        return "****"
    if len(key) <= 4:
        return "****"
    return key[:4] + "****"
