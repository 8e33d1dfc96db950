"""
HTTP transport for txview.

One async httpx round trip per invocation. No retries, no timeout override:
the client's defaults apply. httpx failures are mapped onto the
TransportError family so the CLI can report them with an exit code.
"""

from __future__ import annotations

import logging

import httpx

from txview.exceptions import (
    ConnectionFailedError,
    HTTPStatusError,
    NetworkTimeoutError,
    TransportError,
)
from txview.output import mask_api_key
from txview.request import OutboundRequest

logger = logging.getLogger(__name__)


def _redact(url: str) -> str:
    """Mask the credential segment of an Infura-style URL for logging."""
    head, sep, tail = url.rpartition("/v3/")
    if not sep:
        return url
    return f"{head}{sep}{mask_api_key(tail)}"


async def execute(request: OutboundRequest, client: httpx.AsyncClient | None = None) -> str:
    """
    Send `request` and return the response body as text.

    Args:
        request: Request produced by txview.request.build_request
        client: Optional client to reuse; one is created and closed otherwise

    Raises:
        NetworkTimeoutError: request timed out
        ConnectionFailedError: endpoint unreachable
        HTTPStatusError: non-2xx response
        TransportError: any other transport failure
    """
    target = _redact(request.url)
    logger.debug("%s %s params=%s", request.method, target, request.params)

    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient()
    try:
        resp = await client.request(
            request.method,
            request.url,
            params=request.params or None,
            headers=request.headers or None,
            content=request.content,
        )
        resp.raise_for_status()
    except httpx.TimeoutException as e:
        raise NetworkTimeoutError(f"Timeout talking to {target}: {e}") from e
    except httpx.ConnectError as e:
        raise ConnectionFailedError(f"Cannot connect to {target}: {e}") from e
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        raise HTTPStatusError(f"{target} returned HTTP {status}", status_code=status) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise TransportError(f"Request to {target} failed: {e}") from e
    finally:
        if owns_client:
            await client.aclose()

    logger.debug("HTTP %s, %d bytes", resp.status_code, len(resp.content))
    return resp.text
