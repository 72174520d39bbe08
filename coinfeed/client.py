"""WebSocket market data client: subscribe, read one message, close."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import socket
import ssl
import sys
from collections.abc import Iterator

import websockets
from websockets.exceptions import WebSocketException
from websockets.sync.client import connect as _sync_connect

DEFAULT_HOST = "advanced-trade-ws.coinbase.com"
DEFAULT_PORT = "443"
DEFAULT_MESSAGE = '{"type": "subscribe", "product_ids": ["BTC-USD"], "channel": "ticker"}'
CONNECT_TIMEOUT = 30.0

_SYNC_USER_AGENT = "coinfeed websocket-client-coro"
_ASYNC_USER_AGENT = "coinfeed websocket-client-async-ssl"


def _tls_context() -> ssl.SSLContext:
    context = ssl.create_default_context()
    context.minimum_version = ssl.TLSVersion.TLSv1_2
    return context


def _uri(host: str, port: str | int, secure: bool) -> str:
    scheme = "wss" if secure else "ws"
    return f"{scheme}://{host}:{port}/"


@contextlib.contextmanager
def _stage(name: str) -> Iterator[None]:
    """Re-raise network failures as ConnectionError tagged with the stage."""
    try:
        yield
    except (OSError, WebSocketException) as exc:
        raise ConnectionError(f"{name}: {exc}") from exc


@contextlib.contextmanager
def _opening() -> Iterator[None]:
    try:
        yield
    except ssl.SSLError as exc:
        raise ConnectionError(f"ssl_handshake: {exc}") from exc
    except OSError as exc:
        raise ConnectionError(f"connect: {exc}") from exc
    except WebSocketException as exc:
        raise ConnectionError(f"handshake: {exc}") from exc


def _text(reply: str | bytes) -> str:
    return reply.decode("utf-8", errors="replace") if isinstance(reply, bytes) else reply


def fetch_snapshot(host: str, port: str | int, message: str) -> str:
    """Connect over TLS, send one message and return the first reply."""
    with _stage("resolve"):
        socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)

    with _opening():
        ws = _sync_connect(
            _uri(host, port, secure=True),
            ssl=_tls_context(),
            open_timeout=CONNECT_TIMEOUT,
            user_agent_header=_SYNC_USER_AGENT,
        )
    try:
        with _stage("write"):
            ws.send(message)
        with _stage("read"):
            reply = ws.recv()
    except BaseException:
        with contextlib.suppress(Exception):
            ws.close()
        raise
    with _stage("close"):
        ws.close()
    return _text(reply)


class MarketDataClient:
    """Asynchronous client that sends a subscription and reads one reply.

    With ``ssl_context`` set to None the connection is made without TLS.
    """

    def __init__(self, ssl_context: ssl.SSLContext | None) -> None:
        self.ssl_context = ssl_context

    async def run(self, host: str, port: str | int, message: str) -> str:
        """Resolve, connect, send ``message`` and return the first reply."""
        loop = asyncio.get_running_loop()
        with _stage("resolve"):
            await loop.getaddrinfo(host, port, type=socket.SOCK_STREAM)

        secure = self.ssl_context is not None
        options = {"ssl": self.ssl_context} if secure else {}
        with _opening():
            ws = await websockets.connect(
                _uri(host, port, secure),
                open_timeout=CONNECT_TIMEOUT,
                user_agent_header=_ASYNC_USER_AGENT,
                **options,
            )
        try:
            with _stage("write"):
                await ws.send(message)
            with _stage("read"):
                reply = await ws.recv()
        except BaseException:
            with contextlib.suppress(Exception):
                await ws.close()
            raise
        with _stage("close"):
            await ws.close()
        return _text(reply)


def main(argv: list[str] | None = None) -> int:
    """Subscribe to the ticker feed and print the first message received."""
    parser = argparse.ArgumentParser(prog="coinfeed", description=main.__doc__)
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", default=DEFAULT_PORT)
    parser.add_argument("--message", default=DEFAULT_MESSAGE)
    args = parser.parse_args(argv)

    client = MarketDataClient(_tls_context())
    try:
        reply = asyncio.run(client.run(args.host, args.port, args.message))
    except ConnectionError as exc:
        print(exc, file=sys.stderr)
        status = 1
    else:
        print(reply)
        status = 0
    print("session ended!")
    return status


if __name__ == "__main__":
    sys.exit(main())