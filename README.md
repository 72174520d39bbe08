# coinfeed

A small feed handler for the Coinbase Advanced Trade websocket. It connects,
sends one subscription request, reads the first message back, closes the
connection cleanly and returns or prints what it received. It also provides
plain data types for level-3 order book messages and for building
subscription requests.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
coinfeed-listen [--host HOST] [--port PORT] [--message MESSAGE]
```

By default this connects over TLS (TLS 1.2 or later) to the host in
`coinfeed.client.DEFAULT_HOST` on port `443` and sends
`DEFAULT_MESSAGE`, a subscription to the `ticker` channel for `BTC-USD`. It
prints the first message the server sends, closes the session and then prints
`session ended!`. The exit status is 0 on success and 1 on failure.

On failure the error is written to standard error, prefixed with the stage
where it happened: `resolve`, `connect`, `ssl_handshake`, `handshake`,
`write`, `read` or `close`.

## Library use

All network failures are raised as `ConnectionError`, with the stage name at
the start of the message.

Fetch a single message with a blocking call over TLS:

```python
from coinfeed.client import DEFAULT_HOST, DEFAULT_MESSAGE, fetch_snapshot

reply = fetch_snapshot(DEFAULT_HOST, "443", DEFAULT_MESSAGE)
```

Run the asynchronous client with your own TLS context:

```python
import asyncio
import ssl

from coinfeed.client import DEFAULT_HOST, DEFAULT_MESSAGE, MarketDataClient

client = MarketDataClient(ssl.create_default_context())
reply = asyncio.run(client.run(DEFAULT_HOST, "443", DEFAULT_MESSAGE))
```

Passing `None` as the SSL context makes `MarketDataClient` connect with plain
`ws://` instead of `wss://`.

Build a subscription request:

```python
from coinfeed.messages import Channel

request = Channel(type="subscribe", name="ticker", product_ids=["BTC-USD"])
payload = request.to_json()
same = Channel.from_json(payload)
```

`Channel.to_json` returns a dictionary with the keys `type`, `name`,
`product_ids` and `channel` (nested channels, converted the same way).
`Channel.from_json` accepts such a dictionary or a JSON string or bytes; it
raises `TypeError` if the document is not a JSON object and `ValueError` if
`product_ids` is not a list of strings or `channel` is not a list.

`coinfeed.messages` also defines the level-3 dataclasses `Schema`, `Done`,
`Match`, `Noop`, `Open` and the container `L3`. Their fields are strings, as
the feed sends them, and all default to empty.

## What it does not do

The client reads a single message and then closes; it does not keep a
subscription open or stream updates. Replies are returned as raw text: there
is no parsing of feed messages into the level-3 types and no order book is
built from them.