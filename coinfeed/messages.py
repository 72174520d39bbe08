"""Market data message shapes and the channel subscription request."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Schema:
    """Common fields of a level-3 order book event."""

    type: str = ""
    product_id: str = ""
    sequence: str = ""
    order_id: str = ""
    price: str = ""
    size: str = ""
    time: str = ""


@dataclass
class Done:
    """An order that has left the book."""

    type: str = ""
    product_id: str = ""
    sequence: str = ""
    order_id: str = ""
    time: str = ""


@dataclass
class Match:
    """A trade between a maker and a taker order."""

    type: str = ""
    product_id: str = ""
    sequence: str = ""
    maker_order_id: str = ""
    taker_order_id: str = ""
    price: str = ""
    size: str = ""
    time: str = ""


@dataclass
class Noop:
    """A heartbeat event carrying only a sequence number."""

    type: str = ""
    product_id: str = ""
    sequence: str = ""
    time: str = ""


@dataclass
class Open:
    """An order that has been placed on the book."""

    type: str = ""
    product_id: str = ""
    sequence: str = ""
    order_id: str = ""
    side: str = ""
    price: str = ""
    size: str = ""
    time: str = ""


@dataclass
class L3:
    """A level-3 message with one slot per event kind."""

    type: str = ""
    schema: Schema = field(default_factory=Schema)
    done: Done = field(default_factory=Done)
    match: Match = field(default_factory=Match)
    noop: Noop = field(default_factory=Noop)
    open: Open = field(default_factory=Open)


@dataclass
class Channel:
    """A subscription request, possibly holding nested channels."""

    type: str = ""
    name: str = ""
    product_ids: list[str] = field(default_factory=list)
    channel: list[Channel] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        """Return the request as a JSON-ready dictionary."""
        return {
            "type": self.type,
            "name": self.name,
            "product_ids": list(self.product_ids),
            "channel": [child.to_json() for child in self.channel],
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any] | str | bytes) -> Channel:
        """Build a channel from a dictionary or a JSON document."""
        if isinstance(data, (str, bytes, bytearray)):
            data = json.loads(data)
        if not isinstance(data, Mapping):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        product_ids = data.get("product_ids", [])
        if not isinstance(product_ids, list) or not all(
            isinstance(item, str) for item in product_ids
        ):
            raise ValueError("product_ids must be a list of strings")

        children = data.get("channel", [])
        if not isinstance(children, list):
            raise ValueError("channel must be a list of objects")

        return cls(
            type=str(data.get("type", "")),
            name=str(data.get("name", "")),
            product_ids=list(product_ids),
            channel=[cls.from_json(child) for child in children],
        )