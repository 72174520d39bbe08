import json

import pytest

from coinfeed.messages import L3, Channel, Done, Match, Noop, Open, Schema


def test_to_json_flat_channel():
    channel = Channel(type="subscribe", name="ticker", product_ids=["BTC-USD"])
    assert channel.to_json() == {
        "type": "subscribe",
        "name": "ticker",
        "product_ids": ["BTC-USD"],
        "channel": [],
    }


def test_to_json_nests_children():
    child = Channel(type="subscribe", name="level2", product_ids=["ETH-USD"])
    parent = Channel(type="subscribe", name="ticker", product_ids=["BTC-USD"], channel=[child])
    assert parent.to_json()["channel"] == [child.to_json()]


def test_round_trip_through_dict():
    channel = Channel(
        type="subscribe",
        name="ticker",
        product_ids=["BTC-USD", "ETH-USD"],
        channel=[Channel(type="subscribe", name="heartbeats")],
    )
    assert Channel.from_json(channel.to_json()) == channel


def test_round_trip_through_json_text():
    channel = Channel(type="unsubscribe", name="ticker", product_ids=["BTC-USD"])
    text = json.dumps(channel.to_json())
    assert Channel.from_json(text) == channel


def test_to_json_is_a_copy():
    channel = Channel(product_ids=["BTC-USD"])
    data = channel.to_json()
    data["product_ids"].append("ETH-USD")
    assert channel.product_ids == ["BTC-USD"]


def test_from_json_missing_keys_default_to_empty():
    channel = Channel.from_json({"type": "subscribe"})
    assert channel == Channel(type="subscribe")


def test_from_json_rejects_non_object():
    with pytest.raises(TypeError):
        Channel.from_json([1, 2, 3])


def test_from_json_rejects_bad_product_ids():
    with pytest.raises(ValueError):
        Channel.from_json({"product_ids": "BTC-USD"})


def test_from_json_rejects_bad_channel_list():
    with pytest.raises(ValueError):
        Channel.from_json({"channel": {"name": "ticker"}})


def test_l3_defaults_are_independent():
    first = L3()
    first.open.price = "100"
    first.schema.size = "2"
    second = L3()
    assert second.open == Open()
    assert second.schema == Schema()


def test_l3_holds_each_event_kind():
    match = Match(type="match", maker_order_id="maker", taker_order_id="taker")
    message = L3(type="match", match=match, done=Done(type="done"), noop=Noop(type="noop"))
    assert message.match.maker_order_id == "maker"
    assert message.done.type == "done"
    assert message.noop.type == "noop"