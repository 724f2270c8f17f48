import pytest

from metaverse_messages.complete_ping_check import CompletePingCheck


def test_round_trip():
    message = CompletePingCheck(ping_id=42)
    assert CompletePingCheck.from_bytes(message.to_bytes()) == message


def test_to_bytes_is_single_byte():
    assert CompletePingCheck(ping_id=9).to_bytes() == bytes([9])


def test_extra_bytes_ignored():
    assert CompletePingCheck.from_bytes(bytes([7, 1, 2])).ping_id == 7


def test_empty_raises():
    with pytest.raises(ValueError):
        CompletePingCheck.from_bytes(b"")


def test_out_of_range_id_raises():
    with pytest.raises(ValueError):
        CompletePingCheck(ping_id=256).to_bytes()