import pytest

from toyshop.core.types import ToyRecord, DrawResult, DrawStatus
from toyshop.core.utils import ticket_count, next_id


def test_ticket_count_rounds_half_up():
    assert ticket_count(50.0, 5) == 3  # 2.5
    assert ticket_count(12.5, 4) == 1  # 0.5
    assert ticket_count(30.0, 5) == 2  # 1.5
    assert ticket_count(10.0, 25) == 3  # 2.5
    assert ticket_count(45.0, 10) == 5  # 4.5


def test_ticket_count_regular_values():
    assert ticket_count(50.0, 10) == 5
    assert ticket_count(10.0, 100) == 10
    assert ticket_count(90.0, 100) == 90
    assert ticket_count(44.9, 10) == 4
    assert ticket_count(0.0, 100) == 0
    assert ticket_count(100.0, 0) == 0
    assert ticket_count(1.0, 10) == 0  # 0.1 rounds to nothing


def test_next_id():
    assert next_id([]) == 1
    toys = [ToyRecord(3, "A", 1, 1.0), ToyRecord(7, "B", 1, 1.0), ToyRecord(2, "C", 1, 1.0)]
    assert next_id(toys) == 8


def test_toy_payload_uses_drop_rate_key():
    toy = ToyRecord(1, "Bear", 10, 50)
    assert toy.drop_rate == 50.0
    assert toy.to_payload() == {"id": 1, "name": "Bear", "quantity": 10, "dropRate": 50.0}


def test_toy_from_payload_ignores_extra_keys():
    toy = ToyRecord.from_payload(
        {"id": 2, "name": "Car", "quantity": 3, "dropRate": 12.5, "colour": "red"}
    )
    assert toy == ToyRecord(2, "Car", 3, 12.5)


@pytest.mark.parametrize(
    "payload",
    [
        {"id": 1, "name": "X", "quantity": 1},
        {"id": "1", "name": "X", "quantity": 1, "dropRate": 1.0},
        {"id": 1, "name": "X", "quantity": -1, "dropRate": 1.0},
        {"id": 1, "name": "X", "quantity": 1, "dropRate": -0.5},
        {"id": 1, "name": "X", "quantity": 1, "dropRate": None},
        ["not", "an", "object"],
    ],
)
def test_toy_from_payload_rejects_bad_entries(payload):
    with pytest.raises(ValueError):
        ToyRecord.from_payload(payload)


def test_draw_result_won_flag():
    assert DrawResult(DrawStatus.WON, ToyRecord(1, "A", 1, 1.0)).won
    assert not DrawResult(DrawStatus.EMPTY).won
    assert DrawResult(DrawStatus.NO_WEIGHT).toy is None


def test_ticket_count_just_below_half_rounds_down():
    assert ticket_count(49.99999995, 1) == 0
    assert ticket_count(49.9999, 5) == 2  # 2.499995
    assert ticket_count(50.0, 1) == 1


@pytest.mark.parametrize("rate", [float("inf"), float("nan"), float("-inf")])
def test_toy_rejects_non_finite_drop_rate(rate):
    with pytest.raises(ValueError):
        ToyRecord(1, "X", 1, rate)


@pytest.mark.parametrize("name", [None, 7, ["Bear"]])
def test_toy_from_payload_rejects_non_string_name(name):
    with pytest.raises(ValueError):
        ToyRecord.from_payload({"id": 1, "name": name, "quantity": 1, "dropRate": 1.0})
