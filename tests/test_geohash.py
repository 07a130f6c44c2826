"""Tests for the precision-bound Geohash encoder/decoder."""

import pytest

from geohash64 import (
    Direction,
    Geohash,
    InvalidCharacterError,
    bounding_box,
    decode,
    decode_center,
    error_with_precision,
)


@pytest.mark.parametrize("precision", [0, 13])
def test_precision_bounds(precision: int) -> None:
    with pytest.raises(ValueError, match="Precision must be between 1 and 12"):
        Geohash(precision=precision)


def test_default_precision() -> None:
    assert Geohash().precision == 5


def test_encode() -> None:
    assert Geohash(precision=5).encode(42.6, -5.6) == "ezs42"
    assert Geohash(precision=6).encode(-74.761330, -140.309714) == "0fsnxn"


def test_decode_matches_module_functions() -> None:
    geo = Geohash(precision=5)
    assert geo.decode("ezs42") == decode("ezs42")
    assert geo.decode_center("ezs42") == decode_center("ezs42")
    assert geo.bounding_box("ezs42") == bounding_box("ezs42")


def test_decode_wrong_length() -> None:
    geo = Geohash(precision=5)
    with pytest.raises(ValueError, match="doesn't match precision 5"):
        geo.decode("ezs4")


def test_decode_invalid_character() -> None:
    geo = Geohash(precision=5)
    with pytest.raises(InvalidCharacterError):
        geo.decode("ezsa2")
    with pytest.raises(ValueError):
        geo.bounding_box("EZS42")


def test_cell_size() -> None:
    assert Geohash(precision=5).get_cell_size() == error_with_precision(25)
    assert Geohash(precision=1).get_cell_size() == (45.0, 45.0)


def test_get_neighbors() -> None:
    found = Geohash(precision=5).get_neighbors("gbsuv")
    assert list(found) == list(Direction)
    assert found[Direction.NORTH] == "gbsvj"
    assert found[Direction.SOUTH_WEST] == "gbsus"
    assert found[Direction.NORTH_WEST] == "gbsvh"


def test_roundtrip() -> None:
    geo = Geohash(precision=6)
    encoded = geo.encode(41.878738, -87.6359612)
    lat, lng = geo.decode(encoded)
    assert geo.encode(lat, lng) == encoded
    assert geo.bounding_box(encoded).contains(41.878738, -87.6359612)
