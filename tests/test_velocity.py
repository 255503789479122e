import pytest

from lcvgc.velocity import HitSymbol, clamp_velocity, hit_velocity


@pytest.mark.parametrize(
    "hit, expected",
    [
        (HitSymbol.Normal, 100),
        (HitSymbol.Accent, 127),
        (HitSymbol.Ghost, 40),
        (HitSymbol.Rest, 0),
    ],
)
def test_hit_velocity(hit, expected):
    assert hit_velocity(hit) == expected


def test_clamp_zero():
    assert clamp_velocity(0) == 0


def test_clamp_mid():
    assert clamp_velocity(64) == 64


def test_clamp_max_valid():
    assert clamp_velocity(127) == 127


def test_clamp_over_max():
    assert clamp_velocity(128) == 127
    assert clamp_velocity(255) == 127


def test_clamp_negative():
    assert clamp_velocity(-5) == 0