"""Tests for easing strategies."""

import pytest

from kenburns.core.easing import EASINGS, easing_by_name
from kenburns.errors import UnknownEasingError


@pytest.mark.parametrize("name", sorted(EASINGS))
def test_easing_boundaries(name):
    easing = EASINGS[name]
    assert easing(0.0) == pytest.approx(0.0, abs=1e-12)
    assert easing(1.0) == pytest.approx(1.0, abs=1e-12)


@pytest.mark.parametrize("name", sorted(EASINGS))
def test_easing_is_monotonic(name):
    easing = EASINGS[name]
    samples = [easing(step / 100.0) for step in range(101)]
    assert all(b >= a for a, b in zip(samples, samples[1:]))


def test_ease_in_out_is_symmetric_around_midpoint():
    easing = easing_by_name("ease_in_out")
    assert easing(0.5) == pytest.approx(0.5)
    assert easing(0.25) == pytest.approx(1.0 - easing(0.75))


def test_unknown_easing_name():
    with pytest.raises(UnknownEasingError):
        easing_by_name("bounce")
