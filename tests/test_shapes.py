"""Rectangle value object stories."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cssel import Rectangle


@pytest.mark.os_agnostic
def test_rectangle_exposes_width_and_height() -> None:
    rectangle = Rectangle(10, 20)

    assert rectangle.width == 10
    assert rectangle.height == 20


@pytest.mark.os_agnostic
def test_rectangle_area_is_width_times_height() -> None:
    assert Rectangle(10, 20).get_area() == 200


@pytest.mark.os_agnostic
def test_rectangle_is_immutable() -> None:
    rectangle = Rectangle(1, 2)

    with pytest.raises(dataclasses.FrozenInstanceError):
        rectangle.width = 5  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_rectangles_with_equal_sides_compare_equal() -> None:
    assert Rectangle(3, 4) == Rectangle(3, 4)


@pytest.mark.os_agnostic
@given(width=st.integers(min_value=0, max_value=10**6), height=st.integers(min_value=0, max_value=10**6))
def test_area_matches_product_for_non_negative_sides(width: int, height: int) -> None:
    assert Rectangle(width, height).get_area() == width * height
