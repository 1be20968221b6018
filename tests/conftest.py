"""Shared fixtures for shapegen tests."""

import pytest

from shapegen import build_box, build_capsule


@pytest.fixture
def cube():
    """2x2x2 box with one segment per edge."""
    return build_box(width=2, height=2, depth=2)


@pytest.fixture
def subdivided_box():
    """Box with different sizes and subdivisions on every axis."""
    return build_box(
        width=2.0,
        height=3.0,
        depth=4.0,
        width_segments=2,
        height_segments=3,
        depth_segments=4,
    )


@pytest.fixture
def capsule():
    """Default-resolution capsule with a cylindrical span."""
    return build_capsule(radius=0.5, length=2.0, cap_segments=4, radial_segments=8)


@pytest.fixture
def sphere():
    """Zero-length capsule, i.e. a UV sphere of radius 1."""
    return build_capsule(radius=1.0, length=0.0, cap_segments=4, radial_segments=8)
