"""Shared test fixtures for coverage tests."""
import pytest
from curves.poly import Poly


@pytest.fixture(scope="session")
def square():
    """100 x 100 square, CCW from the origin."""
    return Poly.parse("M0,0 H100 V100 H0 Z")


@pytest.fixture(scope="session")
def square_rotated():
    """Same square as `square`, starting at the opposite corner."""
    return Poly.parse("M100,100 H0 V0 H100 Z")


@pytest.fixture(scope="session")
def square_shifted():
    """Square shifted 50 east: shares half of the bottom and top edges."""
    return Poly.parse("M50,0 H150 V100 H50 Z")


@pytest.fixture(scope="session")
def slot():
    """Line, half circle, line, half circle."""
    return Poly.parse("M0,0 H100 A50,50 0 0 1 100,100 H0 A50,50 0 0 1 0,0 Z")
