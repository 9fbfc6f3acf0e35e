"""Pytest fixtures for all tests."""

import pytest

import internal.logging


# (timestamp, lexicoid) pairs in ascending timestamp order
VECTORS = [
    (0, "22"),               # 1970-01-01T00:00:00Z
    (100, "gk"),             # 1970-01-01T00:01:40Z
    (10000, "6wc2"),         # 1970-01-01T02:46:40Z
    (500000, "2ykm2"),       # 1970-01-06T18:53:20Z
    (1700000, "5bse2"),      # 1970-01-20T16:13:20Z
    (28000000, "2apny22"),   # 1970-11-21T01:46:40Z
    (550000000, "6567f22"),  # 1987-06-06T17:46:40Z
    (1550000000, "flllz22"), # 2019-02-12T19:33:20Z
    (1654301676, "gehebv2"), # 2022-06-04T00:14:36Z
    (1654401676, "gei4p52"), # 2022-06-05T04:01:16Z
    (1674301676, "gj7x3v2"), # 2023-01-21T11:47:56Z
    (1674301677, "gj7x3vc"), # 2023-01-21T11:47:57Z
]


@pytest.fixture
def vectors():
    """Known timestamp/lexicoid pairs."""
    return list(VECTORS)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop the process logger between tests."""
    internal.logging._logger = None
    yield
    internal.logging._logger = None
