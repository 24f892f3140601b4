# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration for varint tests."""

import random

import pytest

from r1cs_varint import I64_MAX, I64_MIN, U64_MAX


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--fuzz-iterations",
        action="store",
        type=int,
        default=2000,
        help="Number of random values per randomized roundtrip test",
    )
    parser.addoption(
        "--fuzz-seed",
        action="store",
        type=int,
        default=None,
        help="Seed for randomized tests (default: random, printed on failure)",
    )


@pytest.fixture(scope="session")
def fuzz_iterations(request):
    """Number of random samples per randomized test."""
    return request.config.getoption("--fuzz-iterations")


@pytest.fixture
def rng(request):
    """Seeded random generator; the seed is shown in the test report."""
    seed = request.config.getoption("--fuzz-seed")
    if seed is None:
        seed = random.randrange(1 << 32)
    request.node.user_properties.append(("fuzz_seed", seed))
    return random.Random(seed)


def _boundaries(limit: int):
    """Values around every 7-bit group boundary up to limit."""
    values = set()
    for bits in range(0, 65, 7):
        edge = 1 << bits
        for v in (edge - 1, edge, edge + 1):
            if 0 <= v <= limit:
                values.add(v)
    values.add(limit)
    return sorted(values)


@pytest.fixture(scope="session")
def unsigned_boundaries():
    """Unsigned values at each group-count boundary."""
    return _boundaries(U64_MAX)


@pytest.fixture(scope="session")
def signed_boundaries():
    """Signed values at each group-count boundary, both signs."""
    values = set()
    for v in _boundaries(I64_MAX):
        values.add(v)
        values.add(-v)
        values.add(-v - 1)
    values.add(I64_MIN)
    return sorted(v for v in values if I64_MIN <= v <= I64_MAX)
