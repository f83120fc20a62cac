# SPDX-FileCopyrightText: 2025 rationals contributors
# SPDX-License-Identifier: Apache-2.0

import random
import pytest
from rationals import Rational

def pytest_addoption(parser):
    parser.addoption(
        "--rational-seed",
        action="store",
        type=int,
        default=20251019,
        help="Seed for the randomized arithmetic law tests.",
    )

@pytest.fixture
def rng(request):
    """Random generator seeded from --rational-seed."""
    return random.Random(request.config.getoption("--rational-seed"))

def pytest_assertrepr_compare(op, left, right):
    if isinstance(left, Rational) and isinstance(right, Rational) and op == "==":
        return [
            f"{left!r} == {right!r}",
            f"\tleft:  numerator={left.numerator}, denominator={left.denominator}",
            f"\tright: numerator={right.numerator}, denominator={right.denominator}",
        ]
