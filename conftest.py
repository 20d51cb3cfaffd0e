"""Lets the harness-style test_*(r) functions run under pytest."""

import pytest

from test_runes import TestResult


@pytest.fixture
def r(request):
    return TestResult(request.node.name)
