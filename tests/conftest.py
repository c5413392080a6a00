"""Pytest session setup: repo root on sys.path, deterministic random source."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart(session):
    sys.dont_write_bytecode = True
    rr = str(Path(__file__).resolve().parents[1])
    if rr not in sys.path:
        sys.path.insert(0, rr)


@pytest.fixture(autouse=True)
def _seeded():
    from sketchmath import set_seed, set_host

    set_seed(12345)
    yield
    set_seed(None)
    set_host(None)
