"""Pytest configuration and fixtures."""

import random

import pytest
import structlog

from cryptounit import CryptoUnit

# Largest magnitude used for 63-bit round-trip properties
MAX_INT63 = 2**63 - 1


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source for sampled properties."""
    return random.Random(20240601)


@pytest.fixture
def one_btc() -> CryptoUnit:
    """One whole unit (100_000_000 satoshi)."""
    return CryptoUnit.from_decimal(1)


@pytest.fixture
def sample_magnitudes(rng: random.Random) -> list[int]:
    """Edge magnitudes plus random samples in [0, 2^63)."""
    edges = [0, 1, 255, 256, 10**8, 2**32, 2**53 + 1, MAX_INT63]
    return edges + [rng.randrange(MAX_INT63 + 1) for _ in range(200)]


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any structlog.configure() done by a test."""
    yield
    structlog.reset_defaults()
