"""Shared test fixtures for the webis-uuid test suite."""

from unittest.mock import patch

import pytest

# Reference record from the ClueWeb12 corpus and its published UUID
CLUEWEB12_PREFIX = "clueweb12"
CLUEWEB12_RECORD = "clueweb12-0200wb-93-16911"
CLUEWEB12_UUID = "7f476110-58fd-5698-b104-8b29c3ac6d55"

UUID_PATTERN = r"^[0-9a-f]{8}-[0-9a-f]{4}-5[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"


@pytest.fixture
def sha1_unavailable():
    """Make hashlib refuse SHA-1 the way restricted OpenSSL builds do."""
    with patch(
        "webis_uuid.core.hashing.hashlib.new",
        side_effect=ValueError("unsupported hash type sha1"),
    ) as mock_new:
        yield mock_new
