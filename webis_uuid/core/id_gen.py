"""Name-based (version 5) UUID generator for corpus records.

UUIDs live in the RFC 4122 NameSpace_URL. The hashed name is the scheme
prefix (e.g. "clueweb12"), a colon, and the record's internal ID, which is
only unique within that scheme (e.g. "clueweb12-0200wb-93-16911").
"""

import logging
import uuid

from webis_uuid.core.hashing import (
    compute_identifier_bytes,
    ensure_sha1_available,
    format_uuid_hex,
)
from webis_uuid.core.models import RecordName

logger = logging.getLogger(__name__)


def generate_uuid(prefix: str, internal_id: str) -> str:
    """Generate the version 5 UUID string for prefix:internal_id.

    Args:
        prefix: scheme prefix, e.g. "clueweb09"
        internal_id: scheme-specific record ID, e.g. "clueweb09-en0001-02-21241"

    Returns:
        Lowercase hyphenated UUID, always 36 characters.

    Raises:
        HashAlgorithmUnavailable: SHA-1 cannot be obtained from hashlib.
    """
    name = RecordName(prefix=prefix, internal_id=internal_id)
    result = format_uuid_hex(compute_identifier_bytes(name.canonical_name))
    logger.debug(f"Derived {result} for '{name.canonical_name}'")
    return result


def generate_uuid_object(prefix: str, internal_id: str) -> uuid.UUID:
    """Same as generate_uuid, returned as a uuid.UUID."""
    return uuid.UUID(generate_uuid(prefix, internal_id))


class UUIDGenerator:
    """Generator bound to one scheme prefix.

    Handy when many records of the same corpus need IDs. Output is identical
    to calling generate_uuid with the bound prefix.
    """

    def __init__(self, prefix: str):
        ensure_sha1_available()
        self._prefix = RecordName(prefix=prefix, internal_id="").prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def generate(self, internal_id: str) -> str:
        return generate_uuid(self._prefix, internal_id)

    def generate_object(self, internal_id: str) -> uuid.UUID:
        return generate_uuid_object(self._prefix, internal_id)

    def __repr__(self) -> str:
        return f"UUIDGenerator(prefix={self._prefix!r})"
