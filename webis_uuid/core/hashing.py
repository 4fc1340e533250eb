"""SHA-1 digest computation and RFC 4122 version 5 byte layout.

Provides:
- NAMESPACE_URL_BYTES: the RFC 4122 NameSpace_URL UUID as 16 big-endian bytes
- compute_name_digest: SHA-1 over namespace bytes followed by the UTF-8 name
- compute_identifier_bytes: truncated digest with version and variant bits set
- format_uuid_hex: canonical 8-4-4-4-12 lowercase rendering

The namespace is hashed together with the name in a single digest stream.
"""

import hashlib

# 6ba7b811-9dad-11d1-80b4-00c04fd430c8
NAMESPACE_URL_BYTES = bytes([
    0x6B, 0xA7, 0xB8, 0x11, 0x9D, 0xAD, 0x11, 0xD1,
    0x80, 0xB4, 0x00, 0xC0, 0x4F, 0xD4, 0x30, 0xC8,
])

HASH_ALGORITHM = "sha1"
NAME_ENCODING = "utf-8"
UUID_BYTE_LENGTH = 16
UUID_SEPARATOR_POSITIONS = (8, 12, 16, 20)

VERSION_BYTE_INDEX = 6
VARIANT_BYTE_INDEX = 8


class HashAlgorithmUnavailable(RuntimeError):
    """The runtime cannot supply the digest algorithm UUIDs are derived with."""

    def __init__(self, algorithm: str = HASH_ALGORITHM):
        self.algorithm = algorithm
        super().__init__(f"Hash algorithm '{algorithm}' is not available in this runtime")


def new_sha1():
    """Return a fresh SHA-1 hash object.

    Raises HashAlgorithmUnavailable if hashlib refuses the algorithm
    (e.g. a restricted OpenSSL build).
    """
    try:
        return hashlib.new(HASH_ALGORITHM)
    except ValueError as e:
        raise HashAlgorithmUnavailable(HASH_ALGORITHM) from e


def ensure_sha1_available() -> None:
    """Fail early if SHA-1 cannot be obtained."""
    new_sha1()


def compute_name_digest(canonical_name: str) -> bytes:
    """Compute the 20-byte SHA-1 of NAMESPACE_URL_BYTES || name."""
    md = new_sha1()
    md.update(NAMESPACE_URL_BYTES)
    md.update(canonical_name.encode(NAME_ENCODING))
    return md.digest()


def compute_identifier_bytes(canonical_name: str) -> bytes:
    """Build the 16 UUID bytes from the name digest.

    Version nibble of byte 6 is forced to 5, top two bits of byte 8 to 0b10.
    The remaining 14 bytes are the digest bytes unchanged.
    """
    shortened = bytearray(compute_name_digest(canonical_name)[:UUID_BYTE_LENGTH])

    shortened[VERSION_BYTE_INDEX] = (shortened[VERSION_BYTE_INDEX] & 0x0F) | 0x50
    shortened[VARIANT_BYTE_INDEX] = (shortened[VARIANT_BYTE_INDEX] & 0x3F) | 0x80

    return bytes(shortened)


def format_uuid_hex(identifier_bytes: bytes) -> str:
    """Render 16 bytes as xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx (lowercase)."""
    if len(identifier_bytes) != UUID_BYTE_LENGTH:
        raise ValueError(
            f"Expected {UUID_BYTE_LENGTH} identifier bytes, got {len(identifier_bytes)}"
        )

    encoded_hex = identifier_bytes.hex()
    bounds = (0, *UUID_SEPARATOR_POSITIONS, len(encoded_hex))
    return "-".join(encoded_hex[start:end] for start, end in zip(bounds, bounds[1:]))
