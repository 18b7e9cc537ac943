"""Kyber-512-shaped key encapsulation, in simulation mode.

Key generation and encapsulation produce random bytes of the sizes the
Kyber-512 specification fixes. Decapsulation derives a secret as the
SHA-256 digest of the secret key followed by the ciphertext. This is a
simulation and offers no post-quantum security.
"""

from __future__ import annotations

import hashlib
import os
from dataclasses import dataclass
from typing import Iterator

PUBLIC_KEY_SIZE = 800
SECRET_KEY_SIZE = 1632
CIPHERTEXT_SIZE = 768
SHARED_SECRET_SIZE = 32

_DESC_PK = "random public key"
_DESC_SK = "random secret key"
_DESC_SS = "shared secret"
_DESC_CT = "ciphertext"


class KeyExchangeError(RuntimeError):
    """Raised when key generation, encapsulation or decapsulation fails."""


@dataclass(frozen=True)
class KeyPair:
    """A public key and its matching secret key."""

    public_key: bytes
    secret_key: bytes

    def __iter__(self) -> Iterator[bytes]:
        yield self.public_key
        yield self.secret_key


@dataclass(frozen=True)
class EncapsulationResult:
    """A shared secret and the ciphertext that carries it."""

    shared_secret: bytes
    ciphertext: bytes

    def __iter__(self) -> Iterator[bytes]:
        yield self.shared_secret
        yield self.ciphertext


def secure_wipe(data: bytearray | memoryview) -> None:
    """Overwrite a mutable buffer with zero bytes in place.

    Immutable buffers such as ``bytes`` raise ``TypeError``.
    """
    view = memoryview(data).cast("B")
    if len(view):
        view[:] = bytes(len(view))


def _random_bytes(size: int, what: str) -> bytes:
    try:
        return os.urandom(size)
    except OSError as exc:
        raise KeyExchangeError(f"Failed to generate {what}: {exc}") from exc


def _check_size(data: bytes, expected: int, what: str) -> None:
    if len(data) != expected:
        raise KeyExchangeError(
            f"Invalid {what} size: expected {expected} bytes, got {len(data)} bytes"
        )


def generate_key_pair() -> KeyPair:
    """Generate a key pair with Kyber-512 key sizes."""
    public_key = _random_bytes(PUBLIC_KEY_SIZE, _DESC_PK)
    secret_key = _random_bytes(SECRET_KEY_SIZE, _DESC_SK)
    return KeyPair(public_key=public_key, secret_key=secret_key)


def encapsulate(public_key: bytes) -> EncapsulationResult:
    """Produce a shared secret and a ciphertext for the given public key."""
    public_key = bytes(public_key)
    if not public_key:
        raise KeyExchangeError("Public key cannot be empty")
    _check_size(public_key, PUBLIC_KEY_SIZE, "public key")

    shared_secret = _random_bytes(SHARED_SECRET_SIZE, _DESC_SS)
    ciphertext = _random_bytes(CIPHERTEXT_SIZE, _DESC_CT)
    return EncapsulationResult(shared_secret=shared_secret, ciphertext=ciphertext)


def decapsulate(secret_key: bytes, ciphertext: bytes) -> bytes:
    """Derive the shared secret from a secret key and a ciphertext."""
    secret_key = bytes(secret_key)
    ciphertext = bytes(ciphertext)
    if not secret_key:
        raise KeyExchangeError("Secret key cannot be empty")
    if not ciphertext:
        raise KeyExchangeError("Ciphertext cannot be empty")
    _check_size(secret_key, SECRET_KEY_SIZE, "secret key")
    _check_size(ciphertext, CIPHERTEXT_SIZE, "ciphertext")

    digest = hashlib.sha256()
    digest.update(secret_key)
    digest.update(ciphertext)
    return digest.digest()


def encrypt(public_key: bytes) -> tuple[bytes, bytes]:
    """Return ``(shared_secret, ciphertext)``; older name for :func:`encapsulate`."""
    result = encapsulate(public_key)
    return result.shared_secret, result.ciphertext


def decrypt(secret_key: bytes, ciphertext: bytes) -> bytes:
    """Older name for :func:`decapsulate`."""
    return decapsulate(secret_key, ciphertext)