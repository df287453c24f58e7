"""Managed secret keys and their random value generator."""
from __future__ import annotations

import base64
import binascii
import secrets
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ManagedKey:
    """A key whose value the tooling owns and rotates."""

    name: str
    byte_length: int
    command: str


SECRET_KEY_BASE = ManagedKey("SECRET_KEY_BASE", 48, "base_key")
CLOAK_KEY = ManagedKey("CLOAK_KEY", 32, "cloak_key")

MANAGED_KEYS: tuple[ManagedKey, ...] = (SECRET_KEY_BASE, CLOAK_KEY)


def generate_key(byte_length: int) -> str:
    """Return ``byte_length`` random bytes from the OS CSPRNG as padded base64 text."""
    if byte_length < 1:
        raise ValueError(f"byte_length must be positive, got {byte_length}")
    return base64.b64encode(secrets.token_bytes(byte_length)).decode("ascii")


def decoded_length(value: str) -> Optional[int]:
    """Number of bytes ``value`` decodes to, or None if it is not valid base64."""
    try:
        return len(base64.b64decode(value, validate=True))
    except (binascii.Error, ValueError):
        return None
