"""Authenticated encryption of text with AES in GCM mode."""

from __future__ import annotations

import os
from dataclasses import dataclass

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

_NONCE_SIZE = 12


@dataclass
class AES:
    """AES-GCM cipher; the key must be 16, 24 or 32 bytes long."""

    key: bytes

    def _cipher(self) -> AESGCM:
        key = bytes(self.key)
        if len(key) not in (16, 24, 32):
            raise ValueError(f"invalid AES key size {len(key)}")
        return AESGCM(key)

    def encrypt(self, plaintext: str | bytes) -> bytes:
        """Encrypt ``plaintext`` and return a random nonce followed by the sealed data."""
        cipher = self._cipher()
        if isinstance(plaintext, str):
            plaintext = plaintext.encode("utf-8", "surrogateescape")
        nonce = os.urandom(_NONCE_SIZE)
        return nonce + cipher.encrypt(nonce, bytes(plaintext), None)

    def decrypt(self, ciphertext: bytes) -> str:
        """Open data made by ``encrypt`` and return the text.

        Raises ``ValueError`` if the key is invalid, the data is too short,
        or authentication fails.
        """
        cipher = self._cipher()
        data = bytes(ciphertext)
        if len(data) < _NONCE_SIZE:
            raise ValueError("ciphertext too short")
        nonce, sealed = data[:_NONCE_SIZE], data[_NONCE_SIZE:]
        try:
            plaintext = cipher.decrypt(nonce, sealed, None)
        except InvalidTag:
            raise ValueError("message authentication failed") from None
        return plaintext.decode("utf-8", "surrogateescape")