"""
AES-256-GCM for file contents.

One key per file, one fresh 96-bit IV per encryption. The 16-byte GCM tag
is appended to the ciphertext by AESGCM.
"""
import os
from dataclasses import dataclass

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from evault.errors import AuthenticationFailure, MalformedKey

KEY_SIZE = 32
IV_SIZE = 12


@dataclass(frozen=True)
class SymmetricKey:
    raw: bytes

    @property
    def aead(self) -> AESGCM:
        return AESGCM(self.raw)


@dataclass(frozen=True)
class Encrypted:
    ciphertext: bytes
    iv: bytes


def generate_key() -> SymmetricKey:
    return SymmetricKey(AESGCM.generate_key(bit_length=KEY_SIZE * 8))


def encrypt(plaintext: bytes, key: SymmetricKey) -> Encrypted:
    iv = os.urandom(IV_SIZE)
    ciphertext = key.aead.encrypt(iv, bytes(plaintext), None)
    return Encrypted(ciphertext=ciphertext, iv=iv)


def decrypt(ciphertext: bytes, key: SymmetricKey, iv: bytes) -> bytes:
    if len(iv) != IV_SIZE:
        raise AuthenticationFailure()
    try:
        return key.aead.decrypt(bytes(iv), bytes(ciphertext), None)
    except InvalidTag as e:
        raise AuthenticationFailure() from e


def export_raw(key: SymmetricKey) -> bytes:
    return key.raw


def import_raw(data: bytes) -> SymmetricKey:
    if not isinstance(data, (bytes, bytearray)) or len(data) != KEY_SIZE:
        raise MalformedKey(f"Symmetric key must be exactly {KEY_SIZE} bytes.")
    return SymmetricKey(bytes(data))
