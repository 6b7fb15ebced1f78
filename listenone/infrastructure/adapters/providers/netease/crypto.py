"""Request signing for the Netease "weapi" endpoints.

The server expects a form made of two fields:

- `params`: the JSON payload encrypted twice with AES-128-CBC, first with a
  preset key, then with a random 16 characters session key.
- `encSecKey`: the session key wrapped with textbook RSA (no padding) so
  that only the server can recover it.

Everything here must stay bit-exact with the server side decryptor.
"""

import base64
import json
import random
from collections.abc import Mapping
from typing import Any
from typing import Final

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher
from cryptography.hazmat.primitives.ciphers import algorithms
from cryptography.hazmat.primitives.ciphers import modes

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from listenone.domain.exceptions import CryptoError

PRESET_KEY: Final[bytes] = b"0CoJUm6Qyw8W8jud"
IV: Final[bytes] = b"0102030405060708"

PUBLIC_EXPONENT: Final[str] = "010001"
MODULUS: Final[str] = (
    "00e0b509f6259df8642dbc35662901477df22677ec152b5ff68ace615bb7b725152b3ab17a876aea8a5aa76d2e417629ec4ee341"
    "f56135fccf695280104e0312ecbda92557c93870114af6c9d05c4f7f0c3685b7a46bee255932575cce10b424d813cfe4875d3e82"
    "047b97ddef52741d546b8e289dc6935b3ece0462db0a22b8e7"
)

# The digit 8 is missing on purpose, the upstream protocol never uses it.
SECRET_CHARS: Final[str] = "012345679abcdef"
SECRET_KEY_SIZE: Final[int] = 16

ENC_SEC_KEY_SIZE: Final[int] = 256


class WeapiForm(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    params: str
    enc_sec_key: str = Field(serialization_alias="encSecKey")

    def to_form(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


def create_secret_key(size: int = SECRET_KEY_SIZE, rng: random.Random | None = None) -> str:
    rng = rng or random.SystemRandom()
    return "".join(rng.choice(SECRET_CHARS) for _ in range(size))


def aes_cbc_encrypt(data: bytes, key: bytes, iv: bytes = IV) -> bytes:
    """Encrypts with AES-128-CBC and PKCS7 padding."""
    try:
        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        padded = padder.update(data) + padder.finalize()

        encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
        return encryptor.update(padded) + encryptor.finalize()
    except ValueError as e:
        raise CryptoError(f"AES encryption failed: {e}") from e


def to_hex(data: bytes) -> str:
    # Bytes aren't left padded with zeros: the upstream key wrap does the same.
    return "".join(format(byte, "x") for byte in data)


def encrypt_rsa(text: str, public_key: str = PUBLIC_EXPONENT, modulus: str = MODULUS) -> str:
    """Wraps the session key with the provider's public key.

    The text is reversed byte by byte, hex encoded, then raised to the public
    exponent modulo the modulus. The result is left padded to 256 hex digits.
    """
    try:
        n = int(modulus, 16)
        e = int(public_key, 16)
        m = int(to_hex(text.encode()[::-1]), 16)
    except ValueError as exc:
        raise CryptoError(f"Invalid RSA material: {exc}") from exc

    encrypted = format(pow(m, e, n), "x")
    if len(encrypted) > ENC_SEC_KEY_SIZE:
        raise CryptoError(f"Encrypted key is too long ({len(encrypted)} digits)")

    return encrypted.rjust(ENC_SEC_KEY_SIZE, "0")


def serialize_payload(data: bytes | str | Mapping[str, Any]) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        return data.encode()
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode()


def encrypt_we_api_data(
    data: bytes | str | Mapping[str, Any],
    secret_key: str | None = None,
    rng: random.Random | None = None,
) -> WeapiForm:
    """Signs a payload for the weapi endpoints.

    Args:
        data: The plaintext payload. Mappings are serialized as compact JSON.
        secret_key: The 16 characters session key, drawn from `rng` if omitted.
        rng: The randomness source used to draw the session key.

    Returns:
        The form to POST, made of `params` and `encSecKey`.
    """
    secret_key = secret_key or create_secret_key(SECRET_KEY_SIZE, rng)
    if len(secret_key) != SECRET_KEY_SIZE:
        raise CryptoError(f"Secret key must be {SECRET_KEY_SIZE} characters long, got {len(secret_key)}")

    first_pass = base64.b64encode(aes_cbc_encrypt(serialize_payload(data), PRESET_KEY))
    params = base64.b64encode(aes_cbc_encrypt(first_pass, secret_key.encode()))

    return WeapiForm(
        params=params.decode(),
        enc_sec_key=encrypt_rsa(secret_key),
    )
