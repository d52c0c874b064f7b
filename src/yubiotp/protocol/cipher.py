"""Single-block AES-128 encryption of token buffers."""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from yubiotp.protocol.constants import KEY_LEN, TOKEN_LEN
from yubiotp.protocol.exceptions import InvalidKey, MalformedInput


def _cipher(key: bytes) -> Cipher:
    if len(key) != KEY_LEN:
        raise InvalidKey(f"Key must be {KEY_LEN} bytes, got {len(key)}")
    # One block only, so ECB carries no chaining or padding
    return Cipher(algorithms.AES(bytes(key)), modes.ECB())


def _check_block(block: bytes) -> None:
    if len(block) != TOKEN_LEN:
        raise MalformedInput(f"Block must be {TOKEN_LEN} bytes, got {len(block)}")


def encrypt_block(key: bytes, block: bytes) -> bytes:
    """
    Encrypt one 16-byte block under a 16-byte key.

    Raises:
        InvalidKey: If key is not 16 bytes
        MalformedInput: If block is not 16 bytes
    """
    _check_block(block)
    encryptor = _cipher(key).encryptor()
    return encryptor.update(bytes(block)) + encryptor.finalize()


def decrypt_block(key: bytes, block: bytes) -> bytes:
    """
    Decrypt one 16-byte block under a 16-byte key.

    Raises:
        InvalidKey: If key is not 16 bytes
        MalformedInput: If block is not 16 bytes
    """
    _check_block(block)
    decryptor = _cipher(key).decryptor()
    return decryptor.update(bytes(block)) + decryptor.finalize()
