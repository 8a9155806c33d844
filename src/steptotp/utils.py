import base64
import hashlib
import hmac
import logging
import time
from typing import Any

from .errors import InvalidKeyError, InvalidTimeError

logger = logging.getLogger(__name__)

TIME_PERIOD = 30
DIGITS = 6
DEFAULT_DIGEST = hashlib.sha1


def current_epoch_seconds() -> int:
    """
    Reads the system clock.

    :returns: whole seconds since 1970-01-01T00:00:00Z
    :raises InvalidTimeError: if the clock reports a time before the epoch
    """
    now = time.time()
    if now < 0:
        logger.debug("System clock is before the UNIX epoch")
        raise InvalidTimeError()
    return int(now)


def time_step_start(epoch_seconds: int, interval: int = TIME_PERIOD) -> int:
    """
    Index of the time step containing ``epoch_seconds``. This is the
    HOTP counter for that window.
    """
    if epoch_seconds < 0:
        raise InvalidTimeError()
    return epoch_seconds // interval


def time_step_end(epoch_seconds: int, interval: int = TIME_PERIOD) -> int:
    # Step count plus period length, not a wall-clock boundary.
    return time_step_start(epoch_seconds, interval) + interval


def decode_secret(text: str) -> bytes:
    """
    Strict RFC 4648 Base32 decoding. Nothing is case-folded and no padding
    is added, so "jbswy3dp" or a 16-char secret missing its last "=" are
    rejected.

    :param text: secret in base32 format
    :returns: the raw key bytes
    :raises InvalidKeyError: if ``text`` is not well-formed Base32
    """
    try:
        raw = base64.b32decode(text)
    except ValueError as exc:
        # binascii.Error subclasses ValueError; so does the non-ASCII str error
        logger.debug("Rejected secret: %s", exc)
        raise InvalidKeyError() from exc
    # b32decode ignores non-zero trailing bits, "MZXW7===" would alias "MZXW6==="
    if base64.b32encode(raw).decode() != text:
        logger.debug("Rejected secret: non-zero trailing bits")
        raise InvalidKeyError()
    return raw


def int_to_bytestring(i: int, padding: int = 8) -> bytes:
    """
    Turns an integer to the OATH specified
    bytestring, which is fed to the HMAC
    along with the secret
    """
    result = bytearray()
    while i != 0:
        result.append(i & 0xFF)
        i >>= 8
    # Bytes were collected least significant first
    return bytes(bytearray(reversed(result)).rjust(padding, b"\0"))


def hmac_over_counter(secret: bytes, counter: int, digest: Any = DEFAULT_DIGEST) -> bytes:
    """
    :param secret: raw key; an empty key is valid
    :param counter: HOTP counter, encoded as 8 big-endian bytes
    :param digest: hashlib constructor, SHA1 unless overridden
    :returns: the HMAC tag (20 bytes for SHA1)
    """
    return hmac.new(secret, int_to_bytestring(counter), digest).digest()


def dynamic_truncate(digest: bytes) -> int:
    """
    RFC 4226 dynamic truncation: the low nibble of the last byte selects a
    4-byte window, read big-endian with the top bit cleared.
    """
    hmac_hash = bytearray(digest)
    offset = hmac_hash[-1] & 0xF
    if offset + 4 > len(hmac_hash):
        raise ValueError("digest too short for dynamic truncation")
    return (
        (hmac_hash[offset] & 0x7F) << 24
        | (hmac_hash[offset + 1] & 0xFF) << 16
        | (hmac_hash[offset + 2] & 0xFF) << 8
        | (hmac_hash[offset + 3] & 0xFF)
    )


def reduce_to_digits(value: int, digit_count: int = DIGITS) -> int:
    return value % 10**digit_count


def format_code(value: int, digit_count: int = DIGITS) -> str:
    # Prefixing with 10**10 keeps the leading zeros when slicing
    str_code = str(10_000_000_000 + value)
    return str_code[-digit_count:]
