import hashlib
from typing import Any

from . import utils


class OTP(object):
    """
    Base class for OTP handlers.
    """

    def __init__(self, s: str, digits: int = utils.DIGITS, digest: Any = utils.DEFAULT_DIGEST) -> None:
        if not 0 < digits <= 10:
            raise ValueError("digits must be between 1 and 10")
        self.digits = digits
        if digest in [hashlib.md5, hashlib.shake_128]:
            raise ValueError("selected digest function must generate digest size greater than or equals to 19 bytes")
        self.digest = digest
        self.secret = s

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        """
        if input < 0:
            raise ValueError("input must be positive integer")
        hmac_hash = utils.hmac_over_counter(self.byte_secret(), input, self.digest)
        if len(hmac_hash) < 19:
            raise ValueError("digest size is lower than 19 bytes, which will trigger error on otp generation")
        code = utils.dynamic_truncate(hmac_hash)
        return utils.format_code(utils.reduce_to_digits(code, self.digits), self.digits)

    def byte_secret(self) -> bytes:
        return utils.decode_secret(self.secret)
