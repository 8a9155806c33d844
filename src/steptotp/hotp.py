from typing import Any

from . import utils
from .otp import OTP


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(
        self,
        s: str,
        digits: int = utils.DIGITS,
        digest: Any = utils.DEFAULT_DIGEST,
        initial_count: int = 0,
    ) -> None:
        """
        :param s: secret in base32 format
        :param digits: number of integers in the OTP
        :param digest: digest function to use in the HMAC (expected to be SHA1)
        :param initial_count: starting HMAC counter value, defaults to 0
        """
        self.initial_count = initial_count
        super().__init__(s=s, digits=digits, digest=digest)

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(self.initial_count + count)
