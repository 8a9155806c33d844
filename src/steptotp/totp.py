import calendar
import datetime
import time
from typing import Any, Union

from . import utils
from .otp import OTP


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(
        self,
        s: str,
        digits: int = utils.DIGITS,
        digest: Any = utils.DEFAULT_DIGEST,
        interval: int = utils.TIME_PERIOD,
    ) -> None:
        """
        :param s: secret in base32 format
        :param digits: number of integers in the OTP
        :param digest: digest function to use in the HMAC (expected to be SHA1)
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        """
        if interval <= 0:
            raise ValueError("interval must be a positive number of seconds")
        self.interval = interval
        super().__init__(s=s, digits=digits, digest=digest)

    def at(self, for_time: Union[int, datetime.datetime], counter_offset: int = 0) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :param counter_offset: the amount of ticks to add to the time counter
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time) + counter_offset)

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.generate_otp(self.timecode(utils.current_epoch_seconds()))

    def timecode(self, for_time: Union[int, datetime.datetime]) -> int:
        """
        Time step index for ``for_time``. Naive datetimes are read as local
        time.
        """
        return utils.time_step_start(self._epoch(for_time), self.interval)

    def period_start(self, for_time: Union[int, datetime.datetime]) -> int:
        return self.timecode(for_time)

    def period_end(self, for_time: Union[int, datetime.datetime]) -> int:
        return utils.time_step_end(self._epoch(for_time), self.interval)

    @staticmethod
    def _epoch(for_time: Union[int, datetime.datetime]) -> int:
        if not isinstance(for_time, datetime.datetime):
            return int(for_time)
        if for_time.tzinfo:
            return calendar.timegm(for_time.utctimetuple())
        return int(time.mktime(for_time.timetuple()))
