import logging

from .errors import InvalidKeyError as InvalidKeyError
from .errors import InvalidTimeError as InvalidTimeError
from .errors import TOTPError as TOTPError
from .errors import TOTPErrorReason as TOTPErrorReason
from .hotp import HOTP as HOTP
from .otp import OTP as OTP
from .totp import TOTP as TOTP
from .utils import TIME_PERIOD as TIME_PERIOD
from .utils import current_epoch_seconds as current_epoch_seconds
from .utils import time_step_end as time_step_end
from .utils import time_step_start as time_step_start

logging.getLogger(__name__).addHandler(logging.NullHandler())


def otp(key: str) -> str:
    """
    Six digit code for the current 30 second window.

    :param key: secret in base32 format
    :raises InvalidKeyError: if ``key`` is not valid Base32
    :raises InvalidTimeError: if the system clock is before the UNIX epoch
    """
    return otp_at(key, current_epoch_seconds())


def otp_at(key: str, epoch_seconds: int) -> str:
    """
    Six digit code for the window containing ``epoch_seconds``.

    >>> otp_at("TKI3J4MD6HBVVLAB", 1578082942)
    '075767'

    :param key: secret in base32 format
    :param epoch_seconds: Unix time in seconds
    :raises InvalidKeyError: if ``key`` is not valid Base32
    """
    return TOTP(key).at(epoch_seconds)


def begin_period() -> int:
    return begin_period_at(current_epoch_seconds())


def begin_period_at(epoch_seconds: int) -> int:
    return time_step_start(epoch_seconds, TIME_PERIOD)


def end_period() -> int:
    return end_period_at(current_epoch_seconds())


def end_period_at(epoch_seconds: int) -> int:
    return time_step_end(epoch_seconds, TIME_PERIOD)
