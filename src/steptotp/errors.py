import enum


class TOTPErrorReason(enum.Enum):
    INVALID_KEY = "invalid_key"
    INVALID_TIME = "invalid_time"


_MESSAGES = {
    TOTPErrorReason.INVALID_KEY: "Provided key could not be BASE32 decoded",
    TOTPErrorReason.INVALID_TIME: "System time set to before UNIX epoch",
}


class TOTPError(ValueError):
    """
    Base class for errors raised while deriving a code.

    The message is fixed per reason and never carries the secret.
    """

    reason: TOTPErrorReason

    def __init__(self) -> None:
        super().__init__(_MESSAGES[self.reason])


class InvalidKeyError(TOTPError):
    reason = TOTPErrorReason.INVALID_KEY


class InvalidTimeError(TOTPError):
    reason = TOTPErrorReason.INVALID_TIME
