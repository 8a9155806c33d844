import time

import pytest

import steptotp
from steptotp import InvalidKeyError, InvalidTimeError, TOTPError, TOTPErrorReason

KEY = "TKI3J4MD6HBVVLAB"
TIME = 1578082942


def test_generate_valid_otp():
    assert steptotp.otp_at(KEY, TIME) == "075767"


def test_otp_at_is_deterministic():
    assert steptotp.otp_at(KEY, TIME) == steptotp.otp_at(KEY, TIME)


def test_otp_at_window_stability():
    # 1578082920 is the first second of the window, 1578082949 the last
    assert steptotp.otp_at(KEY, 1578082920) == "075767"
    assert steptotp.otp_at(KEY, 1578082949) == "075767"


def test_otp_at_window_change():
    assert steptotp.otp_at(KEY, TIME + 30) != steptotp.otp_at(KEY, TIME)


@pytest.mark.parametrize("key", [KEY, "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ", "MZXW6===", ""])
@pytest.mark.parametrize("epoch", [0, 29, 59, TIME, 2**40])
def test_otp_at_is_six_digits(key, epoch):
    code = steptotp.otp_at(key, epoch)
    assert len(code) == 6
    assert code.isascii() and code.isdigit()


@pytest.mark.parametrize("key", ["TKI3J4MD6HBVVLA1", "tki3j4md6hbvvlab", "TKI3J4MD6HBVVLA"])
def test_otp_at_invalid_key(key):
    with pytest.raises(InvalidKeyError) as excinfo:
        steptotp.otp_at(key, TIME)
    assert excinfo.value.reason is TOTPErrorReason.INVALID_KEY
    assert key not in str(excinfo.value)


def test_otp_at_trailing_bits_do_not_alias():
    assert steptotp.otp_at("MZXW6===", TIME)
    with pytest.raises(InvalidKeyError):
        steptotp.otp_at("MZXW7===", TIME)


def test_otp_reads_clock(monkeypatch):
    monkeypatch.setattr(time, "time", lambda: TIME + 0.25)
    assert steptotp.otp(KEY) == "075767"
    assert steptotp.begin_period() == 52602764
    assert steptotp.end_period() == 52602794


def test_clock_before_epoch(monkeypatch):
    monkeypatch.setattr(time, "time", lambda: -1.0)
    with pytest.raises(InvalidTimeError):
        steptotp.otp(KEY)
    with pytest.raises(InvalidTimeError):
        steptotp.begin_period()
    with pytest.raises(InvalidTimeError):
        steptotp.end_period()


def test_otp_invalid_key_with_valid_clock(monkeypatch):
    monkeypatch.setattr(time, "time", lambda: float(TIME))
    with pytest.raises(InvalidKeyError):
        steptotp.otp("0000")


@pytest.mark.parametrize("epoch", [0, 1, 29, 30, TIME, 2**63])
def test_period_arithmetic(epoch):
    assert steptotp.begin_period_at(epoch) == epoch // 30
    assert steptotp.begin_period_at(epoch) + 30 == steptotp.end_period_at(epoch)


def test_error_messages():
    key_error = InvalidKeyError()
    time_error = InvalidTimeError()
    assert str(key_error) == "Provided key could not be BASE32 decoded"
    assert str(time_error) == "System time set to before UNIX epoch"
    assert isinstance(key_error, TOTPError)
    assert isinstance(time_error, ValueError)
    assert time_error.reason is TOTPErrorReason.INVALID_TIME
