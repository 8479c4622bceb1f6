"""Tests for session token encoding and decoding."""

from datetime import datetime, timedelta, timezone

import pytest

from myhome.core.exceptions import ErrorCode, ExpiredTokenError, InvalidTokenError, WeakKeyError
from myhome.core.security import AppJwt, JwtEncoderDecoder

SECRET = "s" * 64
OTHER_SECRET = "o" * 64


@pytest.fixture
def codec():
    return JwtEncoderDecoder("HS512")


def _in(delta: timedelta) -> datetime:
    return datetime.now(timezone.utc) + delta


class TestEncodeDecode:
    def test_round_trip_keeps_user_and_expiration(self, codec):
        expiration = _in(timedelta(hours=1)).replace(microsecond=0)
        token = codec.encode(AppJwt(user_id="user-1", expiration=expiration), SECRET)

        decoded = codec.decode(token, SECRET)

        assert decoded.user_id == "user-1"
        assert decoded.expiration == expiration

    def test_fractional_expiration_is_rounded_up(self, codec):
        expiration = _in(timedelta(hours=1)).replace(microsecond=250000)
        token = codec.encode(AppJwt(user_id="user-1", expiration=expiration), SECRET)

        decoded = codec.decode(token, SECRET)

        assert decoded.expiration == expiration.replace(microsecond=0) + timedelta(seconds=1)

    def test_naive_expiration_treated_as_utc(self, codec):
        expiration = datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0) + timedelta(hours=1)
        token = codec.encode(AppJwt(user_id="user-1", expiration=expiration), SECRET)

        decoded = codec.decode(token, SECRET)

        assert decoded.expiration == expiration.replace(tzinfo=timezone.utc)

    def test_expired_token(self, codec):
        token = codec.encode(AppJwt(user_id="user-1", expiration=_in(-timedelta(minutes=5))), SECRET)

        with pytest.raises(ExpiredTokenError) as exc_info:
            codec.decode(token, SECRET)
        assert exc_info.value.error_code == ErrorCode.TOKEN_EXPIRED

    def test_wrong_secret(self, codec):
        token = codec.encode(AppJwt(user_id="user-1", expiration=_in(timedelta(hours=1))), SECRET)

        with pytest.raises(InvalidTokenError):
            codec.decode(token, OTHER_SECRET)

    def test_malformed_token(self, codec):
        with pytest.raises(InvalidTokenError):
            codec.decode("not.a.token", SECRET)


class TestKeyStrength:
    def test_short_secret_rejected_on_encode(self, codec):
        with pytest.raises(WeakKeyError) as exc_info:
            codec.encode(AppJwt(user_id="u", expiration=_in(timedelta(hours=1))), "short")
        assert exc_info.value.status_code == 500
        assert exc_info.value.required_bytes == 64

    def test_short_secret_rejected_on_decode(self, codec):
        token = codec.encode(AppJwt(user_id="u", expiration=_in(timedelta(hours=1))), SECRET)
        with pytest.raises(WeakKeyError):
            codec.decode(token, "s" * 63)

    def test_hs256_accepts_32_byte_secret(self):
        codec = JwtEncoderDecoder("HS256")
        token = codec.encode(AppJwt(user_id="u", expiration=_in(timedelta(hours=1))), "k" * 32)
        assert codec.decode(token, "k" * 32).user_id == "u"

    def test_unsupported_algorithm(self):
        with pytest.raises(ValueError):
            JwtEncoderDecoder("RS256")
