"""Tests for GLL sentence decoding."""

import datetime

import pytest

from gpsnmea import FieldDecodeError, GLLData, SentenceShapeError, decode_sentence


class TestDecodeGLL:
    def test_valid_gll(self):
        result = decode_sentence("$GPGLL,4916.45,N,12311.12,W,225444,A,*1D")
        assert isinstance(result, GLLData)
        assert result.latitude_degrees == pytest.approx(49.2741667, abs=1e-7)
        assert result.longitude_degrees == pytest.approx(-123.1853333, abs=1e-7)
        assert result.taken == datetime.time(22, 54, 44, tzinfo=datetime.timezone.utc)
        assert result.active is True

    def test_seven_fields_is_enough(self):
        result = decode_sentence("$GPGLL,4916.45,N,12311.12,W,225444,A*31")
        assert result.active is True

    def test_void_status(self):
        result = decode_sentence("$GPGLL,4916.45,N,12311.12,W,225444,V,*0A")
        assert result.active is False

    def test_too_few_fields_is_shape_error(self):
        with pytest.raises(SentenceShapeError):
            decode_sentence("$GPGLL,4916.45,N,12311.12,W*71")

    def test_invalid_time_is_field_decode_error(self):
        with pytest.raises(FieldDecodeError):
            decode_sentence("$GPGLL,4916.45,N,12311.12,W,226444,A,*1E")
