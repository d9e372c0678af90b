"""Tests for VTG sentence decoding."""

import pytest

from gpsnmea import FieldDecodeError, SentenceShapeError, VTGData, decode_sentence


class TestDecodeVTG:
    """Tests for VTG decoding."""

    def test_valid_vtg(self):
        result = decode_sentence("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48")
        assert isinstance(result, VTGData)
        assert result.track_true_degrees == pytest.approx(54.7)
        assert result.track_magnetic_degrees == pytest.approx(34.4)
        assert result.speed_knots == pytest.approx(5.5)
        assert result.speed_kilometers_per_hour == pytest.approx(10.2)
        assert result.mode is None

    def test_vtg_with_mode_indicator(self):
        result = decode_sentence("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25")
        assert result.mode == "A"

    def test_multi_constellation_with_mode(self):
        result = decode_sentence("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,D*3E")
        assert result.mode == "D"

    def test_stationary_empty_track_is_zero(self):
        result = decode_sentence("$GPVTG,,T,,M,0.0,N,0.0,K*4E")
        assert result.track_true_degrees == 0.0
        assert result.track_magnetic_degrees == 0.0
        assert result.speed_knots == pytest.approx(0.0)

    def test_speed_meters_per_second_computed_correctly(self):
        result = decode_sentence("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48")
        assert result.speed_meters_per_second == pytest.approx(10.2 / 3.6)

    def test_wrong_unit_tag_is_shape_error(self):
        with pytest.raises(SentenceShapeError):
            decode_sentence("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,X*5B")

    def test_too_few_fields_is_shape_error(self):
        with pytest.raises(SentenceShapeError):
            decode_sentence("$GPVTG,054.7,T,034.4,M,005.5,N*2E")

    def test_malformed_track_is_field_decode_error(self):
        with pytest.raises(FieldDecodeError):
            decode_sentence("$GPVTG,05x.7,T,034.4,M,005.5,N,010.2,K*04")
