"""Tests for GSV sentence decoding."""

import pytest

from gpsnmea import (
    FieldDecodeError,
    GSVData,
    GSVSatInfo,
    SentenceShapeError,
    decode_sentence,
)


class TestDecodeGSV:
    def test_first_fragment_with_four_satellites(self):
        result = decode_sentence(
            "$GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75"
        )
        assert isinstance(result, GSVData)
        assert result.total_sentences == 2
        assert result.sentence_number == 1
        assert result.in_view == 8
        assert len(result.satellites) == 4
        assert result.satellites[0] == GSVSatInfo(
            prn=1, elevation_degrees=40, azimuth_degrees=83, snr=46
        )
        assert result.satellites[3].prn == 14

    def test_empty_snr_is_zero_and_partial_group_dropped(self):
        result = decode_sentence(
            "$GPGSV,2,2,08,15,10,050,30,16,20,100,,17,30,150,40,18,40,200*50"
        )
        assert [sat.prn for sat in result.satellites] == [15, 16, 17]
        assert result.satellites[1].snr == 0

    def test_no_satellites_in_view(self):
        result = decode_sentence("$GPGSV,1,1,00*79")
        assert result.in_view == 0
        assert result.satellites == ()

    def test_too_few_fields_is_shape_error(self):
        with pytest.raises(SentenceShapeError):
            decode_sentence("$GPGSV,2,1*56")

    def test_malformed_snr_is_field_decode_error(self):
        with pytest.raises(FieldDecodeError):
            decode_sentence("$GPGSV,2,1,08,01,40,083,4x*00")
