"""Tests for sentence lookup and dispatch."""

import logging

import pytest

from gpsnmea import (
    ChecksumError,
    FieldDecodeError,
    GGAData,
    RMCData,
    VTGData,
    decode_sentence,
    parse_sentence,
)
from gpsnmea.nmea import SENTENCE_DECODERS, VALID_TALKER_IDS, dispatch

_RMC = "$GPRMC,162254.00,A,3723.02837,N,12159.39853,W,0.820,188.36,110706,,,A*74"
_GGA = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
_BAD_GGA = "$GPGGA,123519,4807.038,N,01131.000,E,9,08,0.9,545.4,M,46.9,M,,*4F"
_TXT = "$GPTXT,01,01,02,ANTSTATUS=OK*3B"


class _Recorder:
    """Handler for RMC and GGA only."""

    def __init__(self):
        self.calls = []

    def handle_rmc(self, rmc):
        self.calls.append(rmc)

    def handle_gga(self, gga):
        self.calls.append(gga)


class _Nothing:
    pass


class TestRegistry:
    def test_every_talker_registered_for_every_kind(self):
        assert len(SENTENCE_DECODERS) == 9 * len(VALID_TALKER_IDS)
        for talker_id in VALID_TALKER_IDS:
            assert f"${talker_id}RMC" in SENTENCE_DECODERS

    def test_tags_match_verbatim(self):
        assert "GPRMC" not in SENTENCE_DECODERS
        assert "$gprmc" not in SENTENCE_DECODERS


class TestParseSentence:
    def test_handler_invoked_exactly_once(self):
        handler = _Recorder()
        record = parse_sentence(_RMC, handler)
        assert isinstance(record, RMCData)
        assert handler.calls == [record]

    def test_multi_constellation_talker_dispatched(self):
        handler = _Recorder()
        parse_sentence(
            "$GNRMC,162254.00,A,3723.02837,N,12159.39853,W,0.820,188.36,110706,,,A*6A",
            handler,
        )
        assert len(handler.calls) == 1

    def test_missing_capability_is_silent_no_op(self):
        handler = _Recorder()
        result = parse_sentence("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48", handler)
        assert result is None
        assert handler.calls == []

    def test_handler_without_capabilities(self):
        assert parse_sentence(_GGA, _Nothing()) is None

    def test_missing_capability_skips_decoding(self):
        # malformed GGA is never decoded for a handler without handle_gga
        assert parse_sentence(_BAD_GGA, _Nothing()) is None

    def test_unknown_tag_returns_none(self, caplog):
        handler = _Recorder()
        with caplog.at_level(logging.DEBUG, logger="gpsnmea.nmea.registry"):
            assert parse_sentence(_TXT, handler) is None
        assert handler.calls == []
        assert "$GPTXT" in caplog.text

    def test_bad_checksum_raises(self):
        handler = _Recorder()
        with pytest.raises(ChecksumError) as excinfo:
            parse_sentence(_RMC[:-2] + "72", handler)
        assert excinfo.value.sentence == _RMC[:-2] + "72"
        assert handler.calls == []

    def test_handler_not_invoked_on_decode_failure(self):
        handler = _Recorder()
        with pytest.raises(FieldDecodeError):
            parse_sentence(_BAD_GGA, handler)
        assert handler.calls == []

    def test_surrounding_whitespace_ignored(self):
        handler = _Recorder()
        parse_sentence(_GGA + "\r\n", handler)
        assert isinstance(handler.calls[0], GGAData)


class TestDecodeSentence:
    def test_unknown_tag_returns_none(self):
        assert decode_sentence(_TXT) is None

    def test_bad_checksum_raises(self):
        with pytest.raises(ChecksumError):
            decode_sentence("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*49")


class TestDispatch:
    def test_dispatch_returns_true_when_invoked(self):
        handler = _Recorder()
        record = decode_sentence(_GGA)
        assert dispatch(record, handler) is True
        assert handler.calls == [record]

    def test_dispatch_returns_false_without_capability(self):
        record = decode_sentence("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48")
        assert isinstance(record, VTGData)
        assert dispatch(record, _Recorder()) is False
