"""Tests for the line-stream driver."""

import io
import logging

import pytest

from gpsnmea import (
    ChecksumError,
    GSVAccumulator,
    SentenceShapeError,
    ignore_errors,
    log_errors,
    process,
)

_RMC = "$GPRMC,162254.00,A,3723.02837,N,12159.39853,W,0.820,188.36,110706,,,A*74"
_GGA = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
_BAD_CHECKSUM = _RMC[:-2] + "72"
_SHORT_GGA = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M*1F"
_TXT = "$GPTXT,01,01,02,ANTSTATUS=OK*3B"


class _Recorder:
    def __init__(self):
        self.calls = []

    def handle_rmc(self, rmc):
        self.calls.append(rmc)

    def handle_gga(self, gga):
        self.calls.append(gga)


class _Policy:
    """Error policy recording what it is given."""

    def __init__(self, decision=None):
        self.decision = decision
        self.seen = []

    def __call__(self, line, error):
        self.seen.append((line, error))
        return self.decision


class TestProcess:
    def test_dispatches_every_line(self):
        handler = _Recorder()
        assert process([_RMC, _GGA], handler) is None
        assert len(handler.calls) == 2

    def test_default_policy_continues_after_errors(self):
        handler = _Recorder()
        process([_BAD_CHECKSUM, _SHORT_GGA, _GGA], handler)
        assert len(handler.calls) == 1

    def test_policy_receives_line_and_error(self):
        policy = _Policy()
        process([_BAD_CHECKSUM, _SHORT_GGA], _Recorder(), on_error=policy)
        assert [line for line, _ in policy.seen] == [_BAD_CHECKSUM, _SHORT_GGA]
        assert isinstance(policy.seen[0][1], ChecksumError)
        assert isinstance(policy.seen[1][1], SentenceShapeError)

    def test_non_none_decision_aborts_and_is_returned(self):
        handler = _Recorder()
        policy = _Policy(decision="stop")
        result = process([_RMC, _BAD_CHECKSUM, _GGA], handler, on_error=policy)
        assert result == "stop"
        assert len(handler.calls) == 1
        assert len(policy.seen) == 1

    def test_unknown_tag_never_reaches_policy(self):
        policy = _Policy(decision="stop")
        assert process([_TXT, _RMC], _Recorder(), on_error=policy) is None
        assert policy.seen == []

    def test_reads_text_file_lines(self):
        handler = _Recorder()
        source = io.StringIO(f"{_RMC}\r\n{_GGA}\n")
        process(source, handler)
        assert len(handler.calls) == 2

    def test_source_errors_propagate(self):
        def failing_source():
            yield _RMC
            raise OSError("device unplugged")

        handler = _Recorder()
        with pytest.raises(OSError, match="unplugged"):
            process(failing_source(), handler, on_error=_Policy(decision="stop"))
        assert len(handler.calls) == 1

    def test_handler_errors_propagate(self):
        class Broken:
            def handle_gga(self, gga):
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            process([_GGA], Broken())

    def test_accumulator_as_handler(self):
        acc = GSVAccumulator()
        process(["$GPGSV,1,1,00*79"], acc)
        assert acc.complete is True


class TestPolicies:
    def test_ignore_errors_continues(self):
        assert ignore_errors(_BAD_CHECKSUM, ChecksumError(_BAD_CHECKSUM)) is None

    def test_log_errors_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gpsnmea.gnss.processor"):
            result = process([_BAD_CHECKSUM], _Recorder(), on_error=log_errors)
        assert result is None
        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING
        assert "Bad checksum" in caplog.text
