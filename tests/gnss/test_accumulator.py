"""Tests for GSV burst accumulation."""

from gpsnmea import GSVAccumulator, GSVData, GSVSatInfo
from gpsnmea.gnss.accumulator import Idle, Tracking, advance


def _sats(first_prn: int, count: int) -> tuple:
    return tuple(
        GSVSatInfo(prn=prn, elevation_degrees=10, azimuth_degrees=90, snr=30)
        for prn in range(first_prn, first_prn + count)
    )


def _gsv(number: int, total: int = 4, in_view: int = 14) -> GSVData:
    count = 2 if number == total else 4
    return GSVData(
        in_view=in_view,
        sentence_number=number,
        total_sentences=total,
        satellites=_sats(number * 10, count),
    )


class TestAdvance:
    def test_idle_first_sentence_starts_burst(self):
        state, complete = advance(Idle(), _gsv(1))
        assert state == Tracking(
            in_view=14, parts=4, last_index=1, satellites=_gsv(1).satellites
        )
        assert complete is False

    def test_orphan_adopts_total_without_satellites(self):
        state, complete = advance(Idle(), _gsv(2))
        assert state == Tracking(in_view=14, parts=4, last_index=0)
        assert complete is False

    def test_single_sentence_burst_completes_immediately(self):
        gsv = GSVData(in_view=3, sentence_number=1, total_sentences=1, satellites=_sats(1, 3))
        state, complete = advance(Idle(), gsv)
        assert complete is True
        assert state.satellites == gsv.satellites

    def test_state_is_not_mutated(self):
        start = Tracking(in_view=14, parts=4, last_index=1, satellites=_sats(10, 4))
        advance(start, _gsv(2))
        assert start.last_index == 1
        assert len(start.satellites) == 4


class TestGSVAccumulator:
    def test_starts_idle(self):
        acc = GSVAccumulator()
        assert isinstance(acc.state, Idle)
        assert acc.parts == 0
        assert acc.satellites == ()

    def test_in_order_burst(self):
        acc = GSVAccumulator()
        results = [acc.add(_gsv(n)) for n in (1, 2, 3, 4)]
        assert results == [False, False, False, True]
        assert acc.in_view == 14
        assert acc.parts == 4
        assert len(acc.satellites) == 14

    def test_out_of_order_then_complete_burst(self):
        acc = GSVAccumulator()
        results = [acc.add(_gsv(n)) for n in (2, 1, 3, 1, 2, 3, 4)]
        assert results == [False] * 6 + [True]
        assert len(acc.satellites) == 14
        assert [sat.prn for sat in acc.satellites[:4]] == [10, 11, 12, 13]

    def test_orphan_then_start_merges_cleanly(self):
        acc = GSVAccumulator()
        acc.add(_gsv(3))
        acc.add(_gsv(1))
        assert acc.state.last_index == 1
        assert acc.satellites == _gsv(1).satellites

    def test_repeated_sentence_resynchronizes(self):
        acc = GSVAccumulator()
        acc.add(_gsv(1))
        acc.add(_gsv(2))
        assert acc.add(_gsv(2)) is False
        assert acc.state.last_index == 0
        assert acc.satellites == ()

    def test_total_change_mid_burst_drops_merged_data(self):
        acc = GSVAccumulator()
        acc.add(_gsv(1, total=3, in_view=10))
        assert acc.add(_gsv(2, total=4)) is False
        assert acc.parts == 4
        assert acc.satellites == ()

    def test_completed_burst_readable_until_next_resync(self):
        acc = GSVAccumulator()
        for n in (1, 2, 3, 4):
            acc.add(_gsv(n))
        assert len(acc.satellites) == 14
        acc.add(_gsv(1))
        assert len(acc.satellites) == 4

    def test_next_burst_after_completion(self):
        acc = GSVAccumulator()
        for n in (1, 2, 3, 4):
            acc.add(_gsv(n))
        results = [acc.add(_gsv(n)) for n in (1, 2, 3, 4)]
        assert results[-1] is True
        assert len(acc.satellites) == 14

    def test_handle_gsv_records_completion(self):
        acc = GSVAccumulator()
        acc.handle_gsv(_gsv(1, total=1))
        assert acc.complete is True
        acc.handle_gsv(_gsv(1))
        assert acc.complete is False
