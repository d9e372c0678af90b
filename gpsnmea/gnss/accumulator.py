"""GSVAccumulator: merge multi-sentence GSV reports into one satellite list.

A receiver reports its satellites in view as a burst of GSV sentences
("sentence 1 of 3", "2 of 3", "3 of 3"), four satellites per sentence. The
accumulator follows one burst at a time and says when it is complete.

State:
    ``Idle`` before the first sentence, afterwards ``Tracking`` with the
    expected number of sentences, the index of the last merged sentence, and
    the satellites merged so far. ``Idle`` behaves exactly like tracking a
    burst of 0 sentences with nothing merged.

Transition on a GSV sentence ``gsv``:
    Continue: ``gsv`` belongs to the tracked burst (same total) and is the
        next one (index ``last + 1``). Its satellites are appended. Complete
        when the last index reaches the total.

    Resynchronize: anything else. ``gsv`` becomes the start of a new burst.
        If ``gsv`` is not sentence 1 it is an orphan whose predecessors were
        missed: the total and in-view count are adopted but nothing is
        merged (index 0, no satellites), so the next sentence 1 of the same
        total starts the burst cleanly. Complete only for a one-sentence
        burst.

A change of total in the middle of a burst resynchronizes and drops what was
merged, even if the index continues.
"""

from dataclasses import dataclass

from gpsnmea.nmea.types import GSVData, GSVSatInfo

__all__ = ["GSVAccumulator", "GSVState", "Idle", "Tracking", "advance"]


@dataclass(frozen=True)
class Idle:
    """No GSV sentence seen yet."""


@dataclass(frozen=True)
class Tracking:
    """A burst of GSV sentences being merged.

    Attributes:
        in_view: Satellites-in-view count of the sentence that started the
            burst.
        parts: Total number of sentences in the burst.
        last_index: Index of the last merged sentence, 0 if none.
        satellites: Satellites merged so far, in sentence order.
    """

    in_view: int
    parts: int
    last_index: int
    satellites: tuple[GSVSatInfo, ...] = ()


GSVState = Idle | Tracking

_IDLE_TRACKING = Tracking(in_view=0, parts=0, last_index=0)


def _resynchronize(gsv: GSVData) -> Tracking:
    if gsv.sentence_number != 1:
        return Tracking(in_view=gsv.in_view, parts=gsv.total_sentences, last_index=0)

    return Tracking(
        in_view=gsv.in_view,
        parts=gsv.total_sentences,
        last_index=gsv.sentence_number,
        satellites=gsv.satellites,
    )


def advance(state: GSVState, gsv: GSVData) -> tuple[Tracking, bool]:
    """Apply one GSV sentence to ``state``.

    Args:
        state: Current accumulator state.
        gsv: The next decoded GSV sentence.

    Returns:
        The new state and whether the burst is now complete.
    """
    tracking = state if isinstance(state, Tracking) else _IDLE_TRACKING

    if (
        gsv.total_sentences != tracking.parts
        or gsv.sentence_number != tracking.last_index + 1
    ):
        return _resynchronize(gsv), gsv.total_sentences == 1

    merged = Tracking(
        in_view=tracking.in_view,
        parts=tracking.parts,
        last_index=gsv.sentence_number,
        satellites=tracking.satellites + gsv.satellites,
    )
    return merged, merged.last_index == merged.parts


class GSVAccumulator:
    """Stateful wrapper around ``advance`` for use inside a handler.

    Typical use keeps one accumulator in the handler and reacts when a burst
    completes::

        class SkyView:
            def __init__(self) -> None:
                self.gsv = GSVAccumulator()

            def handle_gsv(self, gsv: GSVData) -> None:
                if self.gsv.add(gsv):
                    draw(self.gsv.satellites)

    The accumulator is itself a GSV handler: passed directly to ``process``
    it records each result of ``add`` in ``complete``.

    The merged data of a completed burst stays readable until the next
    resynchronization replaces it.
    """

    def __init__(self) -> None:
        self._state: GSVState = Idle()
        self.complete = False

    @property
    def state(self) -> GSVState:
        return self._state

    @property
    def in_view(self) -> int:
        return self._tracking().in_view

    @property
    def parts(self) -> int:
        return self._tracking().parts

    @property
    def satellites(self) -> tuple[GSVSatInfo, ...]:
        return self._tracking().satellites

    def _tracking(self) -> Tracking:
        if isinstance(self._state, Tracking):
            return self._state
        return _IDLE_TRACKING

    def add(self, gsv: GSVData) -> bool:
        """Merge one GSV sentence; return True when the burst is complete."""
        self._state, complete = advance(self._state, gsv)
        return complete

    def handle_gsv(self, gsv: GSVData) -> None:
        self.complete = self.add(gsv)
