"""Stream processing: line sources, the stream driver, and GSV reassembly."""

from gpsnmea.gnss.accumulator import GSVAccumulator
from gpsnmea.gnss.processor import ignore_errors, log_errors, process
from gpsnmea.gnss.reader import GPSDLineReader

__all__ = [
    "GPSDLineReader",
    "GSVAccumulator",
    "ignore_errors",
    "log_errors",
    "process",
]
