"""Handler capabilities and dispatch of decoded records.

A consumer ("handler") is any object. It receives a kind of sentence by
defining the matching ``handle_<kind>`` method, and may define any subset of
them, including none or all::

    class Printer:
        def handle_rmc(self, rmc: RMCData) -> None:
            print(rmc.latitude_degrees, rmc.longitude_degrees)

        def handle_gsv(self, gsv: GSVData) -> None:
            print(gsv.in_view)

Each capability is a runtime-checkable ``Protocol``, so whether a handler
implements one is a plain ``isinstance`` check performed on every decode.
"""

from typing import Any, Protocol, runtime_checkable

from gpsnmea.nmea.types import (
    AAMData,
    GGAData,
    GLLData,
    GSAData,
    GSTData,
    GSVData,
    RMCData,
    VTGData,
    ZDAData,
)


@runtime_checkable
class RMCHandler(Protocol):
    def handle_rmc(self, rmc: RMCData) -> None: ...


@runtime_checkable
class VTGHandler(Protocol):
    def handle_vtg(self, vtg: VTGData) -> None: ...


@runtime_checkable
class GGAHandler(Protocol):
    def handle_gga(self, gga: GGAData) -> None: ...


@runtime_checkable
class GSAHandler(Protocol):
    def handle_gsa(self, gsa: GSAData) -> None: ...


@runtime_checkable
class GLLHandler(Protocol):
    def handle_gll(self, gll: GLLData) -> None: ...


@runtime_checkable
class GSVHandler(Protocol):
    def handle_gsv(self, gsv: GSVData) -> None: ...


@runtime_checkable
class ZDAHandler(Protocol):
    def handle_zda(self, zda: ZDAData) -> None: ...


@runtime_checkable
class AAMHandler(Protocol):
    def handle_aam(self, aam: AAMData) -> None: ...


@runtime_checkable
class GSTHandler(Protocol):
    def handle_gst(self, gst: GSTData) -> None: ...


# record type -> (capability, method name)
HANDLER_CAPABILITIES: dict[type, tuple[type, str]] = {
    RMCData: (RMCHandler, "handle_rmc"),
    VTGData: (VTGHandler, "handle_vtg"),
    GGAData: (GGAHandler, "handle_gga"),
    GSAData: (GSAHandler, "handle_gsa"),
    GLLData: (GLLHandler, "handle_gll"),
    GSVData: (GSVHandler, "handle_gsv"),
    ZDAData: (ZDAHandler, "handle_zda"),
    AAMData: (AAMHandler, "handle_aam"),
    GSTData: (GSTHandler, "handle_gst"),
}


def supports(handler: Any, record_type: type) -> bool:
    """Return True if ``handler`` implements the capability for ``record_type``."""
    capability, _ = HANDLER_CAPABILITIES[record_type]
    return isinstance(handler, capability)


def dispatch(record: Any, handler: Any) -> bool:
    """Hand a decoded record to the handler method for its kind.

    Args:
        record: A decoded record (``RMCData``, ``GGAData``, ...).
        handler: Any object; only its matching ``handle_<kind>`` is used.

    Returns:
        True if the handler implemented the capability and was invoked
        (exactly once), False if it was a no-op.

    Raises:
        KeyError: If ``record`` is not a decoded record type.
    """
    capability, method_name = HANDLER_CAPABILITIES[type(record)]
    if not isinstance(handler, capability):
        return False

    getattr(handler, method_name)(record)
    return True
