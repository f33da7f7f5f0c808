"""
Engine errors.

TigerStyle: Explicit error types. Assertion failures are reserved for
implementation faults (e.g. a rejection loop exceeding its iteration cap).
"""


class RngError(Exception):
    """Base error for engine operations."""

    pass


class ConfigurationError(RngError):
    """Invalid algorithm/normal-method selection or binding.

    Caller must fix the configuration; retrying will not help.
    """

    pass


class NotReadyError(RngError):
    """A draw was requested before a required external source was bound."""

    pass


class CorruptStateError(RngError):
    """Snapshot bytes are malformed or do not fit the recorded algorithm."""

    pass
