class BeaconError(Exception):
    """Base class for failures in the tracking path."""


class EntropyUnavailable(BeaconError):
    """The OS random source could not supply bytes for a client id."""


class ReportError(BeaconError):
    """A hit could not be delivered to the collector."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code
