# beacon/recorder.py
import logging


class Recorder:
    """Observability hook handed to the router and the reporter.

    Thin wrapper over a named logger so callers depend on three verbs
    instead of a module-level logger.
    """

    def __init__(self, logger=None):
        self.logger = logger or logging.getLogger("beacon")

    def record_debug(self, message, *args):
        self.logger.debug(message, *args)

    def record_info(self, message, *args):
        self.logger.info(message, *args)

    def record_error(self, message, *args, exc_info=False):
        self.logger.error(message, *args, exc_info=exc_info)


def get_recorder(name="beacon"):
    return Recorder(logging.getLogger(name))
