"""Toast and navigation sinks the controllers report to."""
import logging

logger = logging.getLogger(__name__)


class Toaster:
    def __init__(self):
        self.messages = []

    def success(self, message):
        logger.info("toast success: %s", message)
        self.messages.append(("success", message))

    def error(self, message):
        logger.info("toast error: %s", message)
        self.messages.append(("error", message))

    @property
    def last(self):
        return self.messages[-1] if self.messages else None


class Navigator:
    def __init__(self):
        self.history = []
        self.refreshes = 0

    def refresh(self):
        self.refreshes += 1

    def push(self, path):
        self.history.append(path)

    @property
    def current(self):
        return self.history[-1] if self.history else None
