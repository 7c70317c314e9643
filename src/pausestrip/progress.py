"""Prefixed progress logging.

A ProgressLog wraps a module logger and prepends a prefix to every
message. Nested logs extend the parent's prefix, so batch, token and
interval lines are indented by depth:

    pausestrip.clean INFO: Processing 2 token(s)
    pausestrip.clean INFO:   [spk01] 14 interval(s) on tier 'words' (#1)
    pausestrip.clean DEBUG:     #3 'hello' 0.150-1.000s extracted
"""

import logging


class ProgressLog(logging.LoggerAdapter):
    """Logger adapter with a settable message prefix."""

    def __init__(self, logger: logging.Logger, prefix: str = ""):
        super().__init__(logger, {"prefix": prefix})

    @property
    def prefix(self) -> str:
        return self.extra["prefix"]

    def set_prefix(self, prefix: str) -> None:
        self.extra["prefix"] = prefix

    def nested(self, prefix: str) -> "ProgressLog":
        """Return a child log whose prefix extends this one."""
        return ProgressLog(self.logger, self.prefix + prefix)

    def process(self, msg, kwargs):
        return f"{self.prefix}{msg}", kwargs
