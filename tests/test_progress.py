"""Tests for prefixed progress logging."""

import logging

from pausestrip.progress import ProgressLog


def test_prefix_prepended(caplog):
    log = ProgressLog(logging.getLogger("pausestrip.test"), "[batch] ")
    with caplog.at_level(logging.INFO, logger="pausestrip.test"):
        log.info("starting")
    assert caplog.messages == ["[batch] starting"]


def test_nested_extends_prefix(caplog):
    log = ProgressLog(logging.getLogger("pausestrip.test"))
    token_log = log.nested("  [spk01] ")
    interval_log = token_log.nested("  ")
    with caplog.at_level(logging.DEBUG, logger="pausestrip.test"):
        log.info("batch")
        token_log.info("token")
        interval_log.debug("interval")
    assert caplog.messages == ["batch", "  [spk01] token", "  [spk01]   interval"]


def test_set_prefix_does_not_touch_children(caplog):
    log = ProgressLog(logging.getLogger("pausestrip.test"), "a ")
    child = log.nested("b ")
    log.set_prefix("z ")
    with caplog.at_level(logging.INFO, logger="pausestrip.test"):
        log.info("x")
        child.info("y")
    assert caplog.messages == ["z x", "a b y"]
