import logging

from rich.logging import RichHandler

from rms_schedule.utils import console as log


def test_configure_attaches_one_rich_handler_and_sets_level():
    log.configure("DEBUG")
    log.configure("DEBUG")
    handlers = [h for h in log.logger.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert log.logger.level == logging.DEBUG
    assert log.logger.isEnabledFor(logging.DEBUG)

    log.configure("WARNING")
    assert not log.logger.isEnabledFor(logging.INFO)

    log.configure("chatty")
    assert log.logger.level == logging.INFO
