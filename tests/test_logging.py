import logging
import sys

from api_record.logging import LOGGER_NAME, LogfmtFormatter, setup_logging


def _record(msg: str, exc_info=None, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "api_record.client", logging.DEBUG, __file__, 1, msg, None, exc_info
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_logfmt_includes_request_fields():
    line = LogfmtFormatter(with_time=False).format(
        _record("op.request", method="GET", path="contacts/1", status=200, duration_ms=4)
    )
    assert line == (
        "level=debug logger=api_record.client event=op.request "
        "method=GET path=contacts/1 status=200 duration_ms=4"
    )


def test_logfmt_quotes_values_and_adds_timestamp():
    line = LogfmtFormatter().format(_record("op.request", resource="Sales Person"))
    assert line.startswith("ts=")
    assert 'resource="Sales Person"' in line


def test_logfmt_reports_exception_type():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        line = LogfmtFormatter(with_time=False).format(
            _record("op.failed", exc_info=sys.exc_info())
        )
    assert "exc_type=RuntimeError exc_msg=boom" in line


def test_setup_logging_configures_package_logger_once():
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    try:
        setup_logging("debug")
        assert setup_logging("debug") is logger
        ours = [h for h in logger.handlers if isinstance(h.formatter, LogfmtFormatter)]
        assert len(ours) == 1
        assert logger.level == logging.DEBUG
        assert not any(
            isinstance(h.formatter, LogfmtFormatter)
            for h in logging.getLogger().handlers
        )
    finally:
        for h in list(logger.handlers):
            logger.removeHandler(h)
        for h in saved_handlers:
            logger.addHandler(h)
        logger.setLevel(saved_level)
