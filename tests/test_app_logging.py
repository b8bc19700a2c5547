"""Tests for logging configuration."""

import logging

from car_doctor.app_logging import ContextFormatter, configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("car_doctor")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.propagate is False


def test_formatter_appends_extra_fields() -> None:
    formatter = ContextFormatter("%(levelname)s: %(name)s: %(message)s")
    record = logging.getLogger("car_doctor.services.auth").makeRecord(
        "car_doctor.services.auth",
        logging.WARNING,
        __file__,
        1,
        "Rejected session credential",
        None,
        None,
        extra={"reason": "expired"},
    )

    assert formatter.format(record) == (
        "WARNING: car_doctor.services.auth: Rejected session credential"
        " [reason='expired']"
    )


def test_formatter_leaves_plain_records_unchanged() -> None:
    formatter = ContextFormatter("%(levelname)s: %(message)s")
    record = logging.makeLogRecord({"levelname": "INFO", "msg": "Storage ready"})

    assert formatter.format(record) == "INFO: Storage ready"
