"""Logging 모듈 테스트

ECS JSON 포맷터 및 PII 마스킹 테스트
"""

import json
import logging
import sys

from apps.users.setup.constants import SERVICE_NAME
from apps.users.setup.logging import ECSJsonFormatter, configure_logging, mask_sensitive_data


def _record(msg: str = "User created", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="apps.users.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestMaskSensitiveData:
    def test_masks_short_secret_fully(self) -> None:
        assert mask_sensitive_data({"password": "secret123"})["password"] == "***REDACTED***"

    def test_masks_long_token_partially(self) -> None:
        result = mask_sensitive_data({"access_token": "eyJhbGciOiJIUzI1NiJ9"})

        assert result["access_token"] == "eyJh...NiJ9"

    def test_keeps_regular_fields_and_recurses(self) -> None:
        result = mask_sensitive_data({"user_id": "ab12cd3407", "headers": {"Authorization": "x"}})

        assert result["user_id"] == "ab12cd3407"
        assert result["headers"]["Authorization"] == "***REDACTED***"


class TestECSJsonFormatter:
    def test_formats_base_fields(self) -> None:
        formatter = ECSJsonFormatter(environment="test")

        payload = json.loads(formatter.format(_record()))

        assert payload["message"] == "User created"
        assert payload["log.level"] == "info"
        assert payload["log.logger"] == "apps.users.test"
        assert payload["service.name"] == SERVICE_NAME
        assert payload["service.environment"] == "test"
        assert "labels" not in payload

    def test_extra_fields_go_to_labels(self) -> None:
        formatter = ECSJsonFormatter()

        payload = json.loads(formatter.format(_record(user_id="ab12cd3407", token="abc")))

        assert payload["labels"] == {"user_id": "ab12cd3407", "token": "***REDACTED***"}

    def test_includes_error_context(self) -> None:
        formatter = ECSJsonFormatter()
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record("Request failed")
            record.exc_info = sys.exc_info()

        payload = json.loads(formatter.format(record))

        assert payload["error.type"] == "ValueError"
        assert payload["error.message"] == "boom"
        assert "Traceback" in payload["error.stack_trace"]


class TestConfigureLogging:
    def test_installs_single_stdout_handler(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging(log_level="WARNING", json_format=True)
            configure_logging(log_level="WARNING", json_format=True)

            assert root.level == logging.WARNING
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, ECSJsonFormatter)
            assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_text_format(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging(log_level="DEBUG", json_format=False)

            assert not isinstance(root.handlers[0].formatter, ECSJsonFormatter)
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
