"""Tests for the loguru setup."""

import json
import logging

import pytest
from loguru import logger

from users_service.api.utils.app_startup import configure_logging
from users_service.runtime.config.config_data import LoggingConfig


@pytest.fixture(autouse=True)
def restore_logging(test_config):
    yield
    configure_logging(test_config)


class TestConfigureLogging:
    def test_stdlib_records_are_routed_to_loguru(self, test_config):
        configure_logging(test_config)
        messages: list[str] = []
        handler_id = logger.add(messages.append, format="{message}")

        logging.getLogger("users_service.tests").warning("routed through loguru")
        logger.remove(handler_id)

        assert any("routed through loguru" in m for m in messages)

    def test_uvicorn_access_records_are_dropped(self, test_config):
        configure_logging(test_config)
        messages: list[str] = []
        handler_id = logger.add(messages.append, format="{message}")

        logging.getLogger("uvicorn.access").critical("GET /api/v1/users 200")
        logger.remove(handler_id)

        assert messages == []

    def test_request_id_defaults_outside_requests(self, test_config):
        configure_logging(test_config)
        captured: list[str] = []
        handler_id = logger.add(captured.append, format="{extra[request_id]}|{message}")

        logger.info("outside a request")
        logger.remove(handler_id)

        assert "-|outside a request\n" in captured

    def test_json_file_sink(self, test_config, tmp_path):
        log_file = tmp_path / "logs" / "service.log"
        config = test_config.model_copy(
            update={
                "logging": LoggingConfig(level="INFO", format="json", file=str(log_file))
            }
        )

        configure_logging(config)
        logger.info("written as json")
        logger.remove()

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert "written as json" in [r["record"]["message"] for r in records]

    def test_plain_file_sink(self, test_config, tmp_path):
        log_file = tmp_path / "service.log"
        config = test_config.model_copy(
            update={"logging": LoggingConfig(level="INFO", file=str(log_file))}
        )

        configure_logging(config)
        logger.info("written as text")
        logger.remove()

        assert "written as text" in log_file.read_text()
