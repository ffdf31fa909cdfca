"""Tests for the structlog configuration."""

import json
import logging

import structlog

from storefront.application.dto import ProductViewModel
from storefront.application.product_service import ProductService
from storefront.infrastructure.observability.logger_factory import configure_logging
from storefront.infrastructure.session.session_cart import SessionCart
from tests.fakes import FakeProductRepository


class TestConfigureLogging:

    def test_json_events_on_stderr(self, capsys):
        configure_logging("INFO", "json")

        structlog.get_logger("storefront.catalog").info("product_saved", product_id=7)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "product_saved"
        assert event["product_id"] == 7
        assert event["logger"] == "storefront.catalog"
        assert event["level"] == "info"

    def test_level_filters_events(self, capsys):
        configure_logging("WARNING", "console")

        structlog.get_logger("storefront.catalog").info("hidden_event")
        logging.getLogger("plain").warning("stdlib warning")

        err = capsys.readouterr().err
        assert "hidden_event" not in err
        assert "stdlib warning" in err

    def test_reconfiguring_keeps_one_handler(self):
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_service_events_name_their_module(self, capsys):
        configure_logging("INFO", "json")
        repo = FakeProductRepository()
        service = ProductService(repo, SessionCart())

        service.save(ProductViewModel(name="Echo Dot", price="39.99", stock="10"))

        events = [json.loads(line) for line in capsys.readouterr().err.strip().splitlines()]
        saved = [e for e in events if e["event"] == "product_saved"]
        assert saved
        assert saved[0]["logger"] == "storefront.application.product_service"
