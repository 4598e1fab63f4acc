import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from launchpad.config.settings import Settings


class TestLaunchpadSettings(unittest.TestCase):
    def test_defaults_without_env(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.LAUNCHPAD_NEWS_BASE_URL, "https://tldr.tech")
        self.assertEqual(settings.LAUNCHPAD_QUOTE_BASE_URL, "https://financialmodelingprep.com/api/v3")
        self.assertEqual(settings.LAUNCHPAD_QUOTE_API_KEY, "demo")
        self.assertEqual(settings.LAUNCHPAD_TICKER_SYMBOLS, ["AAPL", "MSFT", "GOOGL", "NVDA"])
        self.assertEqual(settings.LAUNCHPAD_QUOTE_POLL_INTERVAL_SEC, 60.0)
        self.assertIsNone(settings.LAUNCHPAD_HTTP_TIMEOUT_SEC)

    def test_ticker_symbols_parses_comma_separated_values(self):
        env = {"LAUNCHPAD_TICKER_SYMBOLS": " aapl, TSLA ,, amzn "}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.LAUNCHPAD_TICKER_SYMBOLS, ["AAPL", "TSLA", "AMZN"])

    def test_blank_ticker_symbols_fall_back_to_default(self):
        with patch.dict(os.environ, {"LAUNCHPAD_TICKER_SYMBOLS": " , "}, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.LAUNCHPAD_TICKER_SYMBOLS, ["AAPL", "MSFT", "GOOGL", "NVDA"])

    def test_overrides_and_trailing_slash(self):
        env = {
            "LAUNCHPAD_NEWS_BASE_URL": "https://news.example.test/",
            "LAUNCHPAD_QUOTE_API_KEY": "secret",
            "LAUNCHPAD_QUOTE_POLL_INTERVAL_SEC": "15",
            "LAUNCHPAD_HTTP_TIMEOUT_SEC": "2.5",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.LAUNCHPAD_NEWS_BASE_URL, "https://news.example.test")
        self.assertEqual(settings.LAUNCHPAD_QUOTE_API_KEY, "secret")
        self.assertEqual(settings.LAUNCHPAD_QUOTE_POLL_INTERVAL_SEC, 15.0)
        self.assertEqual(settings.LAUNCHPAD_HTTP_TIMEOUT_SEC, 2.5)

    def test_non_positive_interval_fails_validation(self):
        with patch.dict(os.environ, {"LAUNCHPAD_QUOTE_POLL_INTERVAL_SEC": "0"}, clear=True):
            with self.assertRaises(ValidationError):
                Settings.from_env()

    def test_invalid_timeout_fails_validation(self):
        with patch.dict(os.environ, {"LAUNCHPAD_HTTP_TIMEOUT_SEC": "soon"}, clear=True):
            with self.assertRaises(ValidationError):
                Settings.from_env()


if __name__ == "__main__":
    unittest.main()
