import unittest
from unittest.mock import MagicMock

import requests

from launchpad.integrations.fmp_rest import FmpQuoteClient, sanitize_url
from launchpad.integrations.tldr_rest import TldrRestClient


def _response(*, json_payload=None, text=None):
    response = MagicMock()
    response.raise_for_status.return_value = None
    response.json.return_value = json_payload
    response.text = text
    return response


class TestTldrRestClient(unittest.TestCase):
    def test_fetch_latest_requests_json(self):
        session = MagicMock()
        session.get.return_value = _response(json_payload={"items": []})
        client = TldrRestClient(session=session, base_url="https://example.test/")

        payload = client.fetch_latest()

        self.assertEqual(payload, {"items": []})
        session.get.assert_called_once_with(
            "https://example.test/api/latest/tech",
            headers={"accept": "application/json"},
            timeout=None,
        )

    def test_fetch_feed_requests_rss_as_text(self):
        session = MagicMock()
        session.get.return_value = _response(text="<rss></rss>")
        client = TldrRestClient(session=session, base_url="https://example.test", timeout=3)

        body = client.fetch_feed()

        self.assertEqual(body, "<rss></rss>")
        session.get.assert_called_once_with(
            "https://example.test/tech.rss",
            headers={"accept": "application/rss+xml,application/xml"},
            timeout=3,
        )

    def test_fetch_homepage_hits_site_root(self):
        session = MagicMock()
        session.get.return_value = _response(text="<html></html>")
        client = TldrRestClient(session=session, base_url="https://example.test")

        self.assertEqual(client.fetch_homepage(), "<html></html>")
        session.get.assert_called_once_with("https://example.test/", timeout=None)

    def test_non_success_status_raises(self):
        session = MagicMock()
        response = _response(text="nope")
        response.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
        session.get.return_value = response
        client = TldrRestClient(session=session)

        with self.assertRaises(requests.HTTPError):
            client.fetch_homepage()


class TestFmpQuoteClient(unittest.TestCase):
    def test_get_quotes_batches_symbols_into_one_request(self):
        session = MagicMock()
        session.get.return_value = _response(json_payload=[{"symbol": "AAPL"}])
        client = FmpQuoteClient(api_key="demo", session=session, base_url="https://example.test/api/v3")

        payload = client.get_quotes(("AAPL", "MSFT", "NVDA"))

        self.assertEqual(payload, [{"symbol": "AAPL"}])
        session.get.assert_called_once_with(
            "https://example.test/api/v3/quote/AAPL,MSFT,NVDA",
            params={"apikey": "demo"},
            timeout=None,
        )

    def test_payload_is_returned_unvalidated(self):
        session = MagicMock()
        session.get.return_value = _response(json_payload={"Error Message": "Invalid API KEY"})
        client = FmpQuoteClient(session=session)

        self.assertEqual(client.get_quotes(["AAPL"]), {"Error Message": "Invalid API KEY"})

    def test_sanitize_url_masks_api_key(self):
        url = "https://example.test/quote/AAPL?apikey=top-secret&x=1"
        self.assertEqual(sanitize_url(url), "https://example.test/quote/AAPL?apikey=***&x=1")


if __name__ == "__main__":
    unittest.main()
