"""Tests for the Translate and Detect calls."""

import urllib.parse

import pytest

from mstranslator.base import TranslatorError
from mstranslator.router import Router
from mstranslator.translation import MicrosoftTranslationProvider
from tests.fakes import FakeHttpClient, make_response, string_document


@pytest.fixture
def router():
    return Router(service_url="http://translator.test/v2/Http.svc")


def split_uri(uri):
    parsed = urllib.parse.urlsplit(uri)
    base = f"{parsed.scheme}://{parsed.netloc}{parsed.path}"
    return base, dict(urllib.parse.parse_qsl(parsed.query))


class TestTranslate:
    def test_sends_text_and_languages_in_query(self, router):
        http_client = FakeHttpClient([make_response(200, string_document("Guten Morgen"))])
        provider = MicrosoftTranslationProvider(http_client, router)

        result = provider.translate("Good morning & welcome", "en", "de")

        method, uri, body, content_type = http_client.calls[0]
        base, query = split_uri(uri)
        assert result == "Guten Morgen"
        assert method == "GET"
        assert body is None
        assert content_type == "text/plain"
        assert base == "http://translator.test/v2/Http.svc/Translate"
        assert query == {"text": "Good morning & welcome", "from": "en", "to": "de"}

    def test_error_status_raises(self, router):
        http_client = FakeHttpClient([make_response(400, b"<html>ArgumentException</html>")])
        provider = MicrosoftTranslationProvider(http_client, router)

        with pytest.raises(TranslatorError, match="400"):
            provider.translate("hello", "en", "xx")


class TestDetect:
    def test_returns_language_code(self, router):
        http_client = FakeHttpClient([make_response(200, string_document("fr"))])
        provider = MicrosoftTranslationProvider(http_client, router)

        assert provider.detect("Bonjour tout le monde") == "fr"

        _, uri, _, _ = http_client.calls[0]
        base, query = split_uri(uri)
        assert base == "http://translator.test/v2/Http.svc/Detect"
        assert query == {"text": "Bonjour tout le monde"}

    def test_wrong_document_raises(self, router):
        http_client = FakeHttpClient([make_response(200, b"<ArrayOfstring/>")])
        provider = MicrosoftTranslationProvider(http_client, router)

        with pytest.raises(TranslatorError):
            provider.detect("hello")
