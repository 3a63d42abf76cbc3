"""Tests for access token acquisition and caching."""

import urllib.parse

import pytest
import requests

from mstranslator.auth import AccessToken, TokenAuthenticator
from mstranslator.base import TranslatorError
from mstranslator.router import Router
from tests.fakes import FakeClock, FakeSession, make_response, token_response

AUTH_URL = "https://auth.test/v2/OAuth2-13"


def prepared_request():
    return requests.Request("GET", "http://translator.test/Translate").prepare()


def make_authenticator(session, clock=None, client_id="my-id", client_secret="my-secret"):
    return TokenAuthenticator(
        client_id,
        client_secret,
        router=Router(auth_url=AUTH_URL),
        session=session,
        timeout=5,
        clock=clock or FakeClock(),
    )


class TestAccessToken:
    def test_expired_with_margin(self):
        token = AccessToken(token="t", token_type="", scope="", expires_at=1000.0)

        assert not token.expired(900.0, margin=30)
        assert token.expired(975.0, margin=30)
        assert token.expired(1000.0, margin=0)


class TestTokenAuthenticator:
    def test_requests_token_with_client_credentials(self):
        session = FakeSession([token_response("abc")])
        authenticator = make_authenticator(session)

        authenticator.authenticate(prepared_request())

        request, kwargs = session.sent[0]
        form = dict(urllib.parse.parse_qsl(request.body))
        assert request.method == "POST"
        assert request.url == AUTH_URL
        assert form == {
            "client_id": "my-id",
            "client_secret": "my-secret",
            "scope": "http://api.microsofttranslator.com",
            "grant_type": "client_credentials",
        }
        assert kwargs["timeout"] == 5

    def test_sets_bearer_header(self):
        authenticator = make_authenticator(FakeSession([token_response("abc")]))
        request = prepared_request()

        authenticator.authenticate(request)

        assert request.headers["Authorization"] == "Bearer abc"

    def test_reuses_token_until_expiry(self):
        clock = FakeClock(1000.0)
        session = FakeSession([token_response("first", "600"), token_response("second", "600")])
        authenticator = make_authenticator(session, clock=clock)

        authenticator.authenticate(prepared_request())
        clock.now = 1500.0
        request = prepared_request()
        authenticator.authenticate(request)

        assert len(session.sent) == 1
        assert request.headers["Authorization"] == "Bearer first"

        clock.now = 1600.0
        request = prepared_request()
        authenticator.authenticate(request)

        assert len(session.sent) == 2
        assert request.headers["Authorization"] == "Bearer second"

    def test_numeric_expires_in(self):
        clock = FakeClock(0.0)
        authenticator = make_authenticator(FakeSession([token_response("abc", 120)]), clock=clock)

        assert authenticator.access_token().expires_at == 120.0

    def test_missing_credentials_raise_without_request(self):
        session = FakeSession()
        authenticator = make_authenticator(session, client_secret="")

        with pytest.raises(TranslatorError):
            authenticator.authenticate(prepared_request())
        assert session.sent == []

    def test_error_status_raises(self):
        authenticator = make_authenticator(FakeSession([make_response(400, b'{"error": "invalid_client"}')]))

        with pytest.raises(TranslatorError, match="400"):
            authenticator.authenticate(prepared_request())

    def test_non_json_body_raises(self):
        authenticator = make_authenticator(FakeSession([make_response(200, b"<html></html>")]))

        with pytest.raises(TranslatorError):
            authenticator.access_token()

    def test_missing_access_token_raises(self):
        authenticator = make_authenticator(FakeSession([make_response(200, b'{"expires_in": "600"}')]))

        with pytest.raises(TranslatorError):
            authenticator.access_token()

    def test_transport_failure_is_wrapped(self):
        cause = requests.Timeout("timed out")
        authenticator = make_authenticator(FakeSession([cause]))

        with pytest.raises(TranslatorError) as excinfo:
            authenticator.access_token()
        assert excinfo.value.__cause__ is cause

    def test_failure_is_retried_on_next_call(self):
        session = FakeSession([make_response(500), token_response("abc")])
        authenticator = make_authenticator(session)

        with pytest.raises(TranslatorError):
            authenticator.access_token()

        assert authenticator.access_token().token == "abc"
