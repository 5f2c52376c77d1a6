import httpx
import pytest

from fakes import Upstream, make_gateway
from investours.engines.gateway_client import (
    GatewayPaymentRequiredError, GatewayRateLimitError, GatewayResponseError, GatewayUnavailableError
)

MESSAGES = [{"role": "user", "content": "hi"}]


def test_returns_first_choice_content():
    upstream = Upstream()
    upstream.reply("hello")
    assert make_gateway(upstream).complete(MESSAGES) == "hello"


@pytest.mark.parametrize("body", [{}, {"choices": []}, {"choices": [{"message": {}}]}])
def test_missing_content_is_none(body):
    upstream = Upstream()
    upstream.responder = lambda request: httpx.Response(200, json=body)
    assert make_gateway(upstream).complete(MESSAGES) is None


def test_non_json_body_is_none():
    upstream = Upstream()
    upstream.responder = lambda request: httpx.Response(200, text="<html>")
    assert make_gateway(upstream).complete(MESSAGES) is None


@pytest.mark.parametrize("status, error, status_code", [
    (429, GatewayRateLimitError, 429),
    (402, GatewayPaymentRequiredError, 402),
    (500, GatewayResponseError, 500),
    (401, GatewayResponseError, 500),
])
def test_status_mapping(status, error, status_code):
    upstream = Upstream()
    upstream.status(status)
    with pytest.raises(error) as exc_info:
        make_gateway(upstream).complete(MESSAGES)
    assert exc_info.value.status_code == status_code
    assert exc_info.value.upstream_status == status


def test_timeout_is_unavailable():
    upstream = Upstream()

    def slow(request):
        raise httpx.ReadTimeout("timed out", request=request)

    upstream.responder = slow
    with pytest.raises(GatewayUnavailableError):
        make_gateway(upstream).complete(MESSAGES)
    assert len(upstream.calls) == 1
