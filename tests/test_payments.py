from urllib.parse import parse_qs

import httpx
import pytest

from app.modules.payments.router import get_stripe_client
from app.modules.payments.service import to_minor_units
from app.shared.services.stripe_client import StripeClient


@pytest.fixture()
def stripe_calls(app):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"id": "pi_123", "client_secret": "pi_123_secret_abc"})

    app.dependency_overrides[get_stripe_client] = lambda: StripeClient(transport=httpx.MockTransport(handler))
    return calls


def test_to_minor_units_truncates():
    assert to_minor_units(25.5) == 2550
    assert to_minor_units(0.019) == 1
    assert to_minor_units(150) == 15000


def test_create_payment_intent(client, stripe_calls):
    r = client.post("/create-payment-intent", json={"amount": 25.5})
    assert r.status_code == 200
    assert r.json() == {"clientSecret": "pi_123_secret_abc"}

    assert len(stripe_calls) == 1
    request = stripe_calls[0]
    assert request.url.path == "/v1/payment_intents"
    assert request.headers["authorization"] == "Bearer sk_test_dummy"
    form = parse_qs(request.content.decode())
    assert form["amount"] == ["2550"]
    assert form["currency"] == ["usd"]
    assert form["payment_method_types[]"] == ["card"]


def test_create_payment_intent_rejects_non_positive_amount(client, stripe_calls):
    assert client.post("/create-payment-intent", json={"amount": 0}).status_code == 422
    assert stripe_calls == []


def test_provider_failure_is_generic_500(app, client):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(402, json={"error": {"message": "Your card was declined."}})

    app.dependency_overrides[get_stripe_client] = lambda: StripeClient(transport=httpx.MockTransport(handler))

    r = client.post("/create-payment-intent", json={"amount": 10})
    assert r.status_code == 500
    assert r.json() == {"message": "Internal Server Error"}
