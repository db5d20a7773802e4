# app/services/payments.py
import logging
from typing import Optional

import httpx
from fastapi import Request

from app.core.errors import PaymentGatewayError

logger = logging.getLogger(__name__)


def salary_to_minor_units(salary: float) -> int:
    """Converts a salary in dollars to the integer cent amount Stripe expects."""
    return int(round(salary * 100))


class PaymentGateway:
    """
    Thin async client for Stripe Payment Intents. One instance is built at
    startup and shared by every request.
    """

    def __init__(self, secret_key: str, base_url: str = "https://api.stripe.com",
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            auth=(secret_key, ""),
            transport=transport,
        )

    async def create_payment_intent(self, amount: int, currency: str = "usd") -> str:
        """
        Creates a card payment intent for `amount` minor units and returns its
        client secret.
        """
        payload = {
            "amount": amount,
            "currency": currency,
            "payment_method_types[]": "card",
        }
        try:
            response = await self._client.post("/v1/payment_intents", data=payload)
            response.raise_for_status()
            client_secret = response.json()["client_secret"]
        except httpx.HTTPStatusError as http_err:
            raise PaymentGatewayError(
                f"Stripe returned {http_err.response.status_code}: {http_err.response.text}"
            ) from http_err
        except (httpx.RequestError, ValueError, KeyError) as e:
            raise PaymentGatewayError(f"Payment intent call or parsing failed: {e}") from e

        logger.info("Created payment intent for %s %s", amount, currency)
        return client_secret

    async def aclose(self) -> None:
        await self._client.aclose()


def get_gateway(request: Request) -> PaymentGateway:
    return request.app.state.gateway
