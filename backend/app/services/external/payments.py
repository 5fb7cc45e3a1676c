"""
Payment Service - Dodo Payments checkout and webhook verification.
"""
import hashlib
import hmac
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from app.core.config import settings
from app.core.logging import get_logger, mask_identifier
from app.services.external.errors import (
    ConfigCheck,
    PaymentConfigError,
    PaymentProviderError,
)

logger = get_logger(__name__)

HINT_UNAUTHORIZED = (
    "Your API key is invalid or expired. Create a key with write access in the "
    "Dodo Payments dashboard and make sure it matches the mode (test vs live)."
)
HINT_BAD_REQUEST = "The request body is invalid. Check the product_id and required fields."


@dataclass
class CheckoutSession:
    """Hosted checkout link for a new subscription."""
    checkout_url: str
    subscription_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "checkout_url": self.checkout_url,
            "subscription_id": self.subscription_id,
        }


class PaymentService:
    """
    Client for the payment provider's subscription API.

    Usage:
        service = PaymentService()
        session = await service.create_checkout_session(user_id, email, name)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        product_id: Optional[str] = None,
        base_url: Optional[str] = None,
        client_url: Optional[str] = None,
        webhook_secret: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key or settings.DODO_PAYMENTS_API_KEY
        self.product_id = product_id or settings.DODO_PRODUCT_ID
        self.base_url = (base_url or settings.get_dodo_base_url()).rstrip("/")
        self.client_url = (client_url or settings.CLIENT_URL).rstrip("/")
        self.webhook_secret = webhook_secret or settings.DODO_WEBHOOK_SECRET
        self.transport = transport

    def validate_config(self) -> ConfigCheck:
        """Check the API key and product id are set."""
        if not self.api_key:
            return ConfigCheck(
                valid=False,
                error="DODO_PAYMENTS_API_KEY is not configured",
                hint="Add DODO_PAYMENTS_API_KEY to your .env file",
            )
        if not self.product_id:
            return ConfigCheck(
                valid=False,
                error="DODO_PRODUCT_ID is not configured",
                hint="Add DODO_PRODUCT_ID to your .env file",
            )
        return ConfigCheck(valid=True)

    def _build_request_body(self, user_id: str, user_email: str, user_name: str) -> Dict[str, Any]:
        return {
            # Placeholder billing address; the hosted page collects the real one
            "billing": {
                "city": "City",
                "country": "US",
                "state": "NY",
                "street": "Street Address",
                "zipcode": "10001",
            },
            "customer": {
                "email": user_email,
                "name": user_name or "Customer",
            },
            "product_id": self.product_id,
            "quantity": 1,
            "payment_link": True,
            "return_url": f"{self.client_url}/payment-success",
            "metadata": {"user_id": user_id},
        }

    async def create_checkout_session(
        self,
        user_id: str,
        user_email: str,
        user_name: str
    ) -> CheckoutSession:
        """
        Create a subscription with a hosted payment link.

        Raises:
            PaymentConfigError: API key or product id missing
            PaymentProviderError: Provider returned a non-2xx response
        """
        check = self.validate_config()
        if not check.valid:
            raise PaymentConfigError(check.error, hint=check.hint)

        logger.info(
            "Creating subscription checkout",
            user_id=user_id,
            base_url=self.base_url,
            product_id=self.product_id,
        )

        async with httpx.AsyncClient(transport=self.transport, timeout=15.0) as client:
            response = await client.post(
                f"{self.base_url}/subscriptions",
                headers={"Authorization": f"Bearer {self.api_key}"},
                json=self._build_request_body(user_id, user_email, user_name),
            )

        if response.is_error:
            hint = None
            if response.status_code == 401:
                hint = HINT_UNAUTHORIZED
            elif response.status_code == 400:
                hint = HINT_BAD_REQUEST

            logger.error("Checkout creation failed", status_code=response.status_code)
            raise PaymentProviderError(response.status_code, response.text, hint=hint)

        data = response.json()
        checkout_url = data.get("payment_link") or data.get("checkout_url") or data.get("url")

        logger.info(
            "Subscription checkout created",
            user_id=user_id,
            subscription_id=mask_identifier(data.get("subscription_id")),
        )

        return CheckoutSession(
            checkout_url=checkout_url,
            subscription_id=data.get("subscription_id"),
        )

    def verify_webhook_signature(self, payload: bytes, signature: Optional[str]) -> bool:
        """
        Verify the HMAC-SHA256 hex signature of a webhook body.

        Accepts the bare digest or "sha256=<digest>". When no secret is
        configured verification is skipped so local setups keep working.
        """
        if not self.webhook_secret:
            logger.warning("DODO_WEBHOOK_SECRET not set, skipping webhook verification")
            return True

        if not signature:
            return False

        expected = hmac.new(
            self.webhook_secret.encode("utf-8"),
            payload,
            hashlib.sha256,
        ).hexdigest()

        if signature.startswith("sha256="):
            signature = signature[len("sha256="):]

        return hmac.compare_digest(signature, expected)
