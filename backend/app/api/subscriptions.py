"""
Subscription and payment API endpoints.
"""
import json
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.deps import get_payment_service, get_subscription_service
from app.core.auth import get_current_user
from app.core.logging import get_logger, mask_identifier
from app.services.external import (
    AuthenticatedUser,
    PaymentConfigError,
    PaymentProviderError,
    PaymentService,
)
from app.services.subscriptions import SubscriptionService

logger = get_logger(__name__)
router = APIRouter()

SIGNATURE_HEADER = "x-dodo-signature"

ACTIVATING_EVENTS = ("subscription.active", "subscription.trialing")
ENDING_EVENTS = ("subscription.cancelled", "subscription.expired")


@router.post("/checkout/create-session")
async def create_checkout_session(
    user: AuthenticatedUser = Depends(get_current_user),
    payments: PaymentService = Depends(get_payment_service),
) -> dict[str, Any]:
    """
    Create a hosted checkout session for the authenticated user.
    """
    try:
        session = await payments.create_checkout_session(
            user_id=user.id,
            user_email=user.email or "",
            user_name=user.full_name,
        )
    except PaymentConfigError as e:
        logger.error("Payment config error", error=str(e))
        raise HTTPException(
            status_code=500,
            detail={"error": "Payment configuration missing", "hint": e.hint},
        )
    except PaymentProviderError as e:
        raise HTTPException(
            status_code=e.status,
            detail={"error": "Dodo API error", "details": e.details, "hint": e.hint},
        )

    return session.to_dict()


@router.get("/subscription/status")
async def get_subscription_status(
    user: AuthenticatedUser = Depends(get_current_user),
    service: SubscriptionService = Depends(get_subscription_service),
) -> dict[str, Any]:
    """
    Subscription status for the authenticated user.
    """
    return await service.get_status(user.id)


@router.post("/webhooks/dodo")
async def handle_webhook(
    request: Request,
    payments: PaymentService = Depends(get_payment_service),
    service: SubscriptionService = Depends(get_subscription_service),
) -> dict[str, Any]:
    """
    Apply payment provider subscription events.
    """
    payload = await request.body()

    if not payments.verify_webhook_signature(payload, request.headers.get(SIGNATURE_HEADER)):
        logger.error("Invalid webhook signature")
        raise HTTPException(status_code=401, detail="Invalid signature")

    try:
        event = json.loads(payload)
    except ValueError:
        event = None
    if not isinstance(event, dict):
        raise HTTPException(status_code=400, detail="Invalid JSON payload")

    event_type = event.get("type")
    data = event.get("data") or {}
    logger.info("Webhook received", event_type=event_type)

    if event_type in ACTIVATING_EVENTS:
        user_id = (data.get("metadata") or {}).get("user_id")
        if user_id:
            await service.activate_subscription(
                user_id=user_id,
                dodo_subscription_id=data.get("subscription_id"),
                is_trialing=event_type == "subscription.trialing",
                trial_ends_at=data.get("trial_ends_at"),
            )
        else:
            logger.warning("Activation webhook without user_id metadata", event_type=event_type)

    elif event_type in ENDING_EVENTS:
        subscription_id = data.get("subscription_id")
        if subscription_id:
            await service.cancel_subscription(subscription_id)
            logger.info("Subscription ended", subscription_id=mask_identifier(subscription_id))

    else:
        logger.info("Unhandled webhook event type", event_type=event_type)

    return {"received": True}
