"""Subscriptions — newsletter sign-up form handler.

Invariants:
    - Body is decoded as application/x-www-form-urlencoded; any other content type
      decodes to an empty form and is rejected
    - Missing name or email → 400 before any database interaction
    - One INSERT per accepted request → 201; persistence failure → 500 via the
      global NewsletterError handler
    - Responses carry no body
"""

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError

from newsletter.core.errors import FormValidationError
from newsletter.infrastructure.database import DatabaseSessionManager, get_db_manager
from newsletter.schemas.subscription import (
    NewSubscription, SubscriptionForm, require_fields,
)
from newsletter.services.insert_subscription import insert_subscription

router = APIRouter(tags=["subscriptions"])


async def parse_subscription_form(request: Request) -> NewSubscription:
    """Decode the form body and require every field."""
    form = await request.form()
    try:
        decoded = SubscriptionForm.model_validate(dict(form))
    except ValidationError as e:
        fields = [".".join(str(loc) for loc in err["loc"]) for err in e.errors()]
        raise FormValidationError("Form fields could not be decoded", fields) from e
    return require_fields(decoded)


@router.post("/subscriptions", status_code=status.HTTP_201_CREATED)
async def subscribe(
    new: NewSubscription = Depends(parse_subscription_form),
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> Response:
    """Persist a newsletter subscription."""
    await insert_subscription(db_manager, new)
    return Response(status_code=status.HTTP_201_CREATED)
