"""Subscription Schemas — typed decode of the sign-up form and the fail-closed check.

Invariants:
    - SubscriptionForm never coerces: every field is optional and strictly str
    - require_fields() rejects on ANY absent field (fails closed)
    - Presence is the only check: no format or length rules on name or email

Design Decisions:
    - Two-step decode (optional fields, then explicit requirement) so that absence
      is reported per field instead of surfacing as a generic decode failure
"""

from pydantic import BaseModel, ConfigDict

from newsletter.core.errors import FormValidationError

REQUIRED_FIELDS = ("name", "email")


class SubscriptionForm(BaseModel):
    """Raw form payload as decoded from application/x-www-form-urlencoded."""
    model_config = ConfigDict(extra="ignore", strict=True)

    name: str | None = None
    email: str | None = None


class NewSubscription(BaseModel):
    """Validated sign-up, ready to be persisted."""
    model_config = ConfigDict(frozen=True)

    name: str
    email: str


def require_fields(form: SubscriptionForm) -> NewSubscription:
    missing = [name for name in REQUIRED_FIELDS if getattr(form, name) is None]
    if missing:
        raise FormValidationError(
            f"Missing required field(s): {', '.join(missing)}", missing,
        )
    return NewSubscription(name=form.name, email=form.email)
