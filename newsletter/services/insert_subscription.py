"""Insert Subscription — persists one validated sign-up as a new row.

Invariants:
    - Exactly one INSERT per call; id and subscribed_at generated here, never by the client
    - Failures surface as DatabaseError (mapped by DatabaseSessionManager), never retried
"""

import logging
import uuid
from datetime import datetime, timezone

from newsletter.infrastructure.database import DatabaseSessionManager
from newsletter.models.subscription import Subscription
from newsletter.schemas.subscription import NewSubscription

logger = logging.getLogger(__name__)


async def insert_subscription(
    db_manager: DatabaseSessionManager, new: NewSubscription,
) -> Subscription:
    subscription = Subscription(
        id=uuid.uuid4(),
        name=new.name,
        email=new.email,
        subscribed_at=datetime.now(timezone.utc),
    )
    async with db_manager.session() as db:
        db.add(subscription)
        await db.commit()
    logger.info(
        "Saved new subscriber",
        extra={"subscription_id": str(subscription.id)},
    )
    return subscription
