"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Design Decisions:
    - All models imported here so Base.metadata is complete for Alembic and tests
"""

from newsletter.models.subscription import Subscription  # noqa: F401
