"""SQLAlchemy base model with common fields and model exports."""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

# Base class for all models
Base = declarative_base()


class BaseModel:
    """Base model with common timestamp fields."""

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )


# Import models to register them with Base (after Base is defined)
from debt_tracker.models.debt import Debt, DebtStatus, DebtType  # noqa: E402
from debt_tracker.models.debt_payment import DebtPayment  # noqa: E402
from debt_tracker.models.receipt import Receipt  # noqa: E402
from debt_tracker.models.user import User  # noqa: E402

__all__ = [
    "Base",
    "BaseModel",
    "User",
    "Debt",
    "DebtType",
    "DebtStatus",
    "DebtPayment",
    "Receipt",
]
