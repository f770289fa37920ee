"""Debt ORM model for loans, credit cards and EMIs tracked by a user."""

from datetime import date
from decimal import Decimal
from enum import Enum

from sqlalchemy import Date, ForeignKey, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from debt_tracker.models import Base, BaseModel


class DebtType(str, Enum):
    """Kinds of debt that can be tracked."""

    CREDIT_CARD = "CREDIT_CARD"
    PERSONAL_LOAN = "PERSONAL_LOAN"
    HOME_LOAN = "HOME_LOAN"
    CAR_LOAN = "CAR_LOAN"
    EDUCATION_LOAN = "EDUCATION_LOAN"
    EMI = "EMI"
    OTHER = "OTHER"


class DebtStatus(str, Enum):
    """Debt lifecycle status."""

    ACTIVE = "ACTIVE"
    """Default on creation"""

    PAID_OFF = "PAID_OFF"
    """Set automatically when a payment brings the balance to zero"""

    OVERDUE = "OVERDUE"
    PAUSED = "PAUSED"


class Debt(Base, BaseModel):
    """
    A financial obligation owned by one user.

    current_balance is authoritative: payments decrement it once at
    creation time and are never replayed to recompute it.
    """

    __tablename__ = "debts"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owner (immutable after creation)",
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    debt_type: Mapped[DebtType] = mapped_column(
        String(32),
        nullable=False,
        comment="CREDIT_CARD, PERSONAL_LOAN, HOME_LOAN, CAR_LOAN, EDUCATION_LOAN, EMI, OTHER",
    )

    total_amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
        comment="Original principal",
    )
    current_balance: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
        comment="Remaining balance, never negative",
    )
    interest_rate: Mapped[Decimal | None] = mapped_column(
        Numeric(6, 2),
        nullable=True,
        comment="Annual interest rate in percent",
    )
    min_payment: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    status: Mapped[DebtStatus] = mapped_column(
        String(16),
        nullable=False,
        default=DebtStatus.ACTIVE,
        comment="ACTIVE, PAID_OFF, OVERDUE, PAUSED",
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="debts")  # noqa: F821
    payments: Mapped[list["DebtPayment"]] = relationship(  # noqa: F821
        "DebtPayment",
        back_populates="debt",
        cascade="all, delete-orphan",
        order_by="[DebtPayment.payment_date.desc(), DebtPayment.id.desc()]",
    )
    receipts: Mapped[list["Receipt"]] = relationship(  # noqa: F821
        "Receipt",
        back_populates="debt",
    )

    __table_args__ = (
        Index("idx_debt_user_created", "user_id", "created_at"),
        Index("idx_debt_status", "status"),
    )

    def __repr__(self) -> str:
        return (
            f"<Debt(id={self.id}, user_id={self.user_id}, name={self.name!r}, "
            f"type={self.debt_type}, balance={self.current_balance}/{self.total_amount}, "
            f"status={self.status})>"
        )


__all__ = ["Debt", "DebtType", "DebtStatus"]
