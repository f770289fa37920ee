"""DebtPayment ORM model for payments recorded against a debt."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Index, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from debt_tracker.models import Base, BaseModel


class DebtPayment(Base, BaseModel):
    """Model representing one payment against a debt.

    Payments are append-only: the debt balance is decremented when the
    payment is created and payments are never edited afterwards.
    """

    __tablename__ = "debt_payments"

    # Foreign keys
    debt_id: Mapped[int] = mapped_column(
        ForeignKey("debts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Debt this payment reduces",
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owner who made the payment",
    )

    # Payment details
    amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
        comment="Payment amount",
    )
    payment_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        index=True,
        comment="Date of payment",
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    debt: Mapped["Debt"] = relationship("Debt", back_populates="payments")  # noqa: F821
    user: Mapped["User"] = relationship("User", back_populates="debt_payments")  # noqa: F821

    __table_args__ = (
        Index("idx_debt_payment_debt_date", "debt_id", "payment_date"),
        Index("idx_debt_payment_user_date", "user_id", "payment_date"),
    )

    def __repr__(self) -> str:
        return (
            f"<DebtPayment(id={self.id}, debt_id={self.debt_id}, user_id={self.user_id}, "
            f"amount={self.amount}, payment_date={self.payment_date})>"
        )


__all__ = ["DebtPayment"]
