"""Receipt ORM model for scanned receipts, optionally linked to a debt."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from debt_tracker.models import Base, BaseModel


class Receipt(Base, BaseModel):
    """Uploaded receipt image with the fields extracted from it.

    Receipts are written by the receipt scanning flow; the debt tracker only
    reads the ones linked to a debt.
    """

    __tablename__ = "receipts"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    debt_id: Mapped[int | None] = mapped_column(
        ForeignKey("debts.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Debt the receipt documents, if any",
    )

    file_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    merchant: Mapped[str | None] = mapped_column(String(255), nullable=True)
    amount: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    receipt_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="receipts")  # noqa: F821
    debt: Mapped["Debt | None"] = relationship("Debt", back_populates="receipts")  # noqa: F821

    def __repr__(self) -> str:
        return f"<Receipt(id={self.id}, debt_id={self.debt_id}, amount={self.amount})>"


__all__ = ["Receipt"]
