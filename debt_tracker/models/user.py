"""User ORM model linking an external identity to internal records."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from debt_tracker.models import Base, BaseModel


class User(Base, BaseModel):
    """
    Internal user record for a person authenticated by the identity provider.

    The identity provider owns credentials; this table only maps its subject
    identifier (external_id) to the integer id used as owner foreign key on
    debts, payments and receipts.
    """

    __tablename__ = "users"

    external_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Subject identifier issued by the identity provider",
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True, comment="Display name")
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (Index("idx_user_external_id", "external_id", unique=True),)

    # Relationships
    debts: Mapped[list["Debt"]] = relationship(  # noqa: F821
        "Debt",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    debt_payments: Mapped[list["DebtPayment"]] = relationship(  # noqa: F821
        "DebtPayment",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    receipts: Mapped[list["Receipt"]] = relationship(  # noqa: F821
        "Receipt",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, external_id={self.external_id!r}, name={self.name!r})>"


__all__ = ["User"]
