"""Debt ledger service: debts, debt payments and the balance side effect.

Provides methods for:
- Creating, listing, updating and deleting a caller's debts
- Recording a payment and decrementing the debt balance in one transaction
- Listing payments of a debt

Every operation resolves the caller first. Write operations return a
MutationResult and never raise ledger errors; read operations are fail-soft
and return an empty list on any error.
"""

import logging
from decimal import Decimal
from typing import Any, Callable, List, Mapping, Optional

from sqlalchemy import Numeric, case, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from debt_tracker.config import get_settings
from debt_tracker.models import Debt, DebtPayment, DebtStatus, DebtType, User
from debt_tracker.services.auth_service import IdentityResolver, resolve_caller
from debt_tracker.services.errors import AppError, MutationResult, NotFoundError, StoreError
from debt_tracker.services.notification_service import ChangeNotifier
from debt_tracker.services.parsers import (
    parse_date_field,
    parse_decimal_field,
    parse_enum_field,
    parse_id,
    parse_id_field,
    parse_text_field,
)

logger = logging.getLogger(__name__)

Form = Mapping[str, Any]

ZERO = Decimal("0.00")

# interest_rate is Numeric(6, 2)
INTEREST_RATE_LIMIT = Decimal("1e4")


def parse_debt_form(form: Form, with_status: bool = False) -> dict[str, Any]:
    """Parse the debt form into column values.

    Args:
        form: Submitted fields (name, type, totalAmount, currentBalance,
            interestRate, minPayment, dueDate, description, status)
        with_status: Include status (update form); defaults to ACTIVE

    Returns:
        Dict of Debt column values

    Raises:
        ValidationError: On missing required fields or malformed values
    """
    values = {
        "name": parse_text_field(form, "name", required=True),
        "debt_type": parse_enum_field(form, "type", DebtType).value,
        "total_amount": parse_decimal_field(form, "totalAmount", strictly_positive=True),
        "current_balance": parse_decimal_field(form, "currentBalance"),
        "interest_rate": parse_decimal_field(
            form, "interestRate", required=False, limit=INTEREST_RATE_LIMIT
        ),
        "min_payment": parse_decimal_field(form, "minPayment", required=False),
        "due_date": parse_date_field(form, "dueDate", required=False),
        "description": parse_text_field(form, "description"),
    }
    if with_status:
        values["status"] = parse_enum_field(
            form, "status", DebtStatus, default=DebtStatus.ACTIVE
        ).value
    return values


def parse_payment_form(form: Form) -> dict[str, Any]:
    """Parse the payment form (debtId, amount, paymentDate, description)."""
    return {
        "debt_id": parse_id_field(form, "debtId"),
        "amount": parse_decimal_field(form, "amount", strictly_positive=True),
        "payment_date": parse_date_field(form, "paymentDate"),
        "description": parse_text_field(form, "description"),
    }


class DebtService:
    """Authenticated CRUD over a caller's debts and debt payments."""

    def __init__(
        self,
        db: Session,
        resolve_caller_identity: IdentityResolver,
        notifier: Optional[ChangeNotifier] = None,
        view_path: Optional[str] = None,
    ):
        """Initialize debt service.

        Args:
            db: SQLAlchemy database session
            resolve_caller_identity: Returns the caller's external identity or None
            notifier: Receives the tracker view path after each mutation
            view_path: Path to invalidate (default: DEBT_TRACKER_PATH setting)
        """
        self.db = db
        self.resolve_caller_identity = resolve_caller_identity
        self.notifier = notifier
        self.view_path = view_path or get_settings().debt_tracker_path

    def _caller(self) -> User:
        return resolve_caller(self.db, self.resolve_caller_identity)

    def _notify(self) -> None:
        if self.notifier is not None:
            self.notifier.revalidate_path(self.view_path)

    def _mutate(self, action: str, operation: Callable[[], MutationResult]) -> MutationResult:
        """Run a write operation, converting ledger and store errors into a failed result."""
        try:
            result = operation()
        except AppError as e:
            self.db.rollback()
            logger.error("Error %s: %s", action, e.message)
            return MutationResult.failed(e)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Error %s: %s", action, e, exc_info=True)
            return MutationResult.failed(StoreError(f"Database error while {action}"))

        self._notify()
        return result

    def _owned_debt(self, user: User, debt_id: int, lock: bool = False) -> Debt:
        stmt = select(Debt).where(Debt.id == debt_id, Debt.user_id == user.id)
        if lock:
            stmt = stmt.with_for_update()
        debt = self.db.execute(stmt).scalar_one_or_none()
        if debt is None:
            raise NotFoundError("Debt not found")
        return debt

    def create_debt(self, form: Form) -> MutationResult:
        """Create a debt owned by the caller.

        Args:
            form: name, type, totalAmount, currentBalance and optional
                interestRate, minPayment, dueDate, description

        Returns:
            MutationResult with the new debt (status ACTIVE)
        """

        def operation() -> MutationResult:
            user = self._caller()
            values = parse_debt_form(form)
            debt = Debt(user_id=user.id, status=DebtStatus.ACTIVE.value, **values)
            self.db.add(debt)
            self.db.commit()
            self.db.refresh(debt)
            logger.info(
                "Created debt id=%s for user_id=%s (%s, %s)",
                debt.id,
                user.id,
                debt.debt_type,
                debt.total_amount,
            )
            return MutationResult(success=True, debt=debt)

        return self._mutate("creating debt", operation)

    def get_debts(self) -> List[Debt]:
        """List the caller's debts, newest first, with payments and receipts.

        Returns:
            List of Debt objects; empty on any error
        """
        try:
            user = self._caller()
            return list(
                self.db.execute(
                    select(Debt)
                    .where(Debt.user_id == user.id)
                    .options(selectinload(Debt.payments), selectinload(Debt.receipts))
                    .order_by(Debt.created_at.desc(), Debt.id.desc())
                )
                .scalars()
                .all()
            )
        except (AppError, SQLAlchemyError) as e:
            logger.error("Error fetching debts: %s", e)
            return []

    def update_debt(self, debt_id: Any, form: Form) -> MutationResult:
        """Replace the editable fields of one of the caller's debts.

        Status may be set explicitly and defaults to ACTIVE when omitted.

        Returns:
            MutationResult with the updated debt; NotFound when the id does not
            match a debt owned by the caller
        """

        def operation() -> MutationResult:
            user = self._caller()
            target_id = parse_id(debt_id, "debtId")
            values = parse_debt_form(form, with_status=True)
            result = self.db.execute(
                update(Debt)
                .where(Debt.id == target_id, Debt.user_id == user.id)
                .values(**values)
                .execution_options(synchronize_session="fetch")
            )
            if result.rowcount == 0:
                raise NotFoundError("Debt not found")
            self.db.commit()
            debt = self._owned_debt(user, target_id)
            self.db.refresh(debt)
            logger.info("Updated debt id=%s for user_id=%s", target_id, user.id)
            return MutationResult(success=True, debt=debt)

        return self._mutate("updating debt", operation)

    def delete_debt(self, debt_id: Any) -> MutationResult:
        """Delete one of the caller's debts along with its payments."""

        def operation() -> MutationResult:
            user = self._caller()
            target_id = parse_id(debt_id, "debtId")
            debt = self._owned_debt(user, target_id)
            self.db.delete(debt)
            self.db.commit()
            logger.info("Deleted debt id=%s for user_id=%s", target_id, user.id)
            return MutationResult(success=True)

        return self._mutate("deleting debt", operation)

    def create_debt_payment(self, form: Form) -> MutationResult:
        """Record a payment and decrement the debt balance atomically.

        The payment insert and the balance update commit together. The new
        balance is computed by the UPDATE statement from the row's current
        value, clamped at zero, and the status becomes PAID_OFF when it
        reaches zero; concurrent payments therefore never overwrite each
        other's decrement.

        Args:
            form: debtId, amount (> 0), paymentDate and optional description

        Returns:
            MutationResult with the payment and the updated debt
        """

        def operation() -> MutationResult:
            user = self._caller()
            values = parse_payment_form(form)
            amount = values["amount"]

            debt = self._owned_debt(user, values["debt_id"], lock=True)

            payment = DebtPayment(user_id=user.id, **values)
            self.db.add(payment)
            self.db.flush()

            # SQLite subtracts in floating point, round back to cents
            remaining = func.round(Debt.current_balance - amount, 2, type_=Numeric(12, 2))
            self.db.execute(
                update(Debt)
                .where(Debt.id == debt.id, Debt.user_id == user.id)
                .values(
                    current_balance=case((remaining <= 0, ZERO), else_=remaining),
                    status=case((remaining <= 0, DebtStatus.PAID_OFF.value), else_=Debt.status),
                )
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
            self.db.refresh(debt)
            self.db.refresh(payment)
            logger.info(
                "Recorded payment id=%s of %s on debt id=%s: balance=%s status=%s",
                payment.id,
                amount,
                debt.id,
                debt.current_balance,
                debt.status,
            )
            return MutationResult(success=True, payment=payment, debt=debt)

        return self._mutate("creating debt payment", operation)

    def get_debt_payments(self, debt_id: Any) -> List[DebtPayment]:
        """List the caller's payments for a debt, newest payment date first.

        Returns:
            List of DebtPayment objects; empty on any error
        """
        try:
            user = self._caller()
            target_id = parse_id(debt_id, "debtId")
            return list(
                self.db.execute(
                    select(DebtPayment)
                    .where(DebtPayment.debt_id == target_id, DebtPayment.user_id == user.id)
                    .order_by(DebtPayment.payment_date.desc(), DebtPayment.id.desc())
                )
                .scalars()
                .all()
            )
        except (AppError, SQLAlchemyError) as e:
            logger.error("Error fetching debt payments: %s", e)
            return []


__all__ = ["DebtService", "parse_debt_form", "parse_payment_form"]
