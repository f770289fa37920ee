"""Debt ledger API endpoints.

Form fields are accepted as a loose JSON object of strings; parsing and
validation happen in DebtService. Mutations always answer 200 with a
MutationResponse, reads always answer 200 with a (possibly empty) list.
"""

import logging
import time
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Header
from sqlalchemy.orm import Session

from debt_tracker.schemas.debt import DebtPaymentResponse, DebtResponse, MutationResponse
from debt_tracker.services.auth_service import extract_identity
from debt_tracker.services.db import get_db
from debt_tracker.services.debt_service import DebtService
from debt_tracker.services.notification_service import ChangeNotifier
from debt_tracker.services.page_service import PageCache, PageService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/debts", tags=["debts"])

_notifier = ChangeNotifier()
_page_cache = PageCache(_notifier)


def get_notifier() -> ChangeNotifier:
    """Process-wide change notifier."""
    return _notifier


def get_page_cache() -> PageCache:
    """Process-wide page snapshot cache (subscribed to the notifier)."""
    return _page_cache


def caller_identity(
    authorization: Optional[str] = Header(None),
    x_user_identity: Optional[str] = Header(None),
) -> Optional[str]:
    """Identity supplied by the identity provider for this request."""
    return extract_identity(authorization, x_user_identity)


def get_debt_service(
    db: Session = Depends(get_db),
    identity: Optional[str] = Depends(caller_identity),
    notifier: ChangeNotifier = Depends(get_notifier),
) -> DebtService:
    """Build a request-scoped DebtService."""
    return DebtService(db, lambda: identity, notifier)


def _log_debug(endpoint: str, start_time: float, **kwargs: Any) -> None:
    """Log an endpoint call with timing at DEBUG level."""
    duration_ms = int((time.time() - start_time) * 1000)
    extra = " ".join(f"{k}={v}" for k, v in kwargs.items())
    logger.debug("debts.%s: %s duration_ms=%d", endpoint, extra, duration_ms)


@router.get("", response_model=list[DebtResponse])
def list_debts(service: DebtService = Depends(get_debt_service)) -> list[Any]:
    """List the caller's debts, newest first."""
    start_time = time.time()
    debts = service.get_debts()
    _log_debug("list", start_time, count=len(debts))
    return debts


@router.post("", response_model=MutationResponse)
def create_debt(
    form: dict[str, Any] = Body(...),
    service: DebtService = Depends(get_debt_service),
) -> MutationResponse:
    """Create a debt from form fields."""
    start_time = time.time()
    result = service.create_debt(form)
    _log_debug("create", start_time, success=result.success)
    return MutationResponse.from_result(result)


@router.post("/payments", response_model=MutationResponse)
def create_debt_payment(
    form: dict[str, Any] = Body(...),
    service: DebtService = Depends(get_debt_service),
) -> MutationResponse:
    """Record a payment; the response carries the payment and the updated debt."""
    start_time = time.time()
    result = service.create_debt_payment(form)
    _log_debug("create_payment", start_time, success=result.success)
    return MutationResponse.from_result(result)


@router.get("/page/debt-tracker", response_model=list[dict[str, Any]])
def debt_tracker_page(
    identity: Optional[str] = Depends(caller_identity),
    service: DebtService = Depends(get_debt_service),
    cache: PageCache = Depends(get_page_cache),
) -> list[dict[str, Any]]:
    """Initial debt snapshot for the tracker page."""
    return PageService(service, cache).load_debt_tracker(identity)


@router.put("/{debt_id}", response_model=MutationResponse)
def update_debt(
    debt_id: str,
    form: dict[str, Any] = Body(...),
    service: DebtService = Depends(get_debt_service),
) -> MutationResponse:
    """Update one of the caller's debts."""
    start_time = time.time()
    result = service.update_debt(debt_id, form)
    _log_debug("update", start_time, debt_id=debt_id, success=result.success)
    return MutationResponse.from_result(result)


@router.delete("/{debt_id}", response_model=MutationResponse)
def delete_debt(
    debt_id: str,
    service: DebtService = Depends(get_debt_service),
) -> MutationResponse:
    """Delete one of the caller's debts."""
    start_time = time.time()
    result = service.delete_debt(debt_id)
    _log_debug("delete", start_time, debt_id=debt_id, success=result.success)
    return MutationResponse.from_result(result)


@router.get("/{debt_id}/payments", response_model=list[DebtPaymentResponse])
def list_debt_payments(
    debt_id: str,
    service: DebtService = Depends(get_debt_service),
) -> list[Any]:
    """List payments for one of the caller's debts."""
    return service.get_debt_payments(debt_id)


__all__ = ["router", "get_notifier", "get_page_cache", "caller_identity", "get_debt_service"]
