"""Pytest configuration and shared fixtures."""

import os

# Set test settings BEFORE any imports from debt_tracker
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.setdefault("LOG_FILE", "logs/test.log")

import pytest  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from debt_tracker.models import Base  # noqa: E402
from debt_tracker.services.db import build_engine  # noqa: E402
from debt_tracker.services.debt_service import DebtService  # noqa: E402
from debt_tracker.services.notification_service import ChangeNotifier  # noqa: E402
from debt_tracker.services.user_service import UserService  # noqa: E402

TRACKER_PATH = "/main/debt-tracker"


@pytest.fixture
def engine():
    """In-memory SQLite engine with all tables created."""
    engine = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create test database session."""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def alice(db_session):
    """Registered user owning the debts under test."""
    return UserService(db_session).register_user("user_alice", name="Alice", email="alice@example.com")


@pytest.fixture
def bob(db_session):
    """Second registered user, used for ownership isolation checks."""
    return UserService(db_session).register_user("user_bob", name="Bob")


@pytest.fixture
def notifier():
    """Change notifier recording every revalidated path."""
    notifier = ChangeNotifier()
    notifier.revalidated = []
    notifier.subscribe(notifier.revalidated.append)
    return notifier


@pytest.fixture
def service_for(db_session, notifier):
    """Factory building a DebtService acting as the given identity."""

    def build(identity):
        return DebtService(db_session, lambda: identity, notifier, view_path=TRACKER_PATH)

    return build


@pytest.fixture
def alice_service(service_for, alice):
    return service_for(alice.external_id)


@pytest.fixture
def bob_service(service_for, bob):
    return service_for(bob.external_id)


@pytest.fixture
def debt_form():
    """Builder for debt form fields as the tracker submits them (all strings)."""

    def build(**overrides):
        form = {
            "name": "Card A",
            "type": "CREDIT_CARD",
            "totalAmount": "10000",
            "currentBalance": "10000",
        }
        form.update(overrides)
        return form

    return build


@pytest.fixture
def payment_form():
    """Builder for payment form fields."""

    def build(debt_id, amount, payment_date="2025-11-15", **overrides):
        form = {"debtId": str(debt_id), "amount": str(amount), "paymentDate": payment_date}
        form.update(overrides)
        return form

    return build
