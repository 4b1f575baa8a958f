"""
Tests for the DebtService: titles, status and running totals.
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from debt_ledger.exceptions import NotFoundError
from debt_ledger.models.enums import DebtStatus
from debt_ledger.schemas.debt import DebtCreate
from debt_ledger.schemas.payment import PaymentCreate
from debt_ledger.services.debt_service import DebtService, evaluate_status
from debt_ledger.services.payment_service import PaymentService


ACTOR = "user-1"


class TestEvaluateStatus:

    def test_fully_paid(self):
        assert evaluate_status(
            Decimal("100"), Decimal("100"), None, date(2024, 1, 1)
        ) == DebtStatus.PAID

    def test_overpaid_is_paid_even_when_past_due(self):
        assert evaluate_status(
            Decimal("100"), Decimal("120"), date(2023, 1, 1), date(2024, 1, 1)
        ) == DebtStatus.PAID

    def test_past_due(self):
        assert evaluate_status(
            Decimal("100"), Decimal("10"), date(2023, 12, 31), date(2024, 1, 1)
        ) == DebtStatus.OVERDUE

    def test_due_today_is_ongoing(self):
        assert evaluate_status(
            Decimal("100"), Decimal("10"), date(2024, 1, 1), date(2024, 1, 1)
        ) == DebtStatus.ONGOING


class TestGetTitle:

    def test_returns_trimmed_title(self, db_session, debt):
        assert DebtService(db_session).get_title(debt.id) == "Kartu Kredit"

    def test_unknown_debt_is_none(self, db_session):
        assert DebtService(db_session).get_title(999) is None

    def test_untitled_debt_is_none(self, db_session):
        service = DebtService(db_session)
        debt = service.create_debt(
            DebtCreate(title="   ", amount=Decimal("10")), ACTOR
        )
        assert service.get_title(debt.id) is None


class TestGetDebt:

    def test_other_actor_not_found(self, db_session, debt):
        with pytest.raises(NotFoundError):
            DebtService(db_session).get_debt(debt.id, "user-2")


class TestRecalculateAggregates:

    def pay(self, db_session, debt, account, amount):
        return PaymentService(db_session).record_payment(debt.id, PaymentCreate(
            account_id=account.id, amount=Decimal(amount),
        ), ACTOR)

    def test_sums_live_payments(self, db_session, debt, account):
        self.pay(db_session, debt, account, "500000")
        self.pay(db_session, debt, account, "250000")

        updated = DebtService(db_session).recalculate_aggregates(debt.id, ACTOR)
        db_session.commit()

        assert updated.paid_total == Decimal("750000")
        assert updated.remaining == Decimal("1250000")
        assert updated.status == DebtStatus.ONGOING

    def test_revoked_payments_not_counted(self, db_session, debt, account):
        self.pay(db_session, debt, account, "500000")
        revoked = self.pay(db_session, debt, account, "1500000")
        PaymentService(db_session).revoke_payment(revoked.id, ACTOR)

        updated = DebtService(db_session).recalculate_aggregates(debt.id, ACTOR)

        assert updated.paid_total == Decimal("500000")
        assert updated.status == DebtStatus.ONGOING

    def test_paid_in_full(self, db_session, debt, account):
        self.pay(db_session, debt, account, "2000000")

        updated = DebtService(db_session).recalculate_aggregates(debt.id, ACTOR)

        assert updated.status == DebtStatus.PAID
        assert updated.remaining == Decimal("0")

    def test_overdue_debt(self, db_session, account):
        service = DebtService(db_session)
        debt = service.create_debt(DebtCreate(
            title="Pinjaman",
            amount=Decimal("100"),
            due_date=date.today() - timedelta(days=30),
        ), ACTOR)

        updated = service.recalculate_aggregates(debt.id, ACTOR)

        assert updated.status == DebtStatus.OVERDUE

    def test_unknown_debt_returns_none(self, db_session):
        assert DebtService(db_session).recalculate_aggregates(999, ACTOR) is None
