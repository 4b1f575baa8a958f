"""
Tests for payment API endpoints.

These test the HTTP layer: status codes, response format,
and error mapping. Mirroring rules are tested in
test_payment_service.py.
"""

from datetime import date, datetime
from decimal import Decimal

from debt_ledger.models.debt_payment import DebtPayment


HEADERS = {"X-User-Id": "user-1"}


def create_account(client, name="BCA"):
    response = client.post("/accounts", json={"name": name}, headers=HEADERS)
    return response.json()["id"]


def create_debt(client, title="Kartu Kredit", amount=2000000):
    response = client.post("/debts", json={
        "title": title,
        "party_name": "Bank Mandiri",
        "amount": amount,
    }, headers=HEADERS)
    return response.json()["id"]


def record_payment(client, debt_id, account_id, amount=500000, **extra):
    return client.post(f"/debts/{debt_id}/payments", json={
        "account_id": account_id,
        "amount": amount,
        "paid_at": "2024-03-05",
        **extra,
    }, headers=HEADERS)


class TestRecordPayment:

    def test_returns_201_with_related_entry(self, client):
        debt_id = create_debt(client)
        account_id = create_account(client)

        response = record_payment(client, debt_id, account_id)

        assert response.status_code == 201
        data = response.json()
        assert data["related_entry_id"] is not None
        assert data["paid_at"] == "2024-03-05"
        assert data["revoked_at"] is None

    def test_entry_is_readable_through_ledger(self, client):
        debt_id = create_debt(client)
        account_id = create_account(client)
        payment = record_payment(client, debt_id, account_id).json()

        entry = client.get(
            f"/ledger/entries/{payment['related_entry_id']}", headers=HEADERS
        ).json()

        assert entry["title"] == "Pay debt: Kartu Kredit"
        assert entry["date"] == "2024-03-05"
        assert entry["revision"] == 1
        assert entry["deleted_at"] is None

    def test_updates_debt_totals(self, client):
        debt_id = create_debt(client)
        account_id = create_account(client)
        record_payment(client, debt_id, account_id, amount=500000)

        debt = client.get(f"/debts/{debt_id}", headers=HEADERS).json()

        assert float(debt["paid_total"]) == 500000
        assert float(debt["remaining"]) == 1500000
        assert debt["status"] == "ongoing"

    def test_missing_account_returns_422(self, client):
        debt_id = create_debt(client)

        response = client.post(f"/debts/{debt_id}/payments", json={
            "amount": 500000,
        }, headers=HEADERS)

        assert response.status_code == 422
        entries = client.get("/ledger/entries", headers=HEADERS).json()
        assert entries == []

    def test_zero_amount_returns_422(self, client):
        debt_id = create_debt(client)
        account_id = create_account(client)

        response = record_payment(client, debt_id, account_id, amount=0)

        assert response.status_code == 422

    def test_amount_finer_than_storage_returns_422(self, client):
        debt_id = create_debt(client)
        account_id = create_account(client)

        response = record_payment(client, debt_id, account_id, amount="0.00001")

        assert response.status_code == 422
        entries = client.get("/ledger/entries", headers=HEADERS).json()
        assert entries == []

    def test_unknown_account_returns_409(self, client):
        debt_id = create_debt(client)

        response = record_payment(client, debt_id, 999)

        assert response.status_code == 409

    def test_missing_actor_returns_401(self, client):
        response = client.post("/debts/1/payments", json={
            "account_id": 1, "amount": 1,
        })
        assert response.status_code == 401


class TestAmendPayment:

    def test_amend_updates_entry(self, client):
        debt_id = create_debt(client)
        account_id = create_account(client)
        payment = record_payment(client, debt_id, account_id).json()

        response = client.patch(
            f"/payments/{payment['id']}",
            json={"amount": 600000},
            headers=HEADERS,
        )

        assert response.status_code == 200
        entry = client.get(
            f"/ledger/entries/{payment['related_entry_id']}", headers=HEADERS
        ).json()
        assert float(entry["amount"]) == 600000
        assert entry["revision"] == 2

    def test_null_account_returns_422(self, client):
        debt_id = create_debt(client)
        account_id = create_account(client)
        payment = record_payment(client, debt_id, account_id).json()

        response = client.patch(
            f"/payments/{payment['id']}",
            json={"account_id": None},
            headers=HEADERS,
        )

        assert response.status_code == 422

    def test_unknown_payment_returns_404(self, client):
        response = client.patch(
            "/payments/999", json={"amount": 1}, headers=HEADERS
        )
        assert response.status_code == 404

    def test_other_actor_gets_404(self, client):
        debt_id = create_debt(client)
        account_id = create_account(client)
        payment = record_payment(client, debt_id, account_id).json()

        response = client.patch(
            f"/payments/{payment['id']}",
            json={"amount": 1},
            headers={"X-User-Id": "user-2"},
        )
        assert response.status_code == 404

    def test_missing_mirror_returns_generic_500(self, client, db_session):
        debt_id = create_debt(client)
        account_id = create_account(client)
        payment = DebtPayment(
            debt_id=debt_id,
            user_id="user-1",
            account_id=account_id,
            amount=Decimal("100000"),
            paid_at=date(2024, 3, 1),
            date=datetime(2024, 2, 29, 17, 0),
            related_entry_id=None,
        )
        db_session.add(payment)
        db_session.commit()

        response = client.patch(
            f"/payments/{payment.id}", json={"amount": 5}, headers=HEADERS
        )

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"


class TestRevokePayment:

    def test_revoke_returns_204_and_tombstones_entry(self, client):
        debt_id = create_debt(client)
        account_id = create_account(client)
        payment = record_payment(client, debt_id, account_id).json()

        response = client.delete(f"/payments/{payment['id']}", headers=HEADERS)

        assert response.status_code == 204
        entry = client.get(
            f"/ledger/entries/{payment['related_entry_id']}", headers=HEADERS
        ).json()
        assert entry["deleted_at"] is not None
        assert entry["revision"] == 2

    def test_revoke_resets_debt_totals(self, client):
        debt_id = create_debt(client)
        account_id = create_account(client)
        payment = record_payment(client, debt_id, account_id).json()

        client.delete(f"/payments/{payment['id']}", headers=HEADERS)

        debt = client.get(f"/debts/{debt_id}", headers=HEADERS).json()
        assert float(debt["paid_total"]) == 0

    def test_revoked_payment_hidden_from_list(self, client):
        debt_id = create_debt(client)
        account_id = create_account(client)
        payment = record_payment(client, debt_id, account_id).json()
        client.delete(f"/payments/{payment['id']}", headers=HEADERS)

        live = client.get(f"/debts/{debt_id}/payments", headers=HEADERS).json()
        everything = client.get(
            f"/debts/{debt_id}/payments",
            params={"include_revoked": True},
            headers=HEADERS,
        ).json()

        assert live == []
        assert [p["id"] for p in everything] == [payment["id"]]

    def test_unknown_payment_returns_404(self, client):
        response = client.delete("/payments/999", headers=HEADERS)
        assert response.status_code == 404
