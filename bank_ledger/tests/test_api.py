import pytest
from fastapi.testclient import TestClient

from ..core.dependencies import get_ledger_service
from ..main import app
from ..services import LedgerService

@pytest.fixture
def client() -> TestClient:
    service = LedgerService()
    app.dependency_overrides[get_ledger_service] = lambda: service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def create(client: TestClient, name: str, initial_deposit: str = "0") -> int:
    response = client.post(
        "/accounts", json={"name": name, "initial_deposit": initial_deposit}
    )
    assert response.status_code == 201
    return response.json()["id"]


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_create_account_deposit_withdraw(client: TestClient) -> None:
    response = client.post("/accounts", json={"name": "Alice", "initial_deposit": "10.00"})
    assert response.status_code == 201
    account = response.json()
    assert account["id"] == 1
    assert account["balance"] == "10.00"

    deposit = client.post(f"/accounts/{account['id']}/deposit", json={"amount": "1000"})
    assert deposit.status_code == 200
    assert deposit.json()["balance"] == "1010.00"

    withdraw = client.post(f"/accounts/{account['id']}/withdraw", json={"amount": "400.50"})
    assert withdraw.status_code == 200
    assert withdraw.json()["balance"] == "609.50"


def test_create_account_negative_initial_deposit(client: TestClient) -> None:
    response = client.post("/accounts", json={"name": "John Doe", "initial_deposit": "-500"})
    assert response.status_code == 400
    assert response.json() == {
        "detail": "Initial deposit cannot be negative.",
        "kind": "negative_amount",
    }
    assert client.get("/accounts").json() == []


def test_withdraw_insufficient_funds(client: TestClient) -> None:
    account_id = create(client, "Bob")

    response = client.post(f"/accounts/{account_id}/withdraw", json={"amount": "1"})
    assert response.status_code == 409
    assert response.json()["kind"] == "insufficient_funds"


def test_negative_deposit_returns_400(client: TestClient) -> None:
    account_id = create(client, "Eve", "5")

    response = client.post(f"/accounts/{account_id}/deposit", json={"amount": "-1"})
    assert response.status_code == 400
    assert response.json()["kind"] == "negative_amount"
    assert client.get(f"/accounts/{account_id}").json()["balance"] == "5.00"


def test_unknown_account_returns_404(client: TestClient) -> None:
    response = client.get("/accounts/99")
    assert response.status_code == 404
    assert response.json() == {
        "detail": "Account not found with account number: 99",
        "kind": "account_not_found",
    }
    assert client.post("/accounts/99/deposit", json={"amount": "1"}).status_code == 404
    assert client.get("/accounts/99/summary").status_code == 404


def test_transfer_between_accounts(client: TestClient) -> None:
    create(client, "Alice", "1000")
    charlie = create(client, "Charlie")
    bob = create(client, "Bob", "500")

    transfer = client.post(
        "/transfers",
        json={"from_account_id": bob, "to_account_id": charlie, "amount": "200"},
    )
    assert transfer.status_code == 200
    payload = transfer.json()
    assert payload["source"]["balance"] == "300.00"
    assert payload["dest"]["balance"] == "200.00"

    balances = [account["balance"] for account in client.get("/accounts").json()]
    assert balances == ["1000.00", "200.00", "300.00"]


def test_transfer_insufficient_funds_leaves_balances(client: TestClient) -> None:
    alice = create(client, "Alice", "1000")
    charlie = create(client, "Charlie")

    response = client.post(
        "/transfers",
        json={"from_account_id": alice, "to_account_id": charlie, "amount": "1500"},
    )
    assert response.status_code == 409
    assert client.get(f"/accounts/{alice}").json()["balance"] == "1000.00"
    assert client.get(f"/accounts/{charlie}").json()["balance"] == "0.00"


def test_transfer_missing_account(client: TestClient) -> None:
    response = client.post(
        "/transfers",
        json={"from_account_id": 1, "to_account_id": 2, "amount": "100"},
    )
    assert response.status_code == 404


def test_summary(client: TestClient) -> None:
    account_id = create(client, "Charlie Chaplin")

    response = client.get(f"/accounts/{account_id}/summary")
    assert response.status_code == 200
    assert response.json() == {
        "summary": "Account Number: 1\nAccount Name: Charlie Chaplin\nBalance: $0.00"
    }


def test_blank_name_is_rejected(client: TestClient) -> None:
    response = client.post("/accounts", json={"name": "", "initial_deposit": "1"})
    assert response.status_code == 422


def test_negative_zero_initial_deposit_serializes_as_zero(client: TestClient) -> None:
    response = client.post("/accounts", json={"name": "Z", "initial_deposit": "-0"})
    assert response.status_code == 201
    assert response.json()["balance"] == "0.00"


def test_sub_cent_negative_deposit_returns_400(client: TestClient) -> None:
    account_id = create(client, "Eve", "10")

    response = client.post(f"/accounts/{account_id}/deposit", json={"amount": "-0.004"})
    assert response.status_code == 400
    assert response.json()["kind"] == "negative_amount"
    assert client.get(f"/accounts/{account_id}").json()["balance"] == "10.00"
