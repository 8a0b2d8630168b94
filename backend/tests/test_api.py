from ledger.services.periods import resolve_month
from ledger.services import LedgerService


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_register_duplicate_is_conflict(client, auth_headers) -> None:
    response = client.post(
        "/api/users/register",
        json={"username": "carol", "name": "Carol", "email": "new@example.com", "password": "pw"},
    )
    assert response.status_code == 409
    assert response.json()["detail"] == "username already registered"


def test_login(client, auth_headers) -> None:
    ok = client.post("/api/users/login", json={"username": "carol", "password": "pw"})
    assert ok.status_code == 200
    assert ok.json()["id"] == int(auth_headers["X-User-Id"])

    bad = client.post("/api/users/login", json={"username": "carol", "password": "nope"})
    assert bad.status_code == 401


def test_missing_identity_is_unauthorized(client) -> None:
    assert client.get("/api/stats/home").status_code == 401


def test_unknown_user_id_is_unauthorized(client, auth_headers) -> None:
    response = client.post(
        "/api/transactions/",
        json={"transaction_type": "expense", "amount": "5", "category": 1},
        headers={"X-User-Id": "9999"},
    )
    assert response.status_code == 401
    assert client.put("/api/budgets/", json={"amount": 5}, headers={"X-User-Id": "9999"}).status_code == 401


def test_oversized_amounts_are_coerced_not_rejected(client, auth_headers) -> None:
    budget = client.put("/api/budgets/", json={"category": 1, "amount": "1e30"}, headers=auth_headers)
    assert budget.status_code == 200
    assert budget.json()["amount_cents"] == 0

    tx = client.post(
        "/api/transactions/",
        json={"transaction_type": "income", "amount": "1e20"},
        headers=auth_headers,
    )
    assert tx.status_code == 201
    assert tx.json()["amount_cents"] == 0


def test_categories(client) -> None:
    categories = client.get("/api/categories/").json()
    assert {"id": 2, "name": "Food"} in categories


def test_record_and_list_transactions(client, auth_headers) -> None:
    current = resolve_month(0)
    day = f"{current.year:04d}-{current.month:02d}-01"

    created = client.post(
        "/api/transactions/",
        json={"transaction_type": "expense", "amount": "42.10", "category": "3", "date": day, "description": "fuel"},
        headers=auth_headers,
    )
    assert created.status_code == 201
    body = created.json()
    assert body["amount_cents"] == 4210
    assert body["amount"] == 42.10
    assert body["category_id"] == 3

    listed = client.get("/api/transactions/", params={"type": "expense"}, headers=auth_headers)
    assert [t["id"] for t in listed.json()] == [body["id"]]

    income = client.get("/api/transactions/", params={"type": "income"}, headers=auth_headers)
    assert income.json() == []


def test_invalid_date_is_not_rejected(client, auth_headers) -> None:
    response = client.post(
        "/api/transactions/",
        json={"transaction_type": "income", "amount": 100, "date": "2025-13-40"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    assert response.json()["category_id"] is None


def test_budget_upsert_and_home_stats(client, auth_headers) -> None:
    current = resolve_month(0)
    day = f"{current.year:04d}-{current.month:02d}-01"

    for amount in ("500", "700"):
        response = client.put(
            "/api/budgets/",
            json={"category": 2, "amount": amount, "description": "food"},
            headers=auth_headers,
        )
        assert response.status_code == 200

    budgets = client.get("/api/budgets/", headers=auth_headers).json()
    assert budgets["period_key"] == current.period_key
    assert budgets["total_cents"] == 70000
    assert len(budgets["items"]) == 1
    assert budgets["items"][0]["category_name"] == "Food"

    client.post(
        "/api/transactions/",
        json={"transaction_type": "expense", "amount": "800", "category": 2, "date": day},
        headers=auth_headers,
    )

    home = client.get("/api/stats/home", headers=auth_headers).json()
    assert home["monthly_budget"] == 70000
    assert home["monthly_expenses"] == 80000
    assert home["monthly_remaining"] == -10000
    assert home["top_categories"] == [{"category_id": 2, "category_name": "Food", "total_cents": 80000}]


def test_budget_rejects_malformed_period_key(client, auth_headers) -> None:
    response = client.put(
        "/api/budgets/",
        json={"period_key": "2025-01", "category": 1, "amount": 5},
        headers=auth_headers,
    )
    assert response.status_code == 422
    assert client.get("/api/budgets/", params={"period_key": "13x"}, headers=auth_headers).status_code == 400


def test_pages_and_charts(client, auth_headers) -> None:
    previous = resolve_month(1)
    day = f"{previous.year:04d}-{previous.month:02d}-15"
    client.post(
        "/api/transactions/",
        json={"transaction_type": "income", "amount": "1200", "date": day},
        headers=auth_headers,
    )
    client.post(
        "/api/transactions/",
        json={"transaction_type": "expense", "amount": "200", "category": 99, "date": day},
        headers=auth_headers,
    )

    income = client.get("/api/stats/income", params={"page": 1}, headers=auth_headers).json()
    assert income["period_label"] == previous.label
    assert income["this_month_income"] == 120000
    assert income["current_budget"] == 100000

    expenses = client.get("/api/stats/expenses", params={"page": 1}, headers=auth_headers).json()
    assert expenses["this_month_expenses"] == 20000
    assert expenses["by_category_list"][0]["category_name"] == "Others"

    yearly = client.get(
        "/api/stats/yearly/income", params={"year": previous.year}, headers=auth_headers
    ).json()
    assert len(yearly["totals"]) == 12
    assert yearly["totals"][previous.month - 1] == 120000

    pie = client.get(
        "/api/stats/category-pie",
        params={"month": previous.month, "year": previous.year},
        headers=auth_headers,
    ).json()
    assert pie["labels"] == ["Others"]
    assert pie["category_ids"] == [99]
    assert pie["totals"] == [20000]


def test_store_failure_serves_degraded_view(client, auth_headers, monkeypatch) -> None:
    from sqlalchemy.exc import OperationalError

    def fail(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(LedgerService, "yearly_series", fail)

    response = client.get("/api/stats/yearly/expenses", params={"year": 2024}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"year": 2024, "totals": [0] * 12, "degraded": True}
