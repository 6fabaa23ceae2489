"""Tests for expense API endpoints."""

from fastapi.testclient import TestClient

from farmbooks.main import app

client = TestClient(app)


def expense_payload(**overrides) -> dict:
    payload = {
        "expenseDate": "2025-12-05",
        "month": "Dec",
        "challan": "CH-101",
        "transId": "TX-9001",
        "farm": "KAASI_19",
        "expenseCost": 1500.50,
        "head": "FEED",
        "notes": "Layer mash, 20 bags",
    }
    payload.update(overrides)
    return payload


def create_expense(headers, **overrides) -> dict:
    response = client.post("/api/expenses", json=expense_payload(**overrides), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreateExpense:
    def test_create(self, user_headers):
        response = client.post("/api/expenses", json=expense_payload(), headers=user_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Expense created successfully"
        assert body["data"]["id"] > 0
        assert body["data"]["expenseCost"] == 1500.5
        assert body["data"]["head"] == "FEED"

    def test_rejects_non_positive_cost(self, user_headers):
        response = client.post("/api/expenses", json=expense_payload(expenseCost=0), headers=user_headers)

        assert response.status_code == 422

    def test_rejects_unknown_head(self, user_headers):
        response = client.post("/api/expenses", json=expense_payload(head="LAND"), headers=user_headers)

        assert response.status_code == 422

    def test_requires_token(self):
        response = client.post("/api/expenses", json=expense_payload())

        assert response.status_code == 401
        assert response.json()["detail"] == "Unauthorized - No token provided"


class TestListExpenses:
    def test_pagination(self, user_headers):
        for day in range(1, 6):
            create_expense(user_headers, expenseDate=f"2025-12-0{day}")

        response = client.get("/api/expenses", params={"page": 2, "limit": 2}, headers=user_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["pagination"] == {"page": 2, "limit": 2, "total": 5, "pages": 3}
        assert [item["expenseDate"] for item in data["items"]] == ["2025-12-03", "2025-12-02"]

    def test_filters(self, user_headers):
        create_expense(user_headers, head="RENT", farm="MATITAL")
        create_expense(user_headers, head="FEED", farm="MATITAL", notes="Broiler starter")
        create_expense(user_headers, head="FEED", farm="KAASI_19")

        by_head = client.get("/api/expenses", params={"head": "FEED", "farm": "MATITAL"}, headers=user_headers)
        by_search = client.get("/api/expenses", params={"search": "broiler"}, headers=user_headers)

        assert by_head.json()["data"]["pagination"]["total"] == 1
        assert by_search.json()["data"]["items"][0]["notes"] == "Broiler starter"

    def test_date_range(self, user_headers):
        create_expense(user_headers, expenseDate="2026-01-31", month="Jan")
        create_expense(user_headers, expenseDate="2026-02-01", month="Feb")

        response = client.get(
            "/api/expenses",
            params={"startDate": "2026-01-01", "endDate": "2026-01-31"},
            headers=user_headers,
        )

        items = response.json()["data"]["items"]
        assert [item["expenseDate"] for item in items] == ["2026-01-31"]

    def test_limit_bounds(self, user_headers):
        response = client.get("/api/expenses", params={"limit": 500}, headers=user_headers)

        assert response.status_code == 422


class TestUpdateDeleteExpense:
    def test_partial_update(self, user_headers):
        expense = create_expense(user_headers)

        response = client.put(
            f"/api/expenses/{expense['id']}",
            json={"expenseCost": 99.99},
            headers=user_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["expenseCost"] == 99.99
        assert data["notes"] == expense["notes"]
        assert data["head"] == expense["head"]

    def test_update_missing(self, user_headers):
        response = client.put("/api/expenses/9999", json={"notes": "x"}, headers=user_headers)

        assert response.status_code == 404
        assert response.json() == {"message": "Expense not found", "data": None}

    def test_delete_requires_admin(self, user_headers):
        expense = create_expense(user_headers)

        response = client.delete(f"/api/expenses/{expense['id']}", headers=user_headers)

        assert response.status_code == 403

    def test_admin_delete(self, user_headers, admin_headers):
        expense = create_expense(user_headers)

        response = client.delete(f"/api/expenses/{expense['id']}", headers=admin_headers)
        again = client.delete(f"/api/expenses/{expense['id']}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Expense deleted"
        assert again.status_code == 404


class TestExpenseSummary:
    def test_groups_by_farm_and_head(self, user_headers):
        create_expense(user_headers, farm="KAASI_19", head="FEED", expenseCost=100)
        create_expense(user_headers, farm="KAASI_19", head="FEED", expenseCost=50)
        create_expense(user_headers, farm="MATITAL", head="RENT", expenseCost=25)
        create_expense(user_headers, expenseDate="2026-01-01", month="Jan", expenseCost=1000)

        response = client.get("/api/expenses/summary", params={"month": "2025-12"}, headers=user_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["month"] == "2025-12"
        assert data["total"] == 175
        groups = {(g["farm"], g["head"]): g["expenseCost"] for g in data["byGroup"]}
        assert groups == {("KAASI_19", "FEED"): 150, ("MATITAL", "RENT"): 25}

    def test_malformed_month(self, user_headers):
        response = client.get("/api/expenses/summary", params={"month": "Dec"}, headers=user_headers)

        assert response.status_code == 400

    def test_month_required(self, user_headers):
        response = client.get("/api/expenses/summary", headers=user_headers)

        assert response.status_code == 422


class TestExpenseUpdateValidation:
    def test_null_required_fields_rejected(self, user_headers):
        expense = create_expense(user_headers)

        for field in ("expenseCost", "farm", "head", "expenseDate"):
            response = client.put(f"/api/expenses/{expense['id']}", json={field: None}, headers=user_headers)
            assert response.status_code == 422, field

        stored = client.get("/api/expenses", headers=user_headers).json()["data"]["items"][0]
        assert stored["expenseCost"] == 1500.5
        assert stored["farm"] == "KAASI_19"

    def test_null_optional_field_clears_it(self, user_headers):
        expense = create_expense(user_headers)

        response = client.put(f"/api/expenses/{expense['id']}", json={"notes": None}, headers=user_headers)

        assert response.status_code == 200
        assert response.json()["data"]["notes"] is None

    def test_cost_beyond_exact_precision_rejected(self, user_headers):
        response = client.post(
            "/api/expenses",
            json=expense_payload(expenseCost="1234567890123456.78"),
            headers=user_headers,
        )

        assert response.status_code == 422

    def test_large_cost_round_trips_exactly(self, user_headers):
        expense = create_expense(user_headers, expenseCost="9999999999999.99")

        assert expense["expenseCost"] == 9999999999999.99
