"""Tests for egg sale and egg production endpoints."""

from fastapi.testclient import TestClient

from farmbooks.main import app

client = TestClient(app)


def record_sale(headers, **overrides) -> dict:
    payload = {
        "saleDate": "2025-12-10",
        "month": "Dec",
        "challanNumber": "EGG-001",
        "farm": "KAASI_19",
        "amountReceived": 125000,
        "description": "300 trays to city market",
    }
    payload.update(overrides)
    response = client.post("/api/egg-sales", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def record_production(headers, **overrides) -> dict:
    payload = {
        "productionDate": "2025-12-10",
        "month": "Dec",
        "farm": "KAASI_19",
        "chickenEggs": 9000,
        "totalEggs": 9150,
        "notes": "Shed 2 moult recovery",
    }
    payload.update(overrides)
    response = client.post("/api/egg-productions", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestEggSales:
    def test_create_defaults_type(self, user_headers):
        sale = record_sale(user_headers)

        assert sale["type"] == "Eggs"
        assert sale["amountReceived"] == 125000

    def test_search_matches_challan(self, user_headers):
        record_sale(user_headers, challanNumber="EGG-777")
        record_sale(user_headers, challanNumber="EGG-002")

        response = client.get("/api/egg-sales", params={"search": "777"}, headers=user_headers)

        items = response.json()["data"]["items"]
        assert [item["challanNumber"] for item in items] == ["EGG-777"]

    def test_update_and_missing(self, user_headers):
        sale = record_sale(user_headers)

        updated = client.put(
            f"/api/egg-sales/{sale['id']}",
            json={"description": "Corrected buyer"},
            headers=user_headers,
        )
        missing = client.put("/api/egg-sales/404", json={"description": "x"}, headers=user_headers)

        assert updated.json()["data"]["description"] == "Corrected buyer"
        assert updated.json()["data"]["amountReceived"] == 125000
        assert missing.status_code == 404
        assert missing.json()["message"] == "Egg sale record not found"

    def test_delete_requires_admin(self, user_headers, admin_headers):
        sale = record_sale(user_headers)

        forbidden = client.delete(f"/api/egg-sales/{sale['id']}", headers=user_headers)
        deleted = client.delete(f"/api/egg-sales/{sale['id']}", headers=admin_headers)

        assert forbidden.status_code == 403
        assert deleted.status_code == 200

    def test_summary_by_farm_largest_first(self, user_headers):
        record_sale(user_headers, farm="KAASI_19", amountReceived=100)
        record_sale(user_headers, farm="MATITAL", amountReceived=300)
        record_sale(user_headers, farm="MATITAL", amountReceived=50)
        record_sale(user_headers, farm="MATITAL", month="Jan", saleDate="2026-01-02", amountReceived=9999)

        response = client.get("/api/egg-sales/summary", params={"month": "Dec"}, headers=user_headers)

        data = response.json()["data"]
        assert data["totalRevenue"] == 450
        assert data["byFarm"] == [
            {"farm": "MATITAL", "amountReceived": 350},
            {"farm": "KAASI_19", "amountReceived": 100},
        ]


class TestEggProduction:
    def test_list_newest_first(self, user_headers):
        record_production(user_headers, productionDate="2025-12-01")
        record_production(user_headers, productionDate="2025-12-03")
        record_production(user_headers, productionDate="2025-12-02")

        response = client.get("/api/egg-productions", headers=user_headers)

        dates = [item["productionDate"] for item in response.json()["data"]["items"]]
        assert dates == ["2025-12-03", "2025-12-02", "2025-12-01"]

    def test_rejects_negative_count(self, user_headers):
        response = client.post(
            "/api/egg-productions",
            json={"productionDate": "2025-12-01", "farm": "MATITAL", "chickenEggs": -1},
            headers=user_headers,
        )

        assert response.status_code == 422

    def test_partial_update(self, user_headers):
        record = record_production(user_headers)

        response = client.put(
            f"/api/egg-productions/{record['id']}",
            json={"chickenEggs": 8800},
            headers=user_headers,
        )

        data = response.json()["data"]
        assert data["chickenEggs"] == 8800
        assert data["totalEggs"] == 9150

    def test_delete_missing(self, admin_headers):
        response = client.delete("/api/egg-productions/12345", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Egg production record not found"

    def test_summary(self, user_headers):
        record_production(user_headers, farm="KAASI_19", chickenEggs=9000, totalEggs=9100)
        record_production(user_headers, farm="KAASI_19", chickenEggs=1000, totalEggs=1000)
        record_production(user_headers, farm="MATITAL", chickenEggs=4000, totalEggs=4200)

        response = client.get("/api/egg-productions/summary", headers=user_headers)

        data = response.json()["data"]
        assert data["totalEggs"] == 14000
        assert data["byFarm"] == [
            {"farm": "KAASI_19", "chickenEggs": 10000, "totalEggs": 10100},
            {"farm": "MATITAL", "chickenEggs": 4000, "totalEggs": 4200},
        ]


class TestNullUpdates:
    def test_egg_sale_rejects_null_amount(self, user_headers):
        sale = record_sale(user_headers)

        response = client.put(f"/api/egg-sales/{sale['id']}", json={"amountReceived": None}, headers=user_headers)
        farm = client.put(f"/api/egg-sales/{sale['id']}", json={"farm": None}, headers=user_headers)

        assert response.status_code == 422
        assert farm.status_code == 422

    def test_egg_sale_rejects_oversized_amount(self, user_headers):
        response = client.post(
            "/api/egg-sales",
            json={
                "saleDate": "2025-12-10",
                "farm": "KAASI_19",
                "amountReceived": "1234567890123456.78",
                "description": "Bulk contract",
            },
            headers=user_headers,
        )

        assert response.status_code == 422

    def test_egg_production_rejects_null_count(self, user_headers):
        record = record_production(user_headers)

        response = client.put(
            f"/api/egg-productions/{record['id']}",
            json={"chickenEggs": None},
            headers=user_headers,
        )
        notes = client.put(
            f"/api/egg-productions/{record['id']}",
            json={"notes": None},
            headers=user_headers,
        )

        assert response.status_code == 422
        assert notes.status_code == 200
        assert notes.json()["data"]["chickenEggs"] == 9000
