"""Tests for salary sheet endpoints."""

from fastapi.testclient import TestClient

from farmbooks.main import app

client = TestClient(app)


def add_salary(headers, **overrides) -> dict:
    payload = {
        "month": "Dec-2025",
        "employeeName": "Rahim Uddin",
        "designation": "Shed supervisor",
        "farm": "KAASI_19",
        "attendance": 30,
        "basicSalary": 18000,
        "salaryAmount": 18000,
        "advance": 2000,
        "penaltyReward": -500,
        "total": 15500,
    }
    payload.update(overrides)
    response = client.post("/api/salaries", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_create_keeps_negative_penalty(user_headers):
    salary = add_salary(user_headers)

    assert salary["penaltyReward"] == -500
    assert salary["total"] == 15500


def test_rejects_attendance_over_month(user_headers):
    response = client.post(
        "/api/salaries",
        json={
            "month": "Dec-2025",
            "employeeName": "A",
            "designation": "Guard",
            "attendance": 40,
            "salaryAmount": 1,
            "total": 1,
        },
        headers=user_headers,
    )

    assert response.status_code == 422


def test_list_orders_by_month_then_name(user_headers):
    add_salary(user_headers, month="Nov-2025", employeeName="Zaman")
    add_salary(user_headers, month="Dec-2025", employeeName="Karim")
    add_salary(user_headers, month="Dec-2025", employeeName="Babul")

    response = client.get("/api/salaries", headers=user_headers)

    rows = [(item["month"], item["employeeName"]) for item in response.json()["data"]["items"]]
    assert rows == [("Nov-2025", "Zaman"), ("Dec-2025", "Babul"), ("Dec-2025", "Karim")]


def test_list_filters_by_month_and_search(user_headers):
    add_salary(user_headers, month="Nov-2025", employeeName="Zaman")
    add_salary(user_headers, month="Dec-2025", designation="Driver", employeeName="Karim")

    by_month = client.get("/api/salaries", params={"month": "Nov-2025"}, headers=user_headers)
    by_search = client.get("/api/salaries", params={"search": "driver"}, headers=user_headers)

    assert [i["employeeName"] for i in by_month.json()["data"]["items"]] == ["Zaman"]
    assert [i["employeeName"] for i in by_search.json()["data"]["items"]] == ["Karim"]


def test_update_and_delete(user_headers, admin_headers):
    salary = add_salary(user_headers)

    updated = client.put(f"/api/salaries/{salary['id']}", json={"remarks": "Paid in cash"}, headers=user_headers)
    deleted = client.delete(f"/api/salaries/{salary['id']}", headers=admin_headers)
    missing = client.put(f"/api/salaries/{salary['id']}", json={"remarks": "x"}, headers=user_headers)

    assert updated.json()["data"]["remarks"] == "Paid in cash"
    assert updated.json()["data"]["total"] == 15500
    assert deleted.json()["message"] == "Salary record deleted successfully"
    assert missing.status_code == 404


def test_summary(user_headers):
    add_salary(user_headers, farm="KAASI_19", total=15500, advance=2000, salaryAmount=18000)
    add_salary(user_headers, farm="KAASI_19", total=9000, advance=None, salaryAmount=9000)
    add_salary(user_headers, farm="MANAGEMENT", total=40000, advance=0, salaryAmount=40000)
    add_salary(user_headers, month="Nov-2025", farm="MATITAL", total=1, salaryAmount=1)

    response = client.get("/api/salaries/summary", params={"month": "Dec-2025"}, headers=user_headers)

    data = response.json()["data"]
    assert data["totalPaid"] == 64500
    assert data["totalAdvance"] == 2000
    assert data["totalSalaryAmount"] == 67000
    by_farm = {row["farm"]: row["total"] for row in data["byFarm"]}
    assert by_farm == {"KAASI_19": 24500, "MANAGEMENT": 40000}


def test_update_rejects_null_required_fields(user_headers):
    salary = add_salary(user_headers)

    for field in ("total", "employeeName", "salaryAmount", "month"):
        response = client.put(f"/api/salaries/{salary['id']}", json={field: None}, headers=user_headers)
        assert response.status_code == 422, field

    cleared = client.put(f"/api/salaries/{salary['id']}", json={"farm": None}, headers=user_headers)
    assert cleared.status_code == 200
    assert cleared.json()["data"]["farm"] is None
