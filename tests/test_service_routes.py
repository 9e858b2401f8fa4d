def test_list_services_returns_all_in_storage_order(client, stores):
    resp = client.get("/api/allservices")
    assert resp.status_code == 200
    data = resp.json()
    assert [s["type"] for s in data] == ["home-loan", "gold-loan"]
    assert data[0]["detail"] == ["Up to 240 months", "No prepayment charges"]
    assert all("_id" in s for s in data)


def test_list_services_empty_collection(client, stores):
    stores["services"].records.clear()
    resp = client.get("/api/allservices")
    assert resp.status_code == 200
    assert resp.json() == []


def test_get_service_by_type(client):
    resp = client.get("/api/service/gold-loan")
    assert resp.status_code == 200
    body = resp.json()
    assert body["code"] == "GL"
    assert body["description"] == "Loans against gold"


def test_get_unknown_service_answers_200_with_error_body(client):
    resp = client.get("/api/service/boat-loan")
    assert resp.status_code == 200
    assert resp.json() == {"error": "Service not found"}


def test_calculate_emi(client):
    resp = client.post("/api/service/home-loan/calculate", json={"amt": 100000, "tenure": 12, "interestRate": 10})
    assert resp.status_code == 200
    assert resp.json() == {"EMI": "8791.59"}


def test_calculate_emi_ignores_path_type(client):
    resp = client.post("/api/service/anything/calculate", json={"amt": 100000, "tenure": 12, "interestRate": 12})
    assert resp.status_code == 200
    assert resp.json() == {"EMI": "8884.88"}


def test_calculate_emi_zero_rate_fails_with_500(client):
    resp = client.post("/api/service/home-loan/calculate", json={"amt": 100000, "tenure": 12, "interestRate": 0})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Unable to calculate EMI"}


def test_calculate_emi_zero_tenure_fails_with_500(client):
    resp = client.post("/api/service/home-loan/calculate", json={"amt": 100000, "tenure": 0, "interestRate": 10})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Unable to calculate EMI"}


def test_calculate_emi_missing_field(client):
    resp = client.post("/api/service/home-loan/calculate", json={"amt": 100000, "tenure": 12})
    assert resp.status_code == 400
    assert resp.json() == {"error": '"interestRate" is required'}


def test_calculate_emi_rejects_non_numeric(client):
    resp = client.post("/api/service/home-loan/calculate", json={"amt": "lots", "tenure": 12, "interestRate": 10})
    assert resp.status_code == 400
    assert resp.json()["error"].startswith('"amt"')


def test_service_routes_report_store_failures(failing_client):
    resp = failing_client.get("/api/allservices")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Unable to fetch services"}

    resp = failing_client.get("/api/service/home-loan")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Error fetching service"}


def test_health_and_security_headers(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_unknown_route_uses_error_body(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


def test_calculate_emi_complex_result_fails_with_500(client):
    resp = client.post("/api/service/home-loan/calculate", json={"amt": 1000, "tenure": 1.5, "interestRate": -2400})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Unable to calculate EMI"}


def test_calculate_emi_rejects_boolean(client):
    resp = client.post("/api/service/home-loan/calculate", json={"amt": True, "tenure": 12, "interestRate": 10})
    assert resp.status_code == 400
    assert resp.json() == {"error": '"amt" must be a number'}
