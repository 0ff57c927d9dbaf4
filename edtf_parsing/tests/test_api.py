"""Integration tests for the EDTF HTTP API."""


def test_root(test_client):
    response = test_client.get("/")
    assert response.status_code == 200
    assert "parse" in response.json()["endpoints"]


def test_health(test_client):
    response = test_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_parse(test_client):
    response = test_client.get("/parse", params={"value": "2004-(06)?-11"})
    assert response.status_code == 200
    data = response.json()
    assert data["edtf"] == "2004-(06)?-11"
    assert data["mode"] == "one_of_a_set"
    start = data["items"][0]["start"]
    assert start["month"]["is_uncertain"] is True
    assert start["year"]["is_uncertain"] is False


def test_parse_list(test_client):
    response = test_client.get("/parse", params={"value": "{1960, 1961-12}"})
    assert response.status_code == 200
    data = response.json()
    assert data["mode"] == "multiple"
    assert len(data["items"]) == 2


def test_normalize(test_client):
    response = test_client.get("/normalize", params={"value": "(2004)?-06-04~"})
    assert response.status_code == 200
    assert response.json() == {"input": "(2004)?-06-04~", "edtf": "2004?-(06-04)~"}


def test_invalid_value_rejected(test_client):
    response = test_client.get("/parse", params={"value": "20o4"})
    assert response.status_code == 422
    assert "Invalid EDTF value" in response.json()["detail"]


def test_oversized_value_rejected(test_client):
    response = test_client.get("/normalize", params={"value": "2004," * 1000})
    assert response.status_code == 422
    assert "exceeds" in response.json()["detail"]


def test_missing_value(test_client):
    response = test_client.get("/parse")
    assert response.status_code == 422


def test_validate_accepts_parse_output(test_client):
    parsed = test_client.get("/parse", params={"value": "[1667, 1670..1672]"}).json()
    response = test_client.post("/validate", json=parsed)
    assert response.status_code == 200
    assert response.json() == {"valid": True, "errors": None}


def test_validate_reports_schema_errors(test_client):
    parsed = test_client.get("/parse", params={"value": "1984?"}).json()
    del parsed["mode"]
    response = test_client.post("/validate", json=parsed)
    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is False
    assert "mode" in data["errors"][0]
