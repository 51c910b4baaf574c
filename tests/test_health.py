def test_health_check(client) -> None:
    response = client.get("/health/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_db_health_check(client) -> None:
    response = client.get("/health/db")
    assert response.status_code == 200
    body = response.json()
    assert body["database"] == "ok"
    assert body["dialect"] == "sqlite"
    assert body["db_url"].startswith("sqlite")
