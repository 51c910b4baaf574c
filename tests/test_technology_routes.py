def test_create(client, seed, admin_headers) -> None:
    response = client.post("/technologies", json={"technology": "Go"}, headers=admin_headers)
    assert response.status_code == 201
    assert response.json()["technology"]["technology"] == "Go"


def test_create_as_non_admin(client, seed, u1_headers) -> None:
    assert client.post("/technologies", json={"technology": "Go"}, headers=u1_headers).status_code == 401


def test_create_duplicate(client, seed, admin_headers) -> None:
    response = client.post("/technologies", json={"technology": "Tech1"}, headers=admin_headers)
    assert response.status_code == 400


def test_create_extra_field(client, seed, admin_headers) -> None:
    response = client.post("/technologies", json={"technology": "Go", "id": 9}, headers=admin_headers)
    assert response.status_code == 400


def test_list(client, seed) -> None:
    response = client.get("/technologies")
    assert [tech["technology"] for tech in response.json()["technologies"]] == ["Tech1", "Tech2"]


def test_get(client, seed) -> None:
    response = client.get(f"/technologies/{seed.tech_ids[1]}")
    assert response.json() == {"technology": {"id": seed.tech_ids[1], "technology": "Tech2"}}


def test_get_missing(client, seed) -> None:
    assert client.get("/technologies/0").status_code == 404


def test_update(client, seed, admin_headers) -> None:
    response = client.patch(
        f"/technologies/{seed.tech_ids[0]}", json={"technology": "Python"}, headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["technology"]["technology"] == "Python"


def test_update_missing(client, seed, admin_headers) -> None:
    response = client.patch("/technologies/0", json={"technology": "Python"}, headers=admin_headers)
    assert response.status_code == 404


def test_delete(client, seed, admin_headers) -> None:
    response = client.delete(f"/technologies/{seed.tech_ids[0]}", headers=admin_headers)
    assert response.json() == {"deleted": seed.tech_ids[0]}


def test_delete_as_non_admin(client, seed, u1_headers) -> None:
    assert client.delete(f"/technologies/{seed.tech_ids[0]}", headers=u1_headers).status_code == 401
