from datetime import timedelta

from jobly.utils.jwt_handler import create_access_token, decode_access_token


NEW_USER = {
    "username": "new",
    "firstName": "First",
    "lastName": "Last",
    "email": "new@email.com",
}


def test_create_as_admin(client, seed, admin_headers) -> None:
    response = client.post("/users", json={**NEW_USER, "isAdmin": True}, headers=admin_headers)
    assert response.status_code == 201
    body = response.json()
    assert body["user"] == {**NEW_USER, "isAdmin": True}
    assert decode_access_token(body["token"])["username"] == "new"


def test_create_as_non_admin(client, seed, u1_headers) -> None:
    assert client.post("/users", json=NEW_USER, headers=u1_headers).status_code == 401


def test_list_as_admin(client, seed, admin_headers) -> None:
    response = client.get("/users", headers=admin_headers)
    users = response.json()["users"]
    assert [user["username"] for user in users] == ["admin", "u1", "u2"]
    assert all("password" not in user for user in users)


def test_list_as_non_admin(client, seed, u1_headers) -> None:
    assert client.get("/users", headers=u1_headers).status_code == 401


def test_list_with_bad_token(client, seed) -> None:
    response = client.get("/users", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_list_with_expired_token(client, seed) -> None:
    token = create_access_token(
        {"sub": "admin", "username": "admin", "is_admin": True}, expires_delta=timedelta(minutes=-1)
    )
    response = client.get("/users", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_get_self(client, seed, u1_headers) -> None:
    response = client.get("/users/u1", headers=u1_headers)
    assert response.status_code == 200
    user = response.json()["user"]
    assert user["firstName"] == "U1F"
    assert user["jobs"] == [seed.job_ids[1], seed.job_ids[2]]
    assert user["qualifications"] == sorted(seed.tech_ids)
    assert "password" not in user


def test_get_other_user(client, seed, u2_headers) -> None:
    assert client.get("/users/u1", headers=u2_headers).status_code == 401


def test_get_missing_as_admin(client, seed, admin_headers) -> None:
    assert client.get("/users/nope", headers=admin_headers).status_code == 404


def test_update_self(client, seed, u1_headers) -> None:
    response = client.patch("/users/u1", json={"firstName": "New"}, headers=u1_headers)
    assert response.status_code == 200
    assert response.json()["user"]["firstName"] == "New"


def test_update_password(client, seed, u1_headers) -> None:
    response = client.patch("/users/u1", json={"password": "new-password"}, headers=u1_headers)
    assert response.status_code == 200
    login = client.post("/auth/token", json={"username": "u1", "password": "new-password"})
    assert login.status_code == 200


def test_update_cannot_grant_admin(client, seed, u1_headers) -> None:
    response = client.patch("/users/u1", json={"isAdmin": True}, headers=u1_headers)
    assert response.status_code == 400


def test_update_other_user(client, seed, u2_headers) -> None:
    assert client.patch("/users/u1", json={"firstName": "x"}, headers=u2_headers).status_code == 401


def test_update_empty_payload(client, seed, u1_headers) -> None:
    assert client.patch("/users/u1", json={}, headers=u1_headers).status_code == 400


def test_delete_self(client, seed, u1_headers, admin_headers) -> None:
    response = client.delete("/users/u1", headers=u1_headers)
    assert response.json() == {"deleted": "u1"}
    assert client.get("/users/u1", headers=admin_headers).status_code == 404


def test_delete_other_user(client, seed, u2_headers) -> None:
    assert client.delete("/users/u1", headers=u2_headers).status_code == 401


def test_apply(client, seed, u2_headers) -> None:
    response = client.post(f"/users/u2/jobs/{seed.job_ids[0]}", headers=u2_headers)
    assert response.status_code == 201
    assert response.json() == {"applied": seed.job_ids[0]}


def test_apply_twice(client, seed, u1_headers) -> None:
    assert client.post(f"/users/u1/jobs/{seed.job_ids[1]}", headers=u1_headers).status_code == 400


def test_apply_missing_job(client, seed, u1_headers) -> None:
    assert client.post("/users/u1/jobs/0", headers=u1_headers).status_code == 404


def test_apply_for_other_user(client, seed, u2_headers) -> None:
    assert client.post(f"/users/u1/jobs/{seed.job_ids[0]}", headers=u2_headers).status_code == 401


def test_qualify(client, seed, u2_headers) -> None:
    response = client.post(f"/users/u2/tech/{seed.tech_ids[0]}", headers=u2_headers)
    assert response.status_code == 201
    assert response.json() == {"qualified": seed.tech_ids[0]}


def test_qualify_missing_technology(client, seed, u2_headers) -> None:
    assert client.post("/users/u2/tech/0", headers=u2_headers).status_code == 404


def test_matching_jobs(client, seed, u1_headers) -> None:
    response = client.get("/users/u1/jobs", headers=u1_headers)
    assert response.status_code == 200
    assert response.json() == {"jobs": [seed.job_ids[0]]}


def test_matching_jobs_without_qualifications(client, seed, u2_headers) -> None:
    assert client.get("/users/u2/jobs", headers=u2_headers).json() == {"jobs": []}


def test_matching_jobs_missing_user(client, seed, admin_headers) -> None:
    assert client.get("/users/nope/jobs", headers=admin_headers).status_code == 404


def test_matching_jobs_for_other_user(client, seed, u2_headers) -> None:
    assert client.get("/users/u1/jobs", headers=u2_headers).status_code == 401
