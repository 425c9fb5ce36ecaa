"""
Login, token and account update tests
"""


def test_login_returns_user_without_password(client, admin_user):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"] == {
        "id": admin_user.id,
        "username": "admin",
        "email": "admin@hrd.local",
        "role": "admin",
    }
    assert "password" not in body["data"]
    assert "password_hash" not in body["data"]
    assert body["token_type"] == "bearer"
    assert body["access_token"]


def test_login_wrong_password_is_401(client, admin_user):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "wrong"})

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Incorrect username or password"}


def test_login_unknown_username_is_401(client, admin_user):
    response = client.post("/api/auth/login", json={"username": "nobody", "password": "admin123"})

    assert response.status_code == 401
    assert response.json()["success"] is False


def test_login_username_is_exact_match(client, admin_user):
    response = client.post("/api/auth/login", json={"username": "ADMIN", "password": "admin123"})

    assert response.status_code == 401


def test_login_missing_password_is_400(client, admin_user):
    response = client.post("/api/auth/login", json={"username": "admin"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "password is required"}


def test_token_from_login_identifies_user(client, admin_user):
    token = client.post(
        "/api/auth/login", json={"username": "admin", "password": "admin123"}
    ).json()["access_token"]

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["data"]["username"] == "admin"


def test_me_requires_valid_token(client, admin_user):
    assert client.get("/api/auth/me").status_code == 401

    response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json()["message"] == "Could not validate credentials"


def test_update_username(client, admin_user):
    response = client.put(
        "/api/users/update-username",
        json={"userId": admin_user.id, "newUsername": "hrd-admin"}
    )

    assert response.status_code == 200
    assert response.json()["success"] is True
    login = client.post("/api/auth/login", json={"username": "hrd-admin", "password": "admin123"})
    assert login.status_code == 200


def test_update_username_rejects_taken_name(client, db, admin_user):
    from hrd_api.models import User
    from hrd_api.services.auth import get_password_hash

    db.add(User(username="staff", password_hash=get_password_hash("staff123"), role="staff"))
    db.commit()

    response = client.put(
        "/api/users/update-username",
        json={"userId": admin_user.id, "newUsername": "staff"}
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Username already exists"


def test_update_username_unknown_user_is_404(client):
    response = client.put("/api/users/update-username", json={"userId": 999, "newUsername": "x"})

    assert response.status_code == 404


def test_update_username_missing_field_is_400(client, admin_user):
    response = client.put("/api/users/update-username", json={"userId": admin_user.id})

    assert response.status_code == 400
    assert response.json()["message"] == "newUsername is required"


def test_update_password(client, admin_user):
    response = client.put(
        "/api/users/update-password",
        json={"userId": admin_user.id, "oldPassword": "admin123", "newPassword": "s3cret!"}
    )

    assert response.status_code == 200
    old_login = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
    new_login = client.post("/api/auth/login", json={"username": "admin", "password": "s3cret!"})
    assert old_login.status_code == 401
    assert new_login.status_code == 200


def test_update_password_wrong_old_password_is_401(client, admin_user):
    response = client.put(
        "/api/users/update-password",
        json={"userId": admin_user.id, "oldPassword": "nope", "newPassword": "s3cret!"}
    )

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Incorrect old password"}


def test_login_with_overlong_password_is_401(client, admin_user):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "x" * 80})

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Incorrect username or password"}


def test_update_password_rejects_overlong_new_password(client, admin_user):
    response = client.put(
        "/api/users/update-password",
        json={"userId": admin_user.id, "oldPassword": "admin123", "newPassword": "y" * 80}
    )

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert "newPassword" in response.json()["message"]
    login = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
    assert login.status_code == 200


def test_update_password_with_overlong_old_password_is_401(client, admin_user):
    response = client.put(
        "/api/users/update-password",
        json={"userId": admin_user.id, "oldPassword": "z" * 80, "newPassword": "s3cret!"}
    )

    assert response.status_code == 401


def test_update_username_race_on_unique_index_is_400(client, db, admin_user, monkeypatch):
    from hrd_api.models import User
    from hrd_api.routers import users
    from hrd_api.services.auth import get_password_hash

    db.add(User(username="staff", password_hash=get_password_hash("staff123"), role="staff"))
    db.commit()
    # Lose the race: the pre-check sees no clash, the unique index does
    monkeypatch.setattr(users, "_ensure_username_available", lambda db, username: None)

    response = client.put(
        "/api/users/update-username",
        json={"userId": admin_user.id, "newUsername": "staff"}
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Username already exists"}
    db.expire_all()
    assert db.query(User).filter(User.id == admin_user.id).first().username == "admin"
