def test_register_login_validate_round_trip(client, register):
    body, _ = register(email="ada@example.com", password="pa55word")
    user_id = body["user"]["id"]

    response = client.post("/login", json={"email": "ada@example.com", "password": "pa55word"})
    assert response.status_code == 200
    login = response.json()
    assert login["user"]["id"] == user_id
    assert login["token"]

    response = client.get("/validate", headers={"Authorization": login["token"]})
    assert response.status_code == 200
    assert response.json()["id"] == user_id


def test_register_returns_user_without_password(register):
    body, _ = register(first_name="Grace", last_name="Hopper", email="grace@example.com")
    user = body["user"]
    assert user["firstName"] == "Grace"
    assert user["lastName"] == "Hopper"
    assert user["email"] == "grace@example.com"
    assert "password" not in user
    assert user["videos"] == []
    assert user["subscribing"] == []
    assert user["subscribedBy"] == []


def test_register_same_email_twice_is_rejected(client, register):
    register(email="dup@example.com")
    response = client.post("/register", json={
        "firstName": "Other",
        "lastName": "Person",
        "email": "dup@example.com",
        "password": "whatever",
    })
    assert response.status_code == 400
    assert response.json()["detail"] == "Email already registered"


def test_register_requires_fields(client):
    response = client.post("/register", json={"email": "x@example.com"})
    assert response.status_code == 422


def test_login_errors_are_generic(client, register):
    register(email="ada@example.com", password="right")

    wrong_password = client.post("/login", json={"email": "ada@example.com", "password": "wrong"})
    unknown_email = client.post("/login", json={"email": "nobody@example.com", "password": "right"})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"detail": "User or password invalid"}


def test_validate_without_token(client):
    response = client.get("/validate")
    assert response.status_code == 401


def test_validate_with_bad_token(client):
    response = client.get("/validate", headers={"Authorization": "garbage"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token"


def test_validate_accepts_bearer_prefix(client, register):
    body, _ = register()
    response = client.get("/validate", headers={"Authorization": f"Bearer {body['token']}"})
    assert response.status_code == 200
    assert response.json()["id"] == body["user"]["id"]


def test_token_for_deleted_user_is_rejected(client, register, db_session):
    from tubeshare.db.models.user import User

    body, headers = register()
    db_session.query(User).filter(User.id == body["user"]["id"]).delete()
    db_session.commit()

    response = client.get("/validate", headers=headers)
    assert response.status_code == 401
    assert response.json()["detail"] == "User not found"


def test_login_with_mixed_case_email_as_registered(client, register):
    body, _ = register(email="Ada@EXAMPLE.com", password="pa55word")
    assert body["user"]["email"] == "ada@example.com"

    response = client.post("/login", json={"email": "Ada@EXAMPLE.com", "password": "pa55word"})
    assert response.status_code == 200
    assert response.json()["user"]["id"] == body["user"]["id"]


def test_register_email_is_case_insensitively_unique(client, register):
    register(email="ada@example.com")
    response = client.post("/register", json={
        "firstName": "Ada",
        "lastName": "Again",
        "email": "ADA@example.com",
        "password": "whatever",
    })
    assert response.status_code == 400


def test_register_with_overlong_password_is_rejected(client):
    response = client.post("/register", json={
        "firstName": "Long",
        "lastName": "Password",
        "email": "long@example.com",
        "password": "x" * 100,
    })
    assert response.status_code == 400
    assert response.json()["detail"] == "Password must be at most 72 bytes"

    assert client.get("/users").json() == []


def test_login_with_overlong_password_is_generic(client, register):
    register(email="ada@example.com", password="x" * 72)
    response = client.post("/login", json={"email": "ada@example.com", "password": "x" * 100})
    assert response.status_code == 401
    assert response.json() == {"detail": "User or password invalid"}


def test_duplicate_registration_log_omits_email(client, register, caplog):
    register(email="private@example.com")
    with caplog.at_level("WARNING", logger="tubeshare.services.user_service"):
        client.post("/register", json={
            "firstName": "Dup",
            "lastName": "User",
            "email": "private@example.com",
            "password": "whatever",
        })
    assert "Registration rejected" in caplog.text
    assert "private@example.com" not in caplog.text
