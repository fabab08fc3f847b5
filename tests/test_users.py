def test_list_users(client, register):
    register(email="a@example.com")
    register(email="b@example.com")

    response = client.get("/users")
    assert response.status_code == 200
    assert [u["email"] for u in response.json()] == ["a@example.com", "b@example.com"]


def test_list_users_empty(client):
    response = client.get("/users")
    assert response.status_code == 200
    assert response.json() == []


def test_get_user(client, register):
    body, _ = register(email="a@example.com")
    user_id = body["user"]["id"]

    response = client.get(f"/users/{user_id}")
    assert response.status_code == 200
    assert response.json()["id"] == user_id
    assert response.json()["email"] == "a@example.com"


def test_get_missing_user_is_404(client):
    response = client.get("/users/9999")
    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"


def test_subscribe_connects_both_directions(client, register):
    alice, alice_headers = register(email="alice@example.com")
    bob, _ = register(email="bob@example.com")

    response = client.patch("/subscribe", json={"subscribeId": bob["user"]["id"]}, headers=alice_headers)
    assert response.status_code == 200
    assert [u["id"] for u in response.json()["subscribing"]] == [bob["user"]["id"]]

    bob_view = client.get(f"/users/{bob['user']['id']}").json()
    assert [u["id"] for u in bob_view["subscribedBy"]] == [alice["user"]["id"]]


def test_subscribe_twice_keeps_one_edge(client, register):
    _, alice_headers = register(email="alice@example.com")
    bob, _ = register(email="bob@example.com")

    client.patch("/subscribe", json={"subscribeId": bob["user"]["id"]}, headers=alice_headers)
    response = client.patch("/subscribe", json={"subscribeId": bob["user"]["id"]}, headers=alice_headers)
    assert response.status_code == 200
    assert len(response.json()["subscribing"]) == 1


def test_subscribe_to_missing_user_is_404(client, register):
    _, headers = register()
    response = client.patch("/subscribe", json={"subscribeId": 9999}, headers=headers)
    assert response.status_code == 404


def test_subscribe_requires_token(client, register):
    bob, _ = register()
    response = client.patch("/subscribe", json={"subscribeId": bob["user"]["id"]})
    assert response.status_code == 401


def test_users_to_subscribe_excludes_caller(client, register):
    alice, alice_headers = register(email="alice@example.com")
    bob, _ = register(email="bob@example.com")
    carol, _ = register(email="carol@example.com")

    response = client.get("/usersToSubscribe", headers=alice_headers)
    assert response.status_code == 200
    ids = [u["id"] for u in response.json()]
    assert alice["user"]["id"] not in ids
    assert ids == [bob["user"]["id"], carol["user"]["id"]]


def test_users_to_subscribe_requires_token(client):
    response = client.get("/usersToSubscribe")
    assert response.status_code == 401
