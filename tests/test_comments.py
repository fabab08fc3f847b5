def test_create_comment(client, register, upload):
    body, headers = register()
    video = upload(headers)

    response = client.post("/comments", json={"commentText": "Nice!", "videoId": video["id"]}, headers=headers)
    assert response.status_code == 200
    comment = response.json()
    assert comment["commentText"] == "Nice!"
    assert comment["userId"] == body["user"]["id"]
    assert comment["videoId"] == video["id"]
    assert comment["comment_likes"] == []
    assert comment["comment_dislikes"] == []

    detail = client.get(f"/videos/{video['id']}").json()
    assert [c["id"] for c in detail["comments"]] == [comment["id"]]


def test_comment_on_missing_video_is_404(client, register):
    _, headers = register()
    response = client.post("/comments", json={"commentText": "?", "videoId": 404}, headers=headers)
    assert response.status_code == 404


def test_comment_requires_token(client, register, upload):
    _, headers = register()
    video = upload(headers)
    response = client.post("/comments", json={"commentText": "anon", "videoId": video["id"]})
    assert response.status_code == 401


def test_comment_reactions(client, register, upload):
    _, headers = register()
    video = upload(headers)
    comment = client.post("/comments", json={"commentText": "Hi", "videoId": video["id"]}, headers=headers).json()

    like = client.post("/comment_likes", json={"commentId": comment["id"]}, headers=headers)
    dislike = client.post("/comment_dislikes", json={"commentId": comment["id"]}, headers=headers)
    assert like.status_code == 200
    assert dislike.status_code == 200
    assert like.json()["commentId"] == comment["id"]
    assert dislike.json()["commentId"] == comment["id"]


def test_react_to_missing_comment_is_404(client, register):
    _, headers = register()
    assert client.post("/comment_likes", json={"commentId": 1}, headers=headers).status_code == 404
    assert client.post("/comment_dislikes", json={"commentId": 1}, headers=headers).status_code == 404
