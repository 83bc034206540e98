def test_comments_oldest_first(client, make_post):
    post_id = make_post()
    ids = []
    for i in range(3):
        resp = client.post("/api/comments", json={
            "post_id": post_id,
            "content": f"comment {i}",
            "author_email": "a@x.com",
        })
        assert resp.status_code == 200
        assert resp.json()["message"] == "Comment added successfully"
        ids.append(resp.json()["id"])

    comments = client.get("/api/comments", params={"postId": post_id}).json()
    assert [c["id"] for c in comments] == ids
    assert comments[0]["email"] == "a@x.com"
    assert comments[0]["display_name"] == "a"
    assert comments[0]["post_id"] == post_id


def test_new_comment_is_last_and_count_grows_by_one(client, make_post):
    post_id = make_post()
    make_post(author_email="b@x.com")
    client.post("/api/comments", json={"post_id": post_id, "content": "first", "author_email": "a@x.com"})
    before = client.get("/api/comments", params={"postId": post_id}).json()

    resp = client.post("/api/comments", json={"post_id": post_id, "content": "second", "author_email": "b@x.com"})
    after = client.get("/api/comments", params={"postId": post_id}).json()
    assert len(after) == len(before) + 1
    assert after[-1]["id"] == resp.json()["id"]
    assert after[-1]["email"] == "b@x.com"


def test_comments_scoped_to_post(client, make_post):
    first = make_post()
    second = make_post(title="other")
    client.post("/api/comments", json={"post_id": first, "content": "hi", "author_email": "a@x.com"})
    assert client.get("/api/comments", params={"postId": second}).json() == []


def test_unknown_author_is_404_and_not_created(client, make_post):
    post_id = make_post()
    resp = client.post("/api/comments", json={
        "post_id": post_id,
        "content": "hello",
        "author_email": "stranger@x.com",
    })
    assert resp.status_code == 404
    assert resp.json()["error"] == "User not found"
    assert client.get("/api/users", params={"email": "stranger@x.com"}).status_code == 404


def test_missing_fields_are_400(client, make_post):
    post_id = make_post()
    for body in (
        {"content": "x", "author_email": "a@x.com"},
        {"post_id": post_id, "author_email": "a@x.com"},
        {"post_id": post_id, "content": "x"},
    ):
        resp = client.post("/api/comments", json=body)
        assert resp.status_code == 400
        assert resp.json()["error"] == "Post ID, content, and author email are required"


def test_list_requires_post_id(client):
    resp = client.get("/api/comments")
    assert resp.status_code == 400
    assert resp.json()["error"] == "Post ID is required"


def test_non_numeric_post_id_is_400(client):
    resp = client.get("/api/comments", params={"postId": "abc"})
    assert resp.status_code == 400


def test_post_id_zero_lists_nothing(client):
    resp = client.get("/api/comments", params={"postId": 0})
    assert resp.status_code == 200
    assert resp.json() == []
