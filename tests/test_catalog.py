def test_coverage_pagination(client, db):
    db["coverage"].insert_many([{"district": f"area-{i}"} for i in range(25)])

    r = client.get("/coverage", params={"page": 1, "limit": 10})
    assert r.status_code == 200
    assert [a["district"] for a in r.json()] == [f"area-{i}" for i in range(10, 20)]

    r = client.get("/coverage", params={"page": 2, "limit": 10})
    assert len(r.json()) == 5

    assert len(client.get("/coverage").json()) == 10


def test_coverage_rejects_bad_paging(client):
    assert client.get("/coverage", params={"page": "x"}).status_code == 422
    assert client.get("/coverage", params={"page": -1}).status_code == 422


def test_coverage_zero_limit_returns_nothing(client, db):
    db["coverage"].insert_many([{"district": f"area-{i}"} for i in range(25)])

    r = client.get("/coverage", params={"page": 0, "limit": 0})
    assert r.status_code == 200
    assert r.json() == []


def test_counter(client, db, make_user):
    db["bookings"].insert_many([
        {"status": "Delivered"},
        {"status": "Delivered"},
        {"status": "Pending"},
    ])
    make_user("u1@niyejai.com", role="User")
    make_user("u2@niyejai.com", role="User")
    make_user("r1@niyejai.com", role="Rider")

    r = client.get("/counter")
    assert r.status_code == 200
    assert r.json() == {"bookingCount": 3, "deliveryCount": 2, "userCount": 2}


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "message" in r.json()
