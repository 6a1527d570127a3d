from datetime import date

from bson import ObjectId


def _review(booking_id, rider_id, **overrides):
    payload = {
        "bookingId": booking_id,
        "reviewBy": {"name": "Rahim", "photo": "p.png"},
        "rating": 4,
        "feedback": "Good",
        "deliveryMenId": rider_id,
    }
    payload.update(overrides)
    return payload


def test_review_upsert_keeps_one_per_booking(client, db):
    booking_id = str(ObjectId())
    rider_id = str(ObjectId())

    r = client.patch("/reviews", json=_review(booking_id, rider_id))
    assert r.status_code == 200
    assert r.json()["upsertedId"] is not None

    r = client.patch("/reviews", json=_review(booking_id, rider_id, rating=2, feedback="Late"))
    assert r.status_code == 200
    assert r.json()["matchedCount"] == 1

    reviews = list(db["reviews"].find({"bookingId": booking_id}))
    assert len(reviews) == 1
    assert reviews[0]["rating"] == 2
    assert reviews[0]["feedback"] == "Late"
    assert reviews[0]["reviewBy"] == {"name": "Rahim", "photo": "p.png"}
    assert reviews[0]["reviewDate"] == date.today().isoformat()


def test_review_rating_out_of_range(client):
    r = client.patch("/reviews", json=_review(str(ObjectId()), str(ObjectId()), rating=6))
    assert r.status_code == 422


def test_review_updates_rider_rating_avg(client, db, make_user):
    rider = make_user("rider@niyejai.com", role="Rider")
    rider_id = str(rider["_id"])

    client.patch("/reviews", json=_review("booking-1", rider_id, rating=5))
    client.patch("/reviews", json=_review("booking-2", rider_id, rating=4))
    assert db["users"].find_one({"_id": rider["_id"]})["ratingAvg"] == 4.5

    # Reemplazar la reseña de booking-2 recalcula el promedio
    client.patch("/reviews", json=_review("booking-2", rider_id, rating=2))
    assert db["users"].find_one({"_id": rider["_id"]})["ratingAvg"] == 3.5


def test_reviews_by_rider_requires_token(client, db, user_headers):
    rider_id = str(ObjectId())
    client.patch("/reviews", json=_review("booking-1", rider_id))
    client.patch("/reviews", json=_review("booking-2", "someone-else"))

    assert client.get(f"/my-review/{rider_id}").status_code == 401

    r = client.get(f"/my-review/{rider_id}", headers=user_headers)
    assert r.status_code == 200
    assert [rv["bookingId"] for rv in r.json()] == ["booking-1"]


def test_review_moved_to_another_rider_refreshes_both(client, db, make_user):
    rider_a = make_user("rider.a@niyejai.com", role="Rider")
    rider_b = make_user("rider.b@niyejai.com", role="Rider")

    client.patch("/reviews", json=_review("bk-1", str(rider_a["_id"]), rating=5))
    assert db["users"].find_one({"_id": rider_a["_id"]})["ratingAvg"] == 5

    r = client.patch("/reviews", json=_review("bk-1", str(rider_b["_id"]), rating=1))
    assert r.status_code == 200
    assert r.json()["matchedCount"] == 1
    assert r.json()["modifiedCount"] == 1

    assert db["reviews"].count_documents({"deliveryMenId": str(rider_a["_id"])}) == 0
    assert db["users"].find_one({"_id": rider_a["_id"]})["ratingAvg"] == 0
    assert db["users"].find_one({"_id": rider_b["_id"]})["ratingAvg"] == 1


def test_review_moved_keeps_old_rider_other_reviews(client, db, make_user):
    rider_a = make_user("rider.a@niyejai.com", role="Rider")
    rider_b = make_user("rider.b@niyejai.com", role="Rider")

    client.patch("/reviews", json=_review("bk-1", str(rider_a["_id"]), rating=5))
    client.patch("/reviews", json=_review("bk-2", str(rider_a["_id"]), rating=3))
    client.patch("/reviews", json=_review("bk-1", str(rider_b["_id"]), rating=4))

    assert db["users"].find_one({"_id": rider_a["_id"]})["ratingAvg"] == 3
    assert db["users"].find_one({"_id": rider_b["_id"]})["ratingAvg"] == 4
