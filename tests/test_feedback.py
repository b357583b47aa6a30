"""Tests for post-swap feedback."""

import pytest

from tests.fakes import ALICE, BOB, CAROL


@pytest.fixture
def completed_swap(db):
    guitar = db.add_skill(ALICE, "Guitar")
    python = db.add_skill(BOB, "Python")
    return db.add_swap(ALICE, BOB, guitar["id"], python["id"], status="completed")


def _feedback(swap_id, **overrides):
    payload = {"swap_request_id": swap_id, "rating": 4, "comment": " Patient mentor ", "would_swap_again": True}
    payload.update(overrides)
    return payload


class TestSubmitFeedback:

    def test_reviewee_is_the_other_participant(self, client, act_as, completed_swap):
        alice = client.post("/api/v1/feedback", json=_feedback(completed_swap["id"]))
        act_as(BOB)
        bob = client.post("/api/v1/feedback", json=_feedback(completed_swap["id"], rating=5))

        assert alice.status_code == 201
        assert alice.json()["reviewee_id"] == BOB
        assert alice.json()["comment"] == "Patient mentor"
        assert bob.status_code == 201
        assert bob.json()["reviewee_id"] == ALICE

    def test_only_once_per_swap(self, client, db, completed_swap):
        client.post("/api/v1/feedback", json=_feedback(completed_swap["id"]))
        second = client.post("/api/v1/feedback", json=_feedback(completed_swap["id"]))

        assert second.status_code == 409
        assert len(db.rows("feedback")) == 1

    def test_swap_must_be_completed(self, client, db):
        guitar = db.add_skill(ALICE, "Guitar")
        python = db.add_skill(BOB, "Python")
        swap = db.add_swap(ALICE, BOB, guitar["id"], python["id"], status="accepted")

        response = client.post("/api/v1/feedback", json=_feedback(swap["id"]))

        assert response.status_code == 409

    def test_outsider_cannot_review(self, client, act_as, completed_swap):
        act_as(CAROL)
        response = client.post("/api/v1/feedback", json=_feedback(completed_swap["id"]))
        assert response.status_code == 404

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_out_of_range(self, client, completed_swap, rating):
        response = client.post("/api/v1/feedback", json=_feedback(completed_swap["id"], rating=rating))
        assert response.status_code == 422


class TestReceivedFeedback:

    def test_list_and_summary(self, client, act_as, db, completed_swap):
        guitar = db.add_skill(ALICE, "Banjo")
        carol_skill = db.add_skill(CAROL, "AWS")
        second = db.add_swap(CAROL, ALICE, carol_skill["id"], guitar["id"], status="completed")

        act_as(BOB)
        client.post("/api/v1/feedback", json=_feedback(completed_swap["id"], rating=5))
        act_as(CAROL)
        client.post("/api/v1/feedback", json=_feedback(second["id"], rating=4, would_swap_again=False))

        listed = client.get(f"/api/v1/feedback/users/{ALICE}").json()
        summary = client.get(f"/api/v1/feedback/users/{ALICE}/summary").json()

        assert [f["reviewer_id"] for f in listed] == [CAROL, BOB]
        assert summary == {
            "user_id": ALICE,
            "count": 2,
            "average_rating": 4.5,
            "would_swap_again_rate": 50,
        }

    def test_summary_without_feedback(self, client):
        summary = client.get(f"/api/v1/feedback/users/{BOB}/summary").json()
        assert summary == {"user_id": BOB, "count": 0, "average_rating": None, "would_swap_again_rate": None}
