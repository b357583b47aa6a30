"""Tests for profile read and upsert."""

from tests.fakes import ALICE, BOB


class TestMyProfile:

    def test_missing_profile_is_404(self, client):
        response = client.get("/api/v1/profiles/me")
        assert response.status_code == 404

    def test_save_requires_an_offering_skill(self, client, db):
        db.add_skill(ALICE, "Python", skill_type="wanted")

        response = client.put("/api/v1/profiles/me", json={"full_name": "Alice"})

        assert response.status_code == 400
        assert "at least one skill you can offer" in response.json()["detail"]
        assert db.rows("profiles") == []

    def test_save_creates_then_updates_one_row(self, client, db):
        db.add_skill(ALICE, "Guitar")

        created = client.put("/api/v1/profiles/me", json={
            "full_name": "  Alice Doe ",
            "location": "Austin",
            "bio": "Musician",
        })
        updated = client.put("/api/v1/profiles/me", json={
            "full_name": "Alice Doe",
            "location": "Seattle",
            "is_public": False,
        })

        assert created.status_code == 200
        assert created.json()["full_name"] == "Alice Doe"
        assert updated.status_code == 200
        assert updated.json()["location"] == "Seattle"
        assert updated.json()["is_public"] is False
        assert len(db.rows("profiles")) == 1
        assert db.rows("profiles")[0]["updated_at"]

    def test_blank_full_name_is_rejected(self, client, db):
        db.add_skill(ALICE, "Guitar")
        response = client.put("/api/v1/profiles/me", json={"full_name": "   "})
        assert response.status_code == 422

    def test_photo_is_kept_when_not_sent(self, client, db):
        db.add_skill(ALICE, "Guitar")
        db.add_profile(ALICE, "Alice", profile_photo="https://cdn.test/alice.png")

        response = client.put("/api/v1/profiles/me", json={"full_name": "Alice"})

        assert response.json()["profile_photo"] == "https://cdn.test/alice.png"

    def test_me_includes_skills_and_availability(self, client, db):
        db.add_profile(ALICE, "Alice")
        db.add_skill(ALICE, "Guitar")
        db.add_skill(ALICE, "Photography", skill_type="wanted", experience_level="Beginner")
        db.insert_row("availability", {"user_id": ALICE, "days": ["Monday"], "time_slots": ["Evening"]})

        body = client.get("/api/v1/profiles/me").json()

        assert body["full_name"] == "Alice"
        assert [s["skill_name"] for s in body["skills"]] == ["Guitar", "Photography"]
        assert body["availability"]["days"] == ["Monday"]

    def test_me_without_availability(self, client, db):
        db.add_profile(ALICE, "Alice")
        body = client.get("/api/v1/profiles/me").json()
        assert body["availability"] is None
        assert body["skills"] == []


class TestOtherProfiles:

    def test_public_profile_with_skills(self, client, db):
        db.add_profile(BOB, "Bob", location="Miami")
        db.add_skill(BOB, "Illustration")

        response = client.get(f"/api/v1/profiles/{BOB}")

        assert response.status_code == 200
        assert response.json()["skills"][0]["skill_name"] == "Illustration"

    def test_private_profile_is_hidden(self, client, db):
        db.add_profile(BOB, "Bob", is_public=False)
        assert client.get(f"/api/v1/profiles/{BOB}").status_code == 404

    def test_own_private_profile_is_visible(self, client, db):
        db.add_profile(ALICE, "Alice", is_public=False)
        assert client.get(f"/api/v1/profiles/{ALICE}").status_code == 200

    def test_database_error_is_generic_500(self, client, db):
        db.failing_tables.add("profiles")
        response = client.get(f"/api/v1/profiles/{BOB}")
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to load profile. Please try again."
