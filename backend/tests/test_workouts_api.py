"""
Tests for the voice agent summary and workout log endpoints.
"""
import uuid
from datetime import datetime


def _post_summary(client, **body):
    return client.post("/api/voice-agent-summary", json=body)


class TestVoiceAgentSummary:

    def test_creates_workout_with_derived_seconds(self, client):
        response = _post_summary(
            client,
            user_id="user-1",
            workout_performed="Push Up",
            activity="strength",
            sets=3,
            reps=12,
            muscle_target="chest",
            workout_time="5:30",
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Workout log saved successfully"

        workout = client.get(f"/api/workouts/{body['workout_id']}").json()["workout"]
        assert workout["user_id"] == "user-1"
        assert workout["workout_performed"] == "Push Up"
        assert workout["workout_time"] == "5:30"
        assert workout["workout_time_seconds"] == 330
        assert workout["sets"] == 3
        assert workout["reps"] == 12
        assert workout["created_at"] is not None

    def test_room_id_is_used_when_user_id_missing(self, client):
        response = _post_summary(client, room_id="room-user-9", workout_performed="Squat")

        assert response.status_code == 200
        workout_id = response.json()["workout_id"]
        assert client.get(f"/api/workouts/{workout_id}").json()["workout"]["user_id"] == "room-user-9"

    def test_malformed_duration_is_stored_without_seconds(self, client):
        response = _post_summary(client, user_id="user-1", workout_performed="Plank", workout_time="one minute")

        workout_id = response.json()["workout_id"]
        workout = client.get(f"/api/workouts/{workout_id}").json()["workout"]
        assert workout["workout_time"] == "one minute"
        assert workout["workout_time_seconds"] is None

    def test_requires_user_id(self, client):
        response = _post_summary(client, workout_performed="Squat")

        assert response.status_code == 400
        assert response.json()["detail"] == "user_id is required"

    def test_requires_workout_performed(self, client):
        response = _post_summary(client, user_id="user-1", workout_performed="  ")

        assert response.status_code == 400
        assert response.json()["detail"] == "workout_performed is required"

    def test_rejects_negative_sets(self, client):
        response = _post_summary(client, user_id="user-1", workout_performed="Squat", sets=-1)

        assert response.status_code == 422


class TestListWorkouts:

    def test_newest_first_with_paging(self, client, seed_workouts):
        seed_workouts(
            {"user_id": "user-1", "workout_performed": "A", "created_at": datetime(2024, 6, 1, 9)},
            {"user_id": "user-1", "workout_performed": "C", "created_at": datetime(2024, 6, 3, 9)},
            {"user_id": "user-1", "workout_performed": "B", "created_at": datetime(2024, 6, 2, 9)},
            {"user_id": "someone-else", "workout_performed": "X", "created_at": datetime(2024, 6, 4, 9)},
        )

        first_page = client.get("/api/workouts", params={"user_id": "user-1", "limit": 2}).json()
        second_page = client.get("/api/workouts", params={"user_id": "user-1", "limit": 2, "offset": 2}).json()

        assert first_page["success"] is True
        assert [w["workout_performed"] for w in first_page["workouts"]] == ["C", "B"]
        assert first_page["count"] == 2
        assert [w["workout_performed"] for w in second_page["workouts"]] == ["A"]
        assert second_page["count"] == 1

    def test_requires_user_id(self, client):
        response = client.get("/api/workouts")

        assert response.status_code == 400

    def test_unknown_user_has_no_workouts(self, client):
        body = client.get("/api/workouts", params={"user_id": "nobody"}).json()

        assert body == {"success": True, "workouts": [], "count": 0}


class TestGetWorkout:

    def test_not_found(self, client):
        response = client.get(f"/api/workouts/{uuid.uuid4()}")

        assert response.status_code == 404

    def test_malformed_id_is_not_found(self, client):
        response = client.get("/api/workouts/not-a-uuid")

        assert response.status_code == 404
