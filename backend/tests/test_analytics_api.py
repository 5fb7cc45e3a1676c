"""
Tests for the analytics endpoints against a seeded database.

The analytics clock is pinned to FIXED_NOW (2024-06-15 12:00 UTC).
"""
from datetime import datetime

import pytest


@pytest.fixture
def history(seed_workouts):
    """Three consecutive days ending today plus an older two-day run."""
    def log(name, created_at, sets=None, reps=None, workout_time=None, seconds=None, user_id="user-1"):
        return {
            "user_id": user_id,
            "workout_performed": name,
            "sets": sets,
            "reps": reps,
            "workout_time": workout_time,
            "workout_time_seconds": seconds,
            "created_at": created_at,
        }

    return seed_workouts(
        log("Push Up", datetime(2024, 6, 1, 8), sets=3, reps=10, workout_time="5:00", seconds=300),
        log("Push Up", datetime(2024, 6, 2, 8), sets=3, reps=12, workout_time="5:30", seconds=330),
        log("push up ", datetime(2024, 6, 13, 8), sets=2, reps=15),
        log("Squat", datetime(2024, 6, 14, 8), sets=5, reps=5, workout_time="10:00", seconds=600),
        log("Squat", datetime(2024, 6, 15, 7), sets=5, reps=5, workout_time="60:05", seconds=3605),
        log("Plank", datetime(2024, 6, 15, 9), workout_time="1:00", seconds=60),
        log("Burpee", datetime(2024, 6, 15, 10), sets=9, reps=9, user_id="someone-else"),
    )


def test_summary(client, history):
    response = client.get("/api/analytics/summary", params={"user_id": "user-1"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True

    summary = body["summary"]
    assert summary["total_workouts"] == 6
    assert summary["total_time_seconds"] == 300 + 330 + 600 + 3605 + 60
    assert summary["total_time_formatted"] == "1h 21m"
    assert summary["total_volume"] == 30 + 36 + 30 + 25 + 25
    assert summary["active_days"] == 5
    assert summary["current_streak"] == 3
    assert summary["last_workout"]["workout_performed"] == "Plank"
    assert summary["last_workout"]["created_at"] == "2024-06-15T09:00:00+00:00"


def test_exercises(client, history):
    body = client.get("/api/analytics/exercises", params={"user_id": "user-1"}).json()

    assert body["success"] is True
    assert body["total_unique_exercises"] == 3
    assert [(e["exercise"], e["count"]) for e in body["exercises"]] == [
        ("push up", 3),
        ("squat", 2),
        ("plank", 1),
    ]

    push_up = body["exercises"][0]
    assert push_up["total_sets"] == 8
    assert push_up["total_volume"] == 30 + 36 + 30
    assert push_up["total_time_seconds"] == 630
    assert push_up["total_time_formatted"] == "10m"
    assert push_up["last_performed"] == "2024-06-13T08:00:00+00:00"


def test_consistency(client, history):
    body = client.get("/api/analytics/consistency", params={"user_id": "user-1"}).json()

    assert body["success"] is True
    assert body["consistency"] == {
        "current_streak": 3,
        "longest_streak": 3,
        "total_active_days": 5,
        "weekly_average": 1.3,
        "this_month_days": ["2024-06-01", "2024-06-02", "2024-06-13", "2024-06-14", "2024-06-15"],
        "this_month_count": 5,
        "all_workout_days": ["2024-06-01", "2024-06-02", "2024-06-13", "2024-06-14", "2024-06-15"],
    }


def test_new_user_gets_empty_analytics(client):
    summary = client.get("/api/analytics/summary", params={"user_id": "new"}).json()["summary"]
    exercises = client.get("/api/analytics/exercises", params={"user_id": "new"}).json()
    consistency = client.get("/api/analytics/consistency", params={"user_id": "new"}).json()["consistency"]

    assert summary["total_workouts"] == 0
    assert summary["last_workout"] is None
    assert summary["current_streak"] == 0
    assert exercises["exercises"] == []
    assert exercises["total_unique_exercises"] == 0
    assert consistency["all_workout_days"] == []
    assert consistency["weekly_average"] == 0.0


@pytest.mark.parametrize("path", ["summary", "exercises", "consistency"])
def test_requires_user_id(client, path):
    response = client.get(f"/api/analytics/{path}")

    assert response.status_code == 400
    assert response.json()["detail"] == "user_id is required"


def test_repeated_calls_are_identical(client, history):
    first = client.get("/api/analytics/consistency", params={"user_id": "user-1"}).json()
    second = client.get("/api/analytics/consistency", params={"user_id": "user-1"}).json()

    assert first == second
