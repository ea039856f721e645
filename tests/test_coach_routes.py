from datetime import date, timedelta

from imt_fitness.models import Role, Schedule
from imt_fitness.services import history, messaging


def test_dashboard_lists_own_clients(http, session, make_user, coach, client_user, auth_headers):
    make_user(coach=make_user(Role.COACH), name="Not mine")
    history.record_snapshot(session, client_user, 90, 172)

    body = http.get("/api/coach/dashboard", headers=auth_headers(coach)).get_json()
    assert body["total_clients"] == 1
    assert body["clients"][0]["name"] == "Siti"
    assert body["clients"][0]["category"] == "obese"


def test_client_detail_is_scoped_to_coach(http, make_user, coach, client_user, auth_headers):
    stranger = make_user(coach=make_user(Role.COACH))
    headers = auth_headers(coach)

    detail = http.get(f"/api/coach/clients/{client_user.id}", headers=headers)
    assert detail.status_code == 200
    assert detail.get_json()["trained_today"] is False

    response = http.get(f"/api/coach/clients/{stranger.id}", headers=headers)
    assert response.status_code == 404
    assert response.get_json() == {"message": "Client not found"}


def test_duplicate_schedule_returns_conflict(http, session, coach, client_user, auth_headers):
    headers = auth_headers(coach)
    day = (date.today() + timedelta(days=1)).isoformat()

    first = http.post(f"/api/coach/schedule/{client_user.id}", json={"date": day, "title": "Legs"}, headers=headers)
    assert first.status_code == 201
    assert first.get_json()["title"] == "Legs"

    second = http.post(f"/api/coach/schedule/{client_user.id}", json={"date": day}, headers=headers)
    assert second.status_code == 409
    assert "message" in second.get_json()
    assert session.query(Schedule).count() == 1


def test_bulk_schedule_reports_skipped_days(http, coach, client_user, auth_headers):
    headers = auth_headers(coach)
    http.post(f"/api/coach/schedule/{client_user.id}", json={"date": "2026-05-04"}, headers=headers)

    response = http.post(
        f"/api/coach/schedule/{client_user.id}/bulk",
        json={"dates": ["2026-05-04", "2026-05-06", "2026-05-08"]},
        headers=headers,
    )
    assert response.status_code == 201
    body = response.get_json()
    assert [s["date"] for s in body["created"]] == ["2026-05-06", "2026-05-08"]
    assert body["skipped"] == ["2026-05-04"]

    listing = http.get("/api/coach/schedule", headers=headers).get_json()
    assert len(listing[0]["schedules"]) == 3


def test_complete_and_delete_schedule(http, session, coach, client_user, auth_headers):
    headers = auth_headers(coach)
    created = http.post(
        f"/api/coach/schedule/{client_user.id}", json={"date": "2026-05-04"}, headers=headers
    ).get_json()

    response = http.put(f"/api/coach/schedule/{created['id']}/complete", json={"completed": True}, headers=headers)
    assert response.get_json()["completed"] is True

    response = http.delete(f"/api/coach/schedule/{created['id']}", headers=headers)
    assert response.status_code == 200
    assert session.query(Schedule).count() == 0


def test_other_coach_cannot_touch_schedule(http, make_user, coach, client_user, auth_headers):
    created = http.post(
        f"/api/coach/schedule/{client_user.id}", json={"date": "2026-05-04"}, headers=auth_headers(coach)
    ).get_json()

    intruder = make_user(Role.COACH)
    response = http.delete(f"/api/coach/schedule/{created['id']}", headers=auth_headers(intruder))
    assert response.status_code == 404


def test_video_crud(http, coach, auth_headers):
    headers = auth_headers(coach)
    created = http.post("/api/coach/videos", json={
        "title": "Low impact cardio", "youtube_url": "https://www.youtube.com/watch?v=abc", "category": "obese",
    }, headers=headers)
    assert created.status_code == 201
    video_id = created.get_json()["id"]

    updated = http.put(f"/api/coach/videos/{video_id}", json={"title": "Gentle cardio"}, headers=headers)
    assert updated.get_json()["title"] == "Gentle cardio"
    assert updated.get_json()["category"] == "obese"

    assert len(http.get("/api/coach/videos", headers=headers).get_json()) == 1
    assert http.delete(f"/api/coach/videos/{video_id}", headers=headers).status_code == 200
    assert http.get("/api/coach/videos", headers=headers).get_json() == []


def test_video_rejects_unknown_category(http, coach, auth_headers):
    response = http.post("/api/coach/videos", json={
        "title": "Bulk", "youtube_url": "https://youtu.be/x", "category": "athletic",
    }, headers=auth_headers(coach))
    assert response.status_code == 400


def test_recommendations_newest_first(http, session, coach, client_user, auth_headers):
    headers = auth_headers(coach)
    for title in ("Week 1", "Week 2"):
        response = http.post(f"/api/coach/clients/{client_user.id}/recommend", json={
            "title": title, "exercises": ["squat", "plank"],
        }, headers=headers)
        assert response.status_code == 201

    body = http.get("/api/client/recommendations", headers=auth_headers(client_user)).get_json()
    assert [r["title"] for r in body] == ["Week 2", "Week 1"]
    assert body[0]["exercises"] == ["squat", "plank"]

    response = http.delete(f"/api/coach/recommendations/{body[0]['id']}", headers=headers)
    assert response.status_code == 200


def test_food_recommendations(http, make_user, coach, client_user, auth_headers):
    headers = auth_headers(coach)
    created = http.post("/api/coach/food-recommendations", json={
        "client_id": client_user.id, "title": "High protein", "foods": ["eggs", "tempeh"], "meal_type": "breakfast",
    }, headers=headers)
    assert created.status_code == 201
    rec_id = created.get_json()["id"]

    listing = http.get(f"/api/coach/food-recommendations/{client_user.id}", headers=headers).get_json()
    assert listing[0]["foods"] == ["eggs", "tempeh"]

    intruder = make_user(Role.COACH)
    assert http.delete(f"/api/coach/food-recommendations/{rec_id}", headers=auth_headers(intruder)).status_code == 404
    assert http.delete(f"/api/coach/food-recommendations/{rec_id}", headers=headers).status_code == 200


def test_food_recommendation_rejects_unknown_meal(http, coach, client_user, auth_headers):
    response = http.post("/api/coach/food-recommendations", json={
        "client_id": client_user.id, "title": "Late", "meal_type": "supper",
    }, headers=auth_headers(coach))
    assert response.status_code == 400


def test_chat_list_and_read_marking(http, session, coach, client_user, auth_headers):
    headers = auth_headers(coach)
    messaging.send_message(session, client_user, coach, "Sudah latihan")
    messaging.send_message(session, client_user, coach, "Foto terlampir")

    chats = http.get("/api/coach/chat-list", headers=headers).get_json()
    assert chats[0]["unread_count"] == 2
    assert chats[0]["last_message"]["content"] == "Foto terlampir"

    thread = http.get(f"/api/coach/messages/{client_user.id}", headers=headers).get_json()
    assert len(thread) == 2
    assert http.get("/api/coach/chat-list", headers=headers).get_json()[0]["unread_count"] == 0


def test_coach_sends_message_to_own_client_only(http, make_user, coach, client_user, auth_headers):
    headers = auth_headers(coach)
    response = http.post("/api/coach/messages", json={"receiver_id": client_user.id, "content": "Good job"}, headers=headers)
    assert response.status_code == 201

    stranger = make_user()
    response = http.post("/api/coach/messages", json={"receiver_id": stranger.id, "content": "Hi"}, headers=headers)
    assert response.status_code == 404


def test_video_description_can_be_cleared(http, coach, auth_headers):
    headers = auth_headers(coach)
    video_id = http.post("/api/coach/videos", json={
        "title": "Mobility", "youtube_url": "https://youtu.be/m", "description": "Hips and ankles",
    }, headers=headers).get_json()["id"]

    body = http.put(f"/api/coach/videos/{video_id}", json={"description": None}, headers=headers).get_json()
    assert body["description"] is None
    assert body["title"] == "Mobility"
