import httpx
from fastapi.testclient import TestClient

from api.app import create_app
from api.config import COMPLETION_COOKIE, SESSION_COOKIE
from submission_form.services.submission import SubmissionClient

ANSWERS = [
    ("name", "Ada"),
    ("idNumber", "1234567890"),
    ("department", "CS"),
    ("batch", "Y24"),
    ("problem1", "https://leetcode.com/problems/best-time-to-buy-and-sell-stock/"),
    ("problem2", "https://leetcode.com/problems/move-zeroes/"),
]


def _app(status_code=200):
    calls = []

    async def handler(request):
        calls.append(request)
        return httpx.Response(status_code, json={"ok": True})

    submitter = SubmissionClient("http://remote/prod", transport=httpx.MockTransport(handler))
    return create_app(submitter=submitter, cleanup=False), calls


def _walk_to_review(client):
    for qid, value in ANSWERS:
        resp = client.put(f"/api/wizard/answers/{qid}", json={"value": value})
        assert resp.status_code == 200
        resp = client.post("/api/wizard/advance")
        assert resp.status_code == 200
    return resp.json()


def test_get_questions_lists_registry():
    app, _ = _app()
    with TestClient(app) as client:
        data = client.get("/api/questions").json()
        assert [q["id"] for q in data] == [qid for qid, _ in ANSWERS] + ["review"]
        assert data[4]["difficulty"] == "Easy"
        assert "validator" not in data[0]


def test_fresh_session_starts_at_first_question():
    app, _ = _app()
    with TestClient(app) as client:
        view = client.get("/api/wizard").json()
        assert view["phase"] == "answering"
        assert view["question"]["id"] == "name"
        assert view["index"] == 0
        assert view["can_retreat"] is False
        assert view["can_advance"] is True
        assert SESSION_COOKIE in client.cookies


def test_invalid_advance_surfaces_error():
    app, _ = _app()
    with TestClient(app) as client:
        view = client.post("/api/wizard/advance").json()
        assert view["index"] == 0
        assert view["error"] == "this field is required"
        assert view["can_advance"] is False


def test_unknown_answer_id_is_rejected():
    app, _ = _app()
    with TestClient(app) as client:
        resp = client.put("/api/wizard/answers/nickname", json={"value": "x"})
        assert resp.status_code == 422


def test_review_summary_and_retreat():
    app, _ = _app()
    with TestClient(app) as client:
        view = _walk_to_review(client)
        assert view["phase"] == "reviewing"
        assert view["progress"] == 1.0

        client.put("/api/wizard/answers/finalComments", json={"value": "nice"})
        review = client.get("/api/wizard/review").json()
        assert [p["solution"] for p in review["problems"]] == [ANSWERS[4][1], ANSWERS[5][1]]
        assert review["feedback"] == "nice"

        view = client.post("/api/wizard/retreat").json()
        assert view["question"]["id"] == "problem2"


def test_failed_submission_keeps_reviewing_without_cookie():
    app, calls = _app(status_code=500)
    with TestClient(app) as client:
        _walk_to_review(client)
        resp = client.post("/api/wizard/advance")
        view = resp.json()
        assert view["phase"] == "reviewing"
        assert view["submitting"] is False
        assert view["error"] is None
        assert COMPLETION_COOKIE not in resp.cookies
        assert len(calls) == 1


def test_successful_submission_sets_completion_cookie():
    app, calls = _app()
    with TestClient(app) as client:
        _walk_to_review(client)
        resp = client.post("/api/wizard/advance")
        view = resp.json()
        assert view["phase"] == "succeeded"
        assert view["just_submitted"] is True
        assert resp.cookies.get(COMPLETION_COOKIE) == "true"
        assert len(calls) == 1

        # 세션이 만료되어도 완료 쿠키가 남아 있으면 바로 완료 상태로 시작
        client.cookies.delete(SESSION_COOKIE)
        view = client.get("/api/wizard").json()
        assert view["phase"] == "already_completed"
        assert view["already_completed"] is True
        assert view["can_advance"] is False


def test_returning_client_cannot_resubmit():
    app, calls = _app()
    with TestClient(app, cookies={COMPLETION_COOKIE: "true"}) as client:
        view = client.post("/api/wizard/advance").json()
        assert view["phase"] == "already_completed"
        assert calls == []
