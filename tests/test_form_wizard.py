import asyncio
import json

import httpx

from submission_form.models.session_state import WizardPhase
from submission_form.services import validators
from submission_form.services.completion_store import InMemoryCompletionStore
from submission_form.services.form_wizard import FormWizard
from submission_form.services.registry import default_registry
from submission_form.services.submission import SubmissionClient


def _client(status_code=200, body=None, calls=None):
    async def handler(request):
        if calls is not None:
            calls.append(json.loads(request.content))
        return httpx.Response(status_code, json=body if body is not None else {"ok": True})

    return SubmissionClient("http://test/prod", transport=httpx.MockTransport(handler))


def _fill_and_advance(wizard, question_id, value):
    wizard.edit_answer(question_id, value)
    return asyncio.run(wizard.advance())


def _wizard_at_review(store, client):
    wizard = FormWizard(default_registry(), store, client)
    for qid, value in [
        ("name", "Ada"),
        ("idNumber", "1234567890"),
        ("department", "CS"),
        ("batch", "Y24"),
        ("problem1", "https://leetcode.com/problems/best-time-to-buy-and-sell-stock/"),
        ("problem2", "https://leetcode.com/problems/move-zeroes/"),
    ]:
        _fill_and_advance(wizard, qid, value)
    assert wizard.phase == WizardPhase.REVIEWING
    return wizard


def test_scenario_a_personal_info_then_scheme_error():
    wizard = FormWizard(default_registry(), InMemoryCompletionStore(), _client())
    assert wizard.phase == WizardPhase.ANSWERING

    for qid, value in [("name", "Ada"), ("idNumber", "1234567890"), ("department", "CS"), ("batch", "Y24")]:
        _fill_and_advance(wizard, qid, value)
        assert all(error is None for error in wizard.state.errors.values())
    assert wizard.current_question.id == "problem1"

    for qid in ["problem1", "problem2"]:
        index = wizard.state.current_index
        _fill_and_advance(wizard, qid, "ftp://bad")
        assert wizard.state.current_index == index
        assert wizard.current_error == validators.URL_SCHEME_MESSAGE
        assert wizard.can_advance is False

        _fill_and_advance(wizard, qid, "https://leetcode.com/problems/two-sum/")
        assert wizard.state.current_index == index + 1

    assert wizard.phase == WizardPhase.REVIEWING


def test_scenario_b_server_error_returns_to_review():
    store = InMemoryCompletionStore()
    calls = []
    wizard = _wizard_at_review(store, _client(status_code=500, calls=calls))

    asyncio.run(wizard.advance())

    assert wizard.phase == WizardPhase.REVIEWING
    assert wizard.submitting is False
    assert wizard.succeeded is False
    assert store.has_completed() is False
    assert wizard.can_advance is True
    assert len(calls) == 1

    # 재시도 가능
    asyncio.run(wizard.advance())
    assert len(calls) == 2


def test_scenario_b_transport_error_is_logged(caplog):
    async def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = SubmissionClient("http://test/prod", transport=httpx.MockTransport(handler))
    wizard = _wizard_at_review(InMemoryCompletionStore(), client)

    asyncio.run(wizard.advance())

    assert wizard.phase == WizardPhase.REVIEWING
    assert "Error submitting form" in caplog.text


def test_scenario_c_success_is_terminal_and_persisted():
    store = InMemoryCompletionStore()
    calls = []
    wizard = _wizard_at_review(store, _client(body={"message": "stored"}, calls=calls))
    wizard.edit_answer("finalComments", "great session")

    asyncio.run(wizard.advance())

    assert wizard.phase == WizardPhase.SUCCEEDED
    assert wizard.just_submitted is True
    assert wizard.last_receipt.body == {"message": "stored"}
    assert store.has_completed() is True
    assert calls == [{
        "name": "Ada",
        "id": "1234567890",
        "dept": "CS",
        "batch": "Y24",
        "q1_link": "https://leetcode.com/problems/best-time-to-buy-and-sell-stock/",
        "q2_link": "https://leetcode.com/problems/move-zeroes/",
        "feedback": "great session",
    }]

    # 이후 조작은 모두 무시되고 재전송도 없다
    asyncio.run(wizard.advance())
    assert len(calls) == 1

    returning = FormWizard(default_registry(), store, _client())
    assert returning.phase == WizardPhase.ALREADY_COMPLETED
    assert returning.already_completed is True
    assert returning.just_submitted is False
    assert returning.can_advance is False
    assert returning.can_retreat is False


def test_retreat_from_review():
    wizard = _wizard_at_review(InMemoryCompletionStore(), _client())
    wizard.retreat()
    assert wizard.current_question.id == "problem2"
    assert wizard.current_answer == "https://leetcode.com/problems/move-zeroes/"


def test_undecodable_success_body_returns_to_review():
    async def handler(request):
        return httpx.Response(200, content=b'{"ok": "\xff\xfe"}',
                              headers={"content-type": "application/json"})

    store = InMemoryCompletionStore()
    client = SubmissionClient("http://test/prod", transport=httpx.MockTransport(handler))
    wizard = _wizard_at_review(store, client)

    asyncio.run(wizard.advance())

    assert wizard.phase == WizardPhase.REVIEWING
    assert wizard.submitting is False
    assert wizard.can_advance is True
    assert store.has_completed() is False


class _ExplodingSubmitter:
    def __init__(self):
        self.calls = 0

    async def submit(self, answers):
        self.calls += 1
        raise RuntimeError("unexpected")


def test_unexpected_submitter_error_still_clears_submitting(caplog):
    store = InMemoryCompletionStore()
    submitter = _ExplodingSubmitter()
    wizard = _wizard_at_review(store, submitter)

    asyncio.run(wizard.advance())

    assert wizard.phase == WizardPhase.REVIEWING
    assert wizard.submitting is False
    assert store.has_completed() is False
    assert "RuntimeError: unexpected" in caplog.text

    # 재시도 가능
    asyncio.run(wizard.advance())
    assert submitter.calls == 2
