"""
api/routes.py — FastAPI 엔드포인트
"""

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from config import FEEDBACK_ANSWER_ID
import api.session as session

# Core Logic Imports
from submission_form.models.question_model import Question
from submission_form.services.form_wizard import FormWizard
from submission_form.services.wizard_service import UnknownAnswerError

router = APIRouter()

# ── Pydantic request bodies ──────────────────────────────────────────────────

class AnswerBody(BaseModel):
    value: str = ""


# ── 헬퍼 ─────────────────────────────────────────────────────────────────────

def _question_to_dict(q: Question) -> dict:
    return {
        "id": q.id,
        "type": q.type.value,
        "prompt": q.prompt,
        "description": q.description,
        "options": q.options,
        "required": q.required,
        "difficulty": q.difficulty.value if q.difficulty else None,
        "problem_url": q.problem_url,
    }


def _wizard(request: Request) -> FormWizard:
    wizard = session.get_session(request.state.session_id)
    if wizard is None:
        raise HTTPException(status_code=404, detail="세션이 없습니다.")
    return wizard


def _wizard_view(wizard: FormWizard) -> dict:
    state = wizard.state
    return {
        "phase": wizard.phase.value,
        "question": _question_to_dict(wizard.current_question),
        "answer": wizard.current_answer,
        "error": wizard.current_error,
        "index": state.current_index,
        "total": state.step_count,
        "progress": wizard.progress,
        "can_advance": wizard.can_advance,
        "can_retreat": wizard.can_retreat,
        "submitting": wizard.submitting,
        "succeeded": wizard.succeeded,
        "already_completed": wizard.already_completed,
        "just_submitted": wizard.just_submitted,
    }


# ── 엔드포인트 ───────────────────────────────────────────────────────────────

@router.get("/api/questions")
async def get_questions(request: Request):
    return [_question_to_dict(q) for q in request.app.state.registry]


@router.get("/api/wizard")
async def get_wizard(request: Request):
    return _wizard_view(_wizard(request))


@router.put("/api/wizard/answers/{question_id}")
async def put_answer(question_id: str, body: AnswerBody, request: Request):
    wizard = _wizard(request)
    try:
        wizard.edit_answer(question_id, body.value)
    except UnknownAnswerError:
        raise HTTPException(status_code=422, detail=f"알 수 없는 질문입니다: {question_id}")
    return _wizard_view(wizard)


@router.post("/api/wizard/advance")
async def advance(request: Request):
    wizard = _wizard(request)
    await wizard.advance()
    return _wizard_view(wizard)


@router.post("/api/wizard/retreat")
async def retreat(request: Request):
    wizard = _wizard(request)
    wizard.retreat()
    return _wizard_view(wizard)


@router.get("/api/wizard/review")
async def get_review(request: Request):
    wizard = _wizard(request)
    return {
        "problems": [
            {
                **_question_to_dict(q),
                "solution": wizard.answer_for(q.id) or None,
            }
            for q in wizard.registry.coding_problems()
        ],
        "feedback": wizard.answer_for(FEEDBACK_ANSWER_ID),
    }
