"""
services/wizard_service.py

위저드 상태 전이 비즈니스 로직.
순수 Python 함수로 구성 — 입력 상태를 바꾸지 않고 항상 새 WizardState 를 반환한다.
UI 코드, 네트워크, 저장소 접근 없음.

상태:
  answering(i) → ... → reviewing → submitting → succeeded
  already_completed 는 세션 생성 시에만 진입하며 다른 상태를 모두 건너뛴다.
"""

from typing import Optional

from config import FEEDBACK_ANSWER_ID
from submission_form.models.question_model import Question
from submission_form.models.session_state import WizardPhase, WizardState
from submission_form.services.registry import QuestionRegistry
from submission_form.services.validators import validate

# 이 상태들에서는 모든 조작이 무시된다 (버튼 비활성 / 제출 후 수정 불가)
_FROZEN_PHASES = (
    WizardPhase.SUBMITTING,
    WizardPhase.SUCCEEDED,
    WizardPhase.ALREADY_COMPLETED,
)


class UnknownAnswerError(KeyError):
    """질문 목록에 없는 키로 답을 쓰려고 할 때."""


def start(registry: QuestionRegistry, already_completed: bool = False) -> WizardState:
    """새 세션 상태. 이미 제출한 클라이언트면 already_completed 로 바로 시작."""
    return WizardState(step_count=len(registry), already_completed=already_completed)


# ── 조회 ─────────────────────────────────────────────────────────────────────

def current_question(state: WizardState, registry: QuestionRegistry) -> Question:
    return registry[state.current_index]


def current_answer(state: WizardState, registry: QuestionRegistry) -> str:
    return state.answers.get(current_question(state, registry).id, "")


def current_error(state: WizardState, registry: QuestionRegistry) -> Optional[str]:
    return state.errors.get(current_question(state, registry).id)


def can_advance(state: WizardState, registry: QuestionRegistry) -> bool:
    """
    '다음'(리뷰 단계에서는 '제출') 버튼 활성 여부.
    리뷰 단계는 항상 통과, 그 외에는 현재 질문에 저장된 오류가 없어야 한다.
    """
    if state.phase in _FROZEN_PHASES:
        return False
    if state.phase == WizardPhase.REVIEWING:
        return True
    return current_error(state, registry) is None


def can_retreat(state: WizardState) -> bool:
    return state.phase not in _FROZEN_PHASES and state.current_index > 0


# ── 전이 ─────────────────────────────────────────────────────────────────────

def advance(state: WizardState, registry: QuestionRegistry) -> WizardState:
    """
    다음 단계로 이동 시도.

    - answering: 현재 답을 검증. 실패하면 오류를 저장하고 제자리,
                 통과하면 오류를 지우고 다음 단계로 (attempted_advance 초기화).
    - reviewing: 검증 없이 submitting 으로 전이. 실제 전송은 호출자(FormWizard)가 한다.
    - 그 외:     변화 없음.
    """
    phase = state.phase
    if phase == WizardPhase.REVIEWING:
        return state.model_copy(update={"submitting": True, "attempted_advance": True})
    if phase != WizardPhase.ANSWERING:
        return state

    question = current_question(state, registry)
    error = validate(question, state.answers.get(question.id, ""))
    errors = {**state.errors, question.id: error}

    if error is not None:
        return state.model_copy(update={"errors": errors, "attempted_advance": True})

    return state.model_copy(update={
        "errors": errors,
        "current_index": state.current_index + 1,
        "attempted_advance": False,
    })


def retreat(state: WizardState) -> WizardState:
    """이전 단계로. 검증하지 않으며 첫 단계에서는 변화 없음."""
    if not can_retreat(state):
        return state
    return state.model_copy(update={
        "current_index": state.current_index - 1,
        "attempted_advance": False,
    })


def edit_answer(
    state: WizardState,
    registry: QuestionRegistry,
    question_id: str,
    value: str,
) -> WizardState:
    """
    답 입력 반영.

    입력이 바뀌면 해당 질문의 오류는 지워진다. 현재 단계에서 이미 '다음'을 눌렀던 경우에만
    즉시 재검증하여 오류를 다시 채운다.

    Raises:
        UnknownAnswerError: 질문 목록에도 피드백 키에도 해당하지 않는 question_id.
    """
    if question_id not in registry and question_id != FEEDBACK_ANSWER_ID:
        raise UnknownAnswerError(question_id)
    if state.phase in _FROZEN_PHASES:
        return state

    answers = {**state.answers, question_id: value}
    errors = {**state.errors, question_id: None}

    question = current_question(state, registry)
    if state.attempted_advance and question.id == question_id:
        errors[question_id] = validate(question, value)

    return state.model_copy(update={"answers": answers, "errors": errors})


def finish_submission(state: WizardState, succeeded: bool) -> WizardState:
    """
    제출 결과 반영.
    성공: submitting → succeeded. 실패: submitting → reviewing (오류 목록은 건드리지 않음).
    """
    if state.phase != WizardPhase.SUBMITTING:
        return state
    return state.model_copy(update={
        "submitting": False,
        "submission_succeeded": succeeded,
    })
