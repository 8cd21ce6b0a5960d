"""
services/form_wizard.py

위저드 세션 컨트롤러.
WizardState 와 협력 객체(질문 목록, 완료 플래그 저장소, 제출 클라이언트)를 묶어
화면 / API 가 호출하는 조작(advance, retreat, edit_answer)과 조회를 제공한다.
"""

import logging
import traceback
from typing import Mapping, Optional, Protocol

from submission_form.models.question_model import Question
from submission_form.models.session_state import WizardPhase, WizardState
from submission_form.services import wizard_service as ws
from submission_form.services.completion_store import CompletionStore
from submission_form.services.registry import QuestionRegistry
from submission_form.services.submission import SubmissionError, SubmissionReceipt

logger = logging.getLogger(__name__)


class Submitter(Protocol):
    async def submit(self, answers: Mapping[str, str]) -> SubmissionReceipt: ...


class FormWizard:
    """
    한 클라이언트의 폼 작성 세션.

    완료 플래그는 생성 시 한 번 읽고, 제출 성공 시 한 번 기록한다.
    """

    def __init__(
        self,
        registry: QuestionRegistry,
        completion_store: CompletionStore,
        submitter: Submitter,
    ):
        self.registry = registry
        self._store = completion_store
        self._submitter = submitter
        self.state: WizardState = ws.start(registry, completion_store.has_completed())
        self.last_receipt: Optional[SubmissionReceipt] = None

    # ── 조회 ─────────────────────────────────────────────────────────────────

    @property
    def phase(self) -> WizardPhase:
        return self.state.phase

    @property
    def current_question(self) -> Question:
        return ws.current_question(self.state, self.registry)

    @property
    def current_answer(self) -> str:
        return ws.current_answer(self.state, self.registry)

    @property
    def current_error(self) -> Optional[str]:
        return ws.current_error(self.state, self.registry)

    @property
    def progress(self) -> float:
        return self.state.progress

    @property
    def can_advance(self) -> bool:
        return ws.can_advance(self.state, self.registry)

    @property
    def can_retreat(self) -> bool:
        return ws.can_retreat(self.state)

    @property
    def submitting(self) -> bool:
        return self.state.submitting

    @property
    def succeeded(self) -> bool:
        return self.state.submission_succeeded

    @property
    def already_completed(self) -> bool:
        return self.state.already_completed

    @property
    def just_submitted(self) -> bool:
        """이번 세션에서 제출에 성공했는지 (재방문으로 완료 상태인 경우와 구분)."""
        return self.succeeded and not self.already_completed

    def answer_for(self, question_id: str) -> str:
        return self.state.answers.get(question_id, "")

    # ── 조작 ─────────────────────────────────────────────────────────────────

    def edit_answer(self, question_id: str, value: str) -> WizardState:
        self.state = ws.edit_answer(self.state, self.registry, question_id, value)
        return self.state

    def retreat(self) -> WizardState:
        self.state = ws.retreat(self.state)
        return self.state

    async def advance(self) -> WizardState:
        """
        다음 단계로 이동. 리뷰 단계에서는 제출을 1회 수행하고 결과를 반영한다.
        제출 실패는 로그만 남기고 reviewing 으로 돌아간다 (재시도는 사용자가 다시 제출).
        """
        before = self.state.phase
        self.state = ws.advance(self.state, self.registry)
        if before == WizardPhase.SUBMITTING or self.state.phase != WizardPhase.SUBMITTING:
            return self.state

        succeeded = False
        try:
            self.last_receipt = await self._submitter.submit(dict(self.state.answers))
            succeeded = True
        except SubmissionError as e:
            logger.error(f"Error submitting form: {e}")
        except Exception:
            logger.error(f"Error submitting form:\n{traceback.format_exc()}")
        finally:
            # 어떤 경로로 끝나든 submitting 은 해제된다
            self.state = ws.finish_submission(self.state, succeeded=succeeded)

        if succeeded:
            self._store.mark_completed()
        return self.state
