"""
models/session_state.py

위저드 진행 상태를 담는 모델.
Pydantic BaseModel 기반 — 불변(frozen) 값이며, 전이 함수가 매번 새 상태를 만든다.
UI 코드 없음.
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class WizardPhase(str, Enum):
    ANSWERING = "answering"
    REVIEWING = "reviewing"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    ALREADY_COMPLETED = "already_completed"


TERMINAL_PHASES = (WizardPhase.SUCCEEDED, WizardPhase.ALREADY_COMPLETED)


class WizardState(BaseModel):
    """
    사용자의 폼 작성 세션 전체 상태를 표현하는 모델.

    Attributes:
        current_index:        현재 단계 인덱스 (0-based).
        step_count:           전체 단계 수 (마지막 단계 = 리뷰).
        answers:              답안. {question.id: 입력값}. 키 없음 = 미입력.
        errors:               오류. {question.id: 메시지 또는 None(오류 없음)}.
        attempted_advance:    현재 단계에서 '다음'을 한 번이라도 눌렀는지. True 면 입력 시 즉시 재검증.
        submitting:           제출 요청 진행 중.
        submission_succeeded: 이번 세션에서 제출 성공.
        already_completed:    세션 시작 시 이미 제출 완료 상태였음. 세션 동안 되돌아가지 않는다.
    """
    model_config = ConfigDict(frozen=True)

    current_index: int = Field(default=0, ge=0)
    step_count: int = Field(..., ge=1)
    answers: Dict[str, str] = Field(default_factory=dict)
    errors: Dict[str, Optional[str]] = Field(default_factory=dict)
    attempted_advance: bool = False
    submitting: bool = False
    submission_succeeded: bool = False
    already_completed: bool = False

    @model_validator(mode='after')
    def validate_index_range(self) -> 'WizardState':
        if self.current_index >= self.step_count:
            raise ValueError(
                f"current_index({self.current_index})가 단계 수({self.step_count})를 벗어났습니다."
            )
        return self

    @property
    def phase(self) -> WizardPhase:
        if self.already_completed:
            return WizardPhase.ALREADY_COMPLETED
        if self.submission_succeeded:
            return WizardPhase.SUCCEEDED
        if self.submitting:
            return WizardPhase.SUBMITTING
        if self.current_index == self.step_count - 1:
            return WizardPhase.REVIEWING
        return WizardPhase.ANSWERING

    @property
    def is_terminal(self) -> bool:
        return self.phase in TERMINAL_PHASES

    @property
    def progress(self) -> float:
        """진행률 (0.0 ~ 1.0]: (current_index + 1) / step_count."""
        return (self.current_index + 1) / self.step_count
