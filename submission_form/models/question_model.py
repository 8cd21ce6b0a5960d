from enum import Enum
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

Validator = Callable[[str], Optional[str]]


class QuestionType(str, Enum):
    SHORT_TEXT = "short_text"
    LONG_TEXT = "long_text"
    RADIO = "radio"
    SELECT = "select"
    CODING_PROBLEM = "coding_problem"
    REVIEW = "review"


CHOICE_TYPES = (QuestionType.RADIO, QuestionType.SELECT)


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class Question(BaseModel):
    """
    제출 폼의 단일 질문(한 단계) 모델
    Pydantic v2 적용, 생성 후 불변
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        min_length=1,
        description="질문 키 (AnswerSet / ErrorSet 의 키로 사용)"
    )
    type: QuestionType = Field(
        ...,
        description="질문 유형 (입력 위젯과 검증 분기 기준)"
    )
    prompt: str = Field(
        ...,
        min_length=1,
        description="질문 문구"
    )
    description: Optional[str] = Field(
        None,
        description="부가 설명 (코딩 문제의 문제 요약 등)"
    )
    options: List[str] = Field(
        default_factory=list,
        description="선택지 리스트 (radio / select 전용)"
    )
    required: bool = Field(
        False,
        description="필수 입력 여부 (화면의 * 표시용)"
    )
    difficulty: Optional[Difficulty] = Field(
        None,
        description="코딩 문제 난이도 (coding_problem 전용)"
    )
    problem_url: Optional[str] = Field(
        None,
        description="원본 문제 링크 (coding_problem 전용)"
    )
    validator: Optional[Validator] = Field(
        None,
        exclude=True,
        description="값 → 오류 메시지(없으면 None) 순수 함수. 없으면 항상 통과."
    )

    @model_validator(mode='after')
    def validate_type_fields(self) -> 'Question':
        """
        검증 로직: 선택형 질문은 선택지가 있어야 하고,
        난이도는 코딩 문제에만 붙을 수 있다.
        """
        if self.type in CHOICE_TYPES and not self.options:
            raise ValueError(f"선택형 질문('{self.id}')에는 options 가 필요합니다.")
        if self.difficulty is not None and self.type != QuestionType.CODING_PROBLEM:
            raise ValueError(f"난이도는 coding_problem 질문에만 지정할 수 있습니다 ('{self.id}').")
        return self

    @property
    def is_review(self) -> bool:
        return self.type == QuestionType.REVIEW
