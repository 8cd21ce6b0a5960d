"""
services/registry.py

질문 목록(Question Registry).
프로세스 시작 시 한 번 만들어지고 이후 변경되지 않는다.
목록 순서가 곧 위저드의 진행 순서이며, 마지막 항목은 항상 리뷰 단계다.
"""

from typing import Dict, Iterator, List, Sequence, Tuple

from submission_form.models.question_model import Difficulty, Question, QuestionType
from submission_form.services import validators


class QuestionRegistry:
    """순서가 있는 읽기 전용 질문 카탈로그."""

    def __init__(self, questions: Sequence[Question]):
        if not questions:
            raise ValueError("질문 목록이 비어 있습니다.")
        by_id: Dict[str, Question] = {}
        for q in questions:
            if q.id in by_id:
                raise ValueError(f"중복된 질문 id: '{q.id}'")
            by_id[q.id] = q
        if not questions[-1].is_review:
            raise ValueError("마지막 질문은 review 유형이어야 합니다.")

        self._questions: Tuple[Question, ...] = tuple(questions)
        self._by_id = by_id

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __getitem__(self, index: int) -> Question:
        return self._questions[index]

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._by_id

    def by_id(self, question_id: str) -> Question:
        """id 로 질문 조회. 없으면 KeyError."""
        return self._by_id[question_id]

    def index_of(self, question_id: str) -> int:
        return self._questions.index(self._by_id[question_id])

    def coding_problems(self) -> List[Question]:
        """리뷰 화면 요약용: 코딩 문제만 원래 순서대로."""
        return [q for q in self._questions if q.type == QuestionType.CODING_PROBLEM]


_BATCH_OPTIONS = ["Y24", "Y23", "Y22", "Y21", "Other"]

# ── SOCC Leetcode Live (Arrays edition) 질문 ───────────────────────────────────
_DEFAULT_QUESTIONS: List[Question] = [
    Question(
        id="name", type=QuestionType.SHORT_TEXT,
        prompt="What's your name?",
        required=True,
        validator=validators.required,
    ),
    Question(
        id="idNumber", type=QuestionType.SHORT_TEXT,
        prompt="What's your ID Number?",
        required=True,
        validator=validators.id_number,
    ),
    Question(
        id="department", type=QuestionType.SHORT_TEXT,
        prompt="What's your Department?",
        required=True,
        validator=validators.required,
    ),
    Question(
        id="batch", type=QuestionType.SELECT,
        prompt="What's your Batch?",
        options=_BATCH_OPTIONS,
        required=True,
        validator=validators.choice(_BATCH_OPTIONS),
    ),
    Question(
        id="problem1", type=QuestionType.CODING_PROBLEM,
        prompt="Stock Buy and Sell",
        description=(
            "You are given an array prices where prices[i] is the price of a given "
            "stock on the ith day. Find the maximum profit you can achieve."
        ),
        difficulty=Difficulty.EASY,
        problem_url="https://leetcode.com/problems/best-time-to-buy-and-sell-stock/",
        required=True,
        validator=validators.solution_url,
    ),
    Question(
        id="problem2", type=QuestionType.CODING_PROBLEM,
        prompt="Move Zeroes",
        description=(
            "Given an integer array nums, move all 0's to the end of it while "
            "maintaining the relative order of the non-zero elements."
        ),
        difficulty=Difficulty.EASY,
        problem_url="https://leetcode.com/problems/move-zeroes/",
        required=True,
        validator=validators.solution_url,
    ),
    Question(
        id="review", type=QuestionType.REVIEW,
        prompt="Review your submission",
    ),
]

_DEFAULT_REGISTRY = QuestionRegistry(_DEFAULT_QUESTIONS)


def default_registry() -> QuestionRegistry:
    return _DEFAULT_REGISTRY
