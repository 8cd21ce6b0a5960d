"""
services/validators.py

질문별 입력 검증 함수 모음.
모든 함수는 순수 함수 — 값 하나를 받아 오류 메시지(또는 None)를 반환하며 상태를 갖지 않는다.
"""

import re
from typing import Optional, Sequence

from pydantic import AnyUrl, TypeAdapter, ValidationError

from submission_form.models.question_model import Question, Validator

REQUIRED_MESSAGE = "this field is required"
ID_NUMBER_MESSAGE = "ID number must be exactly 10 digits"
LINK_REQUIRED_MESSAGE = "link is required"
INVALID_URL_MESSAGE = "enter a valid URL"
URL_SCHEME_MESSAGE = "URL must use http or https"
CHOICE_REQUIRED_MESSAGE = "please select an option"
CHOICE_UNKNOWN_MESSAGE = "please select one of the listed options"

_ID_NUMBER_RE = re.compile(r"[0-9]{10}")
_HTTP_SCHEMES = frozenset({"http", "https"})
_url_adapter = TypeAdapter(AnyUrl)


def required(value: str) -> Optional[str]:
    """빈 값이면 필수 입력 오류."""
    return REQUIRED_MESSAGE if not value else None


def id_number(value: str) -> Optional[str]:
    """
    학번 검증: 정확히 10자리 숫자만 허용.

    '١٢٣...' 같은 유니코드 숫자는 str.isdigit() 를 통과하므로 ASCII 범위 정규식을 쓴다.
    """
    if not value:
        return REQUIRED_MESSAGE
    if not _ID_NUMBER_RE.fullmatch(value):
        return ID_NUMBER_MESSAGE
    return None


def solution_url(value: str) -> Optional[str]:
    """
    풀이 링크 검증.

    오류 구분:
      - 빈 값             → LINK_REQUIRED_MESSAGE
      - 절대 URL 파싱 실패 → INVALID_URL_MESSAGE
      - http(s) 가 아님    → URL_SCHEME_MESSAGE
    """
    if not value:
        return LINK_REQUIRED_MESSAGE
    try:
        url = _url_adapter.validate_python(value)
    except ValidationError:
        return INVALID_URL_MESSAGE
    if url.scheme not in _HTTP_SCHEMES:
        return URL_SCHEME_MESSAGE
    return None


def choice(options: Sequence[str]) -> Validator:
    """선택지 목록에 묶인 선택형 질문 검증 함수를 만든다."""
    allowed = tuple(options)

    def _validate(value: str) -> Optional[str]:
        if not value:
            return CHOICE_REQUIRED_MESSAGE
        if value not in allowed:
            return CHOICE_UNKNOWN_MESSAGE
        return None

    return _validate


def validate(question: Question, value: str) -> Optional[str]:
    """질문에 붙은 검증 함수로 값을 검사. 리뷰 단계와 검증 함수가 없는 질문은 항상 통과."""
    if question.is_review or question.validator is None:
        return None
    return question.validator(value)
