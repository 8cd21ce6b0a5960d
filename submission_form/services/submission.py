"""
services/submission.py

답안 제출 서비스.
Public API:
  - SubmissionPayload.from_answers(answers) : 답안 → 전송 본문 (미입력은 "-")
  - SubmissionClient.submit(answers)        : 원격 엔드포인트로 1회 POST

설계 원칙:
- 제출 버튼 1회 = 요청 1회. 재시도 / 백오프 / 타임아웃 없음
- 전송 실패, 2xx 외 상태, JSON 파싱 실패는 모두 SubmissionError 하나로 분류
"""

import logging
from typing import Any, Mapping, Optional

import httpx
from pydantic import BaseModel

from config import FEEDBACK_ANSWER_ID, PLACEHOLDER

logger = logging.getLogger(__name__)


class SubmissionError(RuntimeError):
    """제출 요청 실패 (네트워크 / 상태 코드 / 응답 본문)."""


class SubmissionPayload(BaseModel):
    """원격 엔드포인트가 받는 JSON 본문. 모든 키가 항상 존재한다."""
    name: str
    id: str
    dept: str
    batch: str
    q1_link: str
    q2_link: str
    feedback: str

    @classmethod
    def from_answers(cls, answers: Mapping[str, str]) -> "SubmissionPayload":
        def pick(key: str) -> str:
            return answers.get(key) or PLACEHOLDER

        return cls(
            name=pick("name"),
            id=pick("idNumber"),
            dept=pick("department"),
            batch=pick("batch"),
            q1_link=pick("problem1"),
            q2_link=pick("problem2"),
            feedback=pick(FEEDBACK_ANSWER_ID),
        )


class SubmissionReceipt(BaseModel):
    """성공 응답 (2xx + JSON 본문)."""
    status_code: int
    body: Any = None


class SubmissionClient:
    """
    원격 제출 엔드포인트 클라이언트.

    Args:
        url:       POST 대상 URL.
        transport: 테스트용 httpx 전송 계층 (httpx.MockTransport 등). None 이면 실제 네트워크.
    """

    def __init__(self, url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self._transport = transport

    async def submit(self, answers: Mapping[str, str]) -> SubmissionReceipt:
        payload = SubmissionPayload.from_answers(answers)

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
                response = await client.post(self.url, json=payload.model_dump())
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            raise SubmissionError(f"HTTP error! Status: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise SubmissionError(f"요청 전송 실패: {e}") from e
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError 모두 ValueError
            raise SubmissionError(f"응답 본문이 JSON 이 아닙니다: {e}") from e

        logger.info(f"제출 응답: {body}")
        return SubmissionReceipt(status_code=response.status_code, body=body)
