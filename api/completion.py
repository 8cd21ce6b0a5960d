"""
api/completion.py — 쿠키 기반 완료 플래그 저장소

브라우저의 로컬 스토리지 역할을 'submitted' 쿠키가 맡는다.
세션 생성 시 요청 쿠키 값으로 초기화되고, 완료 표시 후에는 미들웨어가 응답에 쿠키를 내려보낸다.
"""

from typing import Optional

COOKIE_TRUE = "true"


class CookieCompletionStore:
    def __init__(self, cookie_value: Optional[str] = None):
        self._completed = cookie_value == COOKIE_TRUE

    def has_completed(self) -> bool:
        return self._completed

    def mark_completed(self) -> None:
        self._completed = True
