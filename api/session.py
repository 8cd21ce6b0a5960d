"""
api/session.py — 멀티유저 인메모리 세션 (쿠키 기반)

각 사용자에게 UUID 세션 ID를 발급하고, 세션별로 독립된 FormWizard 를 유지.
TTL(기본 1시간) 경과 시 자동 만료. 만료되면 작성 중이던 답안도 사라지며
완료 플래그만 쿠키로 남는다.
"""

import threading
import time
import uuid
from typing import Optional

from api.config import SESSION_TTL
from api.completion import CookieCompletionStore
from submission_form.services.form_wizard import FormWizard

_lock = threading.Lock()
_sessions: dict[str, FormWizard] = {}
_stores: dict[str, CookieCompletionStore] = {}
_timestamps: dict[str, float] = {}


def create_session(wizard: FormWizard, store: CookieCompletionStore) -> str:
    """새 세션을 생성하고 세션 ID를 반환."""
    sid = uuid.uuid4().hex
    with _lock:
        _sessions[sid] = wizard
        _stores[sid] = store
        _timestamps[sid] = time.time()
    return sid


def _expire(sid: str) -> None:
    del _sessions[sid]
    del _stores[sid]
    del _timestamps[sid]


def get_session(sid: str) -> Optional[FormWizard]:
    """세션 ID로 위저드를 가져옴. 만료되었거나 없으면 None."""
    with _lock:
        if sid not in _sessions:
            return None
        if time.time() - _timestamps[sid] > SESSION_TTL:
            _expire(sid)
            return None
        _timestamps[sid] = time.time()  # 접근 시 갱신
        return _sessions[sid]


def get_store(sid: str) -> Optional[CookieCompletionStore]:
    """세션의 완료 플래그 저장소."""
    with _lock:
        return _stores.get(sid)


def cleanup_expired() -> int:
    """만료된 세션을 정리. 제거된 수 반환."""
    now = time.time()
    removed = 0
    with _lock:
        expired = [sid for sid, ts in _timestamps.items() if now - ts > SESSION_TTL]
        for sid in expired:
            _expire(sid)
            removed += 1
    return removed


def clear() -> None:
    """모든 세션 제거."""
    with _lock:
        _sessions.clear()
        _stores.clear()
        _timestamps.clear()
