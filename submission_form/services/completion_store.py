"""
services/completion_store.py

제출 완료 플래그 저장소 (Persistence Gate).
플래그 하나(불리언)만 저장하며 답안 내용은 남기지 않는다.
키가 없으면 '미완료'와 같다.
"""

import json
import logging
import os
import tempfile
from typing import Protocol

from config import COMPLETION_FLAG_KEY

logger = logging.getLogger(__name__)


class CompletionStore(Protocol):
    def has_completed(self) -> bool: ...

    def mark_completed(self) -> None: ...


class InMemoryCompletionStore:
    """프로세스 메모리에만 두는 저장소 (테스트용)."""

    def __init__(self, completed: bool = False):
        self.completed = completed

    def has_completed(self) -> bool:
        return self.completed

    def mark_completed(self) -> None:
        self.completed = True


class JsonFileCompletionStore:
    """
    로컬 JSON 파일에 완료 플래그를 기록하는 저장소 (Streamlit 앱용).

    파일 형식: {"submitted": true}
    파일이 없거나 읽을 수 없으면 미완료로 본다.
    """

    def __init__(self, path: str, key: str = COMPLETION_FLAG_KEY):
        self.path = path
        self.key = key

    def _load(self) -> dict:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"완료 플래그 파일을 읽지 못했습니다 ({self.path}): {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def has_completed(self) -> bool:
        return self._load().get(self.key) is True

    def mark_completed(self) -> None:
        data = self._load()
        data[self.key] = True
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)

        # 임시 파일에 쓴 뒤 교체 → 기록 도중 중단돼도 기존 파일은 온전하다
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise
        logger.info(f"완료 플래그 기록: {self.path}")
