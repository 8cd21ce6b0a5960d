"""
api/app.py — FastAPI 앱 인스턴스 + 세션 / 완료 쿠키 미들웨어
"""

import logging
import threading
import time
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

import config
from api.completion import COOKIE_TRUE, CookieCompletionStore
from api.config import (
    CLEANUP_INTERVAL, COMPLETION_COOKIE, COMPLETION_COOKIE_MAX_AGE,
    SESSION_COOKIE, SESSION_TTL,
)
from api.routes import router
import api.session as session
from submission_form.services.form_wizard import FormWizard, Submitter
from submission_form.services.registry import QuestionRegistry, default_registry
from submission_form.services.submission import SubmissionClient

logger = logging.getLogger(__name__)


def create_app(
    registry: Optional[QuestionRegistry] = None,
    submitter: Optional[Submitter] = None,
    cleanup: bool = True,
) -> FastAPI:
    app = FastAPI(title="SOCC Submissions", docs_url=None, redoc_url=None)
    app.state.registry = registry or default_registry()
    app.state.submitter = submitter or SubmissionClient(config.SUBMISSION_URL)

    # CORS (모바일 브라우저 등 다양한 출처 허용)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 세션 미들웨어: 쿠키에서 세션 ID를 읽고, 없으면 완료 쿠키를 반영한 새 위저드를 발급
    @app.middleware("http")
    async def session_middleware(request: Request, call_next):
        sid = request.cookies.get(SESSION_COOKIE)
        if not sid or session.get_session(sid) is None:
            store = CookieCompletionStore(request.cookies.get(COMPLETION_COOKIE))
            wizard = FormWizard(app.state.registry, store, app.state.submitter)
            sid = session.create_session(wizard, store)

        request.state.session_id = sid
        response: Response = await call_next(request)
        response.set_cookie(
            key=SESSION_COOKIE,
            value=sid,
            httponly=True,
            samesite="lax",
            max_age=SESSION_TTL,
        )

        store = session.get_store(sid)
        if store is not None and store.has_completed():
            response.set_cookie(
                key=COMPLETION_COOKIE,
                value=COOKIE_TRUE,
                samesite="lax",
                max_age=COMPLETION_COOKIE_MAX_AGE,
            )
        return response

    app.include_router(router)

    # 만료 세션 주기적 정리
    def _cleanup_loop():
        while True:
            time.sleep(CLEANUP_INTERVAL)
            removed = session.cleanup_expired()
            if removed:
                logger.info(f"만료 세션 {removed}개 정리")

    if cleanup:
        t = threading.Thread(target=_cleanup_loop, daemon=True)
        t.start()

    return app
