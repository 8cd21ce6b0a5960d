"""
main.py — SOCC 제출 폼 진입점

API 서버(uvicorn)를 백그라운드 스레드로 띄우고, Streamlit 화면을 별도 프로세스로 실행한 뒤
화면이 준비되면 브라우저를 연다.
"""

import logging
import os
import socket
import subprocess
import sys
import threading
import time
import traceback
import webbrowser

from config import BASE_DIR, DEFAULT_HOST, DEFAULT_PORT, LOG_FILE, UI_PORT

STREAMLIT_APP = os.path.join(BASE_DIR, "submission_form", "streamlit_app.py")

logger = logging.getLogger(__name__)

# ── 로깅 설정 ────────────────────────────────────────────────────────────────

def _setup_logging() -> None:
    try:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            handlers=[
                logging.FileHandler(LOG_FILE, encoding='utf-8'),
                logging.StreamHandler(sys.stdout)
            ]
        )
    except PermissionError:
        # 로그 파일 점유 시 콘솔 출력만 사용
        logging.basicConfig(level=logging.INFO)

# ── 서버 및 네트워크 유틸 ───────────────────────────────────────────────────

def _wait_for_server(port: int, timeout: float = 15.0) -> bool:
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            with socket.create_connection((DEFAULT_HOST, port), timeout=0.5):
                return True
        except OSError:
            time.sleep(0.1)
    return False


def _start_server(port: int) -> None:
    try:
        import uvicorn
        from api.app import create_app
        logger.info(f"Uvicorn 서버 시작 - Port: {port}")
        app = create_app()
        uvicorn.run(app, host=DEFAULT_HOST, port=port, log_level="warning")
    except Exception:
        logger.error(f"서버 오류 발생:\n{traceback.format_exc()}")


def _streamlit_command(port: int) -> list[str]:
    """Streamlit 화면 실행 명령. 브라우저는 이쪽에서 직접 연다."""
    return [
        sys.executable, "-m", "streamlit", "run", STREAMLIT_APP,
        "--server.address", DEFAULT_HOST,
        "--server.port", str(port),
        "--server.headless", "true",
    ]

# ── 메인 실행 ────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    _setup_logging()
    logger.info("=== SOCC Submission Form Started ===")

    server_thread = threading.Thread(target=_start_server, args=(DEFAULT_PORT,), daemon=True)
    server_thread.start()

    # 루트 모듈(config 등)을 찾을 수 있도록 BASE_DIR 를 PYTHONPATH 에 추가
    env = dict(os.environ, PYTHONPATH=os.pathsep.join(filter(None, [BASE_DIR, os.getenv("PYTHONPATH")])))
    ui_process = subprocess.Popen(_streamlit_command(UI_PORT), cwd=BASE_DIR, env=env)

    if _wait_for_server(DEFAULT_PORT) and _wait_for_server(UI_PORT, timeout=30.0):
        logger.info("서버 준비 완료. 브라우저를 엽니다.")
        webbrowser.open(f"http://{DEFAULT_HOST}:{UI_PORT}")

        # 화면 프로세스가 끝날 때까지 유지
        try:
            ui_process.wait()
        except KeyboardInterrupt:
            logger.info("사용자에 의해 종료되었습니다.")
        finally:
            ui_process.terminate()
    else:
        ui_process.terminate()
        logger.error("서버 시작 제한 시간을 초과했습니다. 포트가 이미 사용 중인지 확인해 보세요.")
        sys.exit(1)
