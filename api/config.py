import os

# 쿠키 설정
SESSION_COOKIE = "socc_session"
COMPLETION_COOKIE = "submitted"
COMPLETION_COOKIE_MAX_AGE = 10 * 365 * 24 * 3600  # 10년 (로컬 스토리지처럼 사실상 영구)

# 세션 설정
SESSION_TTL = int(os.getenv("SESSION_TTL", "3600"))  # 1시간
CLEANUP_INTERVAL = 300  # 만료 세션 정리 주기 (초)
