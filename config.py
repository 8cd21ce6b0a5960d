import os

# 기본 디렉토리 설정
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# 경로 설정
LOG_FILE = os.path.join(BASE_DIR, "launch.log")
DATA_DIR = os.getenv("SUBMISSION_DATA_DIR", os.path.join(BASE_DIR, "data"))
COMPLETION_FILE = os.path.join(DATA_DIR, "completion.json")

# 서버 설정
DEFAULT_HOST = os.getenv("HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("PORT", "8000"))
UI_PORT = int(os.getenv("UI_PORT", "8501"))   # Streamlit 화면

# 제출 엔드포인트 설정
SUBMISSION_URL = os.getenv(
    "SUBMISSION_URL",
    "https://9ojwkihuf2.execute-api.us-east-1.amazonaws.com/prod",
)

# 폼 설정
COMPLETION_FLAG_KEY = "submitted"      # 완료 플래그 저장 키 (쿠키 / JSON 파일 공통)
FEEDBACK_ANSWER_ID = "finalComments"   # 리뷰 단계에서 입력하는 자유 의견 키
PLACEHOLDER = "-"                      # 미입력 필드의 전송값
