# 세션 엔진 전역 상수

URL_LEN = 100          # 저장되는 URL은 URL_LEN - 1 글자까지
CONTENT_LEN = 500      # 캐시되는 콘텐츠는 CONTENT_LEN - 1 글자까지
HASH_SIZE = 100
MAX_TABS = 10
MAX_SUGGESTIONS = 5

MIN_URL_LEN = 3
URL_ALLOWED_SYMBOLS = ".-/:?&="

HOME_URL = "home"
DATA_FILE = "browser_data.txt"
TRACE_FILE = "trace.json"

# 실제 시계는 사용하지 않음
STATIC_TIMESTAMP = "Fri May 23 23:10:00 IST 2025"


def clip_url(url: str) -> str:
    """고정 길이 버퍼에 맞게 URL을 자름"""
    return url[:URL_LEN - 1]


def clip_content(content: str) -> str:
    return content[:CONTENT_LEN - 1]
