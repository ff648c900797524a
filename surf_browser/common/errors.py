"""Session error taxonomy"""


class SessionError(Exception):
    """세션 엔진 오류의 기본 클래스

    세션 루프에서 잡아서 알림으로 보고하며, 프로세스를 종료시키지 않는다.
    """


class AllocationError(SessionError):
    """노드 생성 중 메모리 부족"""

    def __init__(self, what: str):
        super().__init__(f"Memory allocation failed for {what}!")
        self.what = what


class CapacityExceededError(SessionError):
    """탭 링이 가득 참 - 상태는 변경되지 않음"""

    def __init__(self, capacity: int):
        super().__init__(f"Maximum tabs reached! ({capacity})")
        self.capacity = capacity


class InvalidIndexError(SessionError):
    """탭 전환 / 선택 번호가 범위를 벗어남"""

    def __init__(self, index: int, limit: int, low: int = 1):
        super().__init__(f"Invalid index {index}! (expected {low}-{limit})")
        self.index = index
        self.limit = limit
        self.low = low


class InvalidURLError(SessionError, ValueError):
    """URL 검증 실패 - 어떤 구조도 변경되지 않음"""

    def __init__(self, url: str):
        super().__init__(f"Invalid URL format: {url!r}")
        self.url = url


class StoreIOError(SessionError):
    """저장 파일을 읽거나 쓸 수 없음 - 메모리 상태가 우선"""

    def __init__(self, path, action: str):
        super().__init__(f"Failed to {action} data file {path}")
        self.path = path
        self.action = action
