"""
Navigator - "뒤로 가기"의 유일한 소유자

HistoryLog 의 current 커서와 NavigationStack 이 각자 "이전 페이지"를 계산하면
검색/북마크 재방문 이후 서로 달라질 수 있다.
그래서 둘을 함께 들고 있는 이 클래스만 visit / go_back 을 제공한다.

- 스택의 top 은 항상 현재 표시 중인 페이지
- go_back: top 을 꺼내고, 새 top 이 이전 페이지가 된다
- 히스토리 current 는 새 top 과 같은 가장 가까운 이전 항목으로
  (분기 탐색 뒤에도 표시 중인 페이지와 일치, 직전 항목이 없으면 그대로)
"""
from typing import Optional

from .history_log import HistoryLog
from .navigation_stack import NavigationStack
from ..profiling import MeasureTime, trace_instant


class Navigator:
    def __init__(self, history: HistoryLog, stack: Optional[NavigationStack] = None):
        self.history = history
        self.stack = stack if stack is not None else NavigationStack()

    @property
    def current(self) -> Optional[str]:
        return self.stack.peek()

    def can_go_back(self) -> bool:
        return len(self.stack) > 1

    def visit(self, url: str):
        """정방향 이동 - 히스토리에 추가하고 스택에 push"""
        with MeasureTime("navigator_visit", "history"):
            self.history.append(url)
            self.stack.push(url)

    def go_back(self) -> Optional[str]:
        """이전 페이지 URL 반환, 돌아갈 곳이 없으면 None (상태 변경 없음)"""
        if not self.can_go_back():
            trace_instant("go_back_empty", "history")
            return None

        self.stack.pop()
        previous = self.stack.peek()
        self.history.rewind_to(previous)
        return previous
