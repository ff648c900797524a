# History layer - 방문 기록과 뒤로 가기
from .history_log import HistoryLog, HistoryEntry
from .navigation_stack import NavigationStack, StackFrame
from .navigator import Navigator

__all__ = [
    'HistoryLog',
    'HistoryEntry',
    'NavigationStack',
    'StackFrame',
    'Navigator',
]
