"""
HistoryLog - 방문한 URL의 추가 전용 기록

- 모든 방문(home, 검색 결과/북마크 재방문 포함)마다 항목이 하나씩 추가된다
- current 커서는 현재 표시 중인 항목을 가리키며, 뒤로 가기 후에는 tail 보다 뒤처질 수 있다
- 항목은 생성 후 변경되지 않고, clear() 에서만 제거된다
"""
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

from ..common.constants import MAX_SUGGESTIONS, clip_url
from ..common.errors import AllocationError
from ..profiling import MeasureTime


@dataclass(frozen=True)
class HistoryEntry:
    """히스토리 항목 (불변)"""
    url: str


class HistoryLog:
    def __init__(self, on_change: Optional[Callable[[], None]] = None):
        self._entries: List[HistoryEntry] = []
        self._current: Optional[int] = None

        # 항목이 추가/삭제될 때 호출 (세션에서 저장을 연결)
        self.on_change = on_change

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        """head 에서 tail 까지 URL 순회"""
        return (entry.url for entry in self._entries)

    @property
    def size(self) -> int:
        return len(self._entries)

    @property
    def current(self) -> Optional[str]:
        """현재 표시 중인 URL, 비어 있으면 None"""
        if self._current is None:
            return None
        return self._entries[self._current].url

    def append(self, url: str) -> HistoryEntry:
        """tail 뒤에 항목을 추가하고 current 로 지정"""
        try:
            entry = HistoryEntry(clip_url(url))
            self._entries.append(entry)
        except MemoryError as e:
            raise AllocationError("history entry") from e

        self._current = len(self._entries) - 1
        self._changed()
        return entry

    def rewind_current(self) -> Optional[str]:
        """current 를 직전 항목으로 옮김

        직전 항목이 없으면(current 가 head 이거나 비어 있음) 아무것도 하지 않고 None 반환
        """
        if not self._current:
            return None
        self._current -= 1
        return self._entries[self._current].url

    def rewind_to(self, url: str) -> Optional[str]:
        """current 앞쪽에서 url 과 같은 가장 가까운 항목으로 current 를 옮김

        그런 항목이 없으면(히스토리가 지워진 뒤 등) rewind_current 와 같다
        """
        if not self._current:
            return None
        for i in range(self._current - 1, -1, -1):
            if self._entries[i].url == url:
                self._current = i
                return url
        return self.rewind_current()

    def clear(self):
        """모든 항목 제거 후 빈 기록을 저장"""
        self._entries.clear()
        self._current = None
        self._changed()

    def search(self, substring: str) -> List[Tuple[int, str]]:
        """substring 을 포함하는 URL 목록 (대소문자 구분)

        결과는 (1부터 시작하는 번호, url) 쌍이며 순회 순서를 따른다
        """
        with MeasureTime("history_search", "history"):
            matches = [url for url in self if substring in url]
        return list(enumerate(matches, start=1))

    def suggest(self, prefix: str) -> List[str]:
        """prefix 로 시작하는 URL 을 최대 MAX_SUGGESTIONS 개, 먼저 찾은 순서대로"""
        suggestions = []
        for url in self:
            if len(suggestions) >= MAX_SUGGESTIONS:
                break
            if url.startswith(prefix):
                suggestions.append(url)
        return suggestions

    def list(self) -> List[Tuple[str, bool]]:
        """(url, current 여부) 목록 - 표시용"""
        return [(entry.url, i == self._current) for i, entry in enumerate(self._entries)]

    def _changed(self):
        if self.on_change:
            self.on_change()
