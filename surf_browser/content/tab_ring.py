"""
TabRing - 열린 탭의 원형 목록

노드끼리 직접 참조하지 않고, 탭 레코드 배열(arena)에 정수 인덱스로 next/prev 를 저장한다.
current 는 arena 인덱스이며, 탭 번호는 항상 current 에서부터 센다.
(같은 번호라도 이전 탐색에 따라 다른 탭을 가리킬 수 있음)
"""
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..common.constants import MAX_TABS, clip_url
from ..common.errors import AllocationError, CapacityExceededError, InvalidIndexError
from ..profiling import trace_instant


@dataclass
class TabRecord:
    """arena 에 저장되는 탭 하나"""
    url: str
    next: int
    prev: int


class TabRing:
    def __init__(self, capacity: int = MAX_TABS):
        self.capacity = capacity
        self._arena: List[TabRecord] = []
        self.current: Optional[int] = None

    def __len__(self) -> int:
        return len(self._arena)

    @property
    def count(self) -> int:
        return len(self._arena)

    @property
    def current_url(self) -> Optional[str]:
        if self.current is None:
            return None
        return self._arena[self.current].url

    def is_full(self) -> bool:
        return len(self._arena) >= self.capacity

    def open(self, url: str) -> int:
        """current 바로 뒤에 새 탭을 열고 current 로 지정

        가득 차 있으면 CapacityExceededError (상태 변경 없음)
        """
        if self.is_full():
            trace_instant("tab_capacity_exceeded", "tabs", {"url": url})
            raise CapacityExceededError(self.capacity)

        index = len(self._arena)
        try:
            if self.current is None:
                # 탭 하나짜리 링
                record = TabRecord(clip_url(url), next=index, prev=index)
            else:
                cur = self._arena[self.current]
                record = TabRecord(clip_url(url), next=cur.next, prev=self.current)
            self._arena.append(record)
        except MemoryError as e:
            raise AllocationError("tab") from e

        if self.current is not None:
            cur = self._arena[self.current]
            self._arena[cur.next].prev = index
            cur.next = index

        self.current = index
        return index

    def switch_to(self, index: int) -> str:
        """current 에서부터 센 index 번째(1부터) 탭으로 전환

        1 은 current 자신, 2 는 current.next ...
        """
        if index < 1 or index > len(self._arena):
            raise InvalidIndexError(index, len(self._arena))

        node = self.current
        for _ in range(index - 1):
            node = self._arena[node].next
        self.current = node
        return self._arena[node].url

    def __iter__(self) -> Iterator[str]:
        """current 에서 시작해 링을 한 바퀴 순회"""
        if self.current is None:
            return
        node = self.current
        while True:
            yield self._arena[node].url
            node = self._arena[node].next
            if node == self.current:
                break

    def list(self) -> List[Tuple[str, bool]]:
        """(url, current 여부) 목록 - current 가 첫 번째"""
        return [(url, i == 0) for i, url in enumerate(self)]

    def check(self):
        """링 연결이 대칭인지 확인 (테스트/디버깅용)"""
        for i, record in enumerate(self._arena):
            assert self._arena[record.next].prev == i
            assert self._arena[record.prev].next == i
