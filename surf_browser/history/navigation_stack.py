"""NavigationStack - 뒤로 가기 계산용 LIFO"""
from typing import Iterator, Optional

from ..common.constants import clip_url
from ..common.errors import AllocationError


class StackFrame:
    __slots__ = ("url", "next")

    def __init__(self, url: str, next: Optional["StackFrame"] = None):
        self.url = url
        self.next = next

    def __repr__(self) -> str:
        return f"StackFrame({self.url!r})"


class NavigationStack:
    def __init__(self):
        self.top: Optional[StackFrame] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        """top 부터 bottom 까지"""
        frame = self.top
        while frame:
            yield frame.url
            frame = frame.next

    def push(self, url: str):
        try:
            self.top = StackFrame(clip_url(url), self.top)
        except MemoryError as e:
            raise AllocationError("stack frame") from e
        self._size += 1

    def pop(self) -> Optional[str]:
        """top 프레임을 제거하고 URL 반환, 비어 있으면 None"""
        if self.top is None:
            return None
        frame = self.top
        self.top = frame.next
        self._size -= 1
        return frame.url

    def peek(self) -> Optional[str]:
        return self.top.url if self.top else None
