"""
ContentCache - URL → 콘텐츠 체이닝 해시 테이블

- 버킷 수는 HASH_SIZE(100) 고정
- put 은 항상 버킷 맨 앞에 새 항목을 붙인다 (기존 항목 교체/삭제 없음)
- get 은 버킷 맨 앞부터 찾으므로 가장 최근에 넣은 항목이 이전 항목을 가린다
- 제거 정책 없음
"""
from typing import Iterator, List, Optional

from ..common.constants import HASH_SIZE, clip_content, clip_url
from ..common.errors import AllocationError


def url_hash(url: str, size: int = HASH_SIZE) -> int:
    """h = (h * 31 + byte) % size, 바이트마다 나머지 연산"""
    h = 0
    for byte in url.encode("utf-8"):
        h = (h * 31 + byte) % size
    return h


class CacheEntry:
    __slots__ = ("url", "content", "next")

    def __init__(self, url: str, content: str, next: Optional["CacheEntry"] = None):
        self.url = url
        self.content = content
        self.next = next

    def __repr__(self) -> str:
        return f"CacheEntry({self.url!r})"


class ContentCache:
    def __init__(self, size: int = HASH_SIZE):
        self.size = size
        self._table: List[Optional[CacheEntry]] = [None] * size
        self._count = 0

    def __len__(self) -> int:
        """중복 포함 전체 항목 수"""
        return self._count

    def hash(self, url: str) -> int:
        return url_hash(url, self.size)

    def get(self, url: str) -> Optional[str]:
        """캐시에서 조회, 없으면 None"""
        url = clip_url(url)
        entry = self._table[self.hash(url)]
        while entry:
            if entry.url == url:
                return entry.content
            entry = entry.next
        return None

    def put(self, url: str, content: str):
        """캐시 저장 - 같은 URL 이 있어도 새 항목을 앞에 추가"""
        url = clip_url(url)
        index = self.hash(url)
        try:
            self._table[index] = CacheEntry(url, clip_content(content), self._table[index])
        except MemoryError as e:
            raise AllocationError("cache entry") from e
        self._count += 1

    def bucket(self, index: int) -> Iterator[CacheEntry]:
        """버킷 체인 순회 (head 부터)"""
        entry = self._table[index]
        while entry:
            yield entry
            entry = entry.next
