"""
BookmarkIndex - 사전순 BST 로 저장하는 북마크

- insert_unchecked: 중복 검사 없이 삽입 (같은 키는 오른쪽으로) - 저장 파일 복원에 사용
- add: contains 로 먼저 확인하는 유일한 중복 안전 경로
- 표시와 저장은 전위 순회(node → left → right) 순서
"""
from typing import Callable, Iterator, List, Optional

from ..common.constants import clip_url
from ..common.errors import AllocationError


class BookmarkNode:
    __slots__ = ("url", "left", "right")

    def __init__(self, url: str):
        self.url = url
        self.left: Optional["BookmarkNode"] = None
        self.right: Optional["BookmarkNode"] = None

    def __repr__(self) -> str:
        return f"BookmarkNode({self.url!r})"


class BookmarkIndex:
    def __init__(self, on_change: Optional[Callable[[], None]] = None):
        self.root: Optional[BookmarkNode] = None
        self._count = 0

        # 북마크가 추가될 때 호출 (세션에서 저장을 연결)
        self.on_change = on_change

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[str]:
        return (node.url for node in self.traverse_pre_order())

    def __contains__(self, url: str) -> bool:
        return self.contains(url)

    def contains(self, url: str) -> bool:
        node = self.root
        while node:
            if url == node.url:
                return True
            node = node.left if url < node.url else node.right
        return False

    def insert_unchecked(self, url: str) -> BookmarkNode:
        """BST 삽입 - 같은 키가 있어도 오른쪽에 새 노드를 만든다"""
        url = clip_url(url)
        try:
            new_node = BookmarkNode(url)
        except MemoryError as e:
            raise AllocationError("bookmark") from e

        if self.root is None:
            self.root = new_node
        else:
            node = self.root
            while True:
                if url < node.url:
                    if node.left is None:
                        node.left = new_node
                        break
                    node = node.left
                else:
                    if node.right is None:
                        node.right = new_node
                        break
                    node = node.right

        self._count += 1
        return new_node

    def add(self, url: str) -> bool:
        """북마크 추가, 이미 있으면 False"""
        if self.contains(clip_url(url)):
            return False
        self.insert_unchecked(url)
        if self.on_change:
            self.on_change()
        return True

    def traverse_pre_order(self) -> Iterator[BookmarkNode]:
        """명시적 스택으로 전위 순회 - 호출할 때마다 처음부터 다시 시작"""
        stack = [self.root] if self.root else []
        while stack:
            node = stack.pop()
            yield node
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)

    def list(self) -> List[str]:
        return [node.url for node in self.traverse_pre_order()]

    def count_of(self, url: str) -> int:
        """url 키를 가진 노드 수 (복원 경로의 중복 확인용)"""
        return sum(1 for node in self.traverse_pre_order() if node.url == url)
