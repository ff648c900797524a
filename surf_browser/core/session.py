"""
SessionController - 탐색 이벤트를 각 구조로 연결

visit(url) 하나가 다음을 수행한다:
    HistoryLog.append → NavigationStack.push → TabRing.open
    → ContentCache 조회/저장 → PersistenceStore.save

전역 상태 대신 SessionContext 하나를 시작 시 만들고 종료 시 정리한다.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..bookmarks import BookmarkIndex
from ..common.config import SessionConfig
from ..common.constants import HOME_URL, STATIC_TIMESTAMP
from ..common.errors import (
    CapacityExceededError,
    InvalidIndexError,
    SessionError,
    StoreIOError,
)
from ..content import PageSource, TabRing
from ..history import HistoryLog, Navigator
from ..networking import BROWSER_NAMES, ContentCache, URLOpener, require_valid_url
from ..profiling import MeasureTime, Tracer, trace_instant
from ..storage import PersistenceStore

THEME_NAMES = ["Default", "Dark", "Light"]


@dataclass
class PageView:
    """fetch 결과 - 화면 표시용"""
    url: str
    content: str
    from_cache: bool = False
    found: bool = True
    timestamp: str = STATIC_TIMESTAMP


class SessionContext:
    """세션 동안 유지되는 상태 묶음"""

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        history: Optional[HistoryLog] = None,
        bookmarks: Optional[BookmarkIndex] = None,
    ):
        self.config = config or SessionConfig()
        self.history = history if history is not None else HistoryLog()
        self.bookmarks = bookmarks if bookmarks is not None else BookmarkIndex()
        self.navigator = Navigator(self.history)
        self.tabs = TabRing()
        self.cache = ContentCache()
        self.pages = PageSource()
        self.store = PersistenceStore(self.config.data_file)
        self.opener = URLOpener(self.config.browser_choice, self.config.open_external)
        self.theme = self.config.theme

    @classmethod
    def restore(cls, config: SessionConfig) -> Tuple["SessionContext", Optional[StoreIOError]]:
        """저장 파일에서 복원한 컨텍스트, 읽기 실패 시 빈 컨텍스트와 오류"""
        store = PersistenceStore(config.data_file)
        try:
            history, bookmarks = store.load()
        except StoreIOError as e:
            return cls(config), e
        return cls(config, history, bookmarks), None


class SessionController:
    def __init__(self, context: SessionContext):
        self.context = context
        self.notices: List[str] = []

        # 히스토리/북마크가 바뀔 때마다 합쳐진 스냅샷 하나를 저장
        context.history.on_change = self.save
        context.bookmarks.on_change = self.save

    @classmethod
    def start(cls, config: Optional[SessionConfig] = None) -> "SessionController":
        """저장 파일을 불러오고 home 으로 이동한 세션"""
        config = config or SessionConfig()
        if config.trace_file:
            Tracer.get().enable(config.trace_file)

        context, error = SessionContext.restore(config)
        controller = cls(context)
        if error:
            controller.notify(str(error))
        controller.go_home()
        return controller

    # === 편의 속성 ===

    @property
    def history(self) -> HistoryLog:
        return self.context.history

    @property
    def bookmarks(self) -> BookmarkIndex:
        return self.context.bookmarks

    @property
    def tabs(self) -> TabRing:
        return self.context.tabs

    @property
    def cache(self) -> ContentCache:
        return self.context.cache

    @property
    def navigator(self) -> Navigator:
        return self.context.navigator

    @property
    def current_url(self) -> Optional[str]:
        return self.tabs.current_url

    # === 알림 ===

    def notify(self, message: str):
        """세션을 멈추지 않는 오류/경고를 UI 로 전달"""
        self.notices.append(message)

    def drain_notices(self) -> List[str]:
        notices, self.notices = self.notices, []
        return notices

    # === 저장 ===

    def save(self):
        """스냅샷 저장 - 실패해도 메모리 상태가 우선"""
        try:
            self.context.store.save(self.history, self.bookmarks)
        except StoreIOError as e:
            self.notify(f"Failed to save data! ({e})")

    # === 탐색 ===

    def fetch(self, url: str) -> PageView:
        """캐시 우선으로 콘텐츠를 가져옴, home 이 아니면 외부 브라우저로도 연다"""
        with MeasureTime("fetch", "content", {"url": url}):
            if url != HOME_URL:
                self.context.opener.open(url)

            cached = self.cache.get(url)
            if cached is not None:
                return PageView(url, cached, from_cache=True,
                                found=self.context.pages.is_known(url))

            content = self.context.pages.fetch(url)
            self.cache.put(url, content)
            return PageView(url, content, found=self.context.pages.is_known(url))

    def _open_tab(self, url: str):
        # 탭이 가득 차도 탐색은 계속 진행
        try:
            self.tabs.open(url)
        except CapacityExceededError as e:
            self.notify(str(e))

    def visit(self, url: str) -> PageView:
        """정방향 탐색 - home 외의 URL 은 먼저 검증"""
        if url != HOME_URL:
            require_valid_url(url)

        with MeasureTime("visit", "session", {"url": url}):
            self.navigator.visit(url)
            self._open_tab(url)
            return self.fetch(url)

    def suggest(self, prefix: str) -> List[str]:
        return self.history.suggest(prefix)

    def enter_url(self, url: str) -> PageView:
        return self.visit(url)

    def new_tab(self, url: str) -> PageView:
        """새 탭 - 입력한 URL 로 탐색하면 current 바로 뒤에 탭이 열린다"""
        return self.visit(url)

    def go_home(self) -> PageView:
        return self.visit(HOME_URL)

    def refresh(self) -> Optional[PageView]:
        """현재 탭 다시 표시, 열린 탭이 없으면 None"""
        url = self.current_url
        if url is None:
            return None
        return self.fetch(url)

    def go_back(self) -> Optional[PageView]:
        """이전 페이지로, 돌아갈 곳이 없으면 None"""
        with MeasureTime("go_back", "session"):
            previous = self.navigator.go_back()
            if previous is None:
                return None
            self._open_tab(previous)
            return self.fetch(previous)

    def switch_tab(self, index: int) -> PageView:
        url = self.tabs.switch_to(index)
        return self.fetch(url)

    # === 히스토리 ===

    def clear_history(self):
        self.history.clear()

    def search_history(self, keyword: str) -> List[Tuple[int, str]]:
        return self.history.search(keyword)

    def visit_search_result(self, keyword: str, choice: int) -> PageView:
        """검색 결과 중 choice 번째(1부터) URL 로 이동"""
        matches = self.search_history(keyword)
        if choice < 1 or choice > len(matches):
            raise InvalidIndexError(choice, len(matches))
        return self.visit(matches[choice - 1][1])

    # === 북마크 ===

    def add_bookmark(self) -> bool:
        """현재 탭을 북마크, 이미 있으면 False"""
        url = self.current_url
        if url is None:
            raise SessionError("No active tab to bookmark!")
        added = self.bookmarks.add(url)
        if not added:
            trace_instant("bookmark_exists", "bookmarks", {"url": url})
        return added

    def view_bookmarks(self) -> List[str]:
        """전위 순회 순서의 북마크 목록"""
        return self.bookmarks.list()

    def visit_bookmark(self, choice: int) -> PageView:
        urls = self.view_bookmarks()
        if choice < 1 or choice > len(urls):
            raise InvalidIndexError(choice, len(urls))
        return self.visit(urls[choice - 1])

    # === 설정 ===

    def set_browser(self, choice: int) -> str:
        if choice not in BROWSER_NAMES:
            raise InvalidIndexError(choice, len(BROWSER_NAMES) - 1, low=0)
        self.context.opener.set_browser(choice)
        return BROWSER_NAMES[choice]

    def set_theme(self, choice: int) -> str:
        if choice < 0 or choice >= len(THEME_NAMES):
            raise InvalidIndexError(choice, len(THEME_NAMES) - 1, low=0)
        self.context.theme = choice
        return THEME_NAMES[choice]

    def shutdown(self):
        """마지막 스냅샷 저장 후 트레이스 종료"""
        self.save()
        Tracer.get().finish()
