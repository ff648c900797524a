"""
Chrome - 터미널 화면 구성

각 paint_* 메서드는 출력할 줄 목록을 반환하고, 실제 출력은 Shell 이 담당한다.
"""
from typing import List, Optional, Tuple

from ..common.constants import HOME_URL
from .theme import colorize, get_theme

RULE = "----------------"
WIDE_RULE = "============================================="

MENU_ITEMS = [
    "Enter New URL",
    "Refresh Page",
    "Go Back",
    "Go Home",
    "New Tab",
    "Switch Tab",
    "Set Browser",
    "Clear History",
    "Search History",
    "Change Theme",
    "Add Bookmark",
    "View Bookmarks",
    "Exit Browser",
]


class Chrome:
    def __init__(self, controller, color: bool = True):
        self.controller = controller
        self.color = color

    @property
    def theme(self):
        return get_theme(self.controller.context.theme)

    def _c(self, text: str, color: str) -> str:
        return colorize(text, color, self.color)

    def paint_header(self) -> List[str]:
        return [self._c(line, self.theme.header) for line in (
            WIDE_RULE,
            "|      Pranav's Surf Browser v4.1           |",
            "|  Powered by Advanced C Data Structures    |",
            WIDE_RULE,
            "",
        )]

    def paint_fake_features(self) -> List[str]:
        return [self._c(line, self.theme.text) for line in (
            "--- Advanced Features ---",
            "  * SSL Encryption: Secure Browsing Enabled",
            "  * CloudSync Serverless Backend: Active",
            "  * Firewall Protection: Intrusion Blocked",
            "  * AI-Powered Threat Detection: Running",
            "-------------------------",
            "",
        )]

    def paint_page(self, view) -> List[str]:
        lines = [
            self._c(f"Current URL: {view.url}", "green"),
            self._c(f"Current Time: {view.timestamp}", self.theme.text),
            "",
        ]
        if view.url == HOME_URL and not view.from_cache:
            lines += self.paint_fake_features()
        lines += ["Web Content:", WIDE_RULE]
        body = view.content.rstrip("\n").split("\n")
        if not view.found:
            body = [self._c(line, "red") for line in body]
        lines += body
        lines += [WIDE_RULE, ""]
        return lines

    def _paint_marked(self, title: str, empty: str, items: List[Tuple[str, bool]]) -> List[str]:
        lines = [title, RULE]
        if not items:
            lines.append(empty)
        for i, (url, is_current) in enumerate(items, start=1):
            marker = "> " if is_current else "  "
            lines.append(f"{marker}{i}. {url}")
        lines += [RULE, ""]
        return [self._c(line, self.theme.text) for line in lines]

    def paint_tabs(self) -> List[str]:
        return self._paint_marked("Open Tabs:", "No tabs open!", self.controller.tabs.list())

    def paint_history(self) -> List[str]:
        return self._paint_marked("Browsing History:", "No history yet!", self.controller.history.list())

    def paint_suggestions(self, suggestions: List[str]) -> List[str]:
        lines = ["Suggested URLs:", RULE]
        lines += [f"  {url}" for url in suggestions] or ["  No suggestions found."]
        lines += [RULE, ""]
        return [self._c(line, self.theme.text) for line in lines]

    def paint_numbered(self, title: str, empty: str, urls: List[str], start: int = 1) -> List[str]:
        lines = [title, RULE]
        lines += [f"  {i}. {url}" for i, url in enumerate(urls, start=start)] or [empty]
        lines.append(RULE)
        return [self._c(line, self.theme.text) for line in lines]

    def paint_menu(self) -> List[str]:
        lines = ["Navigation Menu:", "----------------------------"]
        for i, item in enumerate(MENU_ITEMS, start=1):
            label = f"[{i}] {item}"
            lines.append(f"| {label:<25}|")
        lines.append("----------------------------")
        return [self._c(line, self.theme.menu) for line in lines]

    def paint_status(self, message: str, ok: bool = True) -> List[str]:
        return [self._c(message, "green" if ok else "red")]

    def paint_overview(self, view: Optional[object] = None) -> List[str]:
        """페이지 + 탭 + 히스토리 (탐색 직후 화면)"""
        lines = self.paint_page(view) if view is not None else []
        return lines + self.paint_tabs() + self.paint_history()
