"""
Shell - 메뉴 기반 대화형 루프

요청 하나를 끝까지 처리한 뒤 다시 프롬프트로 돌아온다.
SessionError 는 모두 여기서 잡아서 보고하고, 종료는 Exit 메뉴로만 한다.
"""
import sys
from typing import Callable, Dict, Iterable, Optional

from ..common.errors import SessionError
from ..networking import BROWSER_NAMES
from ..profiling import MeasureTime
from ..core.session import THEME_NAMES
from .chrome import MENU_ITEMS, Chrome

CLEAR_SCREEN = "\x1b[2J\x1b[H"


class Shell:
    def __init__(self, controller, input_func: Callable[[str], str] = input,
                 output=None, color: bool = True):
        self.controller = controller
        self.input_func = input_func
        self.output = output if output is not None else sys.stdout
        self.color = color
        self.chrome = Chrome(controller, color=color)

        self.commands: Dict[int, Callable[[], bool]] = {
            1: self.do_enter_url,
            2: self.do_refresh,
            3: self.do_go_back,
            4: self.do_go_home,
            5: self.do_new_tab,
            6: self.do_switch_tab,
            7: self.do_set_browser,
            8: self.do_clear_history,
            9: self.do_search_history,
            10: self.do_change_theme,
            11: self.do_add_bookmark,
            12: self.do_view_bookmarks,
            13: self.do_exit,
        }

    # === 입출력 ===

    def write(self, lines: Iterable[str]):
        for line in lines:
            print(line, file=self.output)

    def clear(self):
        if self.color:
            self.output.write(CLEAR_SCREEN)
        self.write(self.chrome.paint_header())

    def prompt(self, text: str) -> str:
        return self.input_func(text).strip()

    def prompt_int(self, text: str) -> Optional[int]:
        """정수 입력, 숫자가 아니면 None"""
        try:
            return int(self.prompt(text))
        except ValueError:
            return None

    def flush_notices(self):
        for notice in self.controller.drain_notices():
            self.write(self.chrome.paint_status(notice, ok=False))

    def show(self, view):
        self.clear()
        self.flush_notices()
        self.write(self.chrome.paint_overview(view))

    # === 루프 ===

    def run(self):
        self.show(self.controller.refresh())
        running = True
        while running:
            self.write(self.chrome.paint_menu())
            try:
                choice = self.prompt_int(f"Enter choice (1-{len(MENU_ITEMS)}): ")
            except EOFError:
                choice = 13

            if choice is None:
                self.write(self.chrome.paint_status("Invalid input! Please enter a number.", ok=False))
                continue

            running = self.dispatch(choice)

    def dispatch(self, choice: int) -> bool:
        """메뉴 번호 하나 처리, 계속 실행하면 True"""
        command = self.commands.get(choice)
        if command is None:
            self.write(self.chrome.paint_status(f"Invalid option! Choose 1-{len(MENU_ITEMS)}.", ok=False))
            return True

        try:
            with MeasureTime(f"command_{command.__name__}", "shell"):
                return command()
        except SessionError as e:
            self.flush_notices()
            self.write(self.chrome.paint_status(str(e), ok=False))
        except EOFError:
            return self.do_exit()
        return True

    # === 명령 ===

    def _navigate_to_input(self) -> bool:
        url = self.prompt("Enter URL (e.g., google.com, https://example.com): ")
        self.write(self.chrome.paint_suggestions(self.controller.suggest(url)))
        self.show(self.controller.enter_url(url))
        return True

    def do_enter_url(self) -> bool:
        return self._navigate_to_input()

    def do_new_tab(self) -> bool:
        return self._navigate_to_input()

    def do_refresh(self) -> bool:
        self.show(self.controller.refresh())
        return True

    def do_go_back(self) -> bool:
        view = self.controller.go_back()
        if view is None:
            self.write(self.chrome.paint_status("No more history to go back!", ok=False))
        else:
            self.show(view)
        return True

    def do_go_home(self) -> bool:
        self.show(self.controller.go_home())
        return True

    def do_switch_tab(self) -> bool:
        self.write(self.chrome.paint_tabs())
        index = self.prompt_int("Enter tab number to switch to: ")
        if index is None:
            index = 0
        self.show(self.controller.switch_tab(index))
        return True

    def do_set_browser(self) -> bool:
        self.clear()
        self.write(self.chrome.paint_numbered(
            "Select Browser:", "", [BROWSER_NAMES[i] for i in sorted(BROWSER_NAMES)], start=0))
        choice = self.prompt_int(f"Enter choice (0-{len(BROWSER_NAMES) - 1}): ")
        if choice is None:
            choice = -1
        name = self.controller.set_browser(choice)
        self.write(self.chrome.paint_status(f"Browser set to {name}!"))
        return True

    def do_change_theme(self) -> bool:
        self.clear()
        self.write(self.chrome.paint_numbered("Select Theme:", "", THEME_NAMES, start=0))
        choice = self.prompt_int(f"Enter choice (0-{len(THEME_NAMES) - 1}): ")
        if choice is None:
            choice = -1
        name = self.controller.set_theme(choice)
        self.show(self.controller.refresh())
        self.write(self.chrome.paint_status(f"Theme set to {name}!"))
        return True

    def do_clear_history(self) -> bool:
        self.controller.clear_history()
        self.flush_notices()
        self.write(self.chrome.paint_status("History cleared successfully!"))
        self.write(self.chrome.paint_history())
        return True

    def do_search_history(self) -> bool:
        keyword = self.prompt("Enter search keyword: ")
        matches = self.controller.search_history(keyword)
        self.clear()
        self.write(self.chrome.paint_numbered(
            f"History matching '{keyword}':", "No matches found.", [url for _, url in matches]))
        if not matches:
            return True

        choice = self.prompt_int("Enter number to visit URL (0 to cancel): ")
        if choice:
            self.show(self.controller.visit_search_result(keyword, choice))
        return True

    def do_add_bookmark(self) -> bool:
        if self.controller.add_bookmark():
            self.flush_notices()
            self.write(self.chrome.paint_status(f"Bookmark added: {self.controller.current_url}"))
        else:
            self.write(self.chrome.paint_status("URL already bookmarked!", ok=False))
        return True

    def do_view_bookmarks(self) -> bool:
        urls = self.controller.view_bookmarks()
        self.clear()
        self.write(self.chrome.paint_numbered("Bookmarked URLs:", "No bookmarks yet!", urls))
        if not urls:
            return True

        choice = self.prompt_int("Enter number to visit bookmark (0 to cancel): ")
        if choice:
            self.show(self.controller.visit_bookmark(choice))
        return True

    def do_exit(self) -> bool:
        self.controller.shutdown()
        self.flush_notices()
        self.write(self.chrome.paint_status("\nThanks for browsing! Goodbye!"))
        return False
