"""
외부 브라우저로 URL 열기 (fire-and-forget)

결과를 기다리지 않으며, 실행 실패는 트레이스 이벤트로만 남긴다.
"""
import subprocess
import sys
import webbrowser
from typing import List, Optional

from ..profiling import trace_instant

DEFAULT_BROWSER = 0
EDGE = 1
CHROME = 2

BROWSER_NAMES = {
    DEFAULT_BROWSER: "Default",
    EDGE: "Microsoft Edge",
    CHROME: "Google Chrome",
}


def format_external_url(url: str) -> str:
    """스킴이 없으면 https:// 를 붙임"""
    if url.startswith("http://") or url.startswith("https://"):
        return url
    return "https://" + url


def launch_command(url: str, browser_choice: int, platform: str = sys.platform) -> Optional[List[str]]:
    """플랫폼별 실행 명령, 기본 브라우저는 None (webbrowser 모듈 사용)"""
    if browser_choice == DEFAULT_BROWSER:
        return None

    if platform.startswith("win"):
        app = "msedge" if browser_choice == EDGE else "chrome"
        return ["cmd", "/c", "start", "", app, url]
    elif platform == "darwin":
        app = "Microsoft Edge" if browser_choice == EDGE else "Google Chrome"
        return ["open", "-a", app, url]
    else:
        app = "microsoft-edge" if browser_choice == EDGE else "google-chrome"
        return [app, url]


class URLOpener:
    def __init__(self, browser_choice: int = DEFAULT_BROWSER, enabled: bool = True):
        self.browser_choice = browser_choice
        self.enabled = enabled

    @property
    def browser_name(self) -> str:
        return BROWSER_NAMES[self.browser_choice]

    def set_browser(self, choice: int):
        if choice not in BROWSER_NAMES:
            raise ValueError(f"Unsupported browser choice: {choice}")
        self.browser_choice = choice

    def open(self, url: str):
        if not self.enabled:
            return

        formatted = format_external_url(url)
        command = launch_command(formatted, self.browser_choice)
        try:
            if command is None:
                webbrowser.open(formatted)
            else:
                subprocess.Popen(
                    command,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                )
        except (OSError, webbrowser.Error) as e:
            trace_instant("open_external_failed", "networking", {"url": formatted, "error": str(e)})
