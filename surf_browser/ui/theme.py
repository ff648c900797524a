"""터미널 색상과 테마"""
from dataclasses import dataclass

RESET = "\x1b[0m"

COLOR_MAP = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "gray": "\x1b[90m",
    "grey": "\x1b[90m",
}


def parse_color(color_str):
    """색상 이름을 ANSI escape 코드로 변환 (알 수 없으면 빈 문자열)"""
    if color_str is None:
        return ""
    return COLOR_MAP.get(color_str.lower().strip(), "")


def colorize(text: str, color_str, enabled: bool = True) -> str:
    code = parse_color(color_str)
    if not enabled or not code:
        return text
    return f"{code}{text}{RESET}"


@dataclass(frozen=True)
class Theme:
    name: str
    header: str
    text: str
    menu: str


THEMES = [
    Theme("Default", header="cyan", text="yellow", menu="blue"),
    Theme("Dark", header="blue", text="cyan", menu="magenta"),
    Theme("Light", header="green", text="magenta", menu="yellow"),
]


def get_theme(index: int) -> Theme:
    return THEMES[index]
