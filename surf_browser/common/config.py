"""
세션 설정

main.py 에서 명령행 인자로 한 번 생성되고,
SessionContext 생성 시 그대로 전달된다.
"""
import argparse
from dataclasses import dataclass
from typing import List, Optional

from .constants import DATA_FILE, TRACE_FILE


@dataclass
class SessionConfig:
    """세션 시작 시 사용하는 설정값"""

    # 히스토리/북마크 저장 파일
    data_file: str = DATA_FILE

    # 0: Default, 1: Dark, 2: Light
    theme: int = 0

    # 0: 기본 브라우저, 1: Microsoft Edge, 2: Google Chrome
    browser_choice: int = 0

    # 방문 시 외부 브라우저로 URL 열기
    open_external: bool = True

    # None이면 트레이싱 비활성화
    trace_file: Optional[str] = None

    @classmethod
    def from_args(cls, argv: Optional[List[str]] = None) -> "SessionConfig":
        parser = argparse.ArgumentParser(
            prog="surf-browser",
            description="Terminal browser session simulator",
        )
        parser.add_argument("--data-file", default=DATA_FILE,
                            help="history/bookmark store (default: %(default)s)")
        parser.add_argument("--theme", type=int, choices=(0, 1, 2), default=0,
                            help="0: Default, 1: Dark, 2: Light")
        parser.add_argument("--browser", type=int, choices=(0, 1, 2), default=0,
                            help="0: Default, 1: Microsoft Edge, 2: Google Chrome")
        parser.add_argument("--no-open", action="store_true",
                            help="do not launch an external browser on visit")
        parser.add_argument("--trace", nargs="?", const=TRACE_FILE, default=None,
                            metavar="FILE",
                            help="write a chrome://tracing profile on exit")
        args = parser.parse_args(argv)
        return cls(
            data_file=args.data_file,
            theme=args.theme,
            browser_choice=args.browser,
            open_external=not args.no_open,
            trace_file=args.trace,
        )
