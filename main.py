#!/usr/bin/env python3
"""
Surf Browser - 터미널 브라우저 세션 시뮬레이터
사용법: python main.py [--data-file FILE] [--theme 0-2] [--browser 0-2] [--no-open] [--trace [FILE]]
예시: python main.py --no-open
"""
from surf_browser import SessionConfig, SessionController
from surf_browser.ui import Shell


def main(argv=None):
    config = SessionConfig.from_args(argv)

    controller = SessionController.start(config)
    shell = Shell(controller)
    shell.run()


if __name__ == "__main__":
    main()
