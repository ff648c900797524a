# UI layer - 터미널 화면과 대화형 루프
from .chrome import Chrome, MENU_ITEMS
from .shell import Shell
from .theme import Theme, THEMES, colorize, parse_color

__all__ = ['Chrome', 'MENU_ITEMS', 'Shell', 'Theme', 'THEMES', 'colorize', 'parse_color']
