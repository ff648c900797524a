# Core session functionality
from .session import SessionController, SessionContext, PageView, THEME_NAMES

__all__ = ['SessionController', 'SessionContext', 'PageView', 'THEME_NAMES']
