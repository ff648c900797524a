# Surf Browser Session Engine
# A terminal browser session simulator in Python

__version__ = "1.0.0"
__author__ = "Surf Browser Project"

# Re-export main classes for convenience
from .core.session import SessionController, SessionContext, PageView
from .common.config import SessionConfig
from .history import HistoryLog, NavigationStack, Navigator
from .content import TabRing
from .networking import ContentCache, validate_url
from .bookmarks import BookmarkIndex
from .storage import PersistenceStore

__all__ = [
    'SessionController',
    'SessionContext',
    'PageView',
    'SessionConfig',
    'HistoryLog',
    'NavigationStack',
    'Navigator',
    'TabRing',
    'ContentCache',
    'validate_url',
    'BookmarkIndex',
    'PersistenceStore',
]
