# Common utilities and constants shared across packages
from .constants import *
from .errors import (
    SessionError,
    AllocationError,
    CapacityExceededError,
    InvalidIndexError,
    InvalidURLError,
    StoreIOError,
)
from .config import SessionConfig

__all__ = [
    'URL_LEN', 'CONTENT_LEN',
    'HASH_SIZE', 'MAX_TABS', 'MAX_SUGGESTIONS',
    'MIN_URL_LEN', 'URL_ALLOWED_SYMBOLS',
    'HOME_URL', 'DATA_FILE', 'TRACE_FILE',
    'STATIC_TIMESTAMP',
    'clip_url', 'clip_content',
    'SessionError',
    'AllocationError',
    'CapacityExceededError',
    'InvalidIndexError',
    'InvalidURLError',
    'StoreIOError',
    'SessionConfig',
]
