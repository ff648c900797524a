"""
Networking package for the session engine

실제 네트워크 요청은 없다:
- cache_manager: URL → 콘텐츠 캐시
- url_validator: 입력 URL 검증
- url_opener: 외부 브라우저 실행
"""
from .cache_manager import ContentCache, CacheEntry, url_hash
from .url_validator import validate_url, require_valid_url
from .url_opener import (
    URLOpener,
    BROWSER_NAMES,
    format_external_url,
    launch_command,
)

__all__ = [
    # Cache
    'ContentCache',
    'CacheEntry',
    'url_hash',
    # Validation
    'validate_url',
    'require_valid_url',
    # External opener
    'URLOpener',
    'BROWSER_NAMES',
    'format_external_url',
    'launch_command',
]
