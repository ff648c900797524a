"""URL validation"""
from ..common.constants import MIN_URL_LEN, URL_ALLOWED_SYMBOLS, URL_LEN
from ..common.errors import InvalidURLError


def validate_url(url: str) -> bool:
    """길이 [3, 98], 영숫자와 . - / : ? & = 만 허용"""
    if len(url) < MIN_URL_LEN or len(url) >= URL_LEN - 1:
        return False
    for char in url:
        if not (char.isascii() and char.isalnum()) and char not in URL_ALLOWED_SYMBOLS:
            return False
    return True


def require_valid_url(url: str) -> str:
    if not validate_url(url):
        raise InvalidURLError(url)
    return url
