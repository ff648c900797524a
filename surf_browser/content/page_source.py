"""
PageSource - 잘 알려진 URL에 대한 가짜 웹 콘텐츠

실제 네트워크 요청은 하지 않는다.
"""
from ..common.constants import HOME_URL, clip_content


HOME_PAGE = (
    "| Welcome to Pranav's Surf Browser!          |\n"
    "| Start your secure browsing journey.        |\n"
    "| Powered by:                                |\n"
    "| - Serverless CloudSync Architecture        |\n"
    "| - Advanced Cybersecurity Suite             |\n"
    "| - AI-Driven Threat Detection              |\n"
)

KNOWN_PAGES = {
    HOME_URL: HOME_PAGE,
    "google.com": (
        "| Welcome to Google Search!                   |\n"
        "| Search the world's information instantly.   |\n"
    ),
    "openai.com": (
        "| OpenAI - Pioneering AI Research            |\n"
        "| Explore ChatGPT, Codex & more AI tools.    |\n"
    ),
}

NOT_FOUND_PAGE = (
    "| 404 Not Found!                            |\n"
    "| This is a simulated browser environment.   |\n"
)


class PageSource:
    def __init__(self, pages=None):
        self.pages = dict(KNOWN_PAGES if pages is None else pages)

    def fetch(self, url: str) -> str:
        """url 에 해당하는 콘텐츠 (없으면 404 페이지)"""
        return clip_content(self.pages.get(url, NOT_FOUND_PAGE))

    def is_known(self, url: str) -> bool:
        return url in self.pages
