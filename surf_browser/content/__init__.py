# Content layer - 탭 링과 페이지 콘텐츠
from .tab_ring import TabRing, TabRecord
from .page_source import PageSource, HOME_PAGE, NOT_FOUND_PAGE

__all__ = ['TabRing', 'TabRecord', 'PageSource', 'HOME_PAGE', 'NOT_FOUND_PAGE']
