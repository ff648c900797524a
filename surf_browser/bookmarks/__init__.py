# Bookmarks - BST 북마크 인덱스
from .bookmark_index import BookmarkIndex, BookmarkNode

__all__ = ['BookmarkIndex', 'BookmarkNode']
