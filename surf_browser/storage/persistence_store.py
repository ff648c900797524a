"""
PersistenceStore - 히스토리와 북마크를 텍스트 파일에 저장

파일 형식 (UTF-8, 한 줄에 레코드 하나):
    H:<url>    히스토리 항목, head → tail 순서
    B:<url>    북마크, BST 전위 순회 순서

save 는 항상 두 구조를 합친 스냅샷 하나를 임시 파일에 쓴 뒤 교체한다.
실패하면 기존 파일은 그대로 남는다.
"""
import os
import stat
import tempfile
from typing import Iterable, List, Tuple

from ..bookmarks import BookmarkIndex
from ..common.constants import DATA_FILE
from ..common.errors import StoreIOError
from ..history import HistoryLog
from ..profiling import MeasureTime, trace_instant

HISTORY_TAG = "H"
BOOKMARK_TAG = "B"


def encode_records(history: Iterable[str], bookmarks: Iterable[str]) -> str:
    lines = [f"{HISTORY_TAG}:{url}\n" for url in history]
    lines += [f"{BOOKMARK_TAG}:{url}\n" for url in bookmarks]
    return "".join(lines)


def decode_lines(data: bytes) -> List[str]:
    """UTF-8 로 읽을 수 없는 줄만 버리고 나머지 줄을 반환"""
    lines = []
    for raw in data.splitlines():
        try:
            lines.append(raw.decode("utf-8"))
        except UnicodeDecodeError:
            trace_instant("store_bad_line", "storage", {"line": repr(raw)})
    return lines


def decode_records(text) -> List[Tuple[str, str]]:
    """문자열 또는 줄 목록에서 (tag, url) 목록 - 알 수 없는 줄은 건너뜀"""
    lines = text.splitlines() if isinstance(text, str) else text
    records = []
    for line in lines:
        tag, sep, url = line.partition(":")
        if not sep or tag not in (HISTORY_TAG, BOOKMARK_TAG):
            continue
        records.append((tag, url))
    return records


class PersistenceStore:
    def __init__(self, path: str = DATA_FILE):
        self.path = path

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def _file_mode(self) -> int:
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    @MeasureTime.trace("store_save", "storage")
    def save(self, history: HistoryLog, bookmarks: BookmarkIndex):
        """히스토리 전체 + 북마크 전체를 한 번에 덮어씀"""
        data = encode_records(history, bookmarks)
        directory = os.path.dirname(os.path.abspath(self.path))

        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=os.path.basename(self.path) + ".", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            # mkstemp 은 0600 으로 만들므로 기존 파일(없으면 umask) 권한을 유지
            os.chmod(tmp_path, self._file_mode())
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            trace_instant("store_save_failed", "storage", {"path": self.path, "error": str(e)})
            raise StoreIOError(self.path, "save") from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

    @MeasureTime.trace("store_load", "storage")
    def load(self) -> Tuple[HistoryLog, BookmarkIndex]:
        """저장 파일에서 히스토리/북마크 복원

        히스토리는 append 로, 북마크는 insert_unchecked 로 재생한다.
        (저장된 중복 북마크도 그대로 복원됨)
        파일이 없으면 빈 구조를 반환한다.
        """
        history = HistoryLog()
        bookmarks = BookmarkIndex()

        if not self.exists():
            return history, bookmarks

        try:
            with open(self.path, "rb") as f:
                data = f.read()
        except OSError as e:
            trace_instant("store_load_failed", "storage", {"path": self.path, "error": str(e)})
            raise StoreIOError(self.path, "load") from e

        for tag, url in decode_records(decode_lines(data)):
            if tag == HISTORY_TAG:
                history.append(url)
            else:
                bookmarks.insert_unchecked(url)

        return history, bookmarks
