import pytest

from surf_browser import SessionConfig, SessionController
from surf_browser.common.constants import HOME_URL, MAX_TABS
from surf_browser.common.errors import InvalidIndexError, InvalidURLError, SessionError
from surf_browser.content import HOME_PAGE, NOT_FOUND_PAGE


def read(path):
    with open(path, encoding="utf-8") as f:
        return f.read()


# --- Startup Tests ---

def test_start_navigates_home(controller, data_file):
    assert list(controller.history) == [HOME_URL]
    assert controller.current_url == HOME_URL
    assert controller.navigator.current == HOME_URL
    assert read(data_file) == "H:home\n"


def test_start_restores_store(data_file, config):
    with open(data_file, "w", encoding="utf-8") as f:
        f.write("H:home\nH:google.com\nB:google.com\n")

    controller = SessionController.start(config)

    assert list(controller.history) == ["home", "google.com", "home"]
    assert controller.view_bookmarks() == ["google.com"]
    # 복원 직후 저장에도 북마크가 유지됨
    assert read(data_file) == "H:home\nH:google.com\nH:home\nB:google.com\n"


def test_start_with_bad_byte_keeps_other_records(data_file, config):
    with open(data_file, "wb") as f:
        f.write(b"H:google.com\nB:openai.com\nH:caf\xe9\n")

    controller = SessionController.start(config)

    assert list(controller.history) == ["google.com", HOME_URL]
    assert controller.view_bookmarks() == ["openai.com"]
    assert read(data_file) == "H:google.com\nH:home\nB:openai.com\n"


def test_start_with_unreadable_store_reports_notice(tmp_path):
    config = SessionConfig(data_file=str(tmp_path), open_external=False)

    controller = SessionController.start(config)

    assert list(controller.history) == [HOME_URL]
    assert controller.drain_notices()
    assert controller.drain_notices() == []


# --- Navigation Tests ---

def test_visit_updates_every_structure(controller, data_file):
    view = controller.visit("google.com")

    assert view.url == "google.com"
    assert view.found
    assert not view.from_cache
    assert list(controller.history) == ["home", "google.com"]
    assert controller.current_url == "google.com"
    assert controller.navigator.current == "google.com"
    assert controller.cache.get("google.com") == view.content
    assert read(data_file) == "H:home\nH:google.com\n"


def test_invalid_url_mutates_nothing(controller):
    with pytest.raises(InvalidURLError):
        controller.enter_url("g o")

    assert list(controller.history) == [HOME_URL]
    assert controller.tabs.count == 1
    assert len(controller.navigator.stack) == 1
    assert controller.cache.get("g o") is None


def test_fetch_uses_cache_on_second_visit(controller):
    first = controller.visit("openai.com")
    second = controller.refresh()

    assert not first.from_cache
    assert second.from_cache
    assert second.content == first.content


def test_unknown_url_gets_not_found_page(controller):
    view = controller.visit("example.com")

    assert not view.found
    assert view.content == NOT_FOUND_PAGE


def test_home_content(controller):
    view = controller.refresh()

    assert view.url == HOME_URL
    assert view.content == HOME_PAGE


def test_go_back(controller):
    controller.visit("google.com")
    controller.visit("openai.com")

    view = controller.go_back()
    assert view.url == "google.com"
    assert controller.history.current == "google.com"
    # 뒤로 가기는 히스토리에 항목을 추가하지 않음
    assert list(controller.history) == ["home", "google.com", "openai.com"]

    assert controller.go_back().url == HOME_URL
    assert controller.go_back() is None


def test_go_back_after_branching_keeps_cursor_on_shown_page(controller):
    controller.visit("a.com")
    controller.go_back()
    controller.visit("b.com")

    view = controller.go_back()

    assert view.url == HOME_URL
    assert controller.history.current == HOME_URL
    marked = [url for url, is_current in controller.history.list() if is_current]
    assert marked == [HOME_URL]


def test_go_back_on_fresh_session_is_not_found(controller):
    assert controller.go_back() is None
    assert controller.tabs.count == 1


def test_tab_capacity_does_not_block_navigation(controller):
    for i in range(MAX_TABS - 1):
        controller.visit(f"site{i}.com")
    assert controller.tabs.count == MAX_TABS
    controller.drain_notices()

    view = controller.visit("google.com")

    assert view.url == "google.com"
    assert controller.tabs.count == MAX_TABS
    assert controller.history.current == "google.com"
    assert any("Maximum tabs" in notice for notice in controller.drain_notices())


def test_switch_tab(controller):
    controller.visit("google.com")
    controller.visit("openai.com")

    assert controller.switch_tab(1).url == "openai.com"
    assert controller.switch_tab(2).url == HOME_URL
    with pytest.raises(InvalidIndexError):
        controller.switch_tab(4)
    assert controller.current_url == HOME_URL


# --- History Tests ---

def test_clear_history_keeps_bookmarks(controller, data_file):
    controller.visit("google.com")
    controller.add_bookmark()

    controller.clear_history()

    assert len(controller.history) == 0
    assert read(data_file) == "B:google.com\n"


def test_search_and_visit_result(controller):
    for url in ("google.com", "openai.com", "mail.google.com"):
        controller.visit(url)

    assert controller.search_history("google") == [(1, "google.com"), (2, "mail.google.com")]
    with pytest.raises(InvalidIndexError):
        controller.visit_search_result("google", 3)

    view = controller.visit_search_result("google", 2)
    assert view.url == "mail.google.com"
    assert controller.history.current == "mail.google.com"

    # 재방문도 히스토리에 추가되므로 결과가 하나 늘어남
    matches = controller.search_history("google")
    assert len(matches) == 3
    with pytest.raises(InvalidIndexError):
        controller.visit_search_result("google", len(matches) + 1)


def test_suggest(controller):
    controller.visit("google.com")
    controller.visit("github.com")

    assert controller.suggest("g") == ["google.com", "github.com"]


# --- Bookmark Tests ---

def test_add_bookmark_twice(controller, data_file):
    controller.visit("google.com")

    assert controller.add_bookmark() is True
    assert controller.add_bookmark() is False
    assert controller.view_bookmarks() == ["google.com"]
    assert read(data_file).endswith("B:google.com\n")


def test_add_bookmark_without_tab(config):
    from surf_browser import SessionContext

    controller = SessionController(SessionContext(config))

    with pytest.raises(SessionError):
        controller.add_bookmark()


def test_visit_bookmark(controller):
    controller.visit("openai.com")
    controller.add_bookmark()
    controller.go_home()

    view = controller.visit_bookmark(1)

    assert view.url == "openai.com"
    with pytest.raises(InvalidIndexError):
        controller.visit_bookmark(2)


# --- Settings Tests ---

def test_set_theme_and_browser(controller):
    assert controller.set_theme(1) == "Dark"
    assert controller.context.theme == 1
    assert controller.set_browser(2) == "Google Chrome"

    with pytest.raises(InvalidIndexError):
        controller.set_theme(3)
    with pytest.raises(InvalidIndexError):
        controller.set_browser(-1)
    assert controller.context.theme == 1


def test_failed_save_keeps_memory_state(controller, monkeypatch):
    from surf_browser.storage import persistence_store

    def fail_replace(src, dst):
        raise OSError("read-only")

    monkeypatch.setattr(persistence_store.os, "replace", fail_replace)

    controller.visit("google.com")

    assert controller.history.current == "google.com"
    assert any("Failed to save" in notice for notice in controller.drain_notices())


def test_visit_opens_external_browser(config, monkeypatch):
    opened = []
    config.open_external = True
    controller = SessionController.start(config)
    monkeypatch.setattr(controller.context.opener, "open", opened.append)

    controller.visit("google.com")
    controller.go_home()

    # home 은 외부 브라우저로 열지 않음
    assert opened == ["google.com"]
