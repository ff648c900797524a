from surf_browser.networking import URLOpener, format_external_url, launch_command
from surf_browser.networking import url_opener


# --- External Opener Tests ---

def test_format_external_url():
    assert format_external_url("google.com") == "https://google.com"
    assert format_external_url("http://example.com") == "http://example.com"
    assert format_external_url("https://example.com") == "https://example.com"


def test_launch_command_per_platform():
    url = "https://google.com"

    assert launch_command(url, 0, "linux") is None
    assert launch_command(url, 1, "linux") == ["microsoft-edge", url]
    assert launch_command(url, 2, "linux") == ["google-chrome", url]
    assert launch_command(url, 2, "darwin") == ["open", "-a", "Google Chrome", url]
    assert launch_command(url, 1, "win32")[-2:] == ["msedge", url]


def test_default_browser_uses_webbrowser(monkeypatch):
    opened = []
    monkeypatch.setattr(url_opener.webbrowser, "open", opened.append)

    URLOpener().open("google.com")

    assert opened == ["https://google.com"]


def test_disabled_opener_does_nothing(monkeypatch):
    opened = []
    monkeypatch.setattr(url_opener.webbrowser, "open", opened.append)

    URLOpener(enabled=False).open("google.com")

    assert opened == []


def test_launch_failure_is_ignored(monkeypatch):
    def missing_binary(*args, **kwargs):
        raise FileNotFoundError("google-chrome")

    monkeypatch.setattr(url_opener.subprocess, "Popen", missing_binary)
    opener = URLOpener(browser_choice=2)

    opener.open("google.com")

    assert opener.browser_name == "Google Chrome"
