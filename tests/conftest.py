import pytest

from surf_browser import SessionConfig, SessionController


@pytest.fixture
def data_file(tmp_path):
    return str(tmp_path / "browser_data.txt")


@pytest.fixture
def config(data_file):
    # 테스트 중에는 외부 브라우저를 띄우지 않음
    return SessionConfig(data_file=data_file, open_external=False)


@pytest.fixture
def controller(config):
    return SessionController.start(config)
