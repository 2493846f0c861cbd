import os

# Keep test runs from writing a rotating log file into the working tree.
os.environ["LOG_FILE"] = ""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from omikuji.core.config import settings

PUBLIC_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "public")


@pytest.fixture
def client():
    with TestClient(create_app(PUBLIC_DIR)) as test_client:
        yield test_client


@pytest.fixture
def client_without_static(tmp_path):
    with TestClient(create_app(str(tmp_path / "missing"))) as test_client:
        yield test_client


@pytest.fixture
def labels():
    return settings.fortune_labels_list
