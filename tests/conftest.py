"""
Pytest configuration and fixtures for the gallery tests.
"""

import os
import tempfile
from pathlib import Path

import pytest

# main 在导入时会创建默认应用，先把默认数据目录指到临时目录
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="gallery-data-"))

from fastapi.testclient import TestClient  # noqa: E402

from main import create_app  # noqa: E402


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def dist_dir(tmp_path: Path) -> Path:
    """不存在的 dist 目录：入口页面走内置模板"""
    return tmp_path / "dist"


@pytest.fixture
def app(data_dir: Path, dist_dir: Path):
    return create_app(data_dir=data_dir, dist_dir=dist_dir, require_session=False)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def photos_dir(data_dir: Path) -> Path:
    return data_dir / "photos"


@pytest.fixture
def sample_image_data() -> bytes:
    """1x1 pixel PNG"""
    return bytes.fromhex(
        "89504e470d0a1a0a0000000d49484452000000010000000108020000009077"
        "53de0000000c4944415408d763f8cfc0000003010100c9fe92ef0000000049454e44ae426082"
    )
