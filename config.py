"""应用配置"""
import os
import re
from pathlib import Path

ROOT = Path(__file__).parent
DATA_DIR = ROOT / os.environ.get("DATA_DIR", "data")
DIST_DIR = ROOT / os.environ.get("DIST_DIR", "dist")
TEMPLATES_DIR = ROOT / "templates"

CREDENTIALS_FILENAME = "credentials.dat"
PHOTOS_DIRNAME = "photos"
PHOTOS_URL_PREFIX = "/photos"
UPLOAD_FIELD = "photo"

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3001"))

# 首次启动时写入的演示账号
DEFAULT_USERNAME = "demo"
DEFAULT_PASSWORD = "demo123"
# 照片不记录上传者，列表中统一显示该标签
PHOTO_OWNER = "demo"

# 开启后 upload / photos 需要登录 cookie
REQUIRE_SESSION = os.environ.get("REQUIRE_SESSION", "").strip().lower() in ("1", "true", "yes", "on")
SESSION_COOKIE = "pg_session"


def get_version() -> str:
    """从 pyproject.toml 读取版本号"""
    pyproject_path = ROOT / "pyproject.toml"
    if pyproject_path.exists():
        text = pyproject_path.read_text(encoding="utf-8")
        m = re.search(r'^version\s*=\s*"([^"]+)"', text, re.MULTILINE)
        if m:
            return m.group(1)
    return "unknown"


APP_VERSION = get_version()
