"""
照片存储：photos 目录本身就是索引，目录中的每个文件即一张照片。

- 文件名 = "{毫秒时间戳}-{原始文件名}"，同时作为照片 id
- 生成的文件名已存在时追加 _1、_2 …，以独占方式创建文件，不覆盖已有照片
- 列表按文件名升序，不按扩展名过滤
"""
import time
from collections.abc import Callable
from pathlib import Path
from urllib.parse import quote

from config import PHOTO_OWNER, PHOTOS_URL_PREFIX
from schemas import PhotoItem
from utils.path_utils import safe_basename
from utils.unique_path import numbered_names

FALLBACK_NAME = "upload"


class PhotoStore:
    def __init__(self, photos_dir: Path, clock: Callable[[], float] = time.time):
        self.photos_dir = Path(photos_dir)
        self._clock = clock

    def init(self) -> None:
        """创建照片目录（已存在则保持原样）"""
        self.photos_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def url_for(filename: str) -> str:
        return f"{PHOTOS_URL_PREFIX}/{quote(filename)}"

    def _generate_name(self, original_name: str) -> str:
        millis = int(self._clock() * 1000)
        return f"{millis}-{safe_basename(original_name) or FALLBACK_NAME}"

    def save(self, content: bytes, original_name: str) -> str:
        """写入照片并返回其访问 URL；写入失败抛出 OSError"""
        for name in numbered_names(self._generate_name(original_name)):
            dest = self.photos_dir / name
            try:
                f = dest.open("xb")
            except FileExistsError:
                continue
            try:
                with f:
                    f.write(content)
            except OSError:
                # 不留下写了一半的文件
                dest.unlink(missing_ok=True)
                raise
            return self.url_for(name)

    def list(self) -> list[PhotoItem]:
        """枚举目录中的所有文件；目录不可读时抛出 OSError"""
        names = sorted(entry.name for entry in self.photos_dir.iterdir() if entry.is_file())
        return [
            PhotoItem(id=name, url=self.url_for(name), username=PHOTO_OWNER)
            for name in names
        ]
