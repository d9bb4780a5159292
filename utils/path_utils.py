"""路径工具：上传文件名清洗、相对路径校验"""
import re
from pathlib import Path


def safe_basename(filename: str) -> str:
    """只保留客户端文件名的最后一段，去掉任何目录部分（/ 与 \\ 都视为分隔符，冒号保留）"""
    name = re.split(r"[\\/]", filename or "")[-1].strip()
    return "" if name in (".", "..") else name


def resolve_and_validate_relative_path(relative_path: str, base_dir: Path) -> Path | None:
    """校验 relative_path 在 base_dir 下且为文件，返回绝对路径或 None"""
    rel = (relative_path or "").strip().strip("/")
    if not rel or ".." in rel.split("/"):
        return None
    base = base_dir.resolve()
    full = (base / rel).resolve()
    try:
        full.relative_to(base)
    except ValueError:
        return None
    return full if full.is_file() else None
