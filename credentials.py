"""
凭据存储：credentials.dat 中保存 {用户名: sha256(密码) 十六进制} 的 JSON 对象。

- 文件不存在时写入默认演示账号，已存在则不覆盖
- 每次校验都重新读取文件，不做内存缓存
- 读取或解析失败抛出 CredentialStoreError，调用方按服务器错误处理，绝不放行
"""
import hashlib
import hmac
import json
from pathlib import Path

from config import DEFAULT_PASSWORD, DEFAULT_USERNAME


class CredentialStoreError(Exception):
    """凭据文件缺失、不可读或内容格式错误"""


def hash_password(password: str) -> str:
    """计算密码的 SHA-256 十六进制摘要（无盐）"""
    return hashlib.sha256(password.encode("utf-8", "surrogatepass")).hexdigest()


class CredentialStore:
    def __init__(self, path: Path):
        self.path = Path(path)

    def init(self) -> bool:
        """确保凭据文件存在，返回本次是否新建了文件"""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        default = {DEFAULT_USERNAME: hash_password(DEFAULT_PASSWORD)}
        try:
            # "x" 模式：文件已存在时失败，不会覆盖已有凭据
            with self.path.open("x", encoding="utf-8") as f:
                json.dump(default, f)
        except FileExistsError:
            return False
        print(f"[auth] 已创建默认凭据文件: {self.path}", flush=True)
        return True

    def load(self) -> dict[str, str]:
        """读取并解析凭据映射"""
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CredentialStoreError(f"读取凭据文件失败: {e}") from e
        try:
            data = json.loads(text)
        except ValueError as e:
            raise CredentialStoreError(f"凭据文件不是合法 JSON: {e}") from e
        if not isinstance(data, dict):
            raise CredentialStoreError("凭据文件内容不是 JSON 对象")
        return data

    def verify(self, username: str, password: str) -> bool:
        """用户名存在且密码摘要一致时返回 True"""
        credentials = self.load()
        stored = credentials.get(username)
        if not isinstance(stored, str):
            return False
        return hmac.compare_digest(
            stored.encode("utf-8", "surrogatepass"),
            hash_password(password).encode("ascii"),
        )
