"""唯一文件名：同名文件已存在时依次生成 name_1.ext、name_2.ext …"""
from collections.abc import Iterator
from pathlib import PurePath


def numbered_names(name: str) -> Iterator[str]:
    """先产出 name 本身，之后在 stem 与扩展名之间追加 _1、_2 等"""
    yield name
    p = PurePath(name)
    stem, ext = p.stem, p.suffix
    counter = 1
    while True:
        yield f"{stem}_{counter}{ext}"
        counter += 1
