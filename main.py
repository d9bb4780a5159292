import secrets
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from app_common import templates
from config import (
    APP_VERSION,
    CREDENTIALS_FILENAME,
    DATA_DIR,
    DIST_DIR,
    HOST,
    PHOTOS_DIRNAME,
    PHOTOS_URL_PREFIX,
    PORT,
    REQUIRE_SESSION,
    UPLOAD_FIELD,
)
from credentials import CredentialStore
from photos import PhotoStore
from routers import auth, images
from utils.path_utils import resolve_and_validate_relative_path


@asynccontextmanager
async def lifespan(app: FastAPI):
    state = app.state
    print(
        f"[app] v{APP_VERSION} 数据目录: {state.photo_store.photos_dir.parent} "
        f"session 校验: {'开启' if state.require_session else '关闭'}",
        flush=True,
    )
    yield


def create_app(
    data_dir: Path = DATA_DIR,
    dist_dir: Path = DIST_DIR,
    require_session: bool = REQUIRE_SESSION,
) -> FastAPI:
    """创建应用：初始化凭据文件与照片目录，注册路由和静态文件"""
    data_dir = Path(data_dir)
    dist_dir = Path(dist_dir)

    credential_store = CredentialStore(data_dir / CREDENTIALS_FILENAME)
    credential_store.init()
    photo_store = PhotoStore(data_dir / PHOTOS_DIRNAME)
    photo_store.init()

    app = FastAPI(lifespan=lifespan, version=APP_VERSION)
    app.state.credential_store = credential_store
    app.state.photo_store = photo_store
    app.state.require_session = require_session
    # 进程级 session token，重启后全部失效
    app.state.session_token = secrets.token_hex(32)

    auth.setup_auth_middleware(app)
    app.include_router(auth.router)
    app.include_router(images.router)
    app.mount(PHOTOS_URL_PREFIX, StaticFiles(directory=str(photo_store.photos_dir)), name="photos")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def client_app(request: Request, full_path: str):
        """前端资源：dist 中存在的文件直接返回，其余路径一律返回入口页面"""
        if dist_dir.is_dir():
            asset = resolve_and_validate_relative_path(full_path, dist_dir)
            if asset:
                return FileResponse(asset)
            index_file = dist_dir / "index.html"
            if index_file.is_file():
                return FileResponse(index_file)
        return templates.TemplateResponse(
            request,
            "index.html",
            {"version": APP_VERSION, "upload_field": UPLOAD_FIELD},
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
