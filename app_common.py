"""应用公共对象：模板、存储依赖、错误响应，供 main 和 routers 共享"""
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

from config import TEMPLATES_DIR
from credentials import CredentialStore
from photos import PhotoStore

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def get_credential_store(request: Request) -> CredentialStore:
    return request.app.state.credential_store


def get_photo_store(request: Request) -> PhotoStore:
    return request.app.state.photo_store


def error_response(status_code: int, message: str) -> JSONResponse:
    """统一的失败响应体：{success: false, message}"""
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})
