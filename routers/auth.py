"""认证路由：登录、登出，以及可选的 session 中间件"""
import asyncio
import hmac

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app_common import error_response, get_credential_store
from config import PHOTOS_URL_PREFIX, SESSION_COOKIE
from credentials import CredentialStore, CredentialStoreError
from schemas import LoginResponse

router = APIRouter(prefix="/api", tags=["auth"])

PROTECTED_PATHS = ("/api/upload", "/api/photos")


def _is_protected(path: str) -> bool:
    return path in PROTECTED_PATHS or path.startswith(PHOTOS_URL_PREFIX + "/")


def setup_auth_middleware(app):
    """注册认证中间件到 app；仅在 app.state.require_session 为真时拦截"""
    @app.middleware("http")
    async def auth_middleware(request: Request, call_next):
        if not request.app.state.require_session or not _is_protected(request.url.path):
            return await call_next(request)
        token = request.cookies.get(SESSION_COOKIE)
        if not token or not hmac.compare_digest(token, request.app.state.session_token):
            return error_response(401, "Authentication required")
        return await call_next(request)


async def _read_json_object(request: Request) -> dict | None:
    """宽松读取 JSON 请求体：无法解析或不是对象时返回 None"""
    try:
        body = await request.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


@router.post("/login", response_model=LoginResponse, response_model_exclude_none=True)
async def login(request: Request, store: CredentialStore = Depends(get_credential_store)):
    """校验用户名和密码；缺省字段按空串处理，非字符串字段视为校验失败"""
    body = await _read_json_object(request)
    if body is None:
        return error_response(400, "Invalid request")
    username = body.get("username", "")
    password = body.get("password", "")
    if not isinstance(username, str) or not isinstance(password, str):
        return error_response(401, "Invalid credentials")
    try:
        ok = await asyncio.to_thread(store.verify, username, password)
    except CredentialStoreError as e:
        print(f"[auth] 凭据校验失败: {e}", flush=True)
        return error_response(500, "Server error")
    if not ok:
        return error_response(401, "Invalid credentials")
    response = JSONResponse(content={"success": True})
    if request.app.state.require_session:
        response.set_cookie(
            key=SESSION_COOKIE,
            value=request.app.state.session_token,
            httponly=True,
            samesite="lax",
        )
    return response


@router.post("/logout", response_model=LoginResponse, response_model_exclude_none=True)
async def logout():
    """登出：清除 session cookie"""
    response = JSONResponse(content={"success": True})
    response.delete_cookie(key=SESSION_COOKIE)
    return response
