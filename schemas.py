"""API 请求/响应 Pydantic 模型"""
from pydantic import BaseModel


class PhotoItem(BaseModel):
    id: str
    url: str
    username: str


class LoginResponse(BaseModel):
    success: bool
    message: str | None = None


class UploadResponse(BaseModel):
    success: bool
    url: str


class PhotoListResponse(BaseModel):
    success: bool
    photos: list[PhotoItem]
