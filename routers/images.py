"""照片 API：上传、列表"""
import asyncio

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile

from app_common import error_response, get_photo_store
from config import UPLOAD_FIELD
from photos import PhotoStore
from schemas import PhotoListResponse, UploadResponse

router = APIRouter(prefix="/api", tags=["images"])


@router.post("/upload", response_model=UploadResponse)
async def upload_photo(request: Request, store: PhotoStore = Depends(get_photo_store)):
    """保存 multipart 字段 photo 中的文件，返回访问 URL"""
    form = await request.form()
    photo = form.get(UPLOAD_FIELD)
    if not isinstance(photo, UploadFile) or not photo.filename:
        return error_response(400, "No file uploaded")
    try:
        content = await photo.read()
        url = await asyncio.to_thread(store.save, content, photo.filename)
    except (OSError, ValueError) as e:
        # ValueError: 文件名含 NUL 等非法字符
        print(f"[upload] 保存失败 {photo.filename}: {e}", flush=True)
        return error_response(500, "Error uploading file")
    finally:
        await photo.close()
    print(f"[upload] 已保存: {url}", flush=True)
    return {"success": True, "url": url}


@router.get("/photos", response_model=PhotoListResponse)
async def list_photos(store: PhotoStore = Depends(get_photo_store)):
    """列出照片目录中的全部文件"""
    try:
        photos = await asyncio.to_thread(store.list)
    except OSError as e:
        print(f"[photos] 读取照片目录失败: {e}", flush=True)
        return error_response(500, "Error reading photos")
    return {"success": True, "photos": photos}
