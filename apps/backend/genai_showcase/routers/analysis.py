from fastapi import APIRouter, Depends, File, Form, UploadFile
from typing import Optional

from genai_showcase.dependencies import get_dispatcher
from genai_showcase.schemas.messages import ApiResponse, TextRequest
from genai_showcase.services.dispatcher import Dispatcher

router = APIRouter(prefix="/api")

ERROR_RESPONSES = {
    400: {"model": ApiResponse, "description": "Invalid request or file type"},
    500: {"model": ApiResponse, "description": "Server error"},
}


async def _read_upload(file: Optional[UploadFile]) -> tuple[Optional[bytes], Optional[str]]:
    if file is None:
        return None, None
    return await file.read(), file.content_type


@router.post(
    "/text",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    tags=["Text Analysis"],
    summary="Analyze a text",
)
async def analyze_text(
    req: Optional[TextRequest] = None,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    req = req or TextRequest()
    result = await dispatcher.dispatch_text(req.text, req.provider)
    return ApiResponse(response=result)


@router.post(
    "/image",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    tags=["Image Analysis"],
    summary="Analyze an image",
)
async def analyze_image(
    image: Optional[UploadFile] = File(None, description="The image file to analyze"),
    question: Optional[str] = Form(None, description="Optional question about the image"),
    provider: Optional[str] = Form(None),
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    data, mime_type = await _read_upload(image)
    result = await dispatcher.dispatch_image(data, mime_type, question, provider)
    return ApiResponse(response=result)


@router.post(
    "/pdf",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    tags=["PDF Analysis"],
    summary="Analyze a PDF document",
)
async def analyze_pdf(
    pdf: Optional[UploadFile] = File(None, description="The PDF file to analyze"),
    question: Optional[str] = Form(None, description="Optional question about the PDF"),
    provider: Optional[str] = Form(None),
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    data, mime_type = await _read_upload(pdf)
    result = await dispatcher.dispatch_document(data, mime_type, question, provider)
    return ApiResponse(response=result)
