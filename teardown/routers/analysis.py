from fastapi import APIRouter, File, Form, HTTPException, UploadFile

from teardown.config import get_settings
from teardown.models.analysis import AnalysisResult, AnalyzeResponse, ParseRequest
from teardown.models.provider import ProviderType
from teardown.services import analysis as analysis_service
from teardown.services import parser

router = APIRouter(prefix="/api", tags=["analysis"])


@router.post("/analyze")
def analyze(
    file: UploadFile = File(...),
    provider: ProviderType | None = Form(None),
    model: str | None = Form(None),
) -> AnalyzeResponse:
    limit = get_settings().max_upload_mb * 1024 * 1024
    data = file.file.read(limit + 1)
    if not data:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    if len(data) > limit:
        raise HTTPException(status_code=413, detail=f"Upload exceeds {get_settings().max_upload_mb} MB")
    return analysis_service.analyze_media(data, file.content_type, provider, model or None)


@router.post("/parse")
def parse_text(req: ParseRequest) -> AnalysisResult:
    return parser.parse(req.text)
