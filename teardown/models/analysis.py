from pydantic import BaseModel

from teardown.models.provider import ProviderType


class ParsedMetadata(BaseModel):
    topic: str | None = None
    audience: list[str] | None = None
    viral_tags: list[str] | None = None
    tags: list[str] | None = None


class AnalysisResult(BaseModel):
    body: str
    metadata: ParsedMetadata | None = None
    summary: str | None = None


class AnalyzeResponse(BaseModel):
    provider: ProviderType
    model: str
    result: AnalysisResult


class ParseRequest(BaseModel):
    text: str
