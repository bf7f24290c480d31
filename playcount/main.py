from datetime import date
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from .config import settings
from .dates import SUPPORTED_TARGET_FORMATS, parse_target_date
from .errors import InvalidDateFormat
from .models import AnalysisResult
from .pipeline import AnalysisPipeline


class AnalyzeRequest(BaseModel):
    lines: List[str]
    target_date: Optional[str] = None


app = FastAPI(
    title="Play Count Analyzer",
    version="0.1.0",
    description="Distinct song plays per client, as a histogram for one day.",
)

pipeline = AnalysisPipeline()


def _resolve_target_date(text: Optional[str]) -> date:
    if text is None:
        text = settings.default_target_date
    try:
        return parse_target_date(text)
    except InvalidDateFormat as exc:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid target date format '{text}'. Supported formats: {SUPPORTED_TARGET_FORMATS}",
        ) from exc


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.post("/analyze")
async def analyze(request: AnalyzeRequest) -> dict:
    if not request.lines:
        raise HTTPException(status_code=400, detail="No lines provided")
    target_date = _resolve_target_date(request.target_date)
    result: AnalysisResult = pipeline.analyze_lines(request.lines, target_date)
    return {"status": "completed", "result": result}


@app.get("/analyze/status")
async def analyze_status() -> dict:
    if pipeline.last_result:
        return {"last_run": pipeline.last_result}
    return {"last_run": None}
