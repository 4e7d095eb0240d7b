# app.py
import os
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI, File, Form, UploadFile
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from config import get_settings
from logging_utils import get_logger
from summarize import (
    StrategyConfig,
    segment,
    strategy_from_params,
    summarize_result,
)

settings = get_settings()
logger = get_logger("app")

app = FastAPI(title=settings.app_name)

PROJECT_ROOT = os.path.dirname(__file__)
STATIC_DIR = os.path.join(PROJECT_ROOT, "static")
if not os.path.exists(STATIC_DIR):
    os.makedirs(STATIC_DIR, exist_ok=True)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


class SummarizeIn(BaseModel):
    text: str = ""
    strategy: Optional[str] = None
    count: Optional[Union[int, float, str]] = None
    keywords: Optional[str] = None


class SentencesIn(BaseModel):
    text: str = ""


class SummaryOut(BaseModel):
    ok: bool
    strategy: Optional[str] = None
    summary: Optional[str] = None
    filename: Optional[str] = None
    error: Optional[str] = None
    detail: Optional[str] = None


class SentencesOut(BaseModel):
    sentences: List[str]
    count: int


def error_response(status_code: int, error: str, detail: str, **extra: Any) -> JSONResponse:
    logger.warning(f"{error}: {detail}")
    content = {"ok": False, "error": error, "detail": detail}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


def build_strategy(kind: Optional[str], count: Any, keywords: Optional[str]) -> StrategyConfig:
    return strategy_from_params(kind, count=count, keywords=keywords,
                                default_count=settings.default_line_count)


def run_summarize(text: str, strategy: StrategyConfig) -> Dict[str, Any]:
    out = summarize_result(text, strategy)
    out["strategy"] = strategy.kind
    return out


def decode_upload(data: bytes) -> str:
    """Uploaded files are plain UTF-8; a BOM is dropped and bad bytes replaced."""
    return data.decode("utf-8-sig", errors="replace")


def has_allowed_extension(filename: str) -> bool:
    ext = os.path.splitext(filename)[1].lower()
    return ext in settings.allowed_extensions


@app.get("/")
def root():
    index_path = os.path.join(STATIC_DIR, "index.html")
    if os.path.exists(index_path):
        return FileResponse(index_path)
    return PlainTextResponse("Put a static/index.html in the static folder, or POST to /summarize.")


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.app_name, "environment": settings.environment}


@app.post("/summarize", response_model=SummaryOut)
def summarize_text(payload: SummarizeIn):
    try:
        strategy = build_strategy(payload.strategy, payload.count, payload.keywords)
    except ValueError as e:
        return error_response(400, "BAD_STRATEGY", str(e))

    logger.info(f"Summarizing {len(payload.text)} chars with {strategy.kind}")
    out = run_summarize(payload.text, strategy)
    if not out["ok"]:
        return error_response(400, out["error"], out["detail"], strategy=out["strategy"])
    return out


@app.post("/upload", response_model=SummaryOut)
async def upload_text(
    file: UploadFile = File(...),
    strategy: Optional[str] = Form(None),
    count: Optional[str] = Form(None),
    keywords: Optional[str] = Form(None),
):
    filename = file.filename or "uploaded_file"
    if not has_allowed_extension(filename):
        allowed = ", ".join(settings.allowed_extensions)
        return error_response(415, "UNSUPPORTED_FILE", f"{filename} is not one of: {allowed}", filename=filename)

    try:
        strategy_cfg = build_strategy(strategy, count, keywords)
    except ValueError as e:
        return error_response(400, "BAD_STRATEGY", str(e), filename=filename)

    # read one byte past the limit so oversized files are detected without loading them fully
    data = await file.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        return error_response(413, "FILE_TOO_LARGE",
                              f"{filename} exceeds {settings.max_upload_bytes} bytes", filename=filename)

    text = decode_upload(data)
    logger.info(f"Summarizing upload {filename} ({len(data)} bytes) with {strategy_cfg.kind}")
    out = run_summarize(text, strategy_cfg)
    out["filename"] = filename
    if not out["ok"]:
        return error_response(400, out["error"], out["detail"], strategy=out["strategy"], filename=filename)
    return out


@app.post("/sentences", response_model=SentencesOut)
def split_sentences(payload: SentencesIn):
    sentences = segment(payload.text)
    return {"sentences": sentences, "count": len(sentences)}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host="127.0.0.1", port=int(os.getenv("PORT", "8000")))
