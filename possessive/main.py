from fastapi import FastAPI, UploadFile, File, HTTPException, Query

from .batch import possessive_batch_bytes
from .config import DEFAULT_STYLE, MAX_UPLOAD_BYTES, setup_logging
from .errors import PossessiveError
from .formatter import create, trim_noun
from .models import (
    BatchResponse,
    HealthResponse,
    PossessiveOptions,
    PossessiveRequest,
    PossessiveResponse,
)

setup_logging()

app = FastAPI(
    title="possessive",
    description="Singular English possessive forms for names and nouns",
    version="0.1.0",
)

ALLOWED_SUFFIXES = (".csv", ".txt")


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/possessive", response_model=PossessiveResponse)
def make_possessive(req: PossessiveRequest):
    options = req.options or PossessiveOptions(style=DEFAULT_STYLE)
    try:
        formatter = create(options)
        for noun, form in req.exceptions.items():
            formatter.add_exception(noun, form)
        possessive = formatter.make_possessive(req.noun)
    except PossessiveError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    return {
        "noun": trim_noun(req.noun),
        "possessive": possessive,
        "style": formatter.options.style,
    }


@app.post("/possessive/batch", response_model=BatchResponse)
async def make_possessive_batch(
    file: UploadFile = File(...),
    style: str = Query(default=DEFAULT_STYLE),
    german: bool = Query(default=True),
):
    filename = (file.filename or "").lower()
    if not filename.endswith(ALLOWED_SUFFIXES):
        raise HTTPException(status_code=422, detail="Only CSV or TXT files are supported")

    try:
        formatter = create({"style": style, "enable_german_rules": german})
    except PossessiveError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    raw = await file.read(MAX_UPLOAD_BYTES + 1)
    if len(raw) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"Upload exceeds {MAX_UPLOAD_BYTES} bytes")

    return possessive_batch_bytes(raw, formatter)
