from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import (
    FastAPI,
    File,
    HTTPException,
    Request,
    UploadFile,
)
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from docx_trimmer.api.models import DocumentSummary, ExportOptions, TextExport
from docx_trimmer.config.settings import settings
from docx_trimmer.export.renderer import export_text, render_docx
from docx_trimmer.models.document import TrimDocument
from docx_trimmer.parsing.loader import ExtractionError, load_document
from docx_trimmer.session import DocumentSession, StaleLoadError
from docx_trimmer.validation import DOCX_MIME_TYPE, InvalidFileType, ensure_docx

logger = logging.getLogger("docx_trimmer.web")
logging.basicConfig(level=settings.LOG_LEVEL)


# -------------------------------------------------------------------
# Lifespan: one document session per process
# -------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.session = DocumentSession()
    yield
    app.state.session.clear()


app = FastAPI(
    title="DOCX Section Trimmer",
    description="Remove heading-delimited sections from a DOCX file and export the rest.",
    version="0.1.0",
    lifespan=lifespan,
)


# -------------------------------------------------------------------
# Middleware
# -------------------------------------------------------------------


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Log each request on arrival, then its status and duration on completion.
    """
    logger.info("Incoming request: %s %s", request.method, request.url.path)
    start = time.time()

    response = await call_next(request)

    duration_ms = (time.time() - start) * 1000
    logger.info(
        "Completed %s %s with status %d in %.2fms",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )

    return response


# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------


def _get_session(app_obj: FastAPI) -> DocumentSession:
    """
    Fetch the document session from app.state, initializing if needed.
    """
    session = getattr(app_obj.state, "session", None)
    if session is None:
        session = DocumentSession()
        app_obj.state.session = session
    return session


def _require_document(app_obj: FastAPI) -> TrimDocument:
    document = _get_session(app_obj).document
    if document is None:
        raise HTTPException(status_code=404, detail="No document loaded. Upload a DOCX file first.")
    return document


def _too_large() -> str:
    return f"File is larger than {settings.MAX_UPLOAD_BYTES} bytes."


def _summary(document: TrimDocument) -> DocumentSummary:
    return DocumentSummary(headings=list(document.headings), char_count=document.char_count)


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------


@app.get("/health", summary="Health check")
async def health() -> dict:
    return {"status": "ok"}


@app.post(
    "/documents",
    response_model=DocumentSummary,
    summary="Upload a DOCX file and make it the current document",
)
async def upload_document(
    request: Request,
    file: UploadFile = File(..., description="DOCX file to trim"),
) -> DocumentSummary:
    """
    Validate, load and store an uploaded DOCX file.

    - 415 if the file is not a DOCX file (nothing is loaded or changed).
    - 413 if the file is larger than settings.MAX_UPLOAD_BYTES.
    - 422 if the file could not be read; no document stays loaded.
    - 409 if a newer upload finished while this one was being read.
    """
    try:
        ensure_docx(file.content_type)
    except InvalidFileType as exc:
        logger.info("Rejected upload %r with content type %r", file.filename, exc.content_type)
        raise HTTPException(status_code=415, detail=str(exc))

    if file.size is not None and file.size > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=_too_large())

    # One byte past the limit is enough to tell an oversized upload apart.
    content = await file.read(settings.MAX_UPLOAD_BYTES + 1)
    if len(content) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=_too_large())

    session = _get_session(request.app)

    try:
        document = await run_in_threadpool(session.load, content, loader=load_document)
    except ExtractionError as exc:
        logger.warning("Extraction failed for %r: %s", file.filename, exc)
        raise HTTPException(status_code=422, detail=str(exc))
    except StaleLoadError:
        raise HTTPException(
            status_code=409,
            detail="A newer upload finished first; this upload was discarded.",
        )

    return _summary(document)


@app.get(
    "/documents/current",
    response_model=DocumentSummary,
    summary="Headings of the currently loaded document",
)
async def current_document(request: Request) -> DocumentSummary:
    return _summary(_require_document(request.app))


@app.post(
    "/export/docx",
    summary="Download the trimmed document as DOCX",
    response_class=Response,
)
async def export_docx(options: ExportOptions, request: Request) -> Response:
    document = _require_document(request.app)
    data = await run_in_threadpool(render_docx, document, options)
    return Response(
        content=data,
        media_type=DOCX_MIME_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="{settings.EXPORT_FILENAME}"',
        },
    )


@app.post(
    "/export/text",
    response_model=TextExport,
    summary="Trimmed plain text, for copying to the clipboard",
)
async def export_plain_text(options: ExportOptions, request: Request) -> TextExport:
    document = _require_document(request.app)
    return TextExport(text=export_text(document, options.without_sections))
