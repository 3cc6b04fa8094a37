# routers/analysis.py
import asyncio
from functools import partial
from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile

from resume_match.models.models import Document
from resume_match.models.response import MatchReport
from resume_match.services.analyzer import analyze
from resume_match.utils.logging_config import get_logger, log_api_call

router = APIRouter(tags=["analysis"])
logger = get_logger(__name__)


async def _read_document(resume: Optional[UploadFile]) -> Optional[Document]:
    if resume is None:
        return None
    content = await resume.read()
    return Document(content=content, media_type=resume.content_type, filename=resume.filename)


@router.post("/upload", response_model=MatchReport, response_model_by_alias=True)
@log_api_call("analyze resume")
async def upload_and_analyze(
    resume: Optional[UploadFile] = File(None, description="Resume document (PDF, DOCX or plain text)"),
    jobDescription: Optional[str] = Form(None, description="Job description text"),
):
    """Analyze a resume against a job description and return the match report"""
    document = await _read_document(resume)

    # PDF parsing is CPU-bound; keep it off the event loop
    loop = asyncio.get_running_loop()
    report = await loop.run_in_executor(None, partial(analyze, document, jobDescription))
    return report
