"""
Client for the resume analysis endpoint.

Callers (UI backends, scripts) use this instead of hand-rolled HTTP calls so
the MatchReport shape is validated in one place.
"""
import os
from pathlib import Path
from typing import Optional, Union

import requests
from pydantic import ValidationError

from resume_match.helpers.parsing import resolve_media_type
from resume_match.models.response import MatchReport
from resume_match.utils.exceptions import ExternalServiceError, MalformedResponse, retry_with_logging
from resume_match.utils.logging_config import get_logger

logger = get_logger(__name__)

RESUME_MATCH_URL = os.getenv("RESUME_MATCH_URL", "http://localhost:8000")
TRANSIENT_ERRORS = (requests.ConnectionError, requests.Timeout)


class MatchClient:
    """Posts a resume and a job description to /api/upload and returns a validated MatchReport."""

    def __init__(self, base_url: str = None, timeout: float = 60, session: requests.Session = None):
        self.base_url = (base_url or RESUME_MATCH_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def upload_url(self) -> str:
        return f"{self.base_url}/api/upload"

    @retry_with_logging(max_attempts=3, backoff_factor=0.5, exceptions=TRANSIENT_ERRORS, logger=logger)
    def _post(self, files: dict, data: dict) -> requests.Response:
        return self.session.post(self.upload_url, files=files, data=data, timeout=self.timeout)

    def analyze(self, content: bytes, job_description: str, filename: str = "resume.pdf",
                media_type: Optional[str] = None) -> MatchReport:
        media_type = media_type or resolve_media_type(None, filename) or "application/octet-stream"
        resp = self._post(
            files={"resume": (filename, content, media_type)},
            data={"jobDescription": job_description},
        )
        return self._parse(resp)

    def analyze_file(self, path: Union[str, Path], job_description: str) -> MatchReport:
        p = Path(path)
        return self.analyze(p.read_bytes(), job_description, filename=p.name)

    def _parse(self, resp: requests.Response) -> MatchReport:
        if not resp.ok:
            raise self._error_from(resp)
        try:
            payload = resp.json()
        except ValueError as e:
            raise MalformedResponse("Analysis response is not JSON", cause=e) from e
        try:
            return MatchReport.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Rejected malformed analysis response: {e.error_count()} validation errors")
            raise MalformedResponse("Analysis response does not match the report contract", cause=e) from e

    @staticmethod
    def _error_from(resp: requests.Response) -> ExternalServiceError:
        message, code = f"Analysis request failed with status {resp.status_code}", None
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            error = body.get("error") if isinstance(body.get("error"), dict) else {}
            message = error.get("message") or body.get("message") or message
            code = error.get("error_code")
        logger.warning(f"Analysis service returned {resp.status_code}: {code or 'no error code'}")
        return ExternalServiceError(
            message,
            service_name="resume-match",
            status_code=resp.status_code,
            remote_error_code=code,
        )
