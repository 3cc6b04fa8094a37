from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from resume_match.helpers.templates import NO_GAPS_MESSAGE
from resume_match.models.engine_settings import EngineSettings, UploadSettings
from resume_match.models.models import Document
from resume_match.models.response import MatchReport
from resume_match.services.analyzer import analyze
from resume_match.utils.exceptions import (
    AnalysisFailed,
    CorruptDocument,
    EmptyContent,
    InternalError,
    InvalidInput,
    UnsupportedFormat,
)


def text_doc(text, media_type="text/plain"):
    return Document(content=text.encode("utf-8"), media_type=media_type, filename="resume.txt")


class TestAnalyze:
    """Test cases for the analysis orchestrator"""

    def test_reference_scenario(self, resume_text, job_description):
        report = analyze(text_doc(resume_text), job_description)

        assert isinstance(report, MatchReport)
        assert {"python", "aws"} <= set(report.matching_keywords)
        assert {"kubernetes", "ci/cd"} <= set(report.missing_keywords)
        assert 0 < report.score < 100
        assert "kubernetes" in report.suggestions

    def test_pdf_resume(self, pdf_bytes, job_description):
        doc = Document(content=pdf_bytes(["Python developer", "AWS, Docker, Kubernetes, CI/CD"]),
                       media_type="application/pdf", filename="cv.pdf")
        report = analyze(doc, job_description)
        assert report.score == 100
        assert report.missing_keywords == []
        assert report.suggestions == NO_GAPS_MESSAGE

    def test_stopword_only_job_description(self, resume_text):
        report = analyze(text_doc(resume_text), "the and or but")
        assert report.score == 0
        assert report.matching_keywords == []
        assert report.missing_keywords == []
        assert report.suggestions == NO_GAPS_MESSAGE

    def test_wire_format(self, resume_text, job_description):
        wire = analyze(text_doc(resume_text), job_description).to_wire()
        assert set(wire) == {"score", "matchingKeywords", "missingKeywords", "suggestions"}
        assert isinstance(wire["score"], int)

    def test_deterministic(self, resume_text, job_description):
        first = analyze(text_doc(resume_text), job_description)
        second = analyze(text_doc(resume_text), job_description)
        assert first.model_dump_json() == second.model_dump_json()

    def test_concurrent_calls_are_isolated(self, job_description):
        resumes = ["Python AWS", "Kubernetes CI/CD", "Java Spring Boot", "Python AWS Kubernetes CI/CD"]
        expected = [analyze(text_doc(r), job_description) for r in resumes]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda r: analyze(text_doc(r), job_description), resumes * 5))
        assert results == expected * 5


class TestAnalyzeValidation:
    """Test cases for input validation"""

    @pytest.mark.parametrize("jd", [None, "", "   \n\t"])
    def test_missing_job_description(self, resume_text, jd):
        with pytest.raises(InvalidInput) as exc_info:
            analyze(text_doc(resume_text), jd)
        assert exc_info.value.details["field"] == "jobDescription"

    def test_job_description_without_readable_text(self, resume_text):
        with pytest.raises(InvalidInput):
            analyze(text_doc(resume_text), "\x00\x01\x02")

    def test_missing_document(self, job_description):
        with pytest.raises(InvalidInput) as exc_info:
            analyze(None, job_description)
        assert exc_info.value.details["field"] == "resume"

    def test_empty_document(self, job_description):
        with pytest.raises(InvalidInput):
            analyze(Document(content=b"", media_type="application/pdf"), job_description)

    def test_document_too_large(self, job_description):
        settings = EngineSettings(upload=UploadSettings(max_upload_size_mb=0.001))
        doc = text_doc("python " * 500)
        with pytest.raises(InvalidInput) as exc_info:
            analyze(doc, job_description, settings)
        assert "too large" in exc_info.value.message


class TestAnalyzeFailures:
    """Test cases for failure propagation"""

    def test_unsupported_format_wrapped(self, job_description):
        doc = Document(content=b"\x89PNG", media_type="image/png")
        with pytest.raises(AnalysisFailed) as exc_info:
            analyze(doc, job_description)
        assert isinstance(exc_info.value.cause, UnsupportedFormat)
        assert exc_info.value.status_code == 415

    def test_corrupt_document_wrapped(self, job_description):
        doc = Document(content=b"not a zip", media_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document")
        with pytest.raises(AnalysisFailed) as exc_info:
            analyze(doc, job_description)
        assert isinstance(exc_info.value.cause, CorruptDocument)
        assert exc_info.value.category == "server"

    def test_empty_content_wrapped(self, job_description):
        with pytest.raises(AnalysisFailed) as exc_info:
            analyze(text_doc(" \n "), job_description)
        assert isinstance(exc_info.value.cause, EmptyContent)

    @patch("resume_match.services.analyzer.match")
    def test_unexpected_error_becomes_internal_error(self, mock_match, resume_text, job_description):
        mock_match.side_effect = ZeroDivisionError("boom")
        with pytest.raises(InternalError) as exc_info:
            analyze(text_doc(resume_text), job_description)
        assert exc_info.value.details["stage"] == "matching"
        assert "boom" not in exc_info.value.to_public_dict()["message"]

    @patch("resume_match.services.analyzer.generate_suggestions")
    def test_no_partial_report(self, mock_suggestions, resume_text, job_description):
        mock_suggestions.side_effect = RuntimeError("template broke")
        with pytest.raises(InternalError):
            analyze(text_doc(resume_text), job_description)
