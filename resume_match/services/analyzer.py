"""
Analysis orchestrator: one resume and one job description in, one MatchReport out.
"""
from typing import Optional

from resume_match.helpers import parsing
from resume_match.models.engine_settings import EngineSettings
from resume_match.models.models import Document
from resume_match.models.response import MatchReport
from resume_match.services.keywords import extract_keywords
from resume_match.services.matching import coverage_breakdown, match
from resume_match.services.suggestions import generate_suggestions
from resume_match.utils.config import get_settings
from resume_match.utils.exceptions import AnalysisError, AnalysisFailed, ExceptionContext, InvalidInput
from resume_match.utils.logging_config import PerformanceMonitor, get_logger, log_function_call

logger = get_logger(__name__)


def validate_inputs(document: Optional[Document], job_description: Optional[str],
                    settings: EngineSettings) -> None:
    if job_description is None or not job_description.strip():
        raise InvalidInput("Job description is required", field="jobDescription")
    if document is None or document.size == 0:
        raise InvalidInput("Resume file is required", field="resume")
    limit = settings.upload.max_upload_bytes
    if document.size > limit:
        raise InvalidInput(
            f"Resume file is too large ({document.size} bytes, limit {limit})",
            field="resume",
            details={"max_upload_size_mb": settings.upload.max_upload_size_mb}
        )


@log_function_call
def analyze(document: Optional[Document], job_description: Optional[str],
            settings: Optional[EngineSettings] = None) -> MatchReport:
    """Run the full pipeline. Either returns a complete report or raises one AnalysisError."""
    settings = settings or get_settings()
    validate_inputs(document, job_description, settings)

    with PerformanceMonitor("resume analysis", logger=logger):
        try:
            resume_text = parsing.extract(document)
        except AnalysisError as e:
            raise AnalysisFailed(e) from e

        with ExceptionContext("normalize job description", logger=logger):
            jd_text = parsing.normalize_text(job_description)
        if jd_text.is_empty:
            raise InvalidInput("Job description has no readable text", field="jobDescription")

        with ExceptionContext("keyword extraction", logger=logger):
            resume_terms = extract_keywords(resume_text, settings.keywords)
            jd_terms = extract_keywords(jd_text, settings.keywords)

        with ExceptionContext("matching", logger=logger):
            outcome = match(resume_terms, jd_terms, settings.matching)

        with ExceptionContext("suggestion generation", logger=logger):
            suggestions = generate_suggestions(outcome.missing, outcome.score, settings.suggestions)

        with ExceptionContext("report assembly", logger=logger):
            report = MatchReport(
                score=outcome.score,
                matching_keywords=outcome.matching,
                missing_keywords=outcome.missing,
                suggestions=suggestions,
            )

    logger.info(
        f"Analysis complete - score: {report.score}, resume terms: {len(resume_terms)}, "
        f"jd terms: {len(jd_terms)}, matching: {len(outcome.matching)}, missing: {len(outcome.missing)}",
        extra=coverage_breakdown(jd_terms, outcome)
    )
    return report
