"""
Custom Exception Classes for the Resume Match Engine
"""
import functools
import time
from random import uniform
from typing import Dict, Any

from fastapi import HTTPException


CLIENT_ERROR = "client"
SERVER_ERROR = "server"


class AnalysisError(Exception):
    """Base exception for the resume match engine"""

    status_code: int = 500
    category: str = SERVER_ERROR
    public_message: str = "An unexpected error occurred while analyzing the resume."

    def __init__(
        self,
        message: str = None,
        error_code: str = None,
        details: Dict[str, Any] = None,
        cause: Exception = None
    ):
        self.message = message or self.public_message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    @property
    def is_client_error(self) -> bool:
        return self.category == CLIENT_ERROR

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging"""
        result = {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "category": self.category,
            "message": self.message,
            "details": self.details
        }
        if self.cause:
            result["cause"] = str(self.cause)
        return result

    def to_public_dict(self) -> Dict[str, Any]:
        """Caller-facing view. Server-side errors only expose their public message."""
        if not self.is_client_error:
            return {
                "error_type": self.__class__.__name__,
                "error_code": self.error_code,
                "category": self.category,
                "message": self.public_message
            }
        result = {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "category": self.category,
            "message": self.message
        }
        if self.details:
            result["details"] = self.details
        return result


class InvalidInput(AnalysisError):
    """Raised when the document or job description is missing or empty"""

    status_code = 400
    category = CLIENT_ERROR
    public_message = "Both a resume file and a job description are required."

    def __init__(self, message: str = None, field: str = None, **kwargs):
        details = kwargs.pop('details', {})
        if field:
            details['field'] = field
        super().__init__(message, error_code="INVALID_INPUT", details=details, **kwargs)


class UnsupportedFormat(AnalysisError):
    """Raised when the declared media type is not a supported document type"""

    status_code = 415
    category = CLIENT_ERROR
    public_message = "Unsupported document type. Upload a PDF, DOCX or plain text file."

    def __init__(self, message: str = None, media_type: str = None, **kwargs):
        details = kwargs.pop('details', {})
        if media_type:
            details['media_type'] = media_type
        super().__init__(message, error_code="UNSUPPORTED_FORMAT", details=details, **kwargs)


class CorruptDocument(AnalysisError):
    """Raised when the document bytes cannot be parsed into text"""

    status_code = 500
    category = SERVER_ERROR
    public_message = "The document could not be read. Please upload a valid file."

    def __init__(self, message: str = None, media_type: str = None, **kwargs):
        details = kwargs.pop('details', {})
        if media_type:
            details['media_type'] = media_type
        super().__init__(message, error_code="CORRUPT_DOCUMENT", details=details, **kwargs)


class EmptyContent(AnalysisError):
    """Raised when extraction succeeds but yields no usable text"""

    status_code = 422
    category = CLIENT_ERROR
    public_message = (
        "No text could be extracted from the document. "
        "Scanned or image-only files are not supported."
    )

    def __init__(self, message: str = None, **kwargs):
        super().__init__(message, error_code="EMPTY_CONTENT", **kwargs)


class InternalError(AnalysisError):
    """Raised for unexpected failures during extraction, matching or generation"""

    def __init__(self, message: str = None, stage: str = None, **kwargs):
        details = kwargs.pop('details', {})
        if stage:
            details['stage'] = stage
        super().__init__(message, error_code="INTERNAL_ERROR", details=details, **kwargs)


class AnalysisFailed(AnalysisError):
    """Raised by the orchestrator when text extraction fails; wraps the specific error"""

    def __init__(self, cause: AnalysisError):
        super().__init__(
            f"Analysis failed: {cause.message}",
            error_code=cause.error_code,
            details=dict(cause.details),
            cause=cause
        )
        self.status_code = cause.status_code
        self.category = cause.category
        self.public_message = cause.public_message

    def to_public_dict(self) -> Dict[str, Any]:
        return self.cause.to_public_dict()


class ConfigurationError(AnalysisError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, message: str, config_key: str = None, **kwargs):
        details = kwargs.pop('details', {})
        if config_key:
            details['config_key'] = config_key
        super().__init__(message, error_code="CONFIGURATION_ERROR", details=details, **kwargs)


class ExternalServiceError(AnalysisError):
    """Raised by the client when the analysis service answers with an error"""

    status_code = 502

    def __init__(self, message: str, service_name: str = None, status_code: int = None,
                 remote_error_code: str = None, **kwargs):
        details = kwargs.pop('details', {})
        if service_name:
            details['service_name'] = service_name
        if status_code:
            details['status_code'] = status_code
        if remote_error_code:
            details['remote_error_code'] = remote_error_code
        super().__init__(message, error_code="EXTERNAL_SERVICE_ERROR", details=details, **kwargs)
        self.remote_status = status_code
        self.remote_error_code = remote_error_code
        if status_code is not None and 400 <= status_code < 500:
            self.category = CLIENT_ERROR


class MalformedResponse(AnalysisError):
    """Raised by the client when a success response does not match the report contract"""

    status_code = 502

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_code="MALFORMED_RESPONSE", **kwargs)


# HTTP Exception Mapping
def map_to_http_exception(exc: AnalysisError) -> HTTPException:
    """Map engine exceptions to HTTP exceptions"""

    detail = exc.to_public_dict()
    return HTTPException(
        status_code=exc.status_code,
        detail={
            "error": detail,
            "message": detail["message"]
        }
    )


class ExceptionContext:
    """Context manager that turns unexpected failures of one stage into InternalError"""

    def __init__(self, operation: str, logger=None, **context):
        self.operation = operation
        self.logger = logger
        self.context = context

    def __enter__(self):
        if self.logger:
            self.logger.debug(f"Starting operation: {self.operation}", extra=self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            if self.logger:
                self.logger.debug(f"Operation completed: {self.operation}", extra=self.context)
            return False

        # Engine exceptions already carry their kind
        if isinstance(exc_val, AnalysisError):
            return False

        if self.logger:
            self.logger.error(
                f"Operation failed: {self.operation} - {exc_val}",
                extra={**self.context, "exception_type": exc_type.__name__},
                exc_info=(exc_type, exc_val, exc_tb)
            )
        raise InternalError(
            f"Unexpected error in {self.operation}: {exc_val}",
            stage=self.operation,
            cause=exc_val
        ) from exc_val


# Retry decorator with exponential backoff
def retry_with_logging(
    max_attempts: int = 3,
    backoff_factor: float = 1.0,
    exceptions: tuple = (Exception,),
    logger=None
):
    """Decorator to retry operations with exponential backoff and logging"""

    def decorator(func):
        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            for attempt in range(max_attempts):
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    if logger:
                        logger.warning(
                            f"Attempt {attempt + 1}/{max_attempts} failed for {func.__name__}: {str(e)}"
                        )
                    if attempt == max_attempts - 1:
                        if logger:
                            logger.error(f"All {max_attempts} attempts failed for {func.__name__}")
                        raise
                    time.sleep(backoff_factor * (2 ** attempt) + uniform(0, 1))

        return sync_wrapper

    return decorator
