"""Exception taxonomy for document processing errors.

Every error carries the HTTP status and the short ``error`` string returned
to the caller. None of them are retried: parsing the same bytes again would
fail the same way.
"""


class DocumentError(Exception):
    """Base class for document processing errors."""

    status_code: int = 500
    error: str = "Failed to process file"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(DocumentError):
    """The upload was rejected before any decoding was attempted."""

    status_code = 400
    error = "Invalid upload"


class NoFileError(ValidationError):
    error = "No file uploaded"


class UnsupportedFileTypeError(ValidationError):
    """File extension is not one of the accepted document types."""

    error = "Only PDF and DOCX files are allowed"


class FileTooLargeError(DocumentError):
    """Uploaded file exceeds the configured size cap."""

    status_code = 413
    error = "File too large"


class DocumentDecodeError(DocumentError):
    """External decoder failed on malformed or corrupt input."""

    status_code = 500
    error = "Failed to process file"


class RateLimitExceededError(DocumentError):
    """Client exceeded the upload rate limit."""

    status_code = 429
    error = "Rate limit exceeded"
