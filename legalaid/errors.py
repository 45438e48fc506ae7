"""Error taxonomy shared by the handlers and the error middleware."""

from typing import Optional


class LegalAidError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None, *, details: Optional[str] = None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)


class MissingField(LegalAidError):
    status_code = 400
    message = "Required field is missing"


class NoFilesUploaded(LegalAidError):
    status_code = 400
    message = "No files uploaded"


class UnsupportedFileType(LegalAidError):
    status_code = 400
    message = "Only PDF and Word documents are allowed!"


class FileTooLarge(LegalAidError):
    status_code = 413
    message = "File too large"


class StorageError(LegalAidError):
    message = "Failed to process files"


class ExtractionError(LegalAidError):
    message = "Failed to process file"


class CompletionFailure(LegalAidError):
    message = "Failed to generate text"
