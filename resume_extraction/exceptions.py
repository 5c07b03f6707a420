"""
Typed failures raised while turning a resume document into a profile.

Only UnsupportedFormat, EmptyDocument and DocumentNotFound ever reach a pipeline
caller (InvalidProfileData comes from manual entry). Provider errors are absorbed
by the orchestrator, and anything else is converted into the safe-default
result by the pipeline.
"""


class ResumeExtractionError(Exception):
    """Base class for every error raised by this package."""

    user_message = "Resume parsing failed. Please try again."

    def __init__(self, message: str = None):
        super().__init__(message or self.user_message)


class UnsupportedFormat(ResumeExtractionError):
    user_message = "Unsupported file format. Please upload a PDF or DOCX file."

    def __init__(self, declared_format=None):
        self.declared_format = declared_format
        super().__init__(f"Unsupported document format: {declared_format!r}")


class EmptyDocument(ResumeExtractionError):
    user_message = "The file appears to be empty or contains no readable text. Please upload a valid resume."


class DocumentNotFound(ResumeExtractionError):
    user_message = "The uploaded file could not be found. Please try uploading again."

    def __init__(self, path=None):
        self.path = path
        super().__init__(f"File not found: {path}")


class DocumentDecodeError(ResumeExtractionError):
    """The document decoder could not read the file (corrupted, encrypted...)."""

    user_message = "Failed to read the file. It may be corrupted or password-protected."


class InvalidProfileData(ResumeExtractionError):
    """Manually entered profile data is missing required fields or has the wrong shape."""

    user_message = "Invalid profile data. Education level, field of study and country are required."


class ProviderError(ResumeExtractionError):
    """A language-model provider could not produce a usable result."""

    def __init__(self, message: str, provider: str = None, model: str = None):
        self.provider = provider
        self.model = model
        super().__init__(message)


class ProviderCallFailure(ProviderError):
    """Network, quota, auth or model error raised by the provider SDK."""


class MalformedProviderResponse(ProviderError):
    """The model answered, but not with JSON of the expected shape."""
