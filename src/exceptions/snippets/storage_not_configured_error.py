from src.exceptions.snippets.snippet_service_error import SnippetServiceError


class StorageNotConfiguredError(SnippetServiceError):
    """Exception raised when no snippet bucket is configured."""

    pass
