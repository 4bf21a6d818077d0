from src.exceptions.snippets.snippet_service_error import SnippetServiceError
from src.exceptions.snippets.storage_not_configured_error import StorageNotConfiguredError

__all__ = ["SnippetServiceError", "StorageNotConfiguredError"]
