import asyncio
from typing import List, Optional

import structlog
from google.cloud import storage
from google.cloud.exceptions import NotFound
from google.oauth2 import service_account

from src.config.config import config
from src.exceptions.snippets import SnippetServiceError, StorageNotConfiguredError
from src.models.snippets.snippet import Snippet
from src.utils.singleton import Singleton

logger = structlog.get_logger(__name__)

SNIPPET_SUFFIX = ".json"


class SnippetService(Singleton):
    """
    Service for storing code snippets in Google Cloud Storage.

    Each snippet is one blob named ``<prefix>/<snippet name>.json`` whose
    content is the snippet text. The storage client is created on first use
    so the service can be imported without credentials.
    """

    def __init__(self):
        """Initialize the snippet service."""
        super().__init__()

        if hasattr(self, "_snippet_initialized"):
            return

        self.bucket_name = config.gcs_bucket_name
        self.project_id = config.google_project_id
        self.prefix = config.snippets_prefix

        self._client: Optional[storage.Client] = None
        self._bucket: Optional[storage.Bucket] = None

        self._snippet_initialized = True

        logger.debug(
            "Snippet service initialized",
            bucket=self.bucket_name,
            prefix=self.prefix,
        )

    def _initialize_client(self) -> storage.Client:
        """
        Initialize the Cloud Storage client.

        Uses the configured service account file when there is one, otherwise
        application default credentials.

        Raises:
            SnippetServiceError: If client initialization fails
        """
        try:
            credentials_path = config.get_google_credentials_path()

            if credentials_path is None:
                client = storage.Client(project=self.project_id)
            else:
                if not credentials_path.exists():
                    raise SnippetServiceError(f"Service account file not found: {credentials_path}")

                credentials = service_account.Credentials.from_service_account_file(
                    filename=str(credentials_path)
                )
                client = storage.Client(credentials=credentials, project=self.project_id)

            logger.info("Storage client initialized successfully")
            return client

        except SnippetServiceError:
            raise
        except Exception as e:
            logger.error("Failed to initialize storage client", error=str(e))
            raise SnippetServiceError(f"Failed to initialize storage client: {str(e)}")

    def _get_bucket(self) -> storage.Bucket:
        if self._bucket is not None:
            return self._bucket

        if not self.bucket_name:
            raise StorageNotConfiguredError("No snippet bucket configured")

        self._client = self._initialize_client()
        self._bucket = self._client.bucket(self.bucket_name)
        return self._bucket

    def blob_name(self, snippet_name: str) -> str:
        """Blob name holding the given snippet."""
        if self.prefix:
            return f"{self.prefix}/{snippet_name}{SNIPPET_SUFFIX}"
        return f"{snippet_name}{SNIPPET_SUFFIX}"

    def snippet_name(self, blob_name: str) -> str:
        """Snippet name for a blob name, the inverse of blob_name."""
        name = blob_name
        if self.prefix and name.startswith(f"{self.prefix}/"):
            name = name[len(self.prefix) + 1:]
        if name.endswith(SNIPPET_SUFFIX):
            name = name[: -len(SNIPPET_SUFFIX)]
        return name

    async def bucket_exists(self) -> bool:
        bucket = self._get_bucket()
        try:
            return await asyncio.to_thread(bucket.exists)
        except Exception as e:
            logger.error("Failed to check snippet bucket", bucket=self.bucket_name, error=str(e))
            raise SnippetServiceError(f"Failed to check bucket: {str(e)}")

    async def get_snippet(self, name: str) -> Optional[str]:
        """
        Get a snippet's content by name.

        Args:
            name: Snippet name

        Returns:
            The snippet text, or None if no such snippet exists

        Raises:
            StorageNotConfiguredError: If no bucket is configured
            SnippetServiceError: For other storage errors
        """
        bucket = self._get_bucket()
        blob = bucket.blob(self.blob_name(name))

        try:
            content = await asyncio.to_thread(blob.download_as_text)
        except NotFound:
            logger.info("Snippet not found", snippet_name=name)
            return None
        except Exception as e:
            logger.error("Failed to download snippet", snippet_name=name, error=str(e))
            raise SnippetServiceError(f"Failed to read snippet '{name}': {str(e)}")

        logger.info("Retrieved snippet", snippet_name=name, chars=len(content))
        return content

    async def save_snippet(self, name: str, content: str) -> None:
        """
        Save a snippet, replacing any existing snippet with the same name.

        Raises:
            StorageNotConfiguredError: If no bucket is configured
            SnippetServiceError: For other storage errors
        """
        bucket = self._get_bucket()
        blob = bucket.blob(self.blob_name(name))

        try:
            await asyncio.to_thread(
                blob.upload_from_string, content, content_type="application/json"
            )
        except Exception as e:
            logger.error("Failed to upload snippet", snippet_name=name, error=str(e))
            raise SnippetServiceError(f"Failed to save snippet '{name}': {str(e)}")

        logger.info("Saved snippet", snippet_name=name, chars=len(content))

    async def list_snippets(self) -> List[Snippet]:
        """
        Load every snippet stored under the configured prefix.

        Returns:
            Snippets in blob listing order

        Raises:
            StorageNotConfiguredError: If no bucket is configured
            SnippetServiceError: For other storage errors
        """
        bucket = self._get_bucket()
        list_prefix = f"{self.prefix}/" if self.prefix else None

        def _load() -> List[Snippet]:
            snippets = []
            for blob in bucket.list_blobs(prefix=list_prefix):
                # Skip "directory" placeholder blobs
                if blob.name.endswith("/"):
                    continue
                snippets.append(
                    Snippet(name=self.snippet_name(blob.name), content=blob.download_as_text())
                )
            return snippets

        try:
            snippets = await asyncio.to_thread(_load)
        except Exception as e:
            logger.error("Failed to list snippets", bucket=self.bucket_name, error=str(e))
            raise SnippetServiceError(f"Failed to list snippets: {str(e)}")

        logger.info("Listed snippets", count=len(snippets))
        return snippets


snippet_service = SnippetService()
