from unittest.mock import MagicMock, patch

import pytest
from google.cloud.exceptions import NotFound

from src.exceptions.snippets import SnippetServiceError, StorageNotConfiguredError
from src.services.snippet_service import SnippetService


def make_blob(name, content=""):
    blob = MagicMock()
    blob.name = name
    blob.download_as_text.return_value = content
    return blob


class TestSnippetNaming:
    """Test cases for mapping snippet names to blob names."""

    def test_blob_name(self, snippet_service):
        assert snippet_service.blob_name("hello") == "snippets/hello.json"

    def test_blob_name_without_prefix(self, snippet_service):
        snippet_service.prefix = ""
        assert snippet_service.blob_name("hello") == "hello.json"

    def test_snippet_name(self, snippet_service):
        assert snippet_service.snippet_name("snippets/hello.json") == "hello"
        assert snippet_service.snippet_name("snippets/config.json.bak") == "config.json.bak"


class TestSnippetService:
    """Test cases for snippet storage operations."""

    @pytest.mark.asyncio
    async def test_get_snippet(self, snippet_service):
        blob = make_blob("snippets/hello.json", "print('hello')")
        snippet_service._bucket.blob.return_value = blob

        content = await snippet_service.get_snippet("hello")

        assert content == "print('hello')"
        snippet_service._bucket.blob.assert_called_once_with("snippets/hello.json")

    @pytest.mark.asyncio
    async def test_get_snippet_missing(self, snippet_service):
        blob = make_blob("snippets/nope.json")
        blob.download_as_text.side_effect = NotFound("No such object")
        snippet_service._bucket.blob.return_value = blob

        assert await snippet_service.get_snippet("nope") is None

    @pytest.mark.asyncio
    async def test_get_snippet_storage_error(self, snippet_service):
        blob = make_blob("snippets/hello.json")
        blob.download_as_text.side_effect = RuntimeError("permission denied")
        snippet_service._bucket.blob.return_value = blob

        with pytest.raises(SnippetServiceError, match="permission denied"):
            await snippet_service.get_snippet("hello")

    @pytest.mark.asyncio
    async def test_save_snippet(self, snippet_service):
        blob = make_blob("snippets/hello.json")
        snippet_service._bucket.blob.return_value = blob

        await snippet_service.save_snippet("hello", "print('hello')")

        snippet_service._bucket.blob.assert_called_once_with("snippets/hello.json")
        blob.upload_from_string.assert_called_once_with(
            "print('hello')", content_type="application/json"
        )

    @pytest.mark.asyncio
    async def test_save_snippet_storage_error(self, snippet_service):
        blob = make_blob("snippets/hello.json")
        blob.upload_from_string.side_effect = RuntimeError("quota exceeded")
        snippet_service._bucket.blob.return_value = blob

        with pytest.raises(SnippetServiceError, match="quota exceeded"):
            await snippet_service.save_snippet("hello", "x")

    @pytest.mark.asyncio
    async def test_list_snippets(self, snippet_service):
        snippet_service._bucket.list_blobs.return_value = [
            make_blob("snippets/"),
            make_blob("snippets/hello.json", "print('hello world')"),
            make_blob("snippets/sum.json", "a + b"),
        ]

        snippets = await snippet_service.list_snippets()

        snippet_service._bucket.list_blobs.assert_called_once_with(prefix="snippets/")
        assert [snippet.name for snippet in snippets] == ["hello", "sum"]
        assert snippets[0].word_count == 2
        assert snippets[0].char_count == 20
        assert snippets[1].word_count == 3

    @pytest.mark.asyncio
    async def test_bucket_exists(self, snippet_service):
        snippet_service._bucket.exists.return_value = False

        assert await snippet_service.bucket_exists() is False

    @pytest.mark.asyncio
    async def test_not_configured(self):
        SnippetService.reset_instance()
        service = SnippetService()
        service.bucket_name = None
        service._bucket = None

        with pytest.raises(StorageNotConfiguredError):
            await service.get_snippet("hello")

        SnippetService.reset_instance()

    def test_construction_logs_at_debug(self):
        SnippetService.reset_instance()

        with patch("src.services.snippet_service.logger") as mock_logger:
            SnippetService()

        mock_logger.debug.assert_called_once()
        mock_logger.info.assert_not_called()
        SnippetService.reset_instance()
