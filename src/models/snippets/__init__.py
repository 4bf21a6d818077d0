from src.models.snippets.snippet import Snippet

__all__ = ["Snippet"]
