from pydantic import BaseModel, Field, computed_field


class Snippet(BaseModel):
    """A named code snippet held in blob storage."""

    name: str = Field(..., description="Snippet name, without the blob suffix")
    content: str = Field(..., description="Snippet text as stored")

    @computed_field
    @property
    def word_count(self) -> int:
        return len(self.content.split())

    @computed_field
    @property
    def char_count(self) -> int:
        return len(self.content)
