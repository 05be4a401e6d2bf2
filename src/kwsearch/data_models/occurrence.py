from pydantic import BaseModel, ConfigDict, Field


class Occurrence(BaseModel):
    """A keyword's frequency within one document."""

    model_config = ConfigDict(frozen=True)

    document: str = Field(min_length=1)
    frequency: int = Field(ge=1)

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"
