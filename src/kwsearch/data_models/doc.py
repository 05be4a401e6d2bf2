from pydantic import BaseModel, ConfigDict


class Doc(BaseModel):
    model_config = ConfigDict(frozen=True)

    doc_id: str  # document name as listed, or the parquet doc_id column
    words: list[str] = []  # whitespace-split, not yet normalized
