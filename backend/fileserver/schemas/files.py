"""File schemas — listing entries returned by ``?json``."""

from pydantic import BaseModel, ConfigDict, Field


class FileRecord(BaseModel):
    """One entry of a directory listing."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    size: int = Field(ge=0)
    last_modified: int = Field(alias="lastModified")
    hash_sum: str | None = Field(default=None, alias="hashSum")

    def to_json(self) -> dict:
        """Wire form: camelCase keys, ``hashSum`` dropped when not computed."""
        return self.model_dump(by_alias=True, exclude_none=True)
