"""Base types used across the git-train system."""

from pydantic import BaseModel, ConfigDict, Field


class CommitRecord(BaseModel):
    """A single unpushed commit, as it rides in the train."""

    model_config = ConfigDict(frozen=True)

    hash: str = Field(..., description="The full commit hash")
    message: str = Field(..., description="The commit subject line")
    modifications: str = Field(
        default="", description="Normalized '+N -M' change summary, empty when the commit touches no files"
    )
