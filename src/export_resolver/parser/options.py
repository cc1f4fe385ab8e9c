"""Per-file options attached to the root of every parsed tree."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ResolutionOptions(BaseModel):
    """Options a parsed file carries for resolving its imports.

    Unknown keys are accepted and passed along untouched to every file the
    resolver loads from this one.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    filename: Path | None = Field(
        default=None,
        description="Absolute path of the file the tree was parsed from",
    )
    root: Path | None = Field(
        default=None,
        description="Directory that module specifiers are resolved against",
    )
    language: str | None = Field(
        default=None,
        description="Grammar name; inferred from the filename when omitted",
    )

    def for_file(self, filename: Path) -> "ResolutionOptions":
        """Copy these options for another file."""
        return self.model_copy(update={"filename": filename})
