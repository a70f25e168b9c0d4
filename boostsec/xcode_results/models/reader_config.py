"""Configuration model for the Xcode results reader."""

from pathlib import PurePath

from pydantic import BaseModel, Field, field_validator


class ReaderConfig(BaseModel):
    """Settings controlling discovery and conversion of result bundles."""

    results_pattern: str = Field(
        default="*TestSummaries.plist",
        min_length=1,
        description="Glob matched against file names in the results directory",
    )
    attachments_dir_name: str = Field(
        default="Attachments",
        min_length=1,
        description="Directory next to each summary file holding attachments",
    )
    max_depth: int = Field(
        default=256, ge=1, description="Maximum nesting depth of a document"
    )
    result_format: str = Field(
        default="xcode", description="Value of the resultFormat label"
    )

    @field_validator("results_pattern")
    @classmethod
    def check_results_pattern(cls, value: str) -> str:
        """Reject patterns that reach outside the results directory."""
        pattern = PurePath(value)
        if pattern.is_absolute() or len(pattern.parts) != 1 or value in {".", ".."}:
            raise ValueError("results_pattern must match file names only")
        return value
