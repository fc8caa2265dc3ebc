"""Schema of the project configuration file consulted for path aliases."""

from pydantic import BaseModel, ConfigDict, Field


class CompilerOptions(BaseModel):
    """The subset of compilerOptions that drives alias rewriting."""

    base_url: str | None = Field(default=None, alias="baseUrl", description="Base directory for alias targets")
    paths: dict[str, list[str]] | None = Field(
        default=None, description="Alias pattern to replacement templates, first replacement wins"
    )

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TsConfigFile(BaseModel):
    """Top level of a tsconfig.json style file."""

    compiler_options: CompilerOptions | None = Field(default=None, alias="compilerOptions")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
