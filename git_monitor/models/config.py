"""Application configuration models with Pydantic validation."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ProjectConfig(BaseModel):
    """A monitored working directory."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Display label shown on the dashboard")
    path: str = Field(..., min_length=1, description="Absolute path to the working directory")
    git_dir: str | None = Field(
        default=None,
        alias="gitDir",
        description="Path to the git directory (defaults to <path>/.git)",
    )


class GroupConfig(BaseModel):
    """A titled collection of projects, rendered as one dashboard section."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    title: str = Field(..., min_length=1, description="Section heading")
    projects: tuple[ProjectConfig, ...] = Field(
        default_factory=tuple,
        description="Projects in this group, in display order",
    )


class AppConfig(BaseModel):
    """Root application configuration.

    Loaded once at startup and never modified afterwards.
    """

    model_config = ConfigDict(frozen=True)

    groups: tuple[GroupConfig, ...] = Field(
        ...,
        description="Groups of monitored projects",
    )
    title: str = Field(
        default="Git Monitor",
        description="Page title",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to",
    )
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the HTTP server",
    )
    debug: bool = Field(
        default=False,
        description="Enable Flask debug mode",
    )
    probe_timeout: float = Field(
        default=30,
        ge=1,
        le=600,
        description="Seconds a single git query may run before the project is reported as an error",
    )
    max_workers: int = Field(
        default=8,
        ge=1,
        le=64,
        description="Projects classified in parallel during one dashboard pass",
    )
    git_binary: str = Field(
        default="git",
        min_length=1,
        description="Git executable to invoke",
    )

    @model_validator(mode="after")
    def _require_projects(self) -> "AppConfig":
        if not self.projects:
            raise ValueError("Config must include one or more projects")
        return self

    @property
    def projects(self) -> list[ProjectConfig]:
        """All projects across all groups, in configuration order."""
        return [project for group in self.groups for project in group.projects]
