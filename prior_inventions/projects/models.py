"""Canonical project model shared by every pipeline stage."""

from pydantic import BaseModel, ConfigDict, Field

# Prefix of synthesized ids for manually declared projects. GitHub ids are
# purely numeric, so prefixed ids never collide with them.
MANUAL_ID_PREFIX = "manualproject:"

# Pseudo-owner used to build slugs of manually declared projects
MANUAL_SLUG_OWNER = "__manualprojects"


class Project(BaseModel):
    """Information about a prior invention."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique machine identifier")
    slug: str = Field(..., description="Pseudo-path in the format <owner>/<slug name>")
    owner: str = Field(..., description="Slug of the account owning the project")
    slug_name: str = Field(..., description="Machine readable name of the project")
    name: str = Field(..., description="Human readable name of the project")
    description: str = Field("", description="Short description of the project")
    link: str | None = Field(
        None, description="Link to the project's homepage, None for no link"
    )

    @property
    def is_manual(self) -> bool:
        """Whether the project was declared in configuration."""
        return self.id.startswith(MANUAL_ID_PREFIX)

    @property
    def identity(self) -> str:
        """Return the owner/slug name pair used in reports."""
        return f"{self.owner}/{self.slug_name}"
