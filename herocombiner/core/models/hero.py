"""Hero descriptor models.

A Hero is what the parser extracts from one descriptor file. Every field is
optional: a missing field means its line was not found, not that the file
is invalid.
"""

from pydantic import BaseModel, ConfigDict, Field


class Hero(BaseModel):
    """One parsed hero descriptor."""

    model_config = ConfigDict(frozen=True)

    schema_header: str | None = Field(
        default=None,
        description="Leading comment line, kept verbatim (e.g. '# yaml-language-server: ...')",
    )
    name: str | None = Field(default=None, description="Top-level hero key")
    coloured_name: str | None = Field(
        default=None, description="Decorated display name, e.g. '&7Alice'"
    )
    skills: str | None = Field(
        default=None, description="Everything after the 'skills:' line, verbatim"
    )
    source: str | None = Field(
        default=None, description="Where the descriptor was read from, if known"
    )

    @property
    def is_empty(self) -> bool:
        """True when no field could be extracted."""
        return all(
            value is None
            for value in (self.schema_header, self.name, self.coloured_name, self.skills)
        )


class SynthesizedHero(BaseModel):
    """A generated descriptor for one combination of heroes."""

    model_config = ConfigDict(frozen=True)

    file_name: str
    content: str
