"""Directory entry models fed to the tree addresser."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from aideprov.models.identifiers import Identifier


class DirectoryEntry(BaseModel):
    """One named child of a composite artifact.

    ``is_composite`` selects the directory mode token; otherwise the entry
    is hashed as a leaf file.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    is_composite: bool = False
    identifier: Identifier

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value:
            raise ValueError("entry name must not be empty")
        if "\x00" in value:
            raise ValueError("entry name must not contain NUL")
        if "/" in value:
            raise ValueError("entry name must not contain '/'")
        return value


class WalkFailure(BaseModel):
    """An entry the directory walker could not hash."""

    model_config = ConfigDict(frozen=True)

    path: str
    error: str


class WalkResult(BaseModel):
    """Directory identifier plus any entries skipped along the way."""

    model_config = ConfigDict(frozen=True)

    identifier: Identifier
    failures: list[WalkFailure] = []

    @property
    def complete(self) -> bool:
        return not self.failures
