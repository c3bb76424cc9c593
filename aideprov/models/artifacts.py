"""Model artifact descriptions built on top of content identifiers."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from aideprov.models.identifiers import Identifier


class ModelFileInfo(BaseModel):
    """Identifier and file facts for a single model file."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    swhid: Identifier
    filename: str
    size_bytes: int
    model_format: str
    last_modified: datetime


class ModelPackage(BaseModel):
    """Directory identifier of a model repository plus its known components."""

    model_config = ConfigDict(frozen=True)

    package: Identifier
    components: dict[str, ModelFileInfo] = {}
    skipped: list[str] = []


class TrainingSnapshot(BaseModel):
    """Inputs that pin down one training run."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_code: str
    training_data: str
    hyperparameters: dict[str, Any] = {}
    timestamp: str = ""
    git_commit: str = ""
