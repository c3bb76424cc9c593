"""Runtime configuration: env-driven via pydantic-settings.

Reads from a .env file and AIDEPROV_* environment variables. Only the CLI
reads this module; the hashing core takes everything as explicit
constructor arguments.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from aideprov.core.content_addresser import ContentAddresser
from aideprov.core.directory_walker import DEFAULT_EXCLUDES, DirectoryWalker
from aideprov.core.identifier_codec import IdentifierCodec
from aideprov.core.tree_addresser import TreeAddresser


class AideProvConfig(BaseSettings):
    """Settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export AIDEPROV_LOG_LEVEL=DEBUG
        export AIDEPROV_MAX_CONTENT_BYTES=1073741824
        export AIDEPROV_WALK_WORKERS=8
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="AIDEPROV_",
        env_file_encoding="utf-8",
    )

    environment: str = "development"
    log_level: str = "INFO"

    # Identifier scheme
    namespace: str = "swh"
    schema_version: int = Field(default=1, gt=0)

    # Hashing limits
    max_content_bytes: int | None = None

    # Directory walks
    walk_excludes: list[str] = list(DEFAULT_EXCLUDES)
    walk_workers: int = Field(default=4, ge=1)
    skip_walk_errors: bool = False

    def build_codec(self) -> IdentifierCodec:
        return IdentifierCodec(
            namespace=self.namespace, schema_version=self.schema_version
        )

    def build_content_addresser(self) -> ContentAddresser:
        return ContentAddresser(
            self.max_content_bytes,
            namespace=self.namespace,
            schema_version=self.schema_version,
        )

    def build_tree_addresser(self) -> TreeAddresser:
        return TreeAddresser(
            namespace=self.namespace, schema_version=self.schema_version
        )

    def build_walker(self, **overrides) -> DirectoryWalker:
        """Directory walker wired from these settings; keyword overrides win."""
        options = {
            "excludes": self.walk_excludes,
            "max_workers": self.walk_workers,
            "on_error": "skip" if self.skip_walk_errors else "raise",
        }
        options.update(overrides)
        return DirectoryWalker(
            self.build_content_addresser(), self.build_tree_addresser(), **options
        )


# Module-level instance: import as `from aideprov.config import config`
config = AideProvConfig()
