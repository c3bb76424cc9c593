"""Filesystem walker that feeds the addressers, bottom-up.

The walker is the only part of the system that touches the filesystem.
Sibling subtrees are hashed concurrently; a parent is folded only after
every child has resolved. The tree addresser re-sorts entries, so children
may finish in any order.

Failure policy lives here, not in the hashing core:

- ``on_error="raise"``: the first failure propagates to the caller.
- ``on_error="skip"``: the failing entry is left out of its parent, a
  ``WalkFailure`` is recorded, and a warning is logged.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import threading
from collections.abc import Callable, Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from aideprov.core.content_addresser import ContentAddresser
from aideprov.core.errors import IdentifierError
from aideprov.core.tree_addresser import TreeAddresser
from aideprov.models.artifacts import ModelPackage
from aideprov.models.identifiers import Identifier
from aideprov.models.tree import DirectoryEntry, WalkFailure, WalkResult

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDES: tuple[str, ...] = (".git", ".DS_Store", "__pycache__")

MODEL_PACKAGE_FILES: tuple[str, ...] = (
    "pytorch_model.bin",
    "model.safetensors",
    "tf_model.h5",
    "model.onnx",
    "config.json",
    "tokenizer.json",
    "vocab.txt",
    "README.md",
)

ON_ERROR_CHOICES = ("raise", "skip")

_FailureHandler = Callable[[Path, Exception], None]


@dataclass
class _PendingTree:
    """A scanned directory whose file hashes may still be in flight."""

    path: Path
    files: list[tuple[str, Future]] = field(default_factory=list)
    subdirs: list[tuple[str, _PendingTree]] = field(default_factory=list)
    error: OSError | None = None


class DirectoryWalker:
    """Computes directory identifiers for trees on disk.

    Parameters
    ----------
    content_addresser, tree_addresser:
        The hashing core. Defaults are constructed when omitted.
    excludes:
        Entry names to skip. A pattern matches when it glob-matches the
        name or appears anywhere inside it.
    max_workers:
        Threads used for hashing files. ``1`` walks sequentially.
    on_error:
        ``"raise"`` or ``"skip"``.
    """

    def __init__(
        self,
        content_addresser: ContentAddresser | None = None,
        tree_addresser: TreeAddresser | None = None,
        *,
        excludes: Iterable[str] = DEFAULT_EXCLUDES,
        max_workers: int = 4,
        on_error: str = "raise",
    ) -> None:
        if on_error not in ON_ERROR_CHOICES:
            raise ValueError(
                f"on_error must be one of {ON_ERROR_CHOICES}, got {on_error!r}"
            )
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._content = content_addresser or ContentAddresser()
        self._tree = tree_addresser or TreeAddresser()
        self._excludes = tuple(excludes)
        self._max_workers = max_workers
        self._on_error = on_error

    def is_excluded(self, name: str) -> bool:
        return any(
            pattern in name or fnmatch.fnmatchcase(name, pattern)
            for pattern in self._excludes
        )

    # ------------------------------------------------------------------
    # Walk
    # ------------------------------------------------------------------

    def address_directory(self, path: Path) -> WalkResult:
        """Hash ``path`` recursively and return its directory identifier."""
        root = Path(path)
        if not root.is_dir():
            raise NotADirectoryError(f"Not a directory: {root}")

        failures: list[WalkFailure] = []
        lock = threading.Lock()

        def fail(entry_path: Path, exc: Exception) -> None:
            if self._on_error == "raise":
                raise exc
            logger.warning("Skipping %s: %s", entry_path, exc)
            with lock:
                failures.append(WalkFailure(path=str(entry_path), error=str(exc)))

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            tree = self._scan(root, pool)
            identifier = self._fold(tree, fail)

        logger.debug(
            "Addressed %s -> %s (%d skipped)", root, identifier.digest, len(failures)
        )
        return WalkResult(identifier=identifier, failures=failures)

    def _scan(self, directory: Path, pool: ThreadPoolExecutor) -> _PendingTree:
        """Fan out: submit every file in the tree for hashing."""
        node = _PendingTree(path=directory)
        try:
            with os.scandir(directory) as it:
                children = list(it)
        except OSError as exc:
            node.error = exc
            return node

        for child in children:
            if self.is_excluded(child.name):
                continue
            if child.is_symlink():
                logger.debug("Not following symlink %s", child.path)
                continue
            child_path = Path(child.path)
            if child.is_dir():
                node.subdirs.append((child.name, self._scan(child_path, pool)))
            elif child.is_file():
                node.files.append(
                    (child.name, pool.submit(self._content.address_file, child_path))
                )
        return node

    def _fold(self, node: _PendingTree, fail: _FailureHandler) -> Identifier:
        """Fan in: fold children bottom-up once each has resolved."""
        if node.error is not None:
            raise node.error

        entries: list[DirectoryEntry] = []
        for name, subtree in node.subdirs:
            try:
                child_id = self._fold(subtree, fail)
            except (OSError, IdentifierError) as exc:
                fail(subtree.path, exc)
                continue
            entries.append(
                DirectoryEntry(name=name, is_composite=True, identifier=child_id)
            )

        for name, future in node.files:
            try:
                child_id = future.result()
            except (OSError, IdentifierError) as exc:
                fail(node.path / name, exc)
                continue
            entries.append(DirectoryEntry(name=name, identifier=child_id))

        return self._tree.address_tree(entries)

    # ------------------------------------------------------------------
    # Model packages
    # ------------------------------------------------------------------

    def describe_model_package(self, path: Path) -> ModelPackage:
        """Directory identifier of a model repo plus its well-known files."""
        root = Path(path)
        result = self.address_directory(root)
        components = {}
        skipped = []
        for filename in MODEL_PACKAGE_FILES:
            file_path = root / filename
            if not file_path.is_file():
                continue
            try:
                components[filename] = self._content.describe_model_file(file_path)
            except OSError as exc:
                logger.warning("Could not describe %s: %s", file_path, exc)
                skipped.append(filename)
        return ModelPackage(
            package=result.identifier, components=components, skipped=skipped
        )
