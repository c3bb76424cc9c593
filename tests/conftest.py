"""Shared test fixtures for aideprov."""

from __future__ import annotations

import pytest

from aideprov.core.content_addresser import ContentAddresser
from aideprov.core.identifier_codec import IdentifierCodec
from aideprov.core.tree_addresser import TreeAddresser


@pytest.fixture
def codec() -> IdentifierCodec:
    """Provide the default swh:1 codec."""
    return IdentifierCodec()


@pytest.fixture
def content_addresser() -> ContentAddresser:
    """Provide an unlimited ContentAddresser."""
    return ContentAddresser()


@pytest.fixture
def tree_addresser() -> TreeAddresser:
    """Provide a TreeAddresser."""
    return TreeAddresser()
