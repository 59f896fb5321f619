from pathlib import Path
from typing import Callable

import pytest

from certoids.builtin import initialize_registry
from certoids.registry import OidRegistry


@pytest.fixture
def registry() -> OidRegistry:
    """A freshly initialized registry, independent of the process-wide one."""
    return initialize_registry(OidRegistry())


@pytest.fixture
def write_mapping(tmp_path: Path) -> Callable[..., Path]:
    """Write a mapping document into tmp_path and return its path."""
    def _write(text: str, name: str = "custom_oids.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
