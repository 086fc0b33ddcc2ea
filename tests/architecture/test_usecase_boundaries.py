"""
Summary: Architecture checks ensuring extraction use cases stay independent of mutagen.
Why: Prevent regressions where probe or extractor rules reach into adapter code.
"""

from __future__ import annotations

from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
USECASE_DIRS: tuple[Path, ...] = (
    REPO_ROOT / "src" / "tagprobe" / "features" / "extraction" / "usecases",
    REPO_ROOT / "src" / "tagprobe" / "features" / "extraction" / "domain",
    REPO_ROOT / "src" / "tagprobe" / "features" / "media_session" / "usecases",
)
FORBIDDEN_IMPORTS: tuple[str, ...] = (
    "import mutagen",
    "from mutagen",
    "tagprobe.features.extraction.adapters",
    "tagprobe.ui",
    "from ..adapters",
)


@pytest.mark.parametrize("forbidden", FORBIDDEN_IMPORTS)
def test_usecases_do_not_import_adapters(forbidden: str) -> None:
    """Ensure use case and domain modules only depend on ports."""

    offending_files: list[Path] = []
    for usecases_dir in USECASE_DIRS:
        for path in usecases_dir.rglob("*.py"):
            if forbidden in path.read_text(encoding="utf-8"):
                offending_files.append(path)
    assert offending_files == [], (
        f"Use case modules must not contain '{forbidden}'; found in: "
        f"{', '.join(str(path.relative_to(REPO_ROOT)) for path in offending_files)}"
    )
