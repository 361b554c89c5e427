"""Package record model."""

from __future__ import annotations

from dataclasses import dataclass

NO_LICENSE_FOUND = "NO LICENSE FOUND"


@dataclass(frozen=True)
class PackageRecord:
    """License information for one installed package."""

    name: str
    url: str | None
    license_text: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must be non-empty")
