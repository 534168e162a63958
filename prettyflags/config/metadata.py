"""Application metadata shown in the usage screen header."""

from dataclasses import dataclass
from typing import Optional

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class AppMetadata:
    """Build information printed above the flag tables.

    Attributes:
        app: Application name
        version: Release version, or ``NOT_AVAILABLE``
        branch: Source branch the binary was built from, or ``NOT_AVAILABLE``
        commit: Commit hash, or ``NOT_AVAILABLE``
        tag: Release tag, or ``NOT_AVAILABLE``
    """

    app: str
    version: str = NOT_AVAILABLE
    branch: str = NOT_AVAILABLE
    commit: str = NOT_AVAILABLE
    tag: str = NOT_AVAILABLE

    @classmethod
    def create(
        cls,
        app: str,
        version: Optional[str] = None,
        branch: Optional[str] = None,
        commit: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> "AppMetadata":
        """Build metadata, substituting ``NOT_AVAILABLE`` for missing fields."""
        return cls(
            app=app,
            version=NOT_AVAILABLE if version is None else version,
            branch=NOT_AVAILABLE if branch is None else branch,
            commit=NOT_AVAILABLE if commit is None else commit,
            tag=NOT_AVAILABLE if tag is None else tag,
        )
