"""Results returned by package runners."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Outcome of loading a package entry point in a child process.

    Attributes:
        success: Whether the entry point loaded without error.
        error: Description of the failure, if any.
    """

    success: bool
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the load failed."""
        return not self.success


@dataclass(frozen=True, slots=True)
class PackResult:
    """Outcome of a packaging dry run.

    Attributes:
        success: Whether the dry run completed and its output was parsed.
        files: Paths the published archive would contain.
        error: Description of the failure, if any.
    """

    success: bool
    files: tuple[str, ...] = ()
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the dry run failed."""
        return not self.success
