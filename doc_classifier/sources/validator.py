from collections.abc import Collection, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from doc_classifier.sources.exceptions import FileValidationError

_BYTES_PER_MB = 1024 * 1024


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking a set of input files; ``errors`` is empty when valid."""

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class FileValidator:
    """Checks input files against count, extension and size limits."""

    def __init__(
        self,
        *,
        max_files: int,
        max_size_mb: int,
        allowed_extensions: Collection[str],
    ) -> None:
        self._max_files = max_files
        self._max_size_mb = max_size_mb
        self._allowed_extensions = {ext.lower() for ext in allowed_extensions}

    def validate(self, paths: Sequence[Path]) -> ValidationResult:
        errors: list[str] = []
        if len(paths) > self._max_files:
            errors.append(f"Too many files: {len(paths)} (max {self._max_files})")
        for path in paths:
            errors.extend(self._validate_file(path))
        return ValidationResult(errors=errors)

    def check(self, paths: Sequence[Path]) -> None:
        """Raise FileValidationError listing every problem when ``paths`` are not acceptable."""
        result = self.validate(paths)
        if not result.is_valid:
            raise FileValidationError("; ".join(result.errors))

    def _validate_file(self, path: Path) -> list[str]:
        if path.suffix.lower() not in self._allowed_extensions:
            return [f"File {path.name} has an unsupported type"]
        if not path.is_file():
            return [f"File {path.name} does not exist"]
        if path.stat().st_size > self._max_size_mb * _BYTES_PER_MB:
            return [f"File {path.name} exceeds {self._max_size_mb}MB"]
        return []
