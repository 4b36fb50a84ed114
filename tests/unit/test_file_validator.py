from pathlib import Path

import pytest

from doc_classifier.sources.exceptions import FileValidationError
from doc_classifier.sources.validator import FileValidator


def _validator(max_files: int = 10, max_size_mb: int = 1) -> FileValidator:
    return FileValidator(
        max_files=max_files,
        max_size_mb=max_size_mb,
        allowed_extensions={".txt", ".pdf"},
    )


class TestFileValidator:
    def test_accepts_valid_files(self, tmp_path: Path) -> None:
        path = tmp_path / "label.txt"
        path.write_text("ゲートウェイ", encoding="utf-8")
        result = _validator().validate([path])
        assert result.is_valid
        assert result.errors == []

    def test_rejects_too_many_files(self, tmp_path: Path) -> None:
        paths = []
        for i in range(3):
            path = tmp_path / f"{i}.txt"
            path.write_text("x", encoding="utf-8")
            paths.append(path)
        result = _validator(max_files=2).validate(paths)
        assert not result.is_valid
        assert "Too many files" in result.errors[0]

    def test_rejects_unsupported_type(self, tmp_path: Path) -> None:
        path = tmp_path / "photo.png"
        path.write_bytes(b"\x89PNG")
        result = _validator().validate([path])
        assert result.errors == ["File photo.png has an unsupported type"]

    def test_rejects_missing_file(self, tmp_path: Path) -> None:
        result = _validator().validate([tmp_path / "missing.txt"])
        assert result.errors == ["File missing.txt does not exist"]

    def test_rejects_oversized_file(self, tmp_path: Path) -> None:
        path = tmp_path / "big.txt"
        path.write_bytes(b"a" * (1024 * 1024 + 1))
        result = _validator(max_size_mb=1).validate([path])
        assert result.errors == ["File big.txt exceeds 1MB"]

    def test_extension_check_is_case_insensitive(self, tmp_path: Path) -> None:
        path = tmp_path / "scan.TXT"
        path.write_text("x", encoding="utf-8")
        assert _validator().validate([path]).is_valid

    def test_check_raises_with_all_errors(self, tmp_path: Path) -> None:
        with pytest.raises(FileValidationError) as exc_info:
            _validator().check([tmp_path / "a.txt", tmp_path / "b.png"])
        message = str(exc_info.value)
        assert "a.txt does not exist" in message
        assert "b.png has an unsupported type" in message

    def test_check_passes_for_valid_files(self, tmp_path: Path) -> None:
        path = tmp_path / "label.pdf"
        path.write_bytes(b"%PDF-1.4")
        _validator().check([path])
