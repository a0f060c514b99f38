from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class BadRequest(AppError):
    code = "bad_request"
    status_code = 400


class NotFound(AppError):
    code = "not_found"
    status_code = 404


class InternalError(AppError):
    code = "internal_error"
    status_code = 500


class BreedImportError(AppError):
    """Raised while seeding breeds from a CSV file. Fatal to startup."""

    code = "import_error"
    status_code = 500

    def __init__(self, message: str, *, line: int | None = None) -> None:
        details = {"line": line} if line is not None else None
        super().__init__(message, details=details)
        self.line = line


class BreedFileError(BreedImportError):
    code = "import_file_error"


class MalformedRow(BreedImportError):
    code = "import_malformed_row"

    def __init__(self, line: int, columns: int) -> None:
        super().__init__(f"invalid format line {line}: expected 6 columns, got {columns}", line=line)
        self.columns = columns


class InvalidWeight(BreedImportError):
    code = "import_invalid_weight"

    def __init__(self, line: int, column: str, value: str) -> None:
        super().__init__(f"invalid {column} at line {line}: {value!r}", line=line)
        self.column = column
        self.value = value


class InsertFailed(BreedImportError):
    code = "import_insert_failed"

    def __init__(self, line: int) -> None:
        super().__init__(f"failed to insert record at line {line}", line=line)
