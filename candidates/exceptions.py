"""
Operator-recoverable import failures.

Every error carries a stable ``code`` so the API, the admin log and the
management command can report it without parsing the message.
"""


class CandidateImportError(ValueError):
    code = "import_error"
    default_message = "Import failed"

    def __init__(self, message=None, **context):
        super().__init__(message or self.default_message)
        self.context = context


# -----------------------------
# Structural parse errors
# -----------------------------
class NoRowsFound(CandidateImportError):
    code = "no_rows"
    default_message = "No rows found in file"


class NoDataRows(CandidateImportError):
    code = "no_data_rows"
    default_message = "File has a header row but no data rows"


class NoValidRows(CandidateImportError):
    code = "no_valid_rows"
    default_message = "No valid rows left after cleaning"


class UnsupportedFileType(CandidateImportError):
    code = "unsupported_file"
    default_message = "Unsupported file type"


# -----------------------------
# Validation errors
# -----------------------------
class MissingRequiredMapping(CandidateImportError):
    code = "missing_required_mapping"

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            f"Required fields are not mapped: {', '.join(self.missing)}",
            missing=self.missing,
        )


class NoValidCandidates(CandidateImportError):
    code = "no_valid_candidates"
    default_message = "No valid candidates: every row is missing full name or email"


class UnknownField(CandidateImportError):
    code = "unknown_field"


# -----------------------------
# Workflow errors
# -----------------------------
class LargeImportNotConfirmed(CandidateImportError):
    code = "large_file_unconfirmed"


class InvalidImportStep(CandidateImportError):
    code = "invalid_step"


class InvalidPolicy(CandidateImportError):
    code = "invalid_policy"
