"""Domain model for uploaded financial documents."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FinancialStatement:
    """Metadata of a document stored in the blob store.

    Attributes:
        file_path: Blob key in the form ``<month>/<epoch-ms>-<filename>``.
        file_size: Size in bytes.
        uploaded_by: Member who uploaded the file, if recorded.
    """

    id: str
    month: str
    filename: str
    file_path: str
    file_size: int
    content_type: str
    uploaded_by: str | None
    notes: str = ""
    created_at: datetime | None = None


__all__ = ["FinancialStatement"]
