"""Use case for uploading and retrieving financial documents."""

import time
from collections.abc import Callable

from household_budget.application.ports.blob_store import BlobStorePort
from household_budget.application.ports.statements_repository import (
    StatementsRepositoryPort,
)
from household_budget.application.use_cases.results import OperationResult
from household_budget.domain.errors import BudgetError, StoreError
from household_budget.domain.models import FinancialStatement, StatementUpload
from household_budget.domain.services.month_keys import validate_month_key
from household_budget.domain.services.statements import build_statement_key
from household_budget.domain.services.validation import validate_member
from household_budget.infrastructure.logging.logger import get_app_logger


def _epoch_ms() -> int:
    return int(time.time() * 1000)


class FinancialStatementsUseCase:
    """Store documents in the blob store and their metadata as rows.

    The blob store enforces size and content-type limits; this use case
    only sequences the blob and row writes.
    """

    def __init__(
        self,
        statements_repository: StatementsRepositoryPort,
        blob_store: BlobStorePort,
        logger=None,
        clock: Callable[[], int] = _epoch_ms,
    ) -> None:
        """Initialize the use case.

        Args:
            statements_repository: Port giving access to statement rows.
            blob_store: Port storing the document contents.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning epoch milliseconds for blob keys.
        """
        self._repository = statements_repository
        self._blob_store = blob_store
        self._logger = logger or get_app_logger()
        self._clock = clock

    def list_statements(self, month: str) -> OperationResult:
        try:
            validate_month_key(month)
            statements = self._repository.fetch_statements(month)
        except BudgetError as exc:
            self._logger.error(f"Error listing statements of {month}: {exc}")
            return OperationResult.failure(exc)
        return OperationResult.success(statements)

    def upload_statement(
        self,
        month: str,
        upload: StatementUpload,
    ) -> OperationResult:
        """Store a document and record its metadata.

        When the metadata insert fails the blob is removed again; a failing
        removal is only logged.

        Returns:
            OperationResult: The FinancialStatement row on success.
        """
        try:
            key = build_statement_key(month, upload.filename, self._clock())
            uploaded_by = (
                validate_member(upload.uploaded_by)
                if upload.uploaded_by
                else None
            )
            self._blob_store.put(key, upload.content, upload.content_type)
        except BudgetError as exc:
            self._logger.error(
                f"Error uploading {upload.filename!r} for {month}: {exc}"
            )
            return OperationResult.failure(exc)

        try:
            statement = self._repository.insert_statement(
                month,
                upload.filename.strip(),
                key,
                len(upload.content),
                upload.content_type,
                uploaded_by,
                (upload.notes or "").strip(),
            )
        except StoreError as exc:
            self._logger.error(f"Error recording statement {key}: {exc}")
            self._remove_blob(key)
            return OperationResult.failure(exc)
        self._logger.info(
            f"Uploaded statement {key} ({statement.file_size} bytes)"
        )
        return OperationResult.success(statement)

    def download_statement(
        self,
        statement: FinancialStatement,
    ) -> OperationResult:
        """Return the stored bytes of a statement."""
        try:
            content = self._blob_store.get(statement.file_path)
        except StoreError as exc:
            self._logger.error(
                f"Error downloading statement {statement.file_path}: {exc}"
            )
            return OperationResult.failure(exc)
        return OperationResult.success(content)

    def delete_statement(
        self,
        statement: FinancialStatement,
    ) -> OperationResult:
        """Remove the blob (best effort) and then the metadata row."""
        self._remove_blob(statement.file_path)
        try:
            self._repository.delete_statement(statement.id)
        except StoreError as exc:
            self._logger.error(
                f"Error deleting statement row {statement.id}: {exc}"
            )
            return OperationResult.failure(exc)
        return OperationResult.success()

    def _remove_blob(self, key: str) -> None:
        try:
            self._blob_store.remove(key)
        except StoreError as exc:
            self._logger.warning(f"Could not remove blob {key}: {exc}")


__all__ = ["FinancialStatementsUseCase"]
