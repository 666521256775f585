"""Tests for the FinancialStatementsUseCase."""

from household_budget.application.use_cases.financial_statements import (
    FinancialStatementsUseCase,
)
from household_budget.domain.errors import FormatError, NotFound, StoreError
from household_budget.domain.models import StatementUpload


def _use_case(statements_repository, blob_store, logger):
    return FinancialStatementsUseCase(
        statements_repository,
        blob_store,
        logger=logger,
        clock=lambda: 1736000000000,
    )


def _upload(**overrides) -> StatementUpload:
    values = {
        "filename": "payslip.pdf",
        "content": b"%PDF-1.7",
        "content_type": "application/pdf",
        "uploaded_by": "Nikkie",
        "notes": " January ",
    }
    values.update(overrides)
    return StatementUpload(**values)


def test_upload_stores_blob_then_row(
    statements_repository,
    blob_store,
    logger,
) -> None:
    use_case = _use_case(statements_repository, blob_store, logger)

    result = use_case.upload_statement("2025-01", _upload())

    statement = result.value
    assert statement.file_path == "2025-01/1736000000000-payslip.pdf"
    assert statement.file_size == 8
    assert statement.notes == "January"
    assert blob_store.blobs[statement.file_path] == b"%PDF-1.7"
    assert use_case.list_statements("2025-01").value == [statement]
    assert use_case.download_statement(statement).value == b"%PDF-1.7"


def test_upload_without_member_records_none(
    statements_repository,
    blob_store,
    logger,
) -> None:
    use_case = _use_case(statements_repository, blob_store, logger)

    result = use_case.upload_statement("2025-01", _upload(uploaded_by=""))

    assert result.value.uploaded_by is None


def test_upload_rejects_unknown_member(
    statements_repository,
    blob_store,
    logger,
) -> None:
    use_case = _use_case(statements_repository, blob_store, logger)

    result = use_case.upload_statement("2025-01", _upload(uploaded_by="Sam"))

    assert isinstance(result.error, FormatError)
    assert blob_store.blobs == {}


def test_failed_row_insert_removes_blob(
    statements_repository,
    blob_store,
    logger,
) -> None:
    statements_repository.fail_on["insert_statement"] = StoreError("boom")
    use_case = _use_case(statements_repository, blob_store, logger)

    result = use_case.upload_statement("2025-01", _upload())

    assert isinstance(result.error, StoreError)
    assert blob_store.blobs == {}


def test_failed_cleanup_is_only_logged(
    statements_repository,
    blob_store,
    logger,
) -> None:
    statements_repository.fail_on["insert_statement"] = StoreError("boom")
    blob_store.fail_on["remove"] = StoreError("gone")
    use_case = _use_case(statements_repository, blob_store, logger)

    result = use_case.upload_statement("2025-01", _upload())

    assert str(result.error) == "boom"
    logger.warning.assert_called_once()


def test_blob_rejection_skips_row_insert(
    statements_repository,
    blob_store,
    logger,
) -> None:
    blob_store.fail_on["put"] = StoreError("too large")
    use_case = _use_case(statements_repository, blob_store, logger)

    result = use_case.upload_statement("2025-01", _upload())

    assert not result.ok
    assert statements_repository.statements == {}


def test_delete_removes_row_even_when_blob_is_missing(
    statements_repository,
    blob_store,
    logger,
) -> None:
    use_case = _use_case(statements_repository, blob_store, logger)
    statement = use_case.upload_statement("2025-01", _upload()).value
    blob_store.blobs.clear()

    result = use_case.delete_statement(statement)

    assert result.ok
    assert statements_repository.statements == {}
    logger.warning.assert_called_once()


def test_download_missing_blob_fails(
    statements_repository,
    blob_store,
    logger,
) -> None:
    use_case = _use_case(statements_repository, blob_store, logger)
    statement = use_case.upload_statement("2025-01", _upload()).value
    blob_store.blobs.clear()

    result = use_case.download_statement(statement)

    assert isinstance(result.error, NotFound)
