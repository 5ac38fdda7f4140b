"""Unit tests for unique-violation parsing of driver error messages."""

from sqlalchemy.exc import IntegrityError

from app.infrastructure.database.errors import conflicting_fields, is_unique_violation


def _integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT INTO ...", {}, Exception(message))


def test_sqlite_composite_unique_violation():
    exc = _integrity_error("UNIQUE constraint failed: village_infos.lgd_code, village_infos.year_id")

    assert is_unique_violation(exc)
    assert conflicting_fields(exc) == ["lgd_code", "year_id"]


def test_postgres_unique_violation():
    exc = _integrity_error(
        'duplicate key value violates unique constraint "uq_village_infos_lgd_code_year"\n'
        "DETAIL:  Key (lgd_code, year_id)=(100234, abc) already exists."
    )

    assert is_unique_violation(exc)
    assert conflicting_fields(exc) == ["lgd_code", "year_id"]


def test_constraint_name_used_when_columns_missing():
    exc = _integrity_error('duplicate key value violates unique constraint "sansads_sansad_number_key"')

    assert conflicting_fields(exc) == ["sansads_sansad_number_key"]


def test_fallback_for_unrecognised_message():
    exc = _integrity_error("constraint violation")

    assert not is_unique_violation(exc)
    assert conflicting_fields(exc, ["label"]) == ["label"]
    assert conflicting_fields(exc) == ["unknown field(s)"]


def test_not_null_violation_is_not_unique():
    exc = _integrity_error("NOT NULL constraint failed: year_data.label")

    assert not is_unique_violation(exc)
