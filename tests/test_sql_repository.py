"""Tests for SqlContactRepository against a SQLite file in tmp_path."""

import pytest
import sqlalchemy as sa

from agenda.application import (
    ContactNotFoundError,
    ContactService,
    ContactCreated,
    ContactData,
    InvalidContactError,
    NotFound,
    StorageError,
    StorageFailure,
)
from agenda.domain import Contact
from agenda.infrastructure import SqlContactRepository
from agenda.infrastructure.persistence.models import ContactRow


def _contact(name="Ana", phone="(11) 98765-4321", email="ana@example.com") -> Contact:
    return Contact(name=name, phone=phone, email=email)


def _row_count(repo: SqlContactRepository) -> int:
    with repo.engine.connect() as conn:
        return conn.execute(sa.text("SELECT COUNT(*) FROM contacts")).scalar_one()


def test_add_get_by_id_round_trip(sql_repo):
    contact = _contact()
    stored = sql_repo.add(contact)

    assert stored.id > 0
    assert stored.is_persisted
    found = sql_repo.get_by_id(stored.id)
    assert found == Contact(id=stored.id, name=contact.name, phone=contact.phone, email=contact.email)


def test_add_assigns_distinct_ids(sql_repo):
    first = sql_repo.add(_contact(name="Ana"))
    second = sql_repo.add(_contact(name="Bob"))
    assert first.id != second.id
    assert first.id > 0 and second.id > 0


def test_add_none_raises_invalid_and_stores_nothing(sql_repo):
    with pytest.raises(InvalidContactError):
        sql_repo.add(None)
    assert _row_count(sql_repo) == 0


def test_list_all_ordered_by_name(sql_repo):
    for name in ("Bob", "Ana", "Carl"):
        sql_repo.add(_contact(name=name))

    assert [c.name for c in sql_repo.list_all()] == ["Ana", "Bob", "Carl"]


def test_list_all_empty(sql_repo):
    assert sql_repo.list_all() == []


def test_get_by_id_missing_returns_none(sql_repo):
    assert sql_repo.get_by_id(9999) is None


@pytest.mark.parametrize("contact_id", [0, -1])
def test_get_by_id_non_positive_raises_invalid(sql_repo, contact_id):
    with pytest.raises(InvalidContactError):
        sql_repo.get_by_id(contact_id)


def test_update_replaces_stored_fields(sql_repo):
    stored = sql_repo.add(_contact())
    edited = Contact(id=stored.id, name="Ana Maria", phone="+55 11 90000-0000", email="am@x.org")

    assert sql_repo.update(edited) == edited
    assert sql_repo.get_by_id(stored.id) == edited
    assert _row_count(sql_repo) == 1


def test_update_with_zero_id_raises_invalid_and_store_unchanged(sql_repo):
    stored = sql_repo.add(_contact())

    with pytest.raises(InvalidContactError):
        sql_repo.update(_contact(name="Other"))
    assert sql_repo.list_all() == [stored]


def test_update_none_raises_invalid(sql_repo):
    with pytest.raises(InvalidContactError):
        sql_repo.update(None)


def test_update_missing_id_raises_not_found_without_inserting(sql_repo):
    with pytest.raises(ContactNotFoundError) as excinfo:
        sql_repo.update(Contact(id=9999, name="Ghost", phone="12345678", email="g@x"))
    assert excinfo.value.contact_id == 9999
    assert _row_count(sql_repo) == 0


def test_delete_removes_row(sql_repo):
    keep = sql_repo.add(_contact(name="Ana"))
    gone = sql_repo.add(_contact(name="Bob"))

    sql_repo.delete(gone.id)

    assert sql_repo.get_by_id(gone.id) is None
    assert sql_repo.list_all() == [keep]


def test_delete_missing_id_raises_not_found_and_nothing_removed(sql_repo):
    stored = sql_repo.add(_contact())

    with pytest.raises(ContactNotFoundError):
        sql_repo.delete(9999)
    assert sql_repo.list_all() == [stored]


@pytest.mark.parametrize("contact_id", [0, -5])
def test_delete_non_positive_id_raises_invalid(sql_repo, contact_id):
    with pytest.raises(InvalidContactError):
        sql_repo.delete(contact_id)


def test_failed_add_is_rolled_back(sql_repo):
    """A NOT NULL violation fails the flush; nothing is committed."""
    with pytest.raises(StorageError) as excinfo:
        sql_repo.add(Contact(name=None, phone="12345678", email="a@b"))
    assert isinstance(excinfo.value.__cause__, sa.exc.IntegrityError)
    assert _row_count(sql_repo) == 0


def test_failed_update_is_rolled_back(sql_repo):
    stored = sql_repo.add(_contact())

    with pytest.raises(StorageError):
        sql_repo.update(Contact(id=stored.id, name="Changed", phone=None, email="a@b"))
    assert sql_repo.get_by_id(stored.id) == stored


def test_missing_table_raises_storage_error(sql_repo):
    with sql_repo.engine.begin() as conn:
        conn.execute(sa.text("DROP TABLE contacts"))

    with pytest.raises(StorageError):
        sql_repo.list_all()
    with pytest.raises(StorageError):
        sql_repo.get_by_id(1)
    with pytest.raises(StorageError):
        sql_repo.add(_contact())
    with pytest.raises(StorageError):
        sql_repo.delete(1)


def test_data_survives_reopening(database_url):
    repo = SqlContactRepository.from_url(database_url)
    stored = repo.add(_contact())
    repo.close()

    reopened = SqlContactRepository.from_url(database_url)
    try:
        assert reopened.get_by_id(stored.id) == stored
    finally:
        reopened.close()


def test_service_over_sql_repository(sql_repo):
    service = ContactService(sql_repo)
    created = service.create_contact(ContactData(name="Ana", phone="12345678", email="ana@x.com"))
    assert isinstance(created, ContactCreated)
    assert service.list_contacts() == [created.contact]

    with sql_repo.engine.begin() as conn:
        conn.execute(sa.text("DROP TABLE contacts"))
    assert isinstance(service.list_contacts(), StorageFailure)


def test_id_beyond_integer_range_is_absent(sql_repo):
    huge_id = 2**70
    stored = sql_repo.add(_contact())

    assert sql_repo.get_by_id(huge_id) is None
    with pytest.raises(ContactNotFoundError):
        sql_repo.update(Contact(id=huge_id, name="Ghost", phone="12345678", email="g@x"))
    with pytest.raises(ContactNotFoundError):
        sql_repo.delete(huge_id)
    assert sql_repo.list_all() == [stored]


def test_service_reports_not_found_for_id_beyond_integer_range(sql_repo):
    service = ContactService(sql_repo)
    data = ContactData(name="Ana", phone="12345678", email="ana@x.com")

    assert isinstance(service.get_contact(2**70), NotFound)
    assert isinstance(service.update_contact(2**70, data), NotFound)
    assert isinstance(service.delete_contact(2**70), NotFound)


def test_text_columns_have_no_length_limit(sql_repo):
    for column in ContactRow.__table__.columns:
        if column.name != "id":
            assert isinstance(column.type, sa.Text)
            assert column.type.length is None

    long_phone = "+55 (11) 98765-4321 / +55 (11) 3333-4444"
    stored = sql_repo.add(_contact(phone=long_phone, name="N" * 300))
    assert sql_repo.get_by_id(stored.id).phone == long_phone
