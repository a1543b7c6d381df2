import pytest

from agenda.infrastructure import SqlContactRepository


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'agenda.db'}"


@pytest.fixture
def sql_repo(database_url):
    repo = SqlContactRepository.from_url(database_url)
    try:
        yield repo
    finally:
        repo.close()
