"""ProducerStore — single-statement CRUD against a real (SQLite) session."""

import pytest
from sqlalchemy import select

from producer_registry.core.errors import DatabaseError
from producer_registry.models.producer import Producer
from producer_registry.schemas.producer import ProducerIn
from producer_registry.services.producer_store import ProducerStore


@pytest.fixture
def store(test_db):
    return ProducerStore(test_db)


@pytest.fixture
def producer_in(producer_payload):
    return ProducerIn.model_validate(producer_payload)


async def test_create_persists_row(store, producer_in, test_db):
    created = await store.create(producer_in)

    row = (await test_db.execute(
        select(Producer).where(Producer.id == created.id),
    )).scalar_one()
    assert row.cpf_cnpj == "12345678901"
    assert row.crops == ["soy"]


async def test_list_all_returns_every_row(store, producer_in):
    await store.create(producer_in)
    await store.create(producer_in)

    producers = await store.list_all()

    assert len(producers) == 2
    assert {p.farm_name for p in producers} == {"Fazenda X"}


async def test_update_replaces_fields(store, producer_in):
    created = await store.create(producer_in)
    changed = producer_in.model_copy(update={"city": "Jataí", "crops": []})

    updated = await store.update(created.id, changed)

    assert updated.id == created.id
    assert updated.city == "Jataí"
    assert updated.crops == []


async def test_update_unknown_id_returns_none(store, producer_in):
    assert await store.update(12345, producer_in) is None
    assert await store.list_all() == []


async def test_delete_returns_row_and_removes_it(store, producer_in):
    created = await store.create(producer_in)

    deleted = await store.delete(created.id)

    assert deleted == created
    assert await store.list_all() == []


async def test_delete_unknown_id_returns_none(store):
    assert await store.delete(12345) is None


async def test_aggregate_empty(store):
    stats = await store.aggregate()
    assert stats.total_farms == 0
    assert stats.total_area == 0


async def test_aggregate_counts_and_sums(store, producer_in):
    await store.create(producer_in)
    await store.create(producer_in.model_copy(update={"total_area": 20.25}))

    stats = await store.aggregate()

    assert stats.total_farms == 2
    assert stats.total_area == pytest.approx(120.25)


async def test_user_input_is_bound_not_interpolated(store, producer_in):
    hostile = producer_in.model_copy(
        update={"producer_name": "x'); DROP TABLE producers; --"},
    )

    created = await store.create(hostile)

    assert created.producer_name == "x'); DROP TABLE producers; --"
    assert len(await store.list_all()) == 1


async def test_statement_failure_raises_database_error(store, drop_tables):
    await drop_tables()

    with pytest.raises(DatabaseError) as exc_info:
        await store.list_all()

    assert exc_info.value.operation == "select"
    assert exc_info.value.http_status == 500


async def test_failed_write_carries_producer_id(store, producer_in, drop_tables):
    await drop_tables()

    with pytest.raises(DatabaseError) as exc_info:
        await store.update(7, producer_in)

    assert exc_info.value.operation == "update"
    assert exc_info.value.context.producer_id == 7
