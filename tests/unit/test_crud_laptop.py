"""
Storage tests against a temporary SQLite database.
"""

import asyncio

import pytest

from laptop_api.crud.crud_laptop import CRUDLaptop
from laptop_api.db.init_db import init_db
from laptop_api.db.session import build_engine, build_sessionmaker
from laptop_api.schemas.laptop import LaptopCreate


@pytest.fixture
def run_with_store(settings):
    """Run ``fn(store)`` on a fresh session against an initialized database."""
    engine = build_engine(settings)
    sessionmaker = build_sessionmaker(engine)
    asyncio.run(init_db(engine))

    def runner(fn):
        async def _go():
            async with sessionmaker() as session:
                return await fn(CRUDLaptop(session))

        return asyncio.run(_go())

    yield runner
    asyncio.run(engine.dispose())


def test_insert_assigns_ids(run_with_store, t14, xps):
    first = run_with_store(lambda store: store.insert(LaptopCreate(**t14)))
    second = run_with_store(lambda store: store.insert(LaptopCreate(**xps)))
    assert first.id == 1
    assert second.id == 2
    assert second.price == "$1,299.00"


def test_insert_ignores_body_id(run_with_store, t14):
    created = run_with_store(lambda store: store.insert(LaptopCreate(id=99, **t14)))
    assert created.id == 1


def test_get_all_empty(run_with_store):
    assert list(run_with_store(lambda store: store.get_all())) == []


def test_get_all_ordered_by_id(run_with_store, t14, xps):
    run_with_store(lambda store: store.insert(LaptopCreate(**xps)))
    run_with_store(lambda store: store.insert(LaptopCreate(**t14)))
    names = [row.name for row in run_with_store(lambda store: store.get_all())]
    assert names == ["XPS 13", "T14"]


def test_get_by_id_missing(run_with_store):
    assert run_with_store(lambda store: store.get_by_id(5)) is None


def test_update_replaces_all_columns(run_with_store, t14, xps):
    run_with_store(lambda store: store.insert(LaptopCreate(**t14)))
    assert run_with_store(lambda store: store.update(1, LaptopCreate(**xps))) is True
    row = run_with_store(lambda store: store.get_by_id(1))
    assert {k: getattr(row, k) for k in xps} == xps


def test_update_missing_row(run_with_store, t14):
    assert run_with_store(lambda store: store.update(1, LaptopCreate(**t14))) is False


def test_delete_reports_affected_rows(run_with_store, t14):
    run_with_store(lambda store: store.insert(LaptopCreate(**t14)))
    assert run_with_store(lambda store: store.delete(1)) is True
    assert run_with_store(lambda store: store.delete(1)) is False
    assert run_with_store(lambda store: store.get_by_id(1)) is None


def test_init_db_is_idempotent(settings):
    engine = build_engine(settings)

    async def _twice():
        await init_db(engine)
        await init_db(engine)
        await engine.dispose()

    asyncio.run(_twice())
