"""SqlRecordStore: generic load/save/delete over one mapped model."""

import pytest

from app.core.errors import ResourceNotFoundError
from app.infrastructure.record_store import SqlRecordStore
from app.models.account import Account
from app.models.post import Post


async def test_save_assigns_id_and_defaults(test_db):
    store = SqlRecordStore(test_db, Post)
    post = await store.save(Post(title="My Post"))
    assert post.id is not None
    assert post.post_status is False


async def test_get_returns_none_for_missing(test_db):
    assert await SqlRecordStore(test_db, Post).get(123) is None


async def test_get_or_raise_raises_not_found(test_db):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await SqlRecordStore(test_db, Account).get_or_raise(5)
    assert exc_info.value.http_status == 404
    assert exc_info.value.message == "Account '5' not found"


async def test_all_orders_by_id(test_db):
    store = SqlRecordStore(test_db, Account)
    for name in ("b", "a", "c"):
        await store.save(Account(name=name, payment_status="paid"))
    assert [a.name for a in await store.all()] == ["b", "a", "c"]


async def test_exists(test_db):
    store = SqlRecordStore(test_db, Post)
    post = await store.save(Post(title="Here"))
    assert await store.exists(post.id)
    assert not await store.exists(post.id + 1)


async def test_delete_removes_record(test_db):
    store = SqlRecordStore(test_db, Account)
    account = await store.save(Account(name="acme", payment_status="overdue"))
    await store.delete(account)
    assert await store.get(account.id) is None


async def test_get_out_of_range_id_is_missing(test_db):
    store = SqlRecordStore(test_db, Post)
    assert await store.get(2**31) is None
    assert await store.get(99999999999999999999) is None
    assert not await store.exists(-1)


async def test_get_or_raise_out_of_range_id_is_not_found(test_db):
    with pytest.raises(ResourceNotFoundError):
        await SqlRecordStore(test_db, Post).get_or_raise(99999999999999999999)
