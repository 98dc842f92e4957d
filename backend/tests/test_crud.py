"""
Tests unitarios de CRUDBase.

Validan la lógica de la pasarela sin conexión a base de datos: la sesión
asíncrona se sustituye por mocks.
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from payment.core.exceptions import PersistenceFailure
from payment.crud.customer_crud import customer_crud
from payment.crud.order_crud import order_crud
from payment.db.models import Customer, Order, Product


def _result(first=None, rows=(), scalar=None):
    result = MagicMock()
    result.scalars.return_value.first.return_value = first
    result.scalars.return_value.all.return_value = list(rows)
    result.scalar.return_value = scalar
    return result


@pytest.fixture
def mock_db():
    db = MagicMock()
    db.flush = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.execute = AsyncMock()
    return db


@pytest.fixture
def new_order():
    order = Order(description="book", amount=Decimal("19.99"), customer_id=uuid.uuid4())
    order.products.append(Product(name="Atlas", price=Decimal("19.99"), stock_quantity=3, percentage_discount=0))
    return order


class TestSave:

    @pytest.mark.asyncio
    async def test_save_assigns_ids_and_timestamps_to_order_and_products(self, mock_db, new_order):
        mock_db.execute.return_value = _result(first=new_order)

        saved = await order_crud.save(mock_db, new_order)

        assert saved is new_order
        assert isinstance(saved.id, uuid.UUID)
        assert saved.created_at is not None
        assert isinstance(saved.products[0].id, uuid.UUID)
        assert saved.products[0].created_at == saved.created_at
        mock_db.add.assert_called_once_with(new_order)
        mock_db.commit.assert_awaited_once()
        mock_db.execute.assert_awaited_once()
        mock_db.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_graph_is_reloaded_before_commit(self, mock_db, new_order):
        steps = []
        mock_db.flush.side_effect = lambda: steps.append("flush")
        mock_db.execute.side_effect = lambda query: steps.append("execute") or _result(first=new_order)
        mock_db.commit.side_effect = lambda: steps.append("commit")

        await order_crud.save(mock_db, new_order)

        assert steps == ["flush", "execute", "commit"]

    @pytest.mark.asyncio
    async def test_reload_failure_leaves_nothing_committed(self, mock_db, new_order):
        mock_db.execute.side_effect = OperationalError("SELECT", {}, Exception("connection lost"))

        with pytest.raises(PersistenceFailure) as exc_info:
            await order_crud.save(mock_db, new_order)

        assert exc_info.value.reason == PersistenceFailure.STORAGE
        mock_db.commit.assert_not_awaited()
        mock_db.rollback.assert_awaited_once()

    def test_generated_fields_are_never_reassigned(self):
        existing_id = uuid.uuid4()
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        customer = Customer(id=existing_id, created_at=created)

        customer_crud.assign_generated_fields(customer)

        assert customer.id == existing_id
        assert customer.created_at == created

    @pytest.mark.asyncio
    async def test_integrity_error_is_an_integrity_failure(self, mock_db, new_order):
        mock_db.flush.side_effect = IntegrityError("INSERT INTO orders", {}, Exception("fk_customer"))

        with pytest.raises(PersistenceFailure) as exc_info:
            await order_crud.save(mock_db, new_order)

        assert exc_info.value.reason == PersistenceFailure.INTEGRITY
        assert isinstance(exc_info.value.__cause__, IntegrityError)
        mock_db.rollback.assert_awaited_once()
        mock_db.execute.assert_not_awaited()
        mock_db.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_other_storage_errors_are_storage_failures(self, mock_db, new_order):
        mock_db.execute.return_value = _result(first=new_order)
        mock_db.commit.side_effect = OperationalError("COMMIT", {}, Exception("connection refused"))

        with pytest.raises(PersistenceFailure) as exc_info:
            await order_crud.save(mock_db, new_order)

        assert exc_info.value.reason == PersistenceFailure.STORAGE
        mock_db.rollback.assert_awaited_once()


class TestFind:

    @pytest.mark.asyncio
    async def test_find_by_id_returns_none_when_absent(self, mock_db):
        mock_db.execute.return_value = _result(first=None)

        assert await customer_crud.find_by_id(mock_db, uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_find_page_returns_rows_and_total(self, mock_db):
        customers = [Customer(id=uuid.uuid4(), name="a"), Customer(id=uuid.uuid4(), name="b")]
        mock_db.execute.side_effect = [_result(scalar=7), _result(rows=customers)]

        rows, total = await customer_crud.find_page(mock_db, 2, 2)

        assert rows == customers
        assert total == 7
        query = mock_db.execute.await_args_list[1].args[0]
        assert "LIMIT 2 OFFSET 2" in str(query.compile(compile_kwargs={"literal_binds": True}))

    @pytest.mark.asyncio
    async def test_find_page_on_empty_table(self, mock_db):
        mock_db.execute.side_effect = [_result(scalar=0), _result(rows=[])]

        rows, total = await customer_crud.find_page(mock_db, 1, 20)

        assert rows == []
        assert total == 0

    @pytest.mark.asyncio
    async def test_read_errors_are_storage_failures(self, mock_db):
        mock_db.execute.side_effect = OperationalError("SELECT", {}, Exception("timeout"))

        with pytest.raises(PersistenceFailure) as exc_info:
            await customer_crud.find_page(mock_db, 1, 20)

        assert exc_info.value.reason == PersistenceFailure.STORAGE
