import uuid
from decimal import Decimal

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError

from app.models.cart import CartItem
from app.models.product import Product
from app.services.cart import CartService


@pytest.fixture()
def service(session):
    return CartService(session)


class TestGetCart:
    def test_empty_cart(self, service):
        cart = service.get_cart("sess-empty")
        assert cart.items == []
        assert cart.total == Decimal("0")

    def test_items_embed_product_and_total(self, service, products):
        service.add_to_cart("sess-1", products["Widget"].id, 2)
        service.add_to_cart("sess-1", products["Gadget"].id, 1)

        cart = service.get_cart("sess-1")

        assert sorted(line.product.name for line in cart.items) == ["Gadget", "Widget"]
        assert cart.total == Decimal("39.98")
        assert cart.total == sum(line.product.price * line.quantity for line in cart.items)


class TestAddToCart:
    def test_creates_row(self, service, products):
        item = service.add_to_cart("sess-1", products["Widget"].id)
        assert item.quantity == 1
        assert item.session_id == "sess-1"
        assert item.product_id == products["Widget"].id

    def test_repeated_add_accumulates(self, service, products):
        first = service.add_to_cart("sess-1", products["Widget"].id, 1)
        second = service.add_to_cart("sess-1", products["Widget"].id, 1)

        assert second.id == first.id
        assert second.quantity == 2
        cart = service.get_cart("sess-1")
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2

    def test_add_increments_by_quantity(self, service, products):
        service.add_to_cart("sess-1", products["Widget"].id, 2)
        item = service.add_to_cart("sess-1", products["Widget"].id, 3)
        assert item.quantity == 5

    def test_same_product_in_other_session_is_separate(self, service, products):
        service.add_to_cart("sess-1", products["Widget"].id)
        other = service.add_to_cart("sess-2", products["Widget"].id)
        assert other.quantity == 1

    def test_rejects_non_positive_quantity(self, service, products):
        with pytest.raises(HTTPException) as exc_info:
            service.add_to_cart("sess-1", products["Widget"].id, 0)
        assert exc_info.value.status_code == 400

    def test_unknown_product_is_store_error(self, service, session, products):
        with pytest.raises(IntegrityError):
            service.add_to_cart("sess-1", uuid.uuid4())
        session.rollback()
        assert service.get_cart("sess-1").items == []


class TestUpdateCartItem:
    def test_sets_quantity(self, service, products):
        item = service.add_to_cart("sess-1", products["Widget"].id)
        updated = service.update_cart_item("sess-1", item.id, 7)

        assert updated.quantity == 7
        assert service.get_cart("sess-1").items[0].quantity == 7

    def test_other_session_cannot_update(self, service, products):
        item = service.add_to_cart("sess-1", products["Widget"].id)

        with pytest.raises(HTTPException) as exc_info:
            service.update_cart_item("sess-intruder", item.id, 9)

        assert exc_info.value.status_code == 404
        assert service.get_cart("sess-1").items[0].quantity == 1

    def test_missing_item(self, service):
        with pytest.raises(HTTPException) as exc_info:
            service.update_cart_item("sess-1", uuid.uuid4(), 2)
        assert exc_info.value.status_code == 404

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_rejects_non_positive_quantity(self, service, products, quantity):
        item = service.add_to_cart("sess-1", products["Widget"].id)

        with pytest.raises(HTTPException) as exc_info:
            service.update_cart_item("sess-1", item.id, quantity)

        assert exc_info.value.status_code == 400
        assert service.get_cart("sess-1").items[0].quantity == 1


class TestRemoveAndClear:
    def test_remove(self, service, products):
        widget = service.add_to_cart("sess-1", products["Widget"].id)
        service.add_to_cart("sess-1", products["Gadget"].id)

        service.remove_from_cart("sess-1", widget.id)

        names = [line.product.name for line in service.get_cart("sess-1").items]
        assert names == ["Gadget"]

    def test_remove_missing_item_is_noop(self, service):
        service.remove_from_cart("sess-1", uuid.uuid4())

    def test_remove_ignores_other_sessions_item(self, service, products):
        item = service.add_to_cart("sess-1", products["Widget"].id)
        service.remove_from_cart("sess-2", item.id)
        assert len(service.get_cart("sess-1").items) == 1

    def test_clear_only_touches_own_session(self, service, products):
        service.add_to_cart("sess-1", products["Widget"].id)
        service.add_to_cart("sess-1", products["Gadget"].id)
        service.add_to_cart("sess-2", products["Gadget"].id, 4)

        service.clear_cart("sess-1")

        assert service.get_cart("sess-1").items == []
        other = service.get_cart("sess-2")
        assert len(other.items) == 1
        assert other.items[0].quantity == 4


class TestTimestamps:
    def test_defaults_are_timezone_aware(self):
        assert Product(name="Widget").created_at.tzinfo is not None
        item = CartItem(session_id="sess-1", product_id=uuid.uuid4())
        assert item.created_at.tzinfo is not None
        assert item.updated_at.tzinfo is not None

    def test_upsert_and_update_write_aware_timestamps(self, service, products):
        item = service.add_to_cart("sess-1", products["Widget"].id)
        updated = service.update_cart_item("sess-1", item.id, 3)
        assert updated.quantity == 3
        assert updated.updated_at is not None
