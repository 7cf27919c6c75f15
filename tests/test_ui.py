"""Tests for the UI controller"""
import pytest

from storefront.catalog import PRODUCTS
from storefront.models import CardFields, ModalFields
from storefront.ui import UIController


@pytest.fixture
def ui(store, notifier):
    return UIController(store, notifier)


def card(product_id="air-runner", price="$120.00"):
    return CardFields(product_id=product_id, name="Air Runner", price=price, image="/img/air.jpg")


class TestCartPanel:

    def test_open_renders_and_reveals(self, ui):
        ui.add_from_card(card())
        panel = ui.open_cart()

        assert ui.cart_open is True
        assert 'class="cart-modal"' in panel
        assert "Air Runner" in panel
        assert '<span id="cart-total">120.00</span>' in panel

    def test_close_hides(self, ui):
        ui.open_cart()
        ui.close_cart()

        assert ui.cart_open is False
        assert "cart-modal hidden" in ui.render_cart_panel()

    def test_rows_tagged_with_index(self, ui):
        ui.add_from_card(card("a"))
        ui.add_from_card(card("b", price="$10.5"))
        rows = ui.render_cart_items()

        for cls in ("decrease-quantity", "increase-quantity", "remove-item"):
            assert f'{cls}" data-index="0"' in rows
            assert f'{cls}" data-index="1"' in rows
        assert "Size: M" in rows
        assert '<div class="price">$10.50</div>' in rows

    def test_names_are_escaped(self, ui):
        ui.add_from_card(CardFields(product_id="x", name="<b>Bold</b>", price="1", image=""))
        assert "&lt;b&gt;Bold&lt;/b&gt;" in ui.render_cart_items()


class TestCartClicks:

    def test_increase(self, ui, store):
        ui.add_from_card(card())
        assert ui.handle_cart_click("increase", 0) is True
        assert store.get_cart()[0].quantity == 2

    def test_decrease_above_one(self, ui, store):
        ui.add_from_card(card())
        ui.add_from_card(card())
        assert ui.handle_cart_click("decrease", 0) is True
        assert store.get_cart()[0].quantity == 1

    def test_decrease_at_one_removes(self, ui, store):
        ui.add_from_card(card())
        assert ui.handle_cart_click("decrease", 0) is True
        assert store.get_cart() == []

    def test_remove(self, ui, store):
        ui.add_from_card(card("a"))
        ui.add_from_card(card("b"))
        ui.handle_cart_click("remove", 0)
        assert [line.id for line in store.get_cart()] == ["b"]

    def test_missing_line(self, ui):
        assert ui.handle_cart_click("increase", 3) is False

    def test_unknown_action(self, ui):
        with pytest.raises(ValueError):
            ui.handle_cart_click("explode", 0)


class TestModal:

    def test_add_from_modal_closes_modal(self, ui, store):
        ui.open_modal("trail-blazer")
        ui.increase_quantity()
        ui.add_from_modal(ModalFields(product_id="trail-blazer", name="Trail Blazer", price="$149.99",
                                      image="/img/tb.jpg", size="L", quantity="2"))

        assert ui.modal_open is False
        assert ui.modal_quantity == 1
        assert store.get_cart()[0].size == "L"
        assert store.get_cart()[0].quantity == 2

    def test_add_from_modal_falls_back_to_modal_state(self, ui, store):
        ui.open_modal("court-classic")
        ui.change_image(PRODUCTS[2]["gallery"][1])
        ui.increase_quantity()
        ui.add_from_modal(ModalFields(product_id="court-classic", name="Court Classic", price="$79.50"))

        line = store.get_cart()[0]
        assert line.quantity == 2
        assert line.image == PRODUCTS[2]["gallery"][1]
        assert line.size == "M"

    def test_open_unknown_product(self, ui):
        assert ui.open_modal("no-such-shoe") is False
        assert ui.modal_open is False

    def test_change_image_moves_active_thumbnail(self, ui):
        gallery = PRODUCTS[0]["gallery"]
        ui.change_image(gallery[1])
        html = ui.render_modal()

        assert f'id="mainProductImage" src="{gallery[1]}"' in html
        assert f'src="{gallery[1]}" class="img-thumbnail active"' in html
        assert f'src="{gallery[0]}" class="img-thumbnail"' in html

    def test_quantity_stepper_clamped_at_one(self, ui):
        assert ui.decrease_quantity() == 1
        assert ui.increase_quantity() == 2
        assert ui.increase_quantity() == 3
        assert ui.decrease_quantity() == 2
        assert 'id="quantityInput" value="2"' in ui.render_modal()


class TestMobileMenu:

    def test_toggle_and_close(self, ui):
        ui.toggle_mobile_menu()
        assert '<body class="show-mobile-menu">' in ui.render_page()

        ui.toggle_mobile_menu()
        assert ui.mobile_menu_open is False

        ui.toggle_mobile_menu()
        ui.close_mobile_menu()
        assert ui.mobile_menu_open is False

    def test_nav_link_closes_menu(self, ui):
        ui.toggle_mobile_menu()
        ui.nav_link_clicked()
        assert "<body>" in ui.render_page()


def test_page_lists_every_product(ui):
    html = ui.render_page()
    for product in PRODUCTS:
        assert f'data-product-id="{product["id"]}"' in html
    assert 'id="cart-count" style="display: none">0<' in html


def test_badge_after_add(ui):
    ui.add_from_card(card())
    ui.add_from_card(card())
    assert ui.render_badge() == '<span id="cart-count" style="display: inline">2</span>'
