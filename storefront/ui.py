import logging
from html import escape

from .cart import CartStore
from .catalog import NAV_LINKS, PRODUCTS, SIZES, find_product
from .extract import product_from_card, product_from_modal
from .models import CardFields, ModalFields
from .notifications import NotificationCenter

logger = logging.getLogger(__name__)

CART_ACTIONS = ("remove", "decrease", "increase")


class UIController:
    """Page state and rendering. Cart data is only ever read through `CartStore.get_cart()`."""

    def __init__(self, cart: CartStore, notifier: NotificationCenter):
        self.cart = cart
        self.notifier = notifier
        self.cart_open = False
        self.mobile_menu_open = False
        self.modal_open = False
        self.modal_product = PRODUCTS[0]
        self.main_image = self.modal_product["gallery"][0]
        self.active_thumbnail = self.main_image
        self.modal_quantity = 1

    # cart panel

    def open_cart(self) -> str:
        self.cart_open = True
        return self.render_cart_panel()

    def close_cart(self):
        self.cart_open = False

    def add_from_card(self, fields: CardFields):
        self.cart.add_item(product_from_card(fields))

    def add_from_modal(self, fields: ModalFields):
        # unset fields come from the modal as currently shown
        defaults = {"quantity": str(self.modal_quantity), "image": self.main_image}
        fields = fields.model_copy(update={k: v for k, v in defaults.items() if getattr(fields, k) is None})
        self.cart.add_item(product_from_modal(fields))
        self.modal_open = False
        self.modal_quantity = 1

    def handle_cart_click(self, action: str, index: int) -> bool:
        if action not in CART_ACTIONS:
            raise ValueError(f"Unknown cart action: {action}")
        if action == "remove":
            done = self.cart.remove_item(index)
        else:
            done = self.cart.step_quantity(index, -1 if action == "decrease" else 1)
        if not done:
            logger.debug("Ignoring %s on missing line %d", action, index)
        return done

    # mobile menu

    def toggle_mobile_menu(self):
        self.mobile_menu_open = not self.mobile_menu_open

    def close_mobile_menu(self):
        self.mobile_menu_open = False

    def nav_link_clicked(self):
        self.close_mobile_menu()

    # product modal

    def open_modal(self, product_id: str) -> bool:
        product = find_product(product_id)
        if not product:
            return False
        self.modal_product = product
        self.main_image = self.active_thumbnail = product["gallery"][0]
        self.modal_quantity = 1
        self.modal_open = True
        return True

    def change_image(self, src: str):
        self.main_image = src
        self.active_thumbnail = src

    def increase_quantity(self) -> int:
        self.modal_quantity += 1
        return self.modal_quantity

    def decrease_quantity(self) -> int:
        if self.modal_quantity > 1:
            self.modal_quantity -= 1
        return self.modal_quantity

    # rendering

    def render_cart_items(self) -> str:
        rows = []
        for index, item in enumerate(self.cart.get_cart()):
            rows.append(f"""
<li class="cart-item d-flex align-items-center mb-3">
  <div class="flex-shrink-0">
    <img src="{escape(item.image)}" alt="{escape(item.name)}" width="60" class="img-thumbnail">
  </div>
  <div class="flex-grow-1 ms-3">
    <h6 class="mb-1">{escape(item.name)}</h6>
    <small class="text-muted">Size: {escape(item.size)}</small>
    <div class="d-flex justify-content-between align-items-center mt-2">
      <div class="quantity-controls">
        <button class="btn btn-sm btn-outline-secondary decrease-quantity" data-index="{index}">-</button>
        <span class="mx-2">{item.quantity}</span>
        <button class="btn btn-sm btn-outline-secondary increase-quantity" data-index="{index}">+</button>
      </div>
      <div class="price">${item.price * item.quantity:.2f}</div>
    </div>
  </div>
  <button class="btn btn-sm btn-danger ms-3 remove-item" data-index="{index}"><i class="fas fa-trash"></i></button>
</li>""")
        return "".join(rows)

    def render_total(self) -> str:
        return f"{self.cart.get_total():.2f}"

    def render_badge(self) -> str:
        badge = self.cart.badge
        display = "inline" if badge.visible else "none"
        return f'<span id="cart-count" style="display: {display}">{badge.count}</span>'

    def render_cart_panel(self) -> str:
        hidden = "" if self.cart_open else " hidden"
        return f"""
<div id="cart-modal" class="cart-modal{hidden}">
  <button id="close-cart" class="btn-close"></button>
  <ul id="cart-items" class="list-unstyled">{self.render_cart_items()}</ul>
  <div class="cart-footer">Total: $<span id="cart-total">{self.render_total()}</span></div>
</div>"""

    def render_notifications(self) -> str:
        return "".join(f'<div class="cart-notification"><span>{escape(n.message)}</span></div>'
                       for n in self.notifier.active())

    def render_product_card(self, product: dict) -> str:
        return f"""
<div class="product-item" data-product-id="{escape(product['id'])}">
  <img src="{escape(product['image'])}" alt="{escape(product['name'])}">
  <h3 class="name">{escape(product['name'])}</h3>
  <p><del class="price">{escape(product['price'])}</del> <span class="discount">{escape(product['discount'])}</span></p>
  <a href="#" class="add-to-cart">Add to cart</a>
</div>"""

    def render_modal(self) -> str:
        product = self.modal_product
        shown = " show" if self.modal_open else ""
        thumbs = "".join(
            f'<img src="{escape(src)}" class="img-thumbnail{" active" if src == self.active_thumbnail else ""}">'
            for src in product["gallery"])
        sizes = "".join(
            f'<input type="radio" class="btn-check" name="size" id="size-{s}"{" checked" if s == "M" else ""}>'
            f'<label class="btn btn-outline-dark" for="size-{s}">{s}</label>'
            for s in SIZES)
        return f"""
<div id="myModal" class="modal fade{shown}" data-product-id="{escape(product['id'])}">
  <div class="modal-body">
    <img id="mainProductImage" src="{escape(self.main_image)}">
    <div class="thumbnail-images">{thumbs}</div>
    <h2>{escape(product['name'])}</h2>
    <span class="current-price">{escape(product['discount'])}</span>
    <div class="btn-group">{sizes}</div>
    <div class="quantity-selector">
      <button class="decrease">-</button>
      <input type="number" id="quantityInput" value="{self.modal_quantity}" min="1">
      <button class="increase">+</button>
    </div>
    <button id="modalAddToCart" class="btn btn-dark">Add to cart</button>
  </div>
</div>"""

    def render_page(self) -> str:
        body_class = ' class="show-mobile-menu"' if self.mobile_menu_open else ""
        links = "".join(f'<li><a class="nav-link" href="{href}">{label}</a></li>' for label, href in NAV_LINKS)
        cards = "".join(self.render_product_card(p) for p in PRODUCTS)
        return f"""<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>Shoe Store</title></head>
<body{body_class}>
<header>
  <nav>
    <button id="menu-close-button">&times;</button>
    <ul class="nav-menu">{links}</ul>
    <button id="menu-open-button">&#9776;</button>
    <a id="cart-icon" href="#">Cart {self.render_badge()}</a>
  </nav>
</header>
<main id="shop" class="products">{cards}</main>
{self.render_modal()}
{self.render_cart_panel()}
{self.render_notifications()}
</body>
</html>"""
