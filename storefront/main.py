from fastapi import APIRouter, FastAPI, Depends, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from typing import Optional
import logging

from .cart import CartStore
from .config import Settings, get_settings
from .database import LocalStorage, init_db, make_engine
from .extract import ExtractionError
from .logging_config import setup_logging
from .models import CardFields, ModalFields, ImageChoice
from .notifications import NotificationCenter
from .ui import CART_ACTIONS, UIController

logger = logging.getLogger(__name__)
router = APIRouter()

def get_ui(request: Request) -> UIController:
    return request.app.state.ui

def get_cart(request: Request) -> CartStore:
    return request.app.state.cart

def cart_fragment(ui: UIController) -> dict:
    return {"items": ui.render_cart_items(), "total": ui.render_total(), "badge": ui.cart.badge}

@router.get("/", response_class=HTMLResponse)
def page(ui: UIController = Depends(get_ui)): return ui.render_page()

@router.post("/cart/open", response_class=HTMLResponse)
def open_cart(ui: UIController = Depends(get_ui)): return ui.open_cart()

@router.post("/cart/close")
def close_cart(ui: UIController = Depends(get_ui)):
    ui.close_cart()
    return {"cart_open": ui.cart_open}

@router.get("/cart/items")
def cart_items(cart: CartStore = Depends(get_cart)): return cart.get_cart()

@router.get("/cart/total")
def cart_total(cart: CartStore = Depends(get_cart)): return {"total": cart.get_total()}

@router.get("/cart/badge")
def cart_badge(cart: CartStore = Depends(get_cart)): return cart.badge

@router.delete("/cart")
def clear(cart: CartStore = Depends(get_cart)):
    cart.clear_cart()
    return {"ok": True}

@router.post("/products/add")
def add_from_card(fields: CardFields, ui: UIController = Depends(get_ui)):
    try: ui.add_from_card(fields)
    except ExtractionError as e: raise HTTPException(400, str(e))
    return cart_fragment(ui)

@router.post("/modal/add")
def add_from_modal(fields: ModalFields, ui: UIController = Depends(get_ui)):
    try: ui.add_from_modal(fields)
    except ExtractionError as e: raise HTTPException(400, str(e))
    return cart_fragment(ui)

@router.post("/cart/items/{index}/{action}")
def cart_click(index: int, action: str, ui: UIController = Depends(get_ui)):
    if action not in CART_ACTIONS: raise HTTPException(400, f"Unknown cart action: {action}")
    if not ui.handle_cart_click(action, index): raise HTTPException(404, f"No cart line at index {index}")
    return cart_fragment(ui)

@router.post("/modal/open/{product_id}", response_class=HTMLResponse)
def open_modal(product_id: str, ui: UIController = Depends(get_ui)):
    if not ui.open_modal(product_id): raise HTTPException(404, "Product not found")
    return ui.render_modal()

@router.post("/modal/image", response_class=HTMLResponse)
def change_image(choice: ImageChoice, ui: UIController = Depends(get_ui)):
    ui.change_image(choice.src)
    return ui.render_modal()

@router.post("/modal/quantity/{direction}")
def step_quantity(direction: str, ui: UIController = Depends(get_ui)):
    if direction == "increase": return {"quantity": ui.increase_quantity()}
    if direction == "decrease": return {"quantity": ui.decrease_quantity()}
    raise HTTPException(400, f"Unknown direction: {direction}")

@router.post("/menu/toggle")
def toggle_menu(ui: UIController = Depends(get_ui)):
    ui.toggle_mobile_menu()
    return {"mobile_menu_open": ui.mobile_menu_open}

@router.post("/menu/close")
def close_menu(ui: UIController = Depends(get_ui)):
    ui.close_mobile_menu()
    return {"mobile_menu_open": ui.mobile_menu_open}

@router.post("/nav/click")
def nav_click(ui: UIController = Depends(get_ui)):
    ui.nav_link_clicked()
    return {"mobile_menu_open": ui.mobile_menu_open}

@router.get("/notifications")
def notifications(request: Request):
    return [n.message for n in request.app.state.notifier.active()]

def create_app(engine=None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    engine = engine or make_engine(settings.database_url)
    init_db(engine)

    notifier = NotificationCenter(ttl=settings.notification_ttl)
    cart = CartStore(LocalStorage(engine), notifier)
    cart.init()

    app = FastAPI(title="Shoe Store")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"])
    app.state.cart = cart
    app.state.notifier = notifier
    app.state.ui = UIController(cart, notifier)
    app.include_router(router)
    logger.info("Storefront ready with %d cart line(s)", len(cart.get_cart()))
    return app

# `storefront.main:app` is built on first access so importing this module touches no database
def __getattr__(name):
    if name == "app":
        globals()["app"] = create_app()
        return globals()["app"]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
