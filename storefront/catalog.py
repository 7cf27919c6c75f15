from typing import Optional

SIZES = ["S", "M", "L", "XL"]

PRODUCTS = [
    {"id": "air-runner", "name": "Air Runner", "price": "$150.00", "discount": "$120.00",
     "image": "/static/img/air-runner.jpg",
     "gallery": ["/static/img/air-runner.jpg", "/static/img/air-runner-side.jpg", "/static/img/air-runner-sole.jpg"]},
    {"id": "trail-blazer", "name": "Trail Blazer", "price": "$180.00", "discount": "$149.99",
     "image": "/static/img/trail-blazer.jpg",
     "gallery": ["/static/img/trail-blazer.jpg", "/static/img/trail-blazer-side.jpg"]},
    {"id": "court-classic", "name": "Court Classic", "price": "$95.00", "discount": "$79.50",
     "image": "/static/img/court-classic.jpg",
     "gallery": ["/static/img/court-classic.jpg", "/static/img/court-classic-back.jpg"]},
    {"id": "city-loafer", "name": "City Loafer", "price": "$110.00", "discount": "$89.00",
     "image": "/static/img/city-loafer.jpg",
     "gallery": ["/static/img/city-loafer.jpg"]},
]

NAV_LINKS = [("Home", "#home"), ("Shop", "#shop"), ("About", "#about"), ("Contact", "#contact")]

def find_product(product_id: str) -> Optional[dict]:
    return next((p for p in PRODUCTS if p["id"] == product_id), None)
