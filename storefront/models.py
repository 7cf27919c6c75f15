from sqlmodel import SQLModel, Field
from typing import Optional

class CartLineItem(SQLModel):
    id: str
    name: str
    price: float = Field(ge=0)
    image: str
    size: str
    quantity: int = Field(default=1, ge=1)

class StorageSlot(SQLModel, table=True):
    key: str = Field(primary_key=True)
    value: str

class CartBadge(SQLModel):
    count: int = 0
    visible: bool = False

# Client-side snapshots of the page elements an event was fired from.
class CardFields(SQLModel):
    product_id: Optional[str] = None
    name: str
    price: str
    image: str

class ModalFields(CardFields):
    image: Optional[str] = None
    size: Optional[str] = None
    quantity: Optional[str] = None

class ImageChoice(SQLModel):
    src: str
