from sqlmodel import SQLModel, create_engine, Session, select
from sqlalchemy.pool import StaticPool
from typing import Optional

from .models import StorageSlot

MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")

def make_engine(url: str):
    if not url.startswith("sqlite"):
        return create_engine(url)
    # requests are served from a threadpool; in-memory sqlite needs a single shared connection
    kwargs = {"connect_args": {"check_same_thread": False}}
    if url in MEMORY_URLS: kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)

def init_db(engine):
    SQLModel.metadata.create_all(engine)

class LocalStorage:
    """String key/value slots kept in the `storageslot` table."""

    def __init__(self, engine):
        self.engine = engine

    def get_item(self, key: str) -> Optional[str]:
        with Session(self.engine) as session:
            slot = session.get(StorageSlot, key)
            return slot.value if slot else None

    def set_item(self, key: str, value: str) -> None:
        with Session(self.engine) as session:
            slot = session.get(StorageSlot, key)
            if slot: slot.value = value
            else: slot = StorageSlot(key=key, value=value)
            session.add(slot); session.commit()

    def remove_item(self, key: str) -> None:
        with Session(self.engine) as session:
            slot = session.get(StorageSlot, key)
            if slot: session.delete(slot); session.commit()

    def clear(self) -> None:
        with Session(self.engine) as session:
            for slot in session.exec(select(StorageSlot)).all():
                session.delete(slot)
            session.commit()
