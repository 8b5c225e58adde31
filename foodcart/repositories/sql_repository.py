"""Users and carts backed by SQLAlchemy (STORAGE_BACKEND=sql)."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional
import threading

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from foodcart.core.errors import StartupError, StorageError
from foodcart.db.models import CartItem, User
from foodcart.db.session import Base, build_engine, build_sessionmaker


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    # serializes cart writes so two inserts of the same new item cannot collide
    _write_lock = threading.Lock()

    def __init__(self, database_url: str) -> None:
        try:
            self.engine = build_engine(database_url)
        except (SQLAlchemyError, RuntimeError) as exc:
            raise StartupError(f"Invalid DATABASE_URL: {exc}") from exc
        self._sessionmaker = build_sessionmaker(self.engine)

    @contextmanager
    def _session(self) -> Iterator[Session]:
        try:
            with self._sessionmaker() as session:
                yield session
        except SQLAlchemyError as exc:
            raise StorageError(f"Database error: {exc}") from exc

    def initialize(self) -> None:
        """Create missing tables; existing tables and rows are left alone."""
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as exc:
            raise StartupError(f"Cannot create tables: {exc}") from exc

    def dispose(self) -> None:
        self.engine.dispose()

    # -------------------------- users --------------------------
    def get_user(self, username: str) -> Optional[dict]:
        with self._session() as session:
            user = session.execute(select(User).where(User.username == username)).scalar_one_or_none()
            if not user:
                return None
            return {"username": user.username, "password": user.password}

    def add_user(self, username: str, password: str) -> bool:
        with self._session() as session:
            session.add(User(username=username, password=password))
            try:
                session.commit()
            except IntegrityError:
                session.rollback()
                return False
            return True

    def update_user_password(self, username: str, password: str) -> None:
        with self._session() as session:
            user = session.execute(select(User).where(User.username == username)).scalar_one_or_none()
            if user:
                user.password = password
                session.commit()

    def list_usernames(self) -> list[str]:
        with self._session() as session:
            stmt = select(User.username).order_by(User.id)
            return list(session.execute(stmt).scalars())

    # -------------------------- carts --------------------------
    def _cart(self, session: Session, username: str) -> dict[str, int]:
        stmt = select(CartItem).where(CartItem.username == username).order_by(CartItem.item)
        return {row.item: row.quantity for row in session.execute(stmt).scalars()}

    def get_cart(self, username: str) -> dict[str, int]:
        with self._session() as session:
            return self._cart(session, username)

    def set_cart_item(self, username: str, item: str, quantity: int) -> dict[str, int]:
        with self._write_lock, self._session() as session:
            row = session.get(CartItem, (username, item))
            if quantity <= 0:
                if row:
                    session.delete(row)
            elif row:
                row.quantity = quantity
            else:
                session.add(CartItem(username=username, item=item, quantity=quantity))
            session.commit()
            return self._cart(session, username)

    def replace_cart(self, username: str, cart: dict[str, int]) -> dict[str, int]:
        with self._write_lock, self._session() as session:
            session.execute(delete(CartItem).where(CartItem.username == username))
            for item, quantity in cart.items():
                session.add(CartItem(username=username, item=item, quantity=quantity))
            session.commit()
            return self._cart(session, username)
