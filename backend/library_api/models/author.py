from datetime import date

from sqlalchemy import Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..db.base import Base, ModelBase


class Author(ModelBase, Base):
    __tablename__ = "authors"

    name: Mapped[str] = mapped_column(String(255), index=True)
    biography: Mapped[str] = mapped_column(Text, default="")
    birth_date: Mapped[date | None] = mapped_column(Date, default=None)

    books = relationship("Book", back_populates="author", order_by="Book.id")
