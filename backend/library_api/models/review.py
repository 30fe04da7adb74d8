from datetime import datetime

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..db.base import Base, ModelBase, utcnow


class Review(ModelBase, Base):
    __tablename__ = "reviews"
    __table_args__ = (CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating_range"),)

    rating: Mapped[int] = mapped_column(Integer)
    comment: Mapped[str] = mapped_column(Text, default="")
    date_posted: Mapped[datetime] = mapped_column(default=utcnow)
    book_id: Mapped[int] = mapped_column(ForeignKey("books.id"), index=True)

    book = relationship("Book", back_populates="reviews")
