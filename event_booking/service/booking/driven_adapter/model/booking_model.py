from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from event_booking.platform.database.orm_db_setting import Base


class BookingModel(Base):
    __tablename__ = 'bookings'
    __table_args__ = (
        CheckConstraint('seats_reserved > 0', name='ck_bookings_seats_reserved_positive'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True
    )
    event_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('events.id', ondelete='CASCADE'), nullable=False, index=True
    )
    seats_reserved: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self):
        return (
            f'<BookingModel(id={self.id}, user_id={self.user_id}, '
            f'event_id={self.event_id}, seats={self.seats_reserved})>'
        )
