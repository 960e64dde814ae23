from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from event_booking.platform.database.orm_db_setting import Base


class EventModel(Base):
    __tablename__ = 'events'
    __table_args__ = (
        CheckConstraint('total_seats > 0', name='ck_events_total_seats_positive'),
        CheckConstraint('seats_available >= 0', name='ck_events_seats_available_non_negative'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    total_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    seats_available: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self):
        return (
            f'<EventModel(id={self.id}, name={self.name}, '
            f'seats={self.seats_available}/{self.total_seats})>'
        )
