"""Reservation model — a booking linking one guest and one room over a date range."""

import enum
from datetime import date

from sqlalchemy import Date, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hoteldesk.database import Base


class ReservationStatus(str, enum.Enum):
    """Reservation lifecycle states.

    Every state may follow every other one; there is no terminal state.
    """

    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Reservation(Base):
    """A booking of a room by a guest.

    ``guest_id`` and ``room_id`` are non-owning references without foreign key
    constraints: any identifier is accepted, and deleting a guest or room
    leaves the reference dangling.
    """

    __tablename__ = "reservations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    guest_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    room_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    check_in: Mapped[date] = mapped_column(Date, nullable=False)
    check_out: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(
        String(50),
        default=ReservationStatus.ACTIVE.value,
        server_default=ReservationStatus.ACTIVE.value,
    )  # active, completed, cancelled

    __table_args__ = (
        Index("ix_reservations_check_in", "check_in"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return (
            f"<Reservation(id={self.id}, guest_id={self.guest_id}, room_id={self.room_id}, status={self.status})>"
        )
