"""Room model — bookable units."""

import enum
from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from hoteldesk.database import Base


class RoomStatus(str, enum.Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class Room(Base):
    """A bookable unit. Its status is independent of any reservation's status."""

    __tablename__ = "rooms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    number: Mapped[str] = mapped_column(String(50), nullable=False)  # not unique
    type: Mapped[str | None] = mapped_column(String(50), default=None)  # single, double, suite, deluxe, ...
    status: Mapped[str] = mapped_column(
        String(50),
        default=RoomStatus.AVAILABLE.value,
        server_default=RoomStatus.AVAILABLE.value,
    )
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), default=None)

    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, number={self.number!r}, status={self.status})>"
