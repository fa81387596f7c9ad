import enum

from sqlalchemy import (
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Numeric,
    String,
    Text,
    text,
)
from sqlalchemy.orm import relationship

from parnaioca.models.base import Base, generate_id, utcnow


class StayStatus(enum.Enum):
    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"
    CANCELLED = "cancelled"


# Enum columns store member names
CHECKED_IN_CLAUSE = "status = 'CHECKED_IN'"


class Stay(Base):
    __tablename__ = "stays"
    __table_args__ = (
        # At most one checked-in stay per accommodation
        Index(
            "uq_stays_accommodation_checked_in",
            "accommodation_id",
            unique=True,
            postgresql_where=text(CHECKED_IN_CLAUSE),
            sqlite_where=text(CHECKED_IN_CLAUSE),
        ),
        Index("idx_stays_status", "status"),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    customer_id = Column(String(36), ForeignKey("customers.id"), nullable=False)
    accommodation_id = Column(
        String(36), ForeignKey("accommodations.id"), nullable=False
    )
    check_in_at = Column(DateTime, nullable=False)
    check_out_at = Column(DateTime, nullable=True)
    # Accommodation rate at check-in time
    nightly_rate = Column(Numeric(10, 2), nullable=False)
    status = Column(Enum(StayStatus), default=StayStatus.CHECKED_IN, nullable=False)
    notes = Column(Text)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    customer = relationship("Customer", back_populates="stays")
    accommodation = relationship("Accommodation", back_populates="stays")
    minibar_consumptions = relationship("MinibarConsumption", back_populates="stay")
