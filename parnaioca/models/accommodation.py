from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from parnaioca.models.base import Base, generate_id, utcnow


class AccommodationType(Base):
    __tablename__ = "accommodation_types"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String, nullable=False)
    description = Column(Text)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    accommodations = relationship("Accommodation", back_populates="type")


class Accommodation(Base):
    __tablename__ = "accommodations"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String, nullable=False)
    number = Column(String, nullable=False, unique=True)
    nightly_rate = Column(Numeric(10, 2), default=0, nullable=False)
    max_occupancy = Column(Integer, default=1, nullable=False)
    type_id = Column(String(36), ForeignKey("accommodation_types.id"), nullable=False)
    has_minibar = Column(Boolean, default=False, nullable=False)
    has_parking = Column(Boolean, default=False, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    type = relationship("AccommodationType", back_populates="accommodations")
    stays = relationship("Stay", back_populates="accommodation")
