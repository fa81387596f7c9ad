from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from parnaioca.models.base import Base, generate_id, utcnow


class MinibarItem(Base):
    __tablename__ = "minibar_items"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String, nullable=False)
    unit_price = Column(Numeric(10, 2), default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    consumptions = relationship("MinibarConsumption", back_populates="item")


class MinibarConsumption(Base):
    __tablename__ = "minibar_consumptions"

    id = Column(String(36), primary_key=True, default=generate_id)
    stay_id = Column(String(36), ForeignKey("stays.id"), nullable=False, index=True)
    item_id = Column(String(36), ForeignKey("minibar_items.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    # Price at the time of consumption, later price changes don't apply
    unit_price = Column(Numeric(10, 2), nullable=False)
    total = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    stay = relationship("Stay", back_populates="minibar_consumptions")
    item = relationship("MinibarItem", back_populates="consumptions")
