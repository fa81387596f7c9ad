from sqlalchemy import Boolean, Column, Date, DateTime, String
from sqlalchemy.orm import relationship

from parnaioca.models.base import Base, generate_id, utcnow


class Customer(Base):
    __tablename__ = "customers"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String, nullable=False, index=True)
    birth_date = Column(Date, nullable=False)
    national_id = Column(String(14), nullable=False, unique=True)  # 000.000.000-00
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    state = Column(String(2), nullable=False)
    city = Column(String, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    stays = relationship("Stay", back_populates="customer")
