import enum

from sqlalchemy import JSON, Column, DateTime, Enum, String

from parnaioca.models.base import Base, generate_id, utcnow


class ChangeOperation(enum.Enum):
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class ChangeLog(Base):
    __tablename__ = "change_logs"

    id = Column(String(36), primary_key=True, default=generate_id)
    actor_id = Column(String(36), nullable=False, index=True)
    table_name = Column(String, nullable=False)
    operation = Column(Enum(ChangeOperation), nullable=False)
    row_id = Column(String(36), nullable=False)
    before = Column(JSON, nullable=True)
    after = Column(JSON, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
