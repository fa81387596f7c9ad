from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel

from parnaioca.models.change_log import ChangeOperation


class ChangeLog(BaseModel):
    id: str
    actor_id: str
    actor_email: Optional[str] = None
    table_name: str
    operation: ChangeOperation
    row_id: str
    before: Optional[Any] = None
    after: Optional[Any] = None
    created_at: datetime


class AdminOverview(BaseModel):
    total_users: int
    total_logs: int
    system_status: str
    recent_logs: List[ChangeLog]
    generated_at: datetime
