from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from parnaioca.core.common_deps import ReportServiceDep, SessionDep
from parnaioca.schemas.reports import ReportSummary
from parnaioca.schemas.responses import MessageResponse

router = APIRouter()


@router.get("/", response_model=ReportSummary)
async def get_report(
    service: ReportServiceDep,
    session: SessionDep,
    start_date: Optional[date] = Query(
        None, description="Defaults to the first day of the current month"
    ),
    end_date: Optional[date] = Query(None, description="Defaults to today"),
):
    return await service.get_summary(start_date, end_date)


@router.post("/pdf", response_model=MessageResponse)
async def generate_pdf_report(service: ReportServiceDep, session: SessionDep):
    await service.generate_pdf()


@router.post("/export", response_model=MessageResponse)
async def export_report(service: ReportServiceDep, session: SessionDep):
    await service.export_spreadsheet()
