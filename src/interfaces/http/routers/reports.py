from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from src.application.use_cases.reports import (
    customer_billing_report,
    customer_statement,
    farm_report,
)
from src.config.settings import Settings
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.reports.report_service import ReportService
from src.interfaces.http.deps import (
    get_app_settings,
    get_auth_context,
    get_report_service,
    get_uow,
)
from src.interfaces.http.schemas.reports import ReportRequest, ReportResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])


@router.post("/customers", response_model=ReportResponse)
async def customers_report(
    request: ReportRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
    report_service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    """Billing for every customer over the period, with debit and settlement."""
    report = await customer_billing_report.execute(
        uow,
        context.tenant_id,
        date_from=request.date_from,
        date_to=request.date_to,
        max_days=settings.report_max_range_days,
        include_inactive=request.include_inactive,
    )
    profile = await uow.farm_profiles.get(context.tenant_id)
    logger.info(
        "Customer report %s..%s for tenant %s: %d rows",
        request.date_from,
        request.date_to,
        context.tenant_id,
        len(report.rows),
    )
    return await run_in_threadpool(
        report_service.customer_billing, report, profile, request.format
    )


@router.post("/customers/{customer_code}", response_model=ReportResponse)
async def customer_statement_report(
    customer_code: str,
    request: ReportRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
    report_service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    """Day-by-day statement for one customer."""
    statement = await customer_statement.execute(
        uow,
        context.tenant_id,
        customer_code,
        date_from=request.date_from,
        date_to=request.date_to,
        max_days=settings.report_max_range_days,
    )
    profile = await uow.farm_profiles.get(context.tenant_id)
    return await run_in_threadpool(
        report_service.customer_statement, statement, profile, request.format
    )


@router.post("/farm", response_model=ReportResponse)
async def farm_summary_report(
    request: ReportRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
    report_service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    summary = await farm_report.execute(
        uow,
        context.tenant_id,
        date_from=request.date_from,
        date_to=request.date_to,
        max_days=settings.report_max_range_days,
    )
    profile = await uow.farm_profiles.get(context.tenant_id)
    return await run_in_threadpool(
        report_service.farm, summary, request.date_from, request.date_to, profile, request.format
    )
