from fastapi import Request

from .application.ports.audit_logger import AuditLogger
from .application.ports.clinic_repo import ClinicRepository


def get_repository(request: Request) -> ClinicRepository:
    return request.app.state.repository


def get_audit_logger(request: Request) -> AuditLogger:
    return request.app.state.audit_logger


async def read_body(request: Request) -> bytes:
    """Whole request body, read before the (synchronous) handler runs."""
    return await request.body()
