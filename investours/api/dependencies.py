import secrets
from typing import Optional
from functools import lru_cache
from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from investours.config import settings
from investours.engines.gateway_client import GatewayClient
from investours.services.supabase_service import SupabaseService
from investours.services.audit_logger import AuditLogger


@lru_cache()
def get_gateway() -> GatewayClient:
    return GatewayClient(settings)


@lru_cache()
def get_supabase() -> SupabaseService:
    return SupabaseService(settings)


def get_audit_logger(db: SupabaseService = Depends(get_supabase)) -> AuditLogger:
    return AuditLogger(db)


reports_bearer = HTTPBearer(auto_error=False)


def require_reports_key(credentials: Optional[HTTPAuthorizationCredentials] = Security(reports_bearer)):
    expected = settings.SEARCH_LOGS_API_KEY
    if not expected:
        return
    if credentials is None or not secrets.compare_digest(credentials.credentials, expected):
        raise HTTPException(status_code=401, detail="Unauthorized")
