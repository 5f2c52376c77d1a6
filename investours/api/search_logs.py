"""Read-only reports over the ai_search_logs audit table.

These routes return any user's rows for the given filters. They carry no
authentication of their own and must be served behind the platform's admin
auth. Setting SEARCH_LOGS_API_KEY additionally requires that key as a bearer
token.
"""
from fastapi import APIRouter, Depends, Query
from typing import Any, Dict, List, Literal, Optional
import logging

from investours.core.search_log_reports import decode_result, period_start
from investours.schemas.response_schema import SearchLogStats
from investours.services.supabase_service import SupabaseService
from investours.api.dependencies import get_supabase, require_reports_key

router = APIRouter(prefix="/search-logs", tags=["search-logs"], dependencies=[Depends(require_reports_key)])
logger = logging.getLogger("SearchLogsAPI")


@router.get("")
def list_search_logs(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    search_type: Literal["all", "quick", "deep"] = Query(default="all", alias="searchType"),
    q: Optional[str] = None,
    period: Literal["all", "today", "week", "month"] = "all",
    limit: int = Query(default=100, ge=1, le=1000),
    db: SupabaseService = Depends(get_supabase),
) -> List[Dict[str, Any]]:
    """Audit rows newest first, with `result` decoded back to an object."""
    rows = db.fetch_search_logs(
        user_id=user_id,
        search_type=None if search_type == "all" else search_type,
        text=q,
        since=period_start(period),
        limit=limit,
    )
    return [decode_result(row) for row in rows]


@router.get("/stats", response_model=SearchLogStats)
def search_log_stats(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    db: SupabaseService = Depends(get_supabase),
):
    return SearchLogStats(
        total=db.count_search_logs(user_id=user_id),
        quick=db.count_search_logs(user_id=user_id, search_type="quick"),
        deep=db.count_search_logs(user_id=user_id, search_type="deep"),
        successful=db.count_search_logs(user_id=user_id, success=True),
    )
