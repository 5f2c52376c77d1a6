import logging
from datetime import datetime
from typing import Optional, Dict, Any, List
from supabase import create_client, Client
from investours.schemas.internal_models import AuditLogEntry, WriteResult
from investours.services.metrics_service import MetricsService
from investours.config import Config, settings

logger = logging.getLogger(__name__)

SEARCH_LOG_TABLE = "ai_search_logs"


def _ilike_value(text: str) -> str:
    # LIKE wildcards are matched literally, then the value is quoted for the or=() filter.
    literal = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    quoted = literal.replace("\\", "\\\\").replace('"', '\\"')
    return f'"%{quoted}%"'


class SupabaseService:
    def __init__(self, config: Config = settings, client: Optional[Client] = None):
        self.url = config.SUPABASE_URL
        self.key = config.SUPABASE_KEY
        self.client: Optional[Client] = client
        if self.client is None:
            self._init_client()

    def _init_client(self):
        if self.url and self.key:
            try:
                self.client = create_client(self.url, self.key)
            except Exception as e:
                logger.error(f"Failed to initialize Supabase: {e}")
        else:
            logger.warning("Supabase Init Skip: SUPABASE_URL/SUPABASE_KEY not set")

    def insert_search_log(self, entry: AuditLogEntry) -> WriteResult:
        if not self.client:
            return WriteResult(ok=False, error="supabase not configured")
        try:
            self.client.table(SEARCH_LOG_TABLE).insert({
                "user_id": entry.requester_id,
                "query": entry.query,
                "search_type": entry.mode,
                "result": entry.serialized_result,
                "success": entry.succeeded,
                "created_at": entry.created_at
            }).execute()
            return WriteResult(ok=True)
        except Exception as e:
            MetricsService.record_error("supabase", type(e).__name__)
            return WriteResult(ok=False, error=str(e))

    def fetch_search_logs(self, user_id: Optional[str] = None, search_type: Optional[str] = None,
                          text: Optional[str] = None, since: Optional[datetime] = None,
                          limit: int = 100) -> List[Dict[str, Any]]:
        """Newest rows first. Every filter runs in the datastore before the limit."""
        if not self.client: return []
        try:
            query = self.client.table(SEARCH_LOG_TABLE).select("*")
            if user_id:
                query = query.eq("user_id", user_id)
            if search_type:
                query = query.eq("search_type", search_type)
            if since is not None:
                query = query.gte("created_at", since.isoformat())
            if text:
                pattern = _ilike_value(text)
                query = query.or_(f"query.ilike.{pattern},search_type.ilike.{pattern}")
            res = query.order("created_at", desc=True).limit(limit).execute()
            return res.data or []
        except Exception as e:
            logger.error(f"Search Log Fetch Failed: {e}")
            MetricsService.record_error("supabase", type(e).__name__)
            return []

    def count_search_logs(self, user_id: Optional[str] = None, search_type: Optional[str] = None,
                          success: Optional[bool] = None) -> int:
        if not self.client: return 0
        try:
            query = self.client.table(SEARCH_LOG_TABLE).select("id", count="exact")
            if user_id:
                query = query.eq("user_id", user_id)
            if search_type:
                query = query.eq("search_type", search_type)
            if success is not None:
                query = query.eq("success", success)
            res = query.limit(1).execute()
            return res.count or 0
        except Exception as e:
            logger.error(f"Search Log Count Failed: {e}")
            MetricsService.record_error("supabase", type(e).__name__)
            return 0
