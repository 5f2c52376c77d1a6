import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from investours.schemas.internal_models import AuditLogEntry
from investours.services.supabase_service import SupabaseService

logger = logging.getLogger("SearchAudit")

class AuditLogger:
    def __init__(self, db_service: SupabaseService):
        self.db = db_service

    def record_search(self, user_id: Optional[str], query: str, mode: str, analysis: Dict[str, Any], parsed: bool) -> AuditLogEntry:
        entry = AuditLogEntry(
            requester_id=user_id,
            query=query,
            mode=mode,
            serialized_result=json.dumps(analysis),
            succeeded=True,
            created_at=datetime.now(timezone.utc).isoformat()
        )
        try:
            result = self.db.insert_search_log(entry)
        except Exception as e:
            logger.error(f"Failed to log search: {e}", exc_info=True)
            return entry
        if not result.ok:
            logger.error(f"Failed to log search: {result.error}")
        logger.info(f"AUDIT_ACTION: scam_detection | User: {user_id} | Mode: {mode} | Parsed: {parsed} | Stored: {result.ok}")
        return entry
