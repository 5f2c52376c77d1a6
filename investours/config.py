import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    AI_GATEWAY_API_KEY = os.getenv("AI_GATEWAY_API_KEY", "")
    AI_GATEWAY_URL = os.getenv("AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1/chat/completions")
    AI_MODEL = os.getenv("AI_MODEL", "google/gemini-2.5-flash")
    AI_GATEWAY_TIMEOUT = float(os.getenv("AI_GATEWAY_TIMEOUT", "60.0"))
    SUPABASE_URL = os.getenv("SUPABASE_URL", "")
    SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")
    ENV = os.getenv("ENV", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    RATE_LIMIT = os.getenv("RATE_LIMIT", "30/minute")
    SEARCH_LOGS_API_KEY = os.getenv("SEARCH_LOGS_API_KEY", "")

    POOL_MAX_SIZE = int(os.getenv("POOL_MAX_SIZE", "20"))

    VERSION_MANIFEST = {
        "api": "1.0.0",
        "model": AI_MODEL,
        "build_id": os.getenv("BUILD_ID", "DEV")
    }

settings = Config()
