VETTING_KEYWORDS = [
    "scam", "fraud", "legitimate", "legit", "real", "fake", "trust", "safe to invest",
    "is this company", "should i invest", "check this", "verify", "analyze investment",
    "is it safe", "ponzi", "pyramid", "mlm", "returns guaranteed", "too good to be true",
    "red flags", "warning signs", "due diligence"
]

VETTING_ROUTE = "/vetting"


def is_vetting_query(text: str) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in VETTING_KEYWORDS)
