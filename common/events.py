"""Accessors for API Gateway proxy events (REST v1 and HTTP API v2 shapes)."""


def http_method(event) -> str:
    method = event.get("httpMethod")
    if not method:
        method = ((event.get("requestContext") or {}).get("http") or {}).get("method")
    return (method or "GET").upper()


def header(event, name: str):
    """Case-insensitive header lookup."""
    headers = event.get("headers") or {}
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def query_params(event) -> dict:
    return event.get("queryStringParameters") or {}
