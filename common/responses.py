import json

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def json_response(body, status_code: int = 200):
    """Return an API Gateway response with an unwrapped JSON body."""
    return {
        "statusCode": status_code,
        "headers": CORS_HEADERS,
        "body": json.dumps(body, default=str),
    }


def success(data, status_code: int = 200):
    """Return a standardized success API Gateway response."""
    return json_response({"data": data}, status_code=status_code)


def error(code: str, message: str, status_code: int = 400):
    """Return a standardized error API Gateway response."""
    return json_response(
        {"error": {"code": code, "message": message}}, status_code=status_code
    )


def empty(status_code: int = 200):
    """Return a bodiless response, used for CORS preflight."""
    return {"statusCode": status_code, "headers": CORS_HEADERS, "body": ""}
