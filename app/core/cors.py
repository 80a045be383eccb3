from fastapi import Response

# Sent on explicit OPTIONS answers, whether or not the request carried an Origin
PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

def preflight_response() -> Response:
    return Response(status_code=200, headers=PREFLIGHT_HEADERS)
