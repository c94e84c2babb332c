"""
Request metadata extraction.

Builds a request log record from an incoming Starlette request before
the handler runs.
"""
from typing import Optional

from starlette.requests import Request

from internal.domain.request_log import HttpRequestLog, format_peer_address


REFERER = "referer"
USER_AGENT = "user-agent"
FORWARDED = "forwarded"


def _is_visible_text(value: str) -> bool:
    """Check that a header value holds only visible ASCII or tabs."""
    return all(ch == "\t" or " " <= ch <= "~" for ch in value)


def header_text(request: Request, name: str) -> Optional[str]:
    """
    Read a header value as text.
    
    Args:
        request: Incoming request.
        name: Header name, any case.
        
    Returns:
        The first value for ``name``, or None if the header is missing
        or its bytes are not visible ASCII text.
    """
    key = name.lower().encode("latin-1")
    for raw_key, raw_value in request.headers.raw:
        if raw_key.lower() != key:
            continue
        try:
            value = raw_value.decode("ascii")
        except UnicodeDecodeError:
            return None
        return value if _is_visible_text(value) else None
    return None


def request_path(request: Request) -> str:
    """
    Get the request path as received on the wire.
    
    Args:
        request: Incoming request.
        
    Returns:
        The undecoded path without the query string, or the decoded
        ASGI path when the server does not provide the raw one.
    """
    raw_path = request.scope.get("raw_path")
    if raw_path:
        path, _, _ = raw_path.decode("latin-1").partition("?")
        return path
    return request.scope["path"]


def peer_address(request: Request) -> Optional[str]:
    """
    Get the transport peer address.
    
    Args:
        request: Incoming request.
        
    Returns:
        ``host:port`` of the peer, or None if the server did not expose one.
    """
    client = request.client
    if client is None or client.host is None:
        return None
    return format_peer_address(client.host, client.port)


def extract_request_log(request: Request) -> HttpRequestLog:
    """
    Build the log record for a request.
    
    Reads only immutable request attributes, so extracting twice from
    the same request gives equal records.
    
    Args:
        request: Incoming request.
        
    Returns:
        Record with every field except status and elapsed populated.
    """
    return HttpRequestLog(
        method=request.method,
        path=request_path(request),
        remote_addr=peer_address(request),
        referer=header_text(request, REFERER),
        user_agent=header_text(request, USER_AGENT),
        forwarded=header_text(request, FORWARDED),
    )
