"""
Security utilities and caller authentication
"""

from fastapi import HTTPException, Depends, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
import time
from typing import Dict, List

from app.core.config import settings

# Simple in-memory rate limiter
rate_limiter: Dict[str, List[float]] = {}

security = HTTPBearer()

def get_caller(credentials: HTTPAuthorizationCredentials = Depends(security)) -> str:
    """Resolve the bearer token to the calling principal"""
    principal = settings.ACCESS_TOKENS.get(credentials.credentials)
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid access token"
        )
    return principal

def rate_limit_check(client_ip: str, limit: int = None) -> bool:
    """Simple rate limiting by IP address"""
    if limit is None:
        limit = settings.RATE_LIMIT_PER_MINUTE
    
    current_time = time.time()
    minute_ago = current_time - 60
    
    # Forget clients with no request in the last minute
    idle_ips = [
        ip for ip, times in rate_limiter.items()
        if not times or times[-1] <= minute_ago
    ]
    for ip in idle_ips:
        del rate_limiter[ip]
    
    # Clean old requests
    recent = [
        req_time for req_time in rate_limiter.get(client_ip, [])
        if req_time > minute_ago
    ]
    
    # Check limit
    if len(recent) >= limit:
        if recent:
            rate_limiter[client_ip] = recent
        return False
    
    # Add current request
    recent.append(current_time)
    rate_limiter[client_ip] = recent
    return True

def get_client_ip(request) -> str:
    """Extract client IP from request"""
    # Check for forwarded IP first (for reverse proxy setups)
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    
    # Check for real IP header
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip
    
    # Fall back to direct client IP
    return request.client.host
