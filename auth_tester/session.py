from dataclasses import dataclass
from typing import Optional


@dataclass
class SessionState:
    """Tokens and prompt defaults kept in memory for one run of the tool"""
    user_token: Optional[str] = None
    admin_token: Optional[str] = None
    api_key: Optional[str] = None
    registered_email: Optional[str] = None
