from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    nickname: str
    first_name: str
    last_name: str
    email: str
    country: str
    password: str = ""  # stored form (bcrypt hash for the Mongo store)
