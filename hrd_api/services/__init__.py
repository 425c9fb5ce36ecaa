"""
Service layer
"""
from hrd_api.services.auth import (
    verify_password, get_password_hash, authenticate_user,
    create_access_token, decode_token, get_current_user
)
from hrd_api.services.announcements import classify_contract, get_contract_announcements
from hrd_api.services.statistics import statistics_service

__all__ = [
    # Auth
    "verify_password", "get_password_hash", "authenticate_user",
    "create_access_token", "decode_token", "get_current_user",
    # Services
    "classify_contract",
    "get_contract_announcements",
    "statistics_service",
]
