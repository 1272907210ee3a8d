"""
Core dependencies for route protection and per-user services
"""

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.database.supabase_client import get_supabase, get_service_supabase
from app.modules.auth.service import AuthService
from app.modules.profiles.service import ProfileService
from app.modules.onboarding.header import HeaderStore, header_store
from app.modules.onboarding.service import OnboardingService
from supabase import Client
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer()


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> dict:
    """Extract current user info from JWT token"""
    token = credentials.credentials
    return auth_service.get_current_user(token)


def get_profile_service(
    supabase: Client = Depends(get_supabase),
    service_supabase: Client = Depends(get_service_supabase),
) -> ProfileService:
    return ProfileService(supabase, role_client=service_supabase)


def get_header_store() -> HeaderStore:
    return header_store


def get_onboarding_service(
    profiles: ProfileService = Depends(get_profile_service),
    headers: HeaderStore = Depends(get_header_store),
) -> OnboardingService:
    return OnboardingService(profiles, headers)
