from pydantic import BaseModel
from typing import Optional, Dict, Any


class CurrentUser(BaseModel):
    id: str
    email: Optional[str] = None
    user_metadata: Dict[str, Any] = {}
    app_metadata: Dict[str, Any] = {}
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class MeResponse(CurrentUser):
    role: Optional[str] = None
    is_onboarding_complete: bool = False
    current_step: Optional[int] = None
