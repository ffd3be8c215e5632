# routers/admin_login.py
"""
Admin login route.

Every failure answers 400 with the same message. A wrong password for a
known admin is audited; that audit row is committed before the error is
returned so the failed request does not roll it back.
"""
from fastapi import APIRouter, Depends

from dependencies import get_auth_service
from errors import InvalidCredentials
from schemas.admin import AdminLoginResponse, LoginRequest
from services.auth_service import AuthService

router = APIRouter(prefix="/admins/login", tags=["auth"])


@router.post("", response_model=AdminLoginResponse, summary="Admin login")
def admin_login(body: LoginRequest, service: AuthService = Depends(get_auth_service)):
     try:
          admin, token = service.login_admin(body.email, body.password)
     except InvalidCredentials:
          service.db.commit()
          raise
     return AdminLoginResponse(
          id=admin.id,
          name=admin.name,
          email=admin.email,
          level=admin.level,
          token=token,
     )
