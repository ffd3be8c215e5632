# routers/admins.py
from typing import List

from fastapi import APIRouter, Depends, status

from dependencies import RequestContext, get_account_service, require_principal
from schemas.admin import AdminCreate, AdminResponse
from services.account_service import AccountService

router = APIRouter(prefix="/admins", tags=["admins"])


@router.get("", response_model=List[AdminResponse], summary="List admins")
def list_admins(service: AccountService = Depends(get_account_service)):
     return service.list_admins()


@router.post(
     "",
     response_model=AdminResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create an admin"
)
def create_admin(
     payload: AdminCreate,
     service: AccountService = Depends(get_account_service),
     ctx: RequestContext = Depends(require_principal),
):
     """
     Provision an admin account.

     - **nome**: at least 10 characters
     - **senha**: 8+ characters with lowercase, uppercase, digit and symbol
     - **nivel**: 1 to 5
     """
     return service.create_admin(payload.name, payload.email, payload.password, payload.level)


@router.get("/{admin_id}", response_model=AdminResponse, summary="Get admin by ID")
def get_admin(admin_id: str, service: AccountService = Depends(get_account_service)):
     return service.get_admin(admin_id)
