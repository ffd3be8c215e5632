# routers/customers.py
"""
Customer routes: registration, login and lookup.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from dependencies import RequestContext, get_account_service, get_auth_service, require_principal
from schemas.admin import LoginRequest
from schemas.customer import CustomerCreate, CustomerLoginResponse, CustomerResponse
from services.account_service import AccountService
from services.auth_service import AuthService

router = APIRouter(prefix="/clientes", tags=["clientes"])


@router.post("/login", response_model=CustomerLoginResponse, summary="Customer login")
def customer_login(body: LoginRequest, service: AuthService = Depends(get_auth_service)):
     customer, token = service.login_customer(body.email, body.password)
     return CustomerLoginResponse(id=customer.id, name=customer.name, email=customer.email, token=token)


@router.post(
     "",
     response_model=CustomerResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Register a customer"
)
def register_customer(payload: CustomerCreate, service: AccountService = Depends(get_account_service)):
     return service.register_customer(
          payload.name,
          payload.email,
          payload.password,
          phone=payload.phone,
          city=payload.city,
     )


@router.get("", response_model=List[CustomerResponse], summary="List customers")
def list_customers(
     service: AccountService = Depends(get_account_service),
     ctx: RequestContext = Depends(require_principal),
):
     return service.list_customers()


@router.get("/{customer_id}", response_model=CustomerResponse, summary="Get customer by ID")
def get_customer(
     customer_id: str,
     service: AccountService = Depends(get_account_service),
     ctx: RequestContext = Depends(require_principal),
):
     return service.get_customer(customer_id)
