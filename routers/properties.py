# routers/properties.py
"""
Property API routes.

Public reads (listing, featured, detail, search) and token-gated writes
(create, partial update, soft delete). Any valid bearer token passes the
gate; creation additionally requires the principal to be an existing admin.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from dependencies import RequestContext, get_property_service, require_principal
from schemas.property import PropertyCreate, PropertyResponse, PropertyUpdate
from services.property_service import PropertyService

router = APIRouter(prefix="/imoveis", tags=["imoveis"])


@router.get("", response_model=List[PropertyResponse], summary="List available properties")
def list_properties(service: PropertyService = Depends(get_property_service)):
     """Available listings, newest first, with their landlord."""
     return service.list_available()


@router.get("/destaques", response_model=List[PropertyResponse], summary="Featured properties")
def list_featured(service: PropertyService = Depends(get_property_service)):
     return service.list_featured()


@router.get("/pesquisa/{termo}", response_model=List[PropertyResponse], summary="Search properties")
def search_properties(termo: str, service: PropertyService = Depends(get_property_service)):
     """
     Numeric terms return listings with rent at or below the value;
     other terms match title, city or landlord name (case-insensitive).
     """
     return service.search(termo)


@router.get("/{property_id}", response_model=PropertyResponse, summary="Get property by ID")
def get_property(property_id: int, service: PropertyService = Depends(get_property_service)):
     """Detail view; unavailable listings are still returned."""
     return service.get_by_id(property_id)


@router.post(
     "",
     response_model=PropertyResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a property"
)
def create_property(
     payload: PropertyCreate,
     service: PropertyService = Depends(get_property_service),
     ctx: RequestContext = Depends(require_principal),
):
     """
     Create a listing owned by the logged-in admin.

     The landlord is the admin's own landlord record, provisioned on first use.
     """
     return service.create(payload.model_dump(), ctx.user_id)


@router.put("/{property_id}", response_model=PropertyResponse, summary="Update property")
@router.patch("/{property_id}", response_model=PropertyResponse, summary="Update property")
def update_property(
     property_id: int,
     payload: PropertyUpdate,
     service: PropertyService = Depends(get_property_service),
     ctx: RequestContext = Depends(require_principal),
):
     """Only provided fields are updated. No ownership check is applied."""
     return service.update(property_id, payload.changes())


@router.delete("/{property_id}", response_model=PropertyResponse, summary="Remove property")
def delete_property(
     property_id: int,
     service: PropertyService = Depends(get_property_service),
     ctx: RequestContext = Depends(require_principal),
):
     """Soft delete: the listing is marked unavailable and the removal is audited."""
     return service.soft_delete(property_id, ctx.user_id, ctx.user_name)
