# routers/proposals.py
from typing import List

from fastapi import APIRouter, Depends, status

from dependencies import RequestContext, get_proposal_service, require_principal
from schemas.proposal import ProposalAnswer, ProposalCreate, ProposalDetailResponse, ProposalResponse
from services.proposal_service import ProposalService

router = APIRouter(prefix="/propostas", tags=["propostas"])


@router.get("", response_model=List[ProposalDetailResponse], summary="List proposals")
def list_proposals(service: ProposalService = Depends(get_proposal_service)):
     """All proposals, newest first, with customer and listing."""
     return service.list_all()


@router.post(
     "",
     response_model=ProposalResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a proposal"
)
def create_proposal(payload: ProposalCreate, service: ProposalService = Depends(get_proposal_service)):
     return service.create(payload.customer_id, payload.property_id, payload.description)


@router.get("/{customer_id}", response_model=List[ProposalDetailResponse], summary="Proposals of a customer")
def list_customer_proposals(customer_id: str, service: ProposalService = Depends(get_proposal_service)):
     return service.list_for_customer(customer_id)


@router.patch("/{proposal_id}", response_model=ProposalResponse, summary="Answer a proposal")
def answer_proposal(
     proposal_id: int,
     payload: ProposalAnswer,
     service: ProposalService = Depends(get_proposal_service),
     ctx: RequestContext = Depends(require_principal),
):
     return service.answer(proposal_id, payload.answer)
