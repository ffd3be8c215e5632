# services/proposal_service.py
"""
Proposal Service - customer offers on listings and owner answers.

Answering a proposal only records the answer; notifying the customer is
left to an external collaborator.
"""
import logging
from typing import List

from sqlalchemy.orm import Session, joinedload

from errors import NotFound, ValidationFailed
from models import Customer, Property, Proposal

logger = logging.getLogger(__name__)

MISSING_ANSWER = "Informe a resposta desta proposta"


class ProposalService:
     """Service class for proposal-related business logic."""

     def __init__(self, db: Session):
          self.db = db

     def _query(self):
          return self.db.query(Proposal).options(
               joinedload(Proposal.customer),
               joinedload(Proposal.property).joinedload(Property.landlord),
          )

     def list_all(self) -> List[Proposal]:
          return self._query().order_by(Proposal.id.desc()).all()

     def list_for_customer(self, customer_id: str) -> List[Proposal]:
          return (
               self._query()
               .filter(Proposal.customer_id == customer_id)
               .order_by(Proposal.id.desc())
               .all()
          )

     def create(self, customer_id: str, property_id: int, description: str) -> Proposal:
          if self.db.get(Customer, customer_id) is None:
               raise NotFound("Cliente não encontrado")
          if self.db.get(Property, property_id) is None:
               raise NotFound("Imóvel não encontrado")

          proposal = Proposal(
               customer_id=customer_id,
               property_id=property_id,
               description=description,
          )
          self.db.add(proposal)
          self.db.flush()
          self.db.refresh(proposal)
          logger.info("Proposal %s created for property %s", proposal.id, property_id)
          return proposal

     def answer(self, proposal_id: int, answer: str) -> Proposal:
          if not answer:
               raise ValidationFailed(MISSING_ANSWER)

          proposal = self.db.get(Proposal, proposal_id)
          if proposal is None:
               raise NotFound("Proposta não encontrada")

          proposal.answer = answer
          self.db.flush()
          logger.info("Proposal %s answered", proposal.id)
          return proposal
