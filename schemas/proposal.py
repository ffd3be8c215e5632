# schemas/proposal.py
"""
Pydantic schemas for proposals.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict

from .customer import CustomerResponse
from .property import PropertyResponse


class ProposalCreate(BaseModel):
     customer_id: str = Field(..., alias="clienteId", min_length=1)
     property_id: int = Field(..., alias="imovelId", gt=0)
     description: str = Field(
          ...,
          alias="descricao",
          min_length=10,
          description="Descrição da Proposta deve possuir, no mínimo, 10 caracteres",
     )

     model_config = ConfigDict(populate_by_name=True)


class ProposalAnswer(BaseModel):
     answer: Optional[str] = Field(None, alias="resposta")

     model_config = ConfigDict(populate_by_name=True)


class ProposalResponse(BaseModel):
     id: int
     customer_id: str = Field(serialization_alias="clienteId")
     property_id: int = Field(serialization_alias="imovelId")
     description: str = Field(serialization_alias="descricao")
     answer: Optional[str] = Field(None, serialization_alias="resposta")
     created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")

     model_config = ConfigDict(from_attributes=True)


class ProposalDetailResponse(ProposalResponse):
     """Proposal with its customer and listing (listing includes the landlord)."""
     customer: Optional[CustomerResponse] = Field(None, serialization_alias="cliente")
     property: Optional[PropertyResponse] = Field(None, serialization_alias="imovel")
