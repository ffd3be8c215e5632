# schemas/property.py
"""
Pydantic schemas for Property API request/response validation.

Wire keys keep the names clients already send (titulo, aluguelMensal, ...);
Python attributes match the ORM columns.
"""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict, model_validator

from models.property import PropertyType

# Columns that cannot be cleared with an explicit null on update.
NON_NULLABLE = ("title", "address", "city", "type", "monthly_rent", "available")


class PropertyCreate(BaseModel):
     """Schema for creating a listing. Owner and admin are never taken from the client."""
     title: str = Field(..., alias="titulo", min_length=3, max_length=100)
     description: Optional[str] = Field(None, alias="descricao", min_length=1)
     address: str = Field(..., alias="endereco", min_length=3, max_length=255)
     city: str = Field(..., alias="cidade", min_length=2, max_length=60)
     neighborhood: Optional[str] = Field(None, alias="bairro", min_length=1, max_length=60)
     postal_code: Optional[str] = Field(None, alias="cep", min_length=1, max_length=10)
     type: PropertyType = Field(..., alias="tipo")
     monthly_rent: Decimal = Field(..., alias="aluguelMensal", gt=0, max_digits=10, decimal_places=2)
     available: Optional[bool] = Field(True, alias="disponivel")
     photos: Optional[str] = Field(None, alias="fotos")

     model_config = ConfigDict(
          populate_by_name=True,
          json_schema_extra={
               "example": {
                    "titulo": "Casa com pátio no Centro",
                    "endereco": "Rua XV de Novembro, 100",
                    "cidade": "Pelotas",
                    "bairro": "Centro",
                    "tipo": "CASA",
                    "aluguelMensal": 1200,
               }
          }
     )


class PropertyUpdate(BaseModel):
     """Partial update: every field optional, absent fields stay untouched."""
     title: Optional[str] = Field(None, alias="titulo", min_length=3, max_length=100)
     description: Optional[str] = Field(None, alias="descricao", min_length=1)
     address: Optional[str] = Field(None, alias="endereco", min_length=3, max_length=255)
     city: Optional[str] = Field(None, alias="cidade", min_length=2, max_length=60)
     neighborhood: Optional[str] = Field(None, alias="bairro", min_length=1, max_length=60)
     postal_code: Optional[str] = Field(None, alias="cep", min_length=1, max_length=10)
     type: Optional[PropertyType] = Field(None, alias="tipo")
     monthly_rent: Optional[Decimal] = Field(None, alias="aluguelMensal", gt=0, max_digits=10, decimal_places=2)
     available: Optional[bool] = Field(None, alias="disponivel")
     photos: Optional[str] = Field(None, alias="fotos")

     model_config = ConfigDict(
          populate_by_name=True,
          json_schema_extra={"example": {"aluguelMensal": 1350}},
     )

     @model_validator(mode="after")
     def reject_null_required(self):
          cleared = [
               name for name in NON_NULLABLE
               if name in self.model_fields_set and getattr(self, name) is None
          ]
          if cleared:
               raise ValueError(f"Campos obrigatórios não podem ser nulos: {', '.join(cleared)}")
          return self

     def changes(self) -> dict:
          return self.model_dump(exclude_unset=True)


class LandlordResponse(BaseModel):
     """Owner data embedded in listings (password hash never exposed)."""
     id: int
     name: str = Field(serialization_alias="nome")
     email: str
     phone: Optional[str] = Field(None, serialization_alias="telefone")
     city: Optional[str] = Field(None, serialization_alias="cidade")

     model_config = ConfigDict(from_attributes=True)


class PropertyResponse(BaseModel):
     """Schema for listing responses."""
     id: int
     title: str = Field(serialization_alias="titulo")
     description: Optional[str] = Field(None, serialization_alias="descricao")
     address: str = Field(serialization_alias="endereco")
     city: str = Field(serialization_alias="cidade")
     neighborhood: Optional[str] = Field(None, serialization_alias="bairro")
     postal_code: Optional[str] = Field(None, serialization_alias="cep")
     type: PropertyType = Field(serialization_alias="tipo")
     monthly_rent: Decimal = Field(serialization_alias="aluguelMensal")
     available: bool = Field(serialization_alias="disponivel")
     photos: Optional[str] = Field(None, serialization_alias="fotos")
     landlord_id: int = Field(serialization_alias="proprietarioId")
     admin_id: str = Field(serialization_alias="adminId")

     # Optional related data
     landlord: Optional[LandlordResponse] = Field(None, serialization_alias="proprietario")

     model_config = ConfigDict(from_attributes=True)
