# schemas/customer.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict, EmailStr


class CustomerCreate(BaseModel):
     """Schema for customer self-registration."""
     name: str = Field(..., alias="nome", min_length=3, max_length=60)
     email: EmailStr
     password: str = Field(..., alias="senha", min_length=1)
     phone: Optional[str] = Field(None, alias="telefone", max_length=20)
     city: Optional[str] = Field(None, alias="cidade", max_length=60)

     model_config = ConfigDict(populate_by_name=True)


class CustomerResponse(BaseModel):
     id: str
     name: str = Field(serialization_alias="nome")
     email: str
     phone: Optional[str] = Field(None, serialization_alias="telefone")
     city: Optional[str] = Field(None, serialization_alias="cidade")
     created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")

     model_config = ConfigDict(from_attributes=True)


class CustomerLoginResponse(BaseModel):
     id: str
     name: str = Field(serialization_alias="nome")
     email: str
     token: str
