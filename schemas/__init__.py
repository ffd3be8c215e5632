# schemas/__init__.py
from .property import (
     PropertyCreate,
     PropertyUpdate,
     PropertyResponse,
     LandlordResponse,
)
from .admin import (
     AdminCreate,
     AdminResponse,
     AdminLoginResponse,
     LoginRequest,
)
from .customer import CustomerCreate, CustomerResponse, CustomerLoginResponse
from .proposal import (
     ProposalCreate,
     ProposalAnswer,
     ProposalResponse,
     ProposalDetailResponse,
)

__all__ = [
     "PropertyCreate",
     "PropertyUpdate",
     "PropertyResponse",
     "LandlordResponse",
     "AdminCreate",
     "AdminResponse",
     "AdminLoginResponse",
     "LoginRequest",
     "CustomerCreate",
     "CustomerResponse",
     "CustomerLoginResponse",
     "ProposalCreate",
     "ProposalAnswer",
     "ProposalResponse",
     "ProposalDetailResponse",
]
