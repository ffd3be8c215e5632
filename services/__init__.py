# services/__init__.py
from .password_policy import validate_password
from .token_service import (
     TokenService,
     AdminPrincipal,
     CustomerPrincipal,
     Principal,
     PrincipalKind,
     TokenError,
     TokenExpired,
     MalformedToken,
     InvalidSignature,
)
from .audit_log import AuditLogSink
from .auth_service import AuthService, hash_password, verify_password
from .account_service import AccountService
from .property_service import PropertyService, parse_price_ceiling
from .proposal_service import ProposalService

__all__ = [
     "validate_password",
     "TokenService",
     "AdminPrincipal",
     "CustomerPrincipal",
     "Principal",
     "PrincipalKind",
     "TokenError",
     "TokenExpired",
     "MalformedToken",
     "InvalidSignature",
     "AuditLogSink",
     "AuthService",
     "hash_password",
     "verify_password",
     "AccountService",
     "PropertyService",
     "parse_price_ceiling",
     "ProposalService",
]
