# dependencies.py
"""
Shared FastAPI dependencies: settings, services and the bearer-token gate.

Usage:
     @router.post("/imoveis")
     def create(ctx: RequestContext = Depends(require_principal)):
          ctx.user_id   # works for admin and customer tokens alike
"""
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from config import Settings, get_settings
from database import get_session
from errors import InvalidToken, MissingToken
from services.account_service import AccountService
from services.auth_service import AuthService
from services.property_service import PropertyService
from services.proposal_service import ProposalService
from services.token_service import Principal, TokenError, TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
     """Identity resolved from a verified bearer token."""
     principal: Principal
     token: str

     @property
     def user_id(self) -> str:
          """Uniform "current user" id, whichever kind of token was used."""
          return self.principal.id

     @property
     def user_name(self) -> str:
          return self.principal.name


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
     return TokenService(
          settings.JWT_SECRET,
          algorithm=settings.JWT_ALGORITHM,
          ttl=timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
     )


def extract_bearer(authorization: Optional[str]) -> str:
     """
     Pull the token out of an Authorization header value.

     Raises:
          MissingToken: header absent
          InvalidToken: header present but carries no token
     """
     if not authorization:
          raise MissingToken()
     parts = authorization.split(" ")
     if len(parts) < 2 or not parts[1]:
          raise InvalidToken()
     return parts[1]


def require_principal(
     request: Request,
     token_service: TokenService = Depends(get_token_service),
) -> RequestContext:
     """
     Strict gate: reject the request unless it carries a valid bearer token.

     The resolved context is returned and also stored on
     ``request.state.context``.
     """
     token = extract_bearer(request.headers.get("Authorization"))
     try:
          principal = token_service.verify(token)
     except TokenError as exc:
          logger.info("Rejected token on %s: %s", request.url.path, type(exc).__name__)
          raise InvalidToken() from exc

     context = RequestContext(principal=principal, token=token)
     request.state.context = context
     return context


def get_property_service(
     db: Session = Depends(get_session),
     settings: Settings = Depends(get_settings),
) -> PropertyService:
     return PropertyService(db, featured_limit=settings.FEATURED_LIMIT)


def get_account_service(
     db: Session = Depends(get_session),
     settings: Settings = Depends(get_settings),
) -> AccountService:
     return AccountService(db, rounds=settings.BCRYPT_ROUNDS)


def get_auth_service(
     db: Session = Depends(get_session),
     settings: Settings = Depends(get_settings),
     token_service: TokenService = Depends(get_token_service),
) -> AuthService:
     return AuthService(db, token_service, rounds=settings.BCRYPT_ROUNDS)


def get_proposal_service(db: Session = Depends(get_session)) -> ProposalService:
     return ProposalService(db)
