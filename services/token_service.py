# services/token_service.py
"""
Token Service - signed, time-boxed bearer tokens for both principal kinds.

Admins and customers share one verification contract. Issuance writes
exactly one claim set:

     {adminLogadoId, adminLogadoNome, adminLogadoNivel, exp, iat}
     {userLogadoId,  userLogadoNome,  userLogadoNivel,  exp, iat}

Verification gives the admin set precedence when both are present.
"""
import enum
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from jose import ExpiredSignatureError, JWTError, jwt

ADMIN_CLAIMS = ("adminLogadoId", "adminLogadoNome", "adminLogadoNivel")
CUSTOMER_CLAIMS = ("userLogadoId", "userLogadoNome", "userLogadoNivel")

# Customers have no access level of their own.
CUSTOMER_LEVEL = 0


class TokenError(Exception):
     """Base class for token verification failures."""


class TokenExpired(TokenError):
     pass


class MalformedToken(TokenError):
     pass


class InvalidSignature(MalformedToken):
     pass


class PrincipalKind(str, enum.Enum):
     CUSTOMER = "customer"
     ADMIN = "admin"


@dataclass(frozen=True)
class AdminPrincipal:
     id: str
     name: str
     level: int
     kind: PrincipalKind = PrincipalKind.ADMIN

     def claims(self) -> dict:
          return dict(zip(ADMIN_CLAIMS, (self.id, self.name, self.level)))

     def legacy_claims(self) -> dict:
          """Admin fields plus the user alias older consumers read."""
          legacy = self.claims()
          legacy.update(zip(CUSTOMER_CLAIMS, (self.id, self.name, self.level)))
          return legacy


@dataclass(frozen=True)
class CustomerPrincipal:
     id: str
     name: str
     level: int = CUSTOMER_LEVEL
     kind: PrincipalKind = PrincipalKind.CUSTOMER

     def claims(self) -> dict:
          return dict(zip(CUSTOMER_CLAIMS, (self.id, self.name, self.level)))

     def legacy_claims(self) -> dict:
          return self.claims()


Principal = Union[AdminPrincipal, CustomerPrincipal]


def _has_claim_set(payload: dict, keys: tuple) -> bool:
     return payload.get(keys[0]) not in (None, "")


class TokenService:
     """Issues and verifies HS256 JWTs with a process-wide secret."""

     def __init__(
          self,
          secret_key: str,
          algorithm: str = "HS256",
          ttl: timedelta = timedelta(hours=1),
     ):
          if not secret_key:
               raise ValueError("A signing secret is required")
          self._secret_key = secret_key
          self._algorithm = algorithm
          self._ttl = ttl

     def issue(self, principal: Principal, expires_delta: Optional[timedelta] = None) -> str:
          """Sign a token for the principal, valid for the configured TTL."""
          now = datetime.now(timezone.utc)
          payload = principal.claims()
          payload.update({
               "exp": now + (expires_delta if expires_delta is not None else self._ttl),
               "iat": now,
          })
          return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

     def verify(self, token: str) -> Principal:
          """
          Decode and validate a token.

          Raises:
               TokenExpired: signature valid but past ``exp``
               InvalidSignature: structurally a JWT but not signed with our key
               MalformedToken: not a JWT, or carries neither claim set
          """
          if not token:
               raise MalformedToken("Empty token")
          try:
               jwt.get_unverified_claims(token)
          except JWTError as exc:
               raise MalformedToken(str(exc)) from exc

          try:
               payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
          except ExpiredSignatureError as exc:
               raise TokenExpired(str(exc)) from exc
          except JWTError as exc:
               raise InvalidSignature(str(exc)) from exc

          return self._resolve(payload)

     @staticmethod
     def _resolve(payload: dict) -> Principal:
          if _has_claim_set(payload, ADMIN_CLAIMS):
               id_key, name_key, level_key = ADMIN_CLAIMS
               return AdminPrincipal(
                    id=str(payload[id_key]),
                    name=payload.get(name_key) or "",
                    level=int(payload.get(level_key) or 0),
               )
          if _has_claim_set(payload, CUSTOMER_CLAIMS):
               id_key, name_key, level_key = CUSTOMER_CLAIMS
               return CustomerPrincipal(
                    id=str(payload[id_key]),
                    name=payload.get(name_key) or "",
                    level=int(payload.get(level_key) or CUSTOMER_LEVEL),
               )
          raise MalformedToken("Token carries no principal claims")
