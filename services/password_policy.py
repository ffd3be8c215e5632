# services/password_policy.py
"""
Password complexity rules for admin accounts.

Every rule is checked independently so the caller can report all of the
problems at once instead of one per attempt.
"""
import re
from typing import List

MIN_LENGTH = 8

MSG_LENGTH = f"Erro... senha deve possuir, no mínimo, {MIN_LENGTH} caracteres"
MSG_LOWERCASE = "Erro... senha deve possuir letra(s) minúscula(s)"
MSG_UPPERCASE = "Erro... senha deve possuir letra(s) maiúscula(s)"
MSG_DIGIT = "Erro... senha deve possuir número(s)"
MSG_SYMBOL = "Erro... senha deve possuir símbolo(s)"

_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")


def _count_classes(candidate: str) -> dict:
     counts = {"lower": 0, "upper": 0, "digit": 0, "symbol": 0}
     for char in candidate:
          if _LOWER.fullmatch(char):
               counts["lower"] += 1
          elif _UPPER.fullmatch(char):
               counts["upper"] += 1
          elif _DIGIT.fullmatch(char):
               counts["digit"] += 1
          else:
               counts["symbol"] += 1
     return counts


def validate_password(candidate: str) -> List[str]:
     """
     Check a candidate password against the complexity policy.

     Returns:
          List of violation messages, ordered length, lowercase, uppercase,
          digit, symbol. An empty list means the password is acceptable.
     """
     violations = []
     if len(candidate) < MIN_LENGTH:
          violations.append(MSG_LENGTH)

     counts = _count_classes(candidate)
     if counts["lower"] == 0:
          violations.append(MSG_LOWERCASE)
     if counts["upper"] == 0:
          violations.append(MSG_UPPERCASE)
     if counts["digit"] == 0:
          violations.append(MSG_DIGIT)
     if counts["symbol"] == 0:
          violations.append(MSG_SYMBOL)
     return violations
