import pytest

from services.password_policy import (
    MSG_DIGIT,
    MSG_LENGTH,
    MSG_LOWERCASE,
    MSG_SYMBOL,
    MSG_UPPERCASE,
    validate_password,
)


def test_strong_password_has_no_violations():
    assert validate_password("Admin@123") == []


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("Ab1@", [MSG_LENGTH]),
        ("ADMIN@123", [MSG_LOWERCASE]),
        ("admin@123", [MSG_UPPERCASE]),
        ("Admin@abc", [MSG_DIGIT]),
        ("Admin1234", [MSG_SYMBOL]),
        ("abc", [MSG_LENGTH, MSG_UPPERCASE, MSG_DIGIT, MSG_SYMBOL]),
        ("", [MSG_LENGTH, MSG_LOWERCASE, MSG_UPPERCASE, MSG_DIGIT, MSG_SYMBOL]),
    ],
)
def test_reports_exactly_the_rules_violated(candidate, expected):
    assert validate_password(candidate) == expected


def test_all_violations_are_collected_in_fixed_order():
    violations = validate_password("12345")
    assert violations == [MSG_LENGTH, MSG_LOWERCASE, MSG_UPPERCASE, MSG_SYMBOL]


def test_non_ascii_letters_count_as_symbols():
    # "ç" is outside [a-z], so it satisfies the symbol rule
    assert validate_password("Acucar1ç") == []


def test_space_counts_as_symbol():
    assert validate_password("Minha Senha1") == []
