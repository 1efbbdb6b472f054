# -*- coding: utf-8 -*-
"""
Тесты для core/utils/validator.py
"""
import pytest

from core.utils.validator import is_blank, sanitize_user_input, validate_coordinates


def test_sanitize_user_input():
    assert sanitize_user_input("  Paris  ") == "Paris"
    assert sanitize_user_input("São Paulo") == "São Paulo"
    assert sanitize_user_input("Москва") == "Москва"
    assert sanitize_user_input("St. John's, CA") == "St. John's, CA"
    assert sanitize_user_input("<b>Rome</b>") == "bRomeb"
    assert len(sanitize_user_input("x" * 500)) == 100
    print("✅ test_sanitize_user_input passed")


def test_sanitize_user_input_rejects_non_strings():
    with pytest.raises(ValueError):
        sanitize_user_input(None)


def test_is_blank():
    assert is_blank("")
    assert is_blank("   \t")
    assert is_blank(None)
    assert not is_blank(" Oslo ")


def test_validate_coordinates():
    assert validate_coordinates(55.75, 37.62) == True
    assert validate_coordinates("55.75", "37.62") == True
    assert validate_coordinates(91, 0) == False
    assert validate_coordinates(0, 181) == False
    assert validate_coordinates("invalid", 0) == False
    print("✅ test_validate_coordinates passed")


if __name__ == "__main__":
    test_sanitize_user_input()
    test_validate_coordinates()
