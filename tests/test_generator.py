"""Tests for auto-generated passwords."""
import string

import pytest
from hypothesis import given, settings, strategies as st

from nflx_rotate.core.generator import (
    DIGITS,
    SYMBOLS_ALL,
    SYMBOLS_SHELL_SAFE,
    PasswordPolicy,
    generate_password,
)
from nflx_rotate.errors import GenerationError


def test_default_policy_matches_command_line_defaults():
    policy = PasswordPolicy()
    assert policy.max_len == 16
    assert policy.num_digits == 8
    assert policy.num_symbols == 8
    assert policy.num_letters == 0


def test_digits_and_symbols_exceeding_length_fail():
    policy = PasswordPolicy(max_len=16, num_digits=9, num_symbols=8, no_upper=True)
    with pytest.raises(GenerationError, match="exceeds the total length"):
        generate_password(policy)


def test_too_many_unique_digits_fail_without_repeats():
    with pytest.raises(GenerationError, match="digits"):
        generate_password(PasswordPolicy(max_len=20, num_digits=11, num_symbols=0))


def test_too_many_unique_digits_allowed_with_repeats():
    password = generate_password(PasswordPolicy(max_len=20, num_digits=11, num_symbols=0, allow_repeat=True))
    assert sum(c in DIGITS for c in password) == 11


def test_non_positive_length_fails():
    with pytest.raises(GenerationError):
        generate_password(PasswordPolicy(max_len=0, num_digits=0, num_symbols=0))


def test_no_upper_excludes_upper_case():
    password = generate_password(PasswordPolicy(max_len=20, num_digits=2, num_symbols=2, no_upper=True))
    assert not any(c in string.ascii_uppercase for c in password)


def test_shell_safe_symbols():
    policy = PasswordPolicy(max_len=12, num_digits=2, num_symbols=6, symbols=SYMBOLS_SHELL_SAFE)
    password = generate_password(policy)
    symbols = [c for c in password if not c.isalnum()]
    assert len(symbols) == 6
    assert all(c in SYMBOLS_SHELL_SAFE for c in symbols)


@given(
    max_len=st.integers(min_value=1, max_value=26),
    num_digits=st.integers(min_value=0, max_value=10),
    num_symbols=st.integers(min_value=0, max_value=10),
    no_upper=st.booleans(),
)
@settings(max_examples=100)
def test_generated_password_follows_policy(max_len, num_digits, num_symbols, no_upper):
    policy = PasswordPolicy(max_len=max_len, num_digits=num_digits, num_symbols=num_symbols, no_upper=no_upper)
    if num_digits + num_symbols > max_len:
        with pytest.raises(GenerationError):
            generate_password(policy)
        return

    password = generate_password(policy)

    assert len(password) == max_len
    assert sum(c in DIGITS for c in password) == num_digits
    assert sum(c in SYMBOLS_ALL for c in password) == num_symbols
    # No repeats unless asked for.
    assert len(set(password)) == len(password)
