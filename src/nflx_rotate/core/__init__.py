"""Credential model and password generation for nflx-passwd-rotate."""

from .models import Credentials
from .generator import PasswordPolicy, generate_password

__all__ = [
    'Credentials',
    'PasswordPolicy',
    'generate_password',
]
