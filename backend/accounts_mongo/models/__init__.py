"""
Pydantic models for database documents.
"""
from accounts_mongo.models.user import (
    User,
    EmailRecord,
    Services,
    PasswordService,
    ResetPasswordToken,
    EmailService,
    EmailVerificationToken,
)

__all__ = [
    "User",
    "EmailRecord",
    "Services",
    "PasswordService",
    "ResetPasswordToken",
    "EmailService",
    "EmailVerificationToken",
]
