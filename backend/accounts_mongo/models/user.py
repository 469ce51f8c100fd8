"""
User model for the accounts users collection.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class EmailRecord(BaseModel):
    """Email address attached to a user."""
    address: str = Field(..., description="Lowercase email address")
    verified: bool = Field(default=False, description="Whether the address has been verified")


class ResetPasswordToken(BaseModel):
    """Pending password reset (or enrollment) request."""
    token: str
    address: str
    when: Any = Field(None, description="Value of the store clock when the token was added")
    reason: Optional[str] = Field(None, description="Flow tag, e.g. 'reset' or 'enroll'")


class EmailVerificationToken(BaseModel):
    """Pending email verification request."""
    token: str
    address: str
    when: Any = None


class PasswordService(BaseModel):
    """services.password sub-document."""
    bcrypt: Optional[str] = Field(None, description="Stored password hash")
    reset: list[ResetPasswordToken] = Field(default_factory=list)

    class Config:
        extra = "allow"


class EmailService(BaseModel):
    """services.email sub-document."""
    verification_tokens: list[EmailVerificationToken] = Field(
        default_factory=list,
        alias="verificationTokens",
    )

    class Config:
        populate_by_name = True
        extra = "allow"


class Services(BaseModel):
    """Authentication services attached to a user."""
    password: Optional[PasswordService] = None
    email: Optional[EmailService] = None

    class Config:
        extra = "allow"


class User(BaseModel):
    """
    User document model for the accounts users collection.

    Timestamp fields have configurable names and are kept as extra fields.
    """
    id: str = Field(..., alias="_id", description="MongoDB _id as string")
    username: Optional[str] = Field(None, description="Unique username")
    emails: list[EmailRecord] = Field(default_factory=list)
    services: Services = Field(default_factory=Services)

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, value: Any) -> str:
        return str(value)

    class Config:
        populate_by_name = True
        extra = "allow"

    @property
    def password_hash(self) -> Optional[str]:
        """Stored password hash, if any."""
        if self.services.password is None:
            return None
        return self.services.password.bcrypt

    def find_email(self, address: str) -> Optional[EmailRecord]:
        """Return the email record matching `address` case-insensitively."""
        address = address.lower()
        for email in self.emails:
            if email.address == address:
                return email
        return None
