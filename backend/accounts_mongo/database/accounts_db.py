"""
Users collection layout: credential field paths and indexes.
"""


class Fields:
    """Dotted paths of credential fields on user documents."""
    USERNAME = "username"
    EMAILS = "emails"
    EMAIL_ADDRESS = "emails.address"
    EMAIL_VERIFIED = "emails.$.verified"
    PASSWORD_HASH = "services.password.bcrypt"
    PASSWORD_RESET = "services.password.reset"
    PASSWORD_RESET_TOKEN = "services.password.reset.token"
    VERIFICATION_TOKENS = "services.email.verificationTokens"
    VERIFICATION_TOKEN = "services.email.verificationTokens.token"


# Unique sparse indexes on the users collection: absent fields are not indexed
USER_INDEXES = [
    Fields.USERNAME,
    Fields.EMAIL_ADDRESS,
]
