# Standard library imports
import re
from typing import Dict

# External package imports
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

# Local application imports
from ...domain.constants import UserFields


NICKNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.\-]{3,30}$")
NAME_MAX_LENGTH = 100
COUNTRY_MAX_LENGTH = 56
PASSWORD_MIN_LENGTH = 8
# bcrypt only accepts inputs up to 72 bytes
PASSWORD_MAX_BYTES = 72


class InvalidJSONBodyError(ValueError):
    """Request body is not a JSON object with string user fields"""


class UserInput(BaseModel):
    """
    DTO for the create/update request body.

    Parsing only checks the JSON shape and strips surrounding whitespace, so
    the stored values are exactly the validated ones. Field rules live in
    ``validate_fields`` so that every violation is reported in one response.
    """
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    nickname: StrictStr = ""
    first_name: StrictStr = ""
    last_name: StrictStr = ""
    password: StrictStr = ""
    email: StrictStr = ""
    country: StrictStr = ""

    def validate_fields(self) -> Dict[str, str]:
        """
        Check every field independently

        Returns:
            Mapping of field name to error message; empty when the input is valid
        """
        errors: Dict[str, str] = {}

        if not self.nickname:
            errors[UserFields.NICKNAME] = "nickname is required"
        elif not NICKNAME_PATTERN.match(self.nickname):
            errors[UserFields.NICKNAME] = (
                "nickname must be 3-30 characters of letters, digits, '_', '.' or '-'"
            )

        for field in (UserFields.FIRST_NAME, UserFields.LAST_NAME):
            value = getattr(self, field)
            if not value:
                errors[field] = f"{field} is required"
            elif len(value) > NAME_MAX_LENGTH:
                errors[field] = f"{field} must be at most {NAME_MAX_LENGTH} characters"

        if not self.password:
            errors[UserFields.PASSWORD] = "password is required"
        elif len(self.password) < PASSWORD_MIN_LENGTH:
            errors[UserFields.PASSWORD] = f"password must be at least {PASSWORD_MIN_LENGTH} characters"
        elif len(self.password.encode("utf-8")) > PASSWORD_MAX_BYTES:
            errors[UserFields.PASSWORD] = f"password must be at most {PASSWORD_MAX_BYTES} bytes"

        if not self.email:
            errors[UserFields.EMAIL] = "email is required"
        else:
            try:
                validate_email(self.email, check_deliverability=False)
            except EmailNotValidError:
                errors[UserFields.EMAIL] = "email is not a valid email address"

        if not self.country:
            errors[UserFields.COUNTRY] = "country is required"
        elif len(self.country) > COUNTRY_MAX_LENGTH:
            errors[UserFields.COUNTRY] = f"country must be at most {COUNTRY_MAX_LENGTH} characters"

        return errors


def parse_user_input(body: bytes) -> UserInput:
    """
    Parse a raw request body into a UserInput

    Args:
        body: Raw HTTP request body

    Returns:
        Populated UserInput (not yet validated)

    Raises:
        InvalidJSONBodyError: If the body is not a JSON object of string fields
    """
    try:
        return UserInput.model_validate_json(body)
    except ValidationError as exception:
        raise InvalidJSONBodyError(str(exception)) from exception


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    nickname: str
    first_name: str
    last_name: str
    email: str
    country: str
