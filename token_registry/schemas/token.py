"""
Pydantic schema for the token record.

This is both the stored value in the token map and the JSON body returned
by register-token and get-token.
"""

from pydantic import BaseModel, ConfigDict, Field


class TokenRecord(BaseModel):
    """Token metadata keyed by ``id``."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        description="Base-10 integer literal of arbitrary size, echoed verbatim",
        examples=["42", "115792089237316195423570985008687907853269984665640564039457584007913129639935"],
    )
    name: str = Field(default="", description="Free-text token name")
    description: str = Field(default="", description="Free-text token description")
    external_url: str = Field(
        default="",
        description="Free-text external link (not validated as a URL)",
    )
    image: str = Field(
        ...,
        description="Fully-qualified URL of the stored image",
        examples=["https://example.com/images/0b7e3a52-5f4c-4d0e-9a43-6c1b1d0f2f10.png"],
    )
