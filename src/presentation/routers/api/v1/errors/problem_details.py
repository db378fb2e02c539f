"""Problem Details (RFC 7807) response bodies.

Every error response of the API is a ``ProblemDetails`` document. Domain
failures also carry the catalog ``code`` and ``message``; request-shape
failures carry per-field ``errors`` instead.

See https://tools.ietf.org/html/rfc7807
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One rejected request field."""

    field: str = Field(..., description="Dotted path of the offending field")
    code: str = Field(..., description="Pydantic error type, e.g. 'enum'")
    message: str = Field(..., description="Why the value was rejected")


class ProblemDetails(BaseModel):
    """Error document returned with every 4xx/5xx response.

    Example body for an unknown account:

        {
          "type": "https://api.voiceflex.local/errors/VOICEFLEX_0000",
          "title": "Resource Not Found",
          "status": 404,
          "detail": "A resource with this id could not be found.",
          "instance": "/api/v1/accounts/0192.../phonenumbers",
          "code": "VOICEFLEX_0000",
          "message": "A resource with this id could not be found.",
          "trace_id": "550e8400-e29b-41d4-a716-446655440000"
        }
    """

    type: str = Field(
        ...,
        description="Problem type URI under <api_base_url>/errors/",
        examples=["https://api.voiceflex.local/errors/VOICEFLEX_0005"],
    )
    title: str = Field(..., description="Summary of the problem type", examples=["Validation Failed"])
    status: int = Field(..., description="HTTP status of this response", examples=[400])
    detail: str = Field(
        ...,
        description="Explanation of this occurrence",
        examples=["The description must have at least 1 and not more than 1023 characters."],
    )
    instance: str = Field(..., description="Request path", examples=["/api/v1/accounts"])
    code: str | None = Field(None, description="Catalog code (domain failures only)")
    message: str | None = Field(None, description="Catalog message (domain failures only)")
    errors: list[ErrorDetail] | None = Field(None, description="Rejected fields (422 only)")
    trace_id: str | None = Field(None, description="Value of the X-Trace-Id response header")
