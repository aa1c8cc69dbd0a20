"""Data models for parsed API descriptions and their security schemes.

The parsers turn OpenAPI / Swagger documents into these models; the
preprocessing stage derives one SecurityScheme per declared protocol.
"""

from pydantic import BaseModel, ConfigDict


class SchemeKind(BaseModel):
    """The `type` of a security scheme and, for http schemes, its sub-scheme."""

    model_config = ConfigDict(frozen=True)

    type: str  # apiKey / http / oauth2 / openIdConnect
    scheme: str | None = None  # basic / bearer / digest ...


class CredentialParam(BaseModel):
    """A single credential a viewer asks the caller for."""

    model_config = ConfigDict(frozen=True)

    name: str  # wire name, e.g. the header carrying the key
    location: str  # header / query / cookie / basic
    description: str = ""


class ApiOperation(BaseModel):
    """One operation of an API description, reduced to what the schema needs."""

    operation_id: str
    method: str  # GET / POST / PUT / DELETE / PATCH
    path: str
    summary: str = ""
    security: list[str] = []  # names of the schemes that may authenticate it

    @property
    def is_mutation(self) -> bool:
        return self.method.upper() != "GET"


class ApiDocument(BaseModel):
    """A parsed API description."""

    title: str
    version: str = ""
    security_schemes: dict[str, dict] = {}
    operations: list[ApiOperation] = []


class SecurityScheme(BaseModel):
    """A processed security scheme: one per authentication protocol."""

    model_config = ConfigDict(frozen=True)

    raw_name: str
    document: ApiDocument
    kind: SchemeKind
    parameters: dict[str, CredentialParam] = {}
    credential_schema: dict | None = None
