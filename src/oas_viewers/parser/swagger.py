"""OpenAPI / Swagger document parser.

Parses OpenAPI 3.x and Swagger 2.0 documents into ApiDocument models.
Only the parts the viewer builder needs are kept: operations, their
security requirements and the declared security schemes.
"""

from pathlib import Path

from .base import ApiDocument, ApiOperation
from .detect import detect_format, load_document

METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")


def parse_openapi(file_path: Path) -> ApiDocument:
    """Parse an OpenAPI/Swagger file into an ApiDocument."""
    return parse_document(load_document(file_path))


def parse_document(doc: dict) -> ApiDocument:
    """Parse an already loaded OpenAPI/Swagger dict into an ApiDocument."""
    fmt = detect_format(doc)
    # keys present with a null value count as absent
    info = doc.get("info") or {}
    default_security = doc.get("security") or []

    operations = []
    for path, methods in (doc.get("paths") or {}).items():
        for method, operation in (methods or {}).items():
            if method.upper() not in METHODS:
                continue
            operation = operation or {}
            security = operation.get("security")

            operations.append(
                ApiOperation(
                    operation_id=operation.get("operationId") or f"{method} {path}",
                    method=method.upper(),
                    path=path,
                    summary=operation.get("summary") or "",
                    security=_requirement_names(default_security if security is None else security),
                )
            )

    return ApiDocument(
        title=info.get("title") or "",
        version=str(info.get("version") or ""),
        security_schemes=_security_schemes(doc, fmt),
        operations=operations,
    )


def _requirement_names(requirements: list[dict]) -> list[str]:
    names = []
    for requirement in requirements:
        for name in requirement:
            if name not in names:
                names.append(name)
    return names


def _security_schemes(doc: dict, fmt: str) -> dict[str, dict]:
    if fmt == "openapi":
        return dict((doc.get("components") or {}).get("securitySchemes") or {})

    # Swagger 2.0 calls basic auth "basic"; OpenAPI 3 spells it http/basic
    result = {}
    for name, definition in (doc.get("securityDefinitions") or {}).items():
        if definition.get("type") == "basic":
            definition = {**definition, "type": "http", "scheme": "basic"}
        result[name] = definition
    return result
