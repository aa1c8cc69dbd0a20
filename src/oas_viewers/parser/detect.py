"""Load API description files and detect their format."""

from pathlib import Path

import yaml

from oas_viewers.errors import UnsupportedDocumentError


def load_document(file_path: Path) -> dict:
    """Load a YAML or JSON API description into a dict."""
    text = file_path.read_text(encoding="utf-8")

    # JSON is a subset of YAML, one loader covers both
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise UnsupportedDocumentError(f"Cannot parse {file_path}: {e}", source=str(file_path)) from e

    if not isinstance(data, dict):
        raise UnsupportedDocumentError(f"{file_path} does not contain a mapping", source=str(file_path))
    return data


def detect_format(doc: dict) -> str:
    """Detect the format of a loaded API description.

    Returns: 'openapi' or 'swagger'.
    """
    if str(doc.get("openapi", "")).startswith("3"):
        return "openapi"
    if str(doc.get("swagger", "")).startswith("2"):
        return "swagger"
    raise UnsupportedDocumentError("Document is neither OpenAPI 3.x nor Swagger 2.0")
