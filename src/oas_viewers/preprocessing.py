"""Preprocessing: derive protocol data from the parsed API descriptions.

Each supported security scheme becomes a SecurityScheme carrying the
credential parameters its viewer asks for and the JSON schema its AnyAuth
argument is built from.
"""

import logging
from dataclasses import dataclass, field

from oas_viewers.config import ViewerOptions
from oas_viewers.diagnostics import Diagnostics
from oas_viewers.parser.base import ApiDocument, ApiOperation, CredentialParam, SchemeKind, SecurityScheme
from oas_viewers.schema.input_types import DefinitionRegistry

logger = logging.getLogger(__name__)


@dataclass
class PreprocessingData:
    """Everything collected from the API descriptions for one schema build."""

    documents: list[ApiDocument]
    options: ViewerOptions
    diagnostics: Diagnostics
    security: dict[str, SecurityScheme] = field(default_factory=dict)
    sane_map: dict[str, str] = field(default_factory=dict)
    definitions: DefinitionRegistry = field(default_factory=DefinitionRegistry)
    # (document index, raw scheme name) -> protocol name
    protocol_names: dict[tuple[int, str], str] = field(default_factory=dict)

    def protocols_for(self, document: ApiDocument, operation: ApiOperation) -> list[str]:
        """Protocol names that may authenticate `operation`."""
        index = self._document_index(document)
        protocols = []
        for raw_name in operation.security:
            protocol = self.protocol_names.get((index, raw_name))
            if protocol is not None and protocol not in protocols:
                protocols.append(protocol)
        return protocols

    def _document_index(self, document: ApiDocument) -> int:
        for index, candidate in enumerate(self.documents):
            if candidate is document:
                return index
        raise ValueError(f"Document '{document.title}' is not part of this build")


def preprocess(
    documents: list[ApiDocument],
    options: ViewerOptions | None = None,
    diagnostics: Diagnostics | None = None,
) -> PreprocessingData:
    """Process the security schemes of every document, in declaration order."""
    options = options or ViewerOptions()
    data = PreprocessingData(
        documents=documents,
        options=options,
        diagnostics=diagnostics or Diagnostics(strict=options.strict),
    )

    for index, document in enumerate(documents):
        for raw_name, definition in document.security_schemes.items():
            scheme = _process_scheme(raw_name, definition, document, data.diagnostics)
            if scheme is None:
                continue

            protocol = raw_name
            if protocol in data.security:
                data.diagnostics.warn("DUPLICATE_SECURITY_SCHEME", raw_name)
                protocol = _free_protocol_name(f"{document.title}_{raw_name}", data.security)

            data.security[protocol] = scheme
            data.protocol_names[(index, raw_name)] = protocol

    logger.info("Preprocessed %d security protocols from %d documents", len(data.security), len(documents))
    return data


def _free_protocol_name(base: str, security: dict[str, SecurityScheme]) -> str:
    candidate, suffix = base, 2
    while candidate in security:
        candidate = f"{base}{suffix}"
        suffix += 1
    return candidate


def _process_scheme(
    raw_name: str, definition: dict, document: ApiDocument, diagnostics: Diagnostics
) -> SecurityScheme | None:
    kind = SchemeKind(type=definition.get("type", ""), scheme=definition.get("scheme"))

    if kind.type == "apiKey":
        location = definition.get("in", "header")
        key_name = definition.get("name", raw_name)
        parameters = {
            "apiKey": CredentialParam(
                name=key_name,
                location=location,
                description=f"API key sent in the {location} '{key_name}'",
            ),
        }
        schema = {
            "type": "object",
            "description": definition.get("description", f"API key credentials for the protocol '{raw_name}'"),
            "properties": {"apiKey": {"type": "string"}},
            "required": ["apiKey"],
        }
    elif kind.type == "http":
        if (kind.scheme or "").lower() == "basic":
            # username before password, the order viewers expose them in
            parameters = {
                "username": CredentialParam(name="username", location="basic"),
                "password": CredentialParam(name="password", location="basic"),
            }
            schema = {
                "type": "object",
                "description": definition.get("description", f"Basic auth credentials for the protocol '{raw_name}'"),
                "properties": {"username": {"type": "string"}, "password": {"type": "string"}},
                "required": ["username", "password"],
            }
        else:
            # the classifier reports unsupported http sub-schemes
            parameters, schema = {}, None
    else:
        diagnostics.warn("UNSUPPORTED_SECURITY_SCHEME", kind.type or raw_name)
        return None

    return SecurityScheme(
        raw_name=raw_name,
        document=document,
        kind=kind,
        parameters=parameters,
        credential_schema=schema,
    )
