"""Create the viewers for one root type (query or mutation).

Every protocol gets a viewer named after its auth-kind; one extra AnyAuth
viewer wraps the fields of all protocols together.
"""

import logging

from graphql import GraphQLField

from oas_viewers.auth.any_auth import build_any_auth_viewer
from oas_viewers.auth.classifier import classify
from oas_viewers.auth.names import NameAllocator
from oas_viewers.auth.viewer import Viewer, build_viewer
from oas_viewers.parser.base import ApiDocument

logger = logging.getLogger(__name__)

QUERY_ANY_AUTH_NAME = "viewerAnyAuth"
MUTATION_ANY_AUTH_NAME = "mutationViewerAnyAuth"


def create_and_load_viewer(
    fields_by_protocol: dict[str, dict[str, GraphQLField]],
    data,
    is_mutation: bool = False,
    documents: list[ApiDocument] | None = None,
) -> dict[str, Viewer]:
    """Build one viewer per protocol plus the AnyAuth viewer.

    `fields_by_protocol` maps protocol names (keys of `data.security`) to the
    operation fields they authenticate, in the order viewers are created.
    Returns {viewer name: Viewer}.
    """
    documents = data.documents if documents is None else documents
    allocator = NameAllocator(reserved={QUERY_ANY_AUTH_NAME, MUTATION_ANY_AUTH_NAME})
    prefix = "mutation viewer" if is_mutation else "viewer"

    results: dict[str, Viewer] = {}
    # a field offered by several protocols is kept from the last one
    any_auth_fields: dict[str, GraphQLField] = {}

    for protocol_name, fields in fields_by_protocol.items():
        any_auth_fields.update(fields)

        kind = classify(data.security[protocol_name], data.diagnostics)
        viewer_name = allocator.allocate(kind, f"{prefix} {kind}")
        logger.debug("Viewer %s created for protocol %s", viewer_name, protocol_name)

        results[viewer_name] = build_viewer(viewer_name, protocol_name, kind, fields, data, documents)

    any_auth_name = MUTATION_ANY_AUTH_NAME if is_mutation else QUERY_ANY_AUTH_NAME
    results[any_auth_name] = build_any_auth_viewer(any_auth_name, any_auth_fields, data)

    return results
