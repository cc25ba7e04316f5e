"""Azure Resource Manager resource id parsing."""

from dataclasses import dataclass

from azure.mgmt.core.tools import is_valid_resource_id, parse_resource_id as _parse_arm_id

from reflector.interfaces.exceptions import ParseError


@dataclass(frozen=True)
class ResourceID:
    """Parsed form of a fully qualified ARM resource id."""

    subscription_id: str
    resource_group: str
    namespace: str
    resource_type: str
    resource_name: str


def parse_resource_id(resource_id: str) -> ResourceID:
    """Parse an ARM resource id.

    Accepts ids of the form
    ``/subscriptions/{sub}/resourceGroups/{rg}/providers/{namespace}/{type}/{name}``,
    optionally followed by child resource segments. For child resources
    ``resource_type`` and ``resource_name`` describe the top-level resource.

    Args:
        resource_id: Fully qualified resource id

    Returns:
        ResourceID with every segment populated

    Raises:
        ParseError: If the id is not a well formed ARM resource id
    """
    if not resource_id or not is_valid_resource_id(resource_id):
        raise ParseError(f"invalid resource id format: {resource_id!r}", cluster=resource_id)

    parts = _parse_arm_id(resource_id)
    fields = {
        "subscription_id": parts.get("subscription"),
        "resource_group": parts.get("resource_group"),
        "namespace": parts.get("namespace"),
        "resource_type": parts.get("type"),
        "resource_name": parts.get("name"),
    }
    missing = [key for key, value in fields.items() if not value]
    if missing:
        raise ParseError(
            f"resource id {resource_id!r} is missing {', '.join(missing)}",
            cluster=resource_id,
        )

    return ResourceID(**fields)


def resource_group_from_id(resource_id: str) -> str:
    """Return the resource group a resource lives in.

    Raises:
        ParseError: If the id is not a well formed ARM resource id
    """
    return parse_resource_id(resource_id).resource_group
