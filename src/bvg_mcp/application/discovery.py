"""Conversion of tool parameter models into MCP discovery schemas."""

from typing import Any

from pydantic import BaseModel


def to_discovery_schema(params_model: type[BaseModel]) -> dict[str, Any]:
    """Build the ``inputSchema`` advertised for a tool.

    The JSON Schema pydantic generates already carries types, descriptions,
    bounds, enums, defaults, the required set and ``additionalProperties``.
    Only the titles are dropped: the top-level one is a metadata wrapper and
    the per-property ones repeat the field names.
    """
    schema = params_model.model_json_schema(by_alias=True, mode="validation")
    schema.pop("title", None)
    for prop in schema.get("properties", {}).values():
        prop.pop("title", None)
    return schema
