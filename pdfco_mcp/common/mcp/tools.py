"""
Tool utilities for MCP servers

Provides utilities for defining, validating and dispatching MCP tools.
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import mcp.types as types
from mcp.shared.exceptions import McpError


@dataclass
class ToolDefinition:
    """Definition of an MCP tool"""
    name: str
    description: str
    input_schema: Dict[str, Any]
    handler: Callable


class ToolRegistry:
    """Registry for managing MCP tools"""

    def __init__(self):
        """Initialize tool registry"""
        self.tools: Dict[str, ToolDefinition] = {}

    def register(self,
                 name: str,
                 description: str,
                 input_schema: Dict[str, Any],
                 handler: Callable):
        """Register a new tool"""
        self.tools[name] = ToolDefinition(
            name=name,
            description=description,
            input_schema=input_schema,
            handler=handler
        )

    def has_tool(self, name: str) -> bool:
        return name in self.tools

    def get_tool_definitions(self) -> List[types.Tool]:
        """Get MCP tool definitions"""
        return [
            types.Tool(
                name=tool_def.name,
                description=tool_def.description,
                inputSchema=tool_def.input_schema
            )
            for tool_def in self.tools.values()
        ]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        """Call a registered tool.

        Raises McpError(METHOD_NOT_FOUND) for undeclared names and
        McpError(INVALID_PARAMS) when a required argument is absent. Errors
        raised by the handler propagate to the caller.
        """
        if not self.has_tool(name):
            raise McpError(types.ErrorData(
                code=types.METHOD_NOT_FOUND,
                message=f"Unknown tool: {name}"
            ))

        arguments = arguments or {}
        is_valid, error = self.validate_arguments(name, arguments)
        if not is_valid:
            raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message=error))

        result = await self.tools[name].handler(arguments)
        if isinstance(result, list) and all(isinstance(r, types.TextContent) for r in result):
            return result
        elif isinstance(result, str):
            return [types.TextContent(type="text", text=result)]
        return [types.TextContent(
            type="text",
            text=json.dumps(result, indent=2, ensure_ascii=False)
        )]

    def validate_arguments(self, tool_name: str, arguments: Dict[str, Any]) -> tuple[bool, str]:
        """Validate tool arguments against schema"""
        if tool_name not in self.tools:
            return False, f"Tool {tool_name} not found"

        schema = self.tools[tool_name].input_schema

        # Presence only; a null value counts as missing
        required_fields = schema.get('required', [])
        missing_fields = [field for field in required_fields if arguments.get(field) is None]
        if missing_fields:
            return False, f"Missing required fields: {', '.join(missing_fields)}"

        properties = schema.get('properties', {})
        for field_name, value in arguments.items():
            field_schema = properties.get(field_name)
            if field_schema and 'type' in field_schema and value is not None:
                if not self._validate_type(value, field_schema['type']):
                    return False, f"Field {field_name} should be of type {field_schema['type']}"

        return True, ""

    def _validate_type(self, value: Any, expected_type: str) -> bool:
        """Validate value against expected JSON schema type"""
        type_mapping = {
            'string': str,
            'number': (int, float),
            'integer': int,
            'boolean': bool,
            'array': list,
            'object': dict
        }

        if expected_type in type_mapping:
            return isinstance(value, type_mapping[expected_type])

        return True  # Unknown type, allow it


def create_simple_tool_schema(required_params: List[str],
                              optional_params: Dict[str, Dict[str, Any]] = None,
                              descriptions: Dict[str, str] = None) -> Dict[str, Any]:
    """Create a simple tool input schema

    Required parameters default to strings; pass their full schema through
    ``optional_params`` to override the type.
    """
    descriptions = descriptions or {}
    schema = {
        "type": "object",
        "properties": {},
    }

    for param in required_params:
        schema["properties"][param] = {"type": "string"}
        if param in descriptions:
            schema["properties"][param]["description"] = descriptions[param]

    if optional_params:
        for param_name, param_config in optional_params.items():
            schema["properties"][param_name] = param_config

    if required_params:
        schema["required"] = list(required_params)

    return schema


def create_url_tool_schema(description: str = "URL of the PDF file",
                           additional_optional: Dict[str, Dict[str, Any]] = None) -> Dict[str, Any]:
    """Create a tool schema for single-document tools (common pattern)"""
    return create_simple_tool_schema(
        ["url"],
        additional_optional,
        descriptions={"url": description},
    )
