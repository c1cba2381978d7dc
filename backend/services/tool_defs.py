"""
Tool definitions for the record UI tools.

Shared between the HTTP listing and dispatch. Each entry is the name,
description and JSON input schema a host advertises to its model.
"""

TOOLS = [
    {
        "name": "record_edit",
        "description": (
            "Show an editable form for one record. Input is the record as text: "
            "the object name on the first line, then one '* Label: value' bullet "
            "per field. Name and Id fields are required."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "text": {
                    "type": "string",
                    "description": "Record text, e.g. 'Acme\\n\\n* Id: 001\\n* Name: Acme'",
                },
            },
            "required": ["text"],
        },
    },
    {
        "name": "record_view_table",
        "description": "Show several records of one type as a table. Each row can be reopened for editing.",
        "input_schema": {
            "type": "object",
            "properties": {
                "records": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "One record text per entry, same format as record_edit",
                },
                "object_type": {
                    "type": "string",
                    "description": "Object type shown as the table title, e.g. 'Account'",
                },
            },
            "required": ["records", "object_type"],
        },
    },
    {
        "name": "record_view_detail",
        "description": (
            "Show one record as a read-only card. Markdown-style header lines "
            "in the text split the fields into sections."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "text": {"type": "string"},
                "object_type": {"type": "string"},
            },
            "required": ["text"],
        },
    },
    {
        "name": "record_view_query_result",
        "description": (
            "Show rows returned by a query. One row renders as a detail card, "
            "several rows as a table."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "object_name": {"type": "string"},
                "rows": {"type": "array", "items": {"type": "object"}},
            },
            "required": ["object_name", "rows"],
        },
    },
]

TOOL_NAMES: list[str] = [tool["name"] for tool in TOOLS]
