"""Conversions between response output items, messages and request inputs.

Items are plain dictionaries keyed by the wire field names.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from agentcore.computer_params import computer_call_to_param
from agentcore.message_params import (
    file_search_call_to_param,
    function_tool_call_to_param,
    output_message_to_param,
    reasoning_item_to_param,
    web_search_call_to_param,
)

__all__ = [
    "output_item_to_input",
    "message_output_item",
    "output_message_from_item",
    "content_from_stream_part",
    "text_parts_to_assistant_content",
    "reasoning_from_param",
]

Item = Mapping[str, Any]
Param = dict[str, Any]

_CONVERTERS = {
    "message": output_message_to_param,
    "file_search_call": file_search_call_to_param,
    "function_call": function_tool_call_to_param,
    "web_search_call": web_search_call_to_param,
    "computer_call": computer_call_to_param,
    "reasoning": reasoning_item_to_param,
}


def output_item_to_input(item: Item) -> Param:
    """Turn an output item from a response into an item for the next request."""
    kind = item.get("type")
    try:
        convert = _CONVERTERS[kind]
    except KeyError:
        raise ValueError(f"unexpected output item type {kind!r}") from None
    return convert(item)


def _message_fields(source: Item) -> Param:
    return {
        "id": source.get("id", ""),
        "content": list(source.get("content") or ()),
        "role": source.get("role", "assistant"),
        "status": source.get("status", ""),
        "type": "message",
    }


def message_output_item(message: Item) -> Param:
    """Wrap an output message as a generic output item."""
    return _message_fields(message)


def output_message_from_item(item: Item) -> Param:
    """Read a generic output item as an output message."""
    return _message_fields(item)


def content_from_stream_part(part: Item) -> Param:
    """Turn a content part from a stream event into output message content."""
    return {
        key: part[key]
        for key in ("annotations", "text", "type", "refusal")
        if key in part
    }


def text_parts_to_assistant_content(parts: Iterable[Item] | None) -> list[Param]:
    """Turn text content parts into assistant message content parts."""
    return [{"text": part.get("text", ""), "type": "text"} for part in parts or ()]


def reasoning_from_param(reasoning: Item) -> Param:
    """Turn a reasoning request parameter into a reasoning setting."""
    return {"effort": reasoning.get("effort"), "summary": reasoning.get("summary")}