"""Conversion of response output objects into request input parameters.

Response objects and parameters are plain dictionaries keyed by the wire
field names; the ``type`` field tells the variants of a union apart.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

__all__ = [
    "output_message_to_param",
    "output_content_to_param",
    "annotation_to_param",
    "function_tool_call_to_param",
    "reasoning_item_to_param",
    "file_search_call_to_param",
    "file_search_result_to_param",
    "web_search_call_to_param",
]

Item = Mapping[str, Any]
Param = dict[str, Any]


def _convert_all(fn: Callable[[Item], Param], items: Iterable[Item] | None) -> list[Param]:
    return [fn(item) for item in items or ()]


def _put_if_set(target: Param, key: str, value: Any) -> None:
    # Zero values (empty string, 0, False, None) count as absent.
    if value:
        target[key] = value


def output_message_to_param(message: Item) -> Param:
    """Convert an output message into an input message parameter."""
    return {
        "id": message.get("id", ""),
        "content": _convert_all(output_content_to_param, message.get("content")),
        "status": message.get("status", ""),
        "role": message.get("role", "assistant"),
        "type": "message",
    }


def output_content_to_param(content: Item) -> Param:
    """Convert one part of an output message's content."""
    kind = content.get("type")
    if kind == "output_text":
        return {
            "annotations": _convert_all(annotation_to_param, content.get("annotations")),
            "text": content.get("text", ""),
            "type": "output_text",
        }
    if kind == "refusal":
        return {"refusal": content.get("refusal", ""), "type": "refusal"}
    raise ValueError(f"unexpected output message content type {kind!r}")


def annotation_to_param(annotation: Item) -> Param:
    """Convert an output text annotation."""
    kind = annotation.get("type")
    if kind in ("file_citation", "file_path"):
        return {
            "file_id": annotation.get("file_id", ""),
            "index": annotation.get("index", 0),
            "type": kind,
        }
    if kind == "url_citation":
        return {
            "end_index": annotation.get("end_index", 0),
            "start_index": annotation.get("start_index", 0),
            "title": annotation.get("title", ""),
            "url": annotation.get("url", ""),
            "type": "url_citation",
        }
    raise ValueError(f"unexpected output text annotation type {kind!r}")


def function_tool_call_to_param(call: Item) -> Param:
    """Convert a function tool call; an empty id or status is left out."""
    param: Param = {
        "arguments": call.get("arguments", ""),
        "call_id": call.get("call_id", ""),
        "name": call.get("name", ""),
        "type": "function_call",
    }
    _put_if_set(param, "id", call.get("id"))
    _put_if_set(param, "status", call.get("status"))
    return param


def reasoning_item_to_param(item: Item) -> Param:
    """Convert a reasoning item together with its summary texts."""
    param: Param = {
        "id": item.get("id", ""),
        "summary": [
            {"text": part.get("text", ""), "type": "summary_text"}
            for part in item.get("summary") or ()
        ],
        "type": "reasoning",
    }
    _put_if_set(param, "status", item.get("status"))
    return param


def file_search_call_to_param(call: Item) -> Param:
    """Convert a file search tool call and its results."""
    param: Param = {
        "id": call.get("id", ""),
        "queries": list(call.get("queries") or ()),
        "status": call.get("status", ""),
        "type": "file_search_call",
    }
    results = call.get("results")
    if results is not None:
        param["results"] = _convert_all(file_search_result_to_param, results)
    return param


def _attribute_value(key: str, value: Any) -> Any:
    if value is not None and not isinstance(value, (str, bool, int, float)):
        raise TypeError(
            f"file search attribute {key!r} must be a string, number or boolean, "
            f"not {type(value).__name__}"
        )
    # A zero-valued attribute carries no value.
    return value if value else None


def file_search_result_to_param(result: Item) -> Param:
    """Convert one file search result; zero-valued fields are left out."""
    param: Param = {}
    for key in ("file_id", "filename", "score", "text"):
        _put_if_set(param, key, result.get(key))
    attributes = result.get("attributes")
    if attributes is not None:
        param["attributes"] = {
            key: _attribute_value(key, value) for key, value in attributes.items()
        }
    return param


def web_search_call_to_param(call: Item) -> Param:
    """Convert a web search tool call."""
    return {
        "id": call.get("id", ""),
        "status": call.get("status", ""),
        "type": "web_search_call",
    }