"""Conversion of computer-use and local shell tool calls into input parameters.

Calls and parameters are plain dictionaries keyed by the wire field names.
"""

from __future__ import annotations

from typing import Any, Mapping

__all__ = [
    "computer_action_to_param",
    "computer_call_to_param",
    "safety_check_to_param",
    "local_shell_call_to_param",
]

Item = Mapping[str, Any]
Param = dict[str, Any]


def _point(action: Item) -> Param:
    return {"x": action.get("x", 0), "y": action.get("y", 0)}


def computer_action_to_param(action: Item) -> Param:
    """Convert a computer action, keeping only the fields its type uses."""
    kind = action.get("type")
    match kind:
        case "click":
            return {"button": action.get("button", ""), **_point(action), "type": "click"}
        case "double_click":
            return {**_point(action), "type": "double_click"}
        case "drag":
            return {
                "path": [_point(step) for step in action.get("path") or ()],
                "type": "drag",
            }
        case "keypress":
            return {"keys": list(action.get("keys") or ()), "type": "keypress"}
        case "move":
            return {**_point(action), "type": "move"}
        case "screenshot":
            return {"type": "screenshot"}
        case "scroll":
            return {
                "scroll_x": action.get("scroll_x", 0),
                "scroll_y": action.get("scroll_y", 0),
                **_point(action),
                "type": "scroll",
            }
        case "type":
            return {"text": action.get("text", ""), "type": "type"}
        case "wait":
            return {"type": "wait"}
    raise ValueError(f"unexpected computer action type {kind!r}")


def safety_check_to_param(check: Item) -> Param:
    """Convert a pending safety check."""
    return {
        "id": check.get("id", ""),
        "code": check.get("code", ""),
        "message": check.get("message", ""),
    }


def computer_call_to_param(call: Item) -> Param:
    """Convert a computer tool call with its action and pending safety checks."""
    return {
        "id": call.get("id", ""),
        "action": computer_action_to_param(call.get("action") or {}),
        "call_id": call.get("call_id", ""),
        "pending_safety_checks": [
            safety_check_to_param(check)
            for check in call.get("pending_safety_checks") or ()
        ],
        "status": call.get("status", ""),
        "type": call.get("type", "computer_call"),
    }


def local_shell_call_to_param(call: Item) -> Param:
    """Convert a local shell call output item into an input item parameter."""
    action = call.get("action") or {}
    return {
        "id": call.get("id", ""),
        "action": {
            "command": list(action.get("command") or ()),
            "env": dict(action.get("env") or {}),
            "timeout_ms": action.get("timeout_ms"),
            "user": action.get("user"),
            "working_directory": action.get("working_directory"),
            "type": action.get("type", "exec"),
        },
        "call_id": call.get("call_id", ""),
        "status": call.get("status", ""),
        "type": call.get("type", "local_shell_call"),
    }