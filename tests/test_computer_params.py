import pytest

from agentcore.computer_params import (
    computer_action_to_param,
    computer_call_to_param,
    local_shell_call_to_param,
    safety_check_to_param,
)


def test_click_keeps_button_and_position():
    action = {"type": "click", "button": "left", "x": 10, "y": 20, "text": "ignored"}
    result = computer_action_to_param(action)
    assert result == {"button": "left", "x": 10, "y": 20, "type": "click"}


@pytest.mark.parametrize("kind", ["double_click", "move"])
def test_point_actions_keep_only_position(kind):
    action = {"type": kind, "x": 3, "y": 4, "button": "right", "keys": ["a"]}
    result = computer_action_to_param(action)
    assert result == {"x": 3, "y": 4, "type": kind}


def test_drag_path_drops_extra_fields():
    path = [{"x": 1, "y": 2, "extra": True}, {"x": 5, "y": 6}]
    result = computer_action_to_param({"type": "drag", "path": path, "x": 9})
    assert result["type"] == "drag"
    assert result["path"] == [{"x": p["x"], "y": p["y"]} for p in path]
    assert "x" not in result


def test_keypress_and_type_actions():
    keys = ["ctrl", "c"]
    assert computer_action_to_param({"type": "keypress", "keys": keys}) == {
        "keys": keys,
        "type": "keypress",
    }
    assert computer_action_to_param({"type": "type", "text": "hello"}) == {
        "text": "hello",
        "type": "type",
    }


def test_scroll_keeps_offsets_and_position():
    action = {"type": "scroll", "scroll_x": 7, "scroll_y": -8, "x": 1, "y": 2}
    result = computer_action_to_param(action)
    assert result == {k: action[k] for k in ("scroll_x", "scroll_y", "x", "y", "type")}


@pytest.mark.parametrize("kind", ["screenshot", "wait"])
def test_fieldless_actions(kind):
    assert computer_action_to_param({"type": kind, "x": 1, "text": "t"}) == {"type": kind}


def test_unknown_action_type_raises():
    with pytest.raises(ValueError, match="teleport"):
        computer_action_to_param({"type": "teleport"})


def test_safety_check_fields():
    check = {"id": "sc1", "code": "malicious", "message": "careful", "extra": 1}
    assert safety_check_to_param(check) == {
        "id": "sc1",
        "code": "malicious",
        "message": "careful",
    }


def test_computer_call_converts_nested_parts():
    call = {
        "id": "cc1",
        "call_id": "call-1",
        "status": "completed",
        "type": "computer_call",
        "action": {"type": "wait", "x": 5},
        "pending_safety_checks": [{"id": "a", "code": "b", "message": "c"}],
    }
    result = computer_call_to_param(call)
    assert result["id"] == call["id"]
    assert result["call_id"] == call["call_id"]
    assert result["status"] == call["status"]
    assert result["type"] == "computer_call"
    assert result["action"] == computer_action_to_param(call["action"])
    assert result["pending_safety_checks"] == [
        safety_check_to_param(c) for c in call["pending_safety_checks"]
    ]


def test_computer_call_with_bad_action_raises():
    with pytest.raises(ValueError):
        computer_call_to_param({"id": "x", "action": {"type": "nope"}})


def test_local_shell_call():
    call = {
        "id": "ls1",
        "call_id": "call-9",
        "status": "in_progress",
        "type": "local_shell_call",
        "action": {
            "command": ["ls", "-l"],
            "env": {"HOME": "/tmp"},
            "timeout_ms": 1000,
            "user": "user",
            "working_directory": "/tmp",
            "type": "exec",
        },
    }
    result = local_shell_call_to_param(call)
    assert result["action"] == call["action"]
    assert result["action"] is not call["action"]
    assert {k: result[k] for k in ("id", "call_id", "status", "type")} == {
        k: call[k] for k in ("id", "call_id", "status", "type")
    }


def test_local_shell_call_copies_command_list():
    command = ["echo", "hi"]
    result = local_shell_call_to_param({"action": {"command": command, "type": "exec"}})
    result["action"]["command"].append("more")
    assert command == ["echo", "hi"]