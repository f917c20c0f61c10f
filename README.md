# agentcore

Small building blocks for programs that drive LLM agents over a
responses-style API. Items and parameters are plain dictionaries keyed
by the wire field names, and the `type` field tells the variants apart.

- `agentcore.usage`: the `Usage` dataclass counts requests and input,
  output and total tokens, with `InputTokensDetails.cached_tokens` and
  `OutputTokensDetails.reasoning_tokens`. `Usage.add(other)` adds another
  record's counts in place. `usage_context(usage)` is a context manager
  that makes a record current for the block; `current_usage()` returns the
  current record, or `None` outside any `usage_context`.
- `agentcore.transforms`: `transform_string_function_style(name)` replaces
  every character other than ASCII letters and digits with `_` and lower-cases
  the result.
- `agentcore.message_params`: converts output messages and their content
  and annotations, function tool calls, reasoning items, file search calls
  and results, and web search calls into input parameters.
- `agentcore.computer_params`: converts computer tool calls, their actions
  and pending safety checks, and local shell calls.
- `agentcore.output_items`: `output_item_to_input(item)` picks the right
  conversion for an output item of type `message`, `file_search_call`,
  `function_call`, `web_search_call`, `computer_call` or `reasoning`.
  It also has helpers to wrap or read messages as generic output items
  (`message_output_item`, `output_message_from_item`), to take content from
  a stream event part (`content_from_stream_part`), to turn text parts into
  assistant content (`text_parts_to_assistant_content`) and to turn a
  reasoning parameter into a reasoning setting (`reasoning_from_param`).

## Install

```
pip install agentcore
```

## Usage accounting

```python
from agentcore.usage import Usage, usage_context, current_usage

total = Usage()
with usage_context(total):
    current_usage().add(Usage(requests=1, input_tokens=12, output_tokens=30, total_tokens=42))

print(total.requests, total.total_tokens)  # 1 42
```

## Function-style names

```python
from agentcore.transforms import transform_string_function_style

transform_string_function_style("Foo Bar 123?Baz Quux!")  # "foo_bar_123_baz_quux_"
```

## Feeding model output back as input

```python
from agentcore.output_items import output_item_to_input

item = {
    "type": "function_call",
    "id": "fc_1",
    "call_id": "call_1",
    "name": "lookup",
    "arguments": "{}",
    "status": "completed",
}
next_input = output_item_to_input(item)
```

Local shell calls are not dispatched by `output_item_to_input`; convert
them with `agentcore.computer_params.local_shell_call_to_param`.

An item whose type, content type, annotation type or computer action type
is not recognised raises `ValueError`. A file search attribute that is not
a string, number or boolean raises `TypeError`.

## What it does not do

The package only shapes data. It has no API client, makes no network
requests, and does not run agents, tools or handoffs; those are left to
the program that uses it.

## Tests

```
pip install -e ".[test]"
pytest
```