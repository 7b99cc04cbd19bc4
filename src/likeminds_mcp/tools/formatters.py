"""Render LikeMinds API payloads as markdown text for tool results.

Both formatters are total: missing or oddly-typed fields are skipped, and
neither function raises.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

NO_RESPONSE = "No response received from LikeMinds AI Agent"
NO_CODE_GENERATED = "Error: No code generated from Flutter API"
NO_CODE_CONTENT = "Error: No code content received from Flutter API"

DEFAULT_CODE_LANGUAGE = "javascript"
DEFAULT_LINK_TITLE = "Documentation"


def _get(obj: Any, key: str, default: Any = None) -> Any:
    """``obj[key]`` if *obj* is a mapping holding a non-null value, else *default*."""
    if not isinstance(obj, Mapping):
        return default
    value = obj.get(key)
    return default if value is None else value


def _list(obj: Any, key: str) -> list[Any]:
    value = _get(obj, key)
    return value if isinstance(value, list) else []


def format_response(response: Any) -> str:
    """Format a ``/ai-agent/query`` reply: answer, code examples, documentation links."""
    if not _get(response, "success"):
        return f"Error: {_get(response, 'message', 'Unknown error occurred')}"

    data = _get(response, "data", {})
    answer = _get(data, "answer", "")
    code_examples = _list(data, "code_examples")
    documentation_links = _list(data, "documentation_links")

    out: list[str] = []
    if answer:
        out.append(f"## Answer\n{answer}")

    if code_examples:
        out.append("\n## Code Examples")
        for example in code_examples:
            language = _get(example, "language", DEFAULT_CODE_LANGUAGE)
            code = _get(example, "code", "")
            description = _get(example, "description", "")
            if description:
                out.append(f"\n### {description}")
            out.append(f"\n```{language}\n{code}\n```")

    if documentation_links:
        out.append("\n## Documentation Links")
        for link in documentation_links:
            title = _get(link, "title", DEFAULT_LINK_TITLE)
            url = _get(link, "url", "")
            out.append(f"- [{title}]({url})")

    return "\n".join(out) if out else NO_RESPONSE


def format_flutter_response(response: Any) -> str:
    """Format an ``/api/ai-query`` reply: generated code plus integration details."""
    try:
        result = _get(response, "result", {})
        choices = _list(result, "choices")
        if not choices:
            return NO_CODE_GENERATED

        content = _get(_get(choices[0], "message"), "content", "")
        if not content:
            return NO_CODE_CONTENT

        out = ["## Generated Flutter Code\n", str(content)]

        metadata = _get(result, "metadata", {})
        if isinstance(metadata, Mapping) and metadata:
            out.append("\n## Integration Details")

            description = _get(metadata, "description", "")
            if description:
                out.append(f"\n### Description\n{description}")

            suggested = _get(metadata, "suggestedInsertion", {})
            file_path_hint = _get(suggested, "filePathHint", "")
            if file_path_hint:
                out.append(f"\n### File Structure\n{file_path_hint}")

            widget_placement = _get(suggested, "widgetPlacement", "")
            if widget_placement:
                out.append(f"\n### Placement Instructions\n{widget_placement}")

            dependencies = _list(suggested, "dependencies")
            if dependencies:
                out.append("\n### Dependencies")
                out.extend(f"- {dep}" for dep in dependencies)

            preconditions = _list(suggested, "preconditions")
            if preconditions:
                out.append("\n### Prerequisites")
                out.extend(f"- {item}" for item in preconditions)

        return "\n".join(out)
    except Exception as exc:
        return f"Error formatting Flutter response: {exc}"
