"""Jinja2 rendering for prompt sections.

Sections render with StrictUndefined: a variable the context does not
provide is an error, never a blank.
"""

from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import Any

from jinja2 import Environment, StrictUndefined, Template, meta

SECTION_HEADERS = {
    "context": "--- CURRENT CONTEXT ---",
    "task": "--- YOUR TASK ---",
    "constraints": "--- CONSTRAINTS ---",
    "output_format": "--- EXPECTED OUTPUT ---",
}


def format_money(value: Any) -> str:
    """Render integer cents as dollars ("$1,200.50")."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return str(value)
    return f"${value / 100:,.2f}"


def format_args(value: Any) -> str:
    """Render a mapping as "key=value" pairs, skipping empty values."""
    if not isinstance(value, Mapping):
        return str(value)
    parts = [f"{key}={item}" for key, item in value.items() if item not in (None, "", [], {})]
    return ", ".join(parts) if parts else "none"


PROMPT_ENVIRONMENT = Environment(
    undefined=StrictUndefined,
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)
PROMPT_ENVIRONMENT.filters["money"] = format_money
PROMPT_ENVIRONMENT.filters["format_args"] = format_args


@lru_cache(maxsize=512)
def compile_section(source: str) -> Template:
    """Compile a section once; raises jinja2.TemplateSyntaxError when invalid."""
    return PROMPT_ENVIRONMENT.from_string(source)


def referenced_variables(source: str) -> set[str]:
    """Top-level variables a section reads (loop variables excluded)."""
    return set(meta.find_undeclared_variables(PROMPT_ENVIRONMENT.parse(source)))


def render_section(source: str, context: Mapping[str, Any]) -> str:
    """Render a section; raises jinja2.UndefinedError on a missing variable."""
    if not source:
        return ""
    return compile_section(source).render(**context).strip()


def cap_arrays(context: Mapping[str, Any], max_items: int) -> dict[str, Any]:
    """Copy of the context with every list value cut to `max_items`."""
    return {
        key: list(value[:max_items]) if isinstance(value, list | tuple) else value
        for key, value in context.items()
    }


def assemble_prompt(rendered: Iterable[tuple[str, str]]) -> str:
    """Join rendered sections under their headers, skipping empty ones."""
    parts: list[str] = []
    for name, text in rendered:
        if not text:
            continue
        header = SECTION_HEADERS.get(name)
        parts.append(f"{header}\n{text}" if header else text)
    return "\n\n".join(parts)


class Placeholder:
    """Stand-in value for previews.

    Prints as "[path]", is truthy, iterates once and answers any attribute
    or item lookup with a nested placeholder, so loops and conditionals in
    a template render their full shape.
    """

    __slots__ = ("_path",)

    def __init__(self, path: str) -> None:
        self._path = path

    def __str__(self) -> str:
        return f"[{self._path}]"

    __repr__ = __str__

    def __getattr__(self, name: str) -> "Placeholder":
        if name.startswith("__"):
            raise AttributeError(name)
        return Placeholder(f"{self._path}.{name}")

    def __getitem__(self, key: Any) -> "Placeholder":
        return Placeholder(f"{self._path}.{key}")

    def __iter__(self):
        yield Placeholder(f"{self._path}[]")

    def __len__(self) -> int:
        return 1

    def __bool__(self) -> bool:
        return True


def placeholder_context(keys: Iterable[str]) -> dict[str, Placeholder]:
    return {key: Placeholder(key) for key in keys}
