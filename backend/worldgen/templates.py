"""Deterministic text templates.

Syntax:
    {path.to.value}          variable lookup in the context
    {$a|b|c}                 seeded choice
    {?cond:yes|no}           conditional; cond is a path, ``path === 'v'``
                             or ``path.includes('v')``
    {@name}                  render ``context["templates"][name]``
    {#north.biome}           lookup inside a directional sub-context

Unclosed or malformed tokens are emitted as literal text.  The same
template, context and seed always render the same string.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from .rng import stream

logger = logging.getLogger(__name__)

MAX_REFERENCE_DEPTH = 10

_EQUALS_RE = re.compile(r"""^(.+?)\s*===\s*['"](.+?)['"]$""")
_INCLUDES_RE = re.compile(r"""^(.+?)\.includes\(['"](.+?)['"]\)$""")


@dataclass
class Text:
    value: str


@dataclass
class Variable:
    path: str


@dataclass
class Choice:
    options: List[str]


@dataclass
class Conditional:
    condition: str
    true_value: str
    false_value: Optional[str] = None


@dataclass
class Reference:
    name: str


@dataclass
class Directional:
    direction: str
    path: str


Token = Union[Text, Variable, Choice, Conditional, Reference, Directional]


def parse(template: str) -> List[Token]:
    """Split a template into tokens."""
    tokens: List[Token] = []
    position = 0
    while position < len(template):
        open_brace = template.find("{", position)
        if open_brace == -1:
            tokens.append(Text(template[position:]))
            break
        if open_brace > position:
            tokens.append(Text(template[position:open_brace]))
        close_brace = _matching_close(template, open_brace)
        if close_brace == -1:
            tokens.append(Text(template[open_brace:]))
            break
        tokens.append(_parse_token(template[open_brace + 1 : close_brace]))
        position = close_brace + 1
    return tokens


def _matching_close(template: str, open_index: int) -> int:
    depth = 1
    for i in range(open_index + 1, len(template)):
        if template[i] == "{":
            depth += 1
        elif template[i] == "}":
            depth -= 1
            if depth == 0:
                return i
    return -1


def _top_level_pipe(text: str) -> int:
    depth = 0
    for i, ch in enumerate(text):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        elif ch == "|" and depth == 0:
            return i
    return -1


def _parse_token(content: str) -> Token:
    if not content:
        return Text("")
    first = content[0]
    if first == "$":
        return Choice([option.strip() for option in content[1:].split("|")])
    if first == "?":
        colon = content.find(":")
        if colon == -1:
            return Text("{" + content + "}")
        condition = content[1:colon].strip()
        rest = content[colon + 1 :]
        pipe = _top_level_pipe(rest)
        if pipe == -1:
            return Conditional(condition, rest)
        return Conditional(condition, rest[:pipe], rest[pipe + 1 :])
    if first == "@":
        return Reference(content[1:].strip())
    if first == "#":
        dot = content.find(".")
        if dot == -1:
            return Text("{" + content + "}")
        return Directional(content[1:dot].strip(), content[dot + 1 :].strip())
    return Variable(content.strip())


def render(template: str, context: Optional[Dict[str, Any]] = None, seed: int = 0) -> str:
    """Render ``template`` against ``context`` using ``seed`` for choices."""
    return _render(template, context or {}, seed, 0)


def _render(template: str, context: Dict[str, Any], seed: int, depth: int) -> str:
    if depth >= MAX_REFERENCE_DEPTH:
        logger.warning(f"Template reference depth {MAX_REFERENCE_DEPTH} exceeded")
        return "[MAX_DEPTH_EXCEEDED]"

    rng = stream(seed)
    parts: List[str] = []
    for token in parse(template):
        if isinstance(token, Text):
            parts.append(token.value)
        elif isinstance(token, Variable):
            value = resolve_path(context, token.path)
            parts.append("" if value is None else str(value))
        elif isinstance(token, Choice):
            parts.append(token.options[int(rng() * len(token.options))])
        elif isinstance(token, Conditional):
            if evaluate_condition(token.condition, context):
                parts.append(_render(token.true_value, context, seed, depth + 1))
            elif token.false_value is not None:
                parts.append(_render(token.false_value, context, seed, depth + 1))
        elif isinstance(token, Reference):
            referenced = (context.get("templates") or {}).get(token.name)
            if referenced is None:
                logger.warning(f"Template reference not found: {token.name}")
                parts.append(f"[@{token.name}]")
            else:
                parts.append(_render(referenced, context, seed + len(token.name), depth + 1))
        elif isinstance(token, Directional):
            sub_context = context.get(token.direction)
            if isinstance(sub_context, dict):
                value = resolve_path(sub_context, token.path)
                parts.append("" if value is None else str(value))
    return "".join(parts)


def resolve_path(context: Any, path: str) -> Any:
    """Follow a dotted path through nested dicts and attributes."""
    current = context
    for part in path.split("."):
        if current is None:
            return None
        if isinstance(current, dict):
            current = current.get(part)
        else:
            current = getattr(current, part, None)
    return current


def evaluate_condition(condition: str, context: Dict[str, Any]) -> bool:
    match = _EQUALS_RE.match(condition)
    if match:
        path, expected = match.groups()
        return resolve_path(context, path.strip()) == expected
    match = _INCLUDES_RE.match(condition)
    if match:
        path, needle = match.groups()
        haystack = resolve_path(context, path.strip())
        return isinstance(haystack, (list, tuple)) and needle in haystack
    return bool(resolve_path(context, condition.strip()))
