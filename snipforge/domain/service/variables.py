"""Variable placeholders in snippet bodies.

A placeholder is written ``{{name}}``. Names may contain spaces and any
character except ``}``. The body is scanned once, left to right, by a small
state machine:

- LITERAL: copy text until ``{{`` is seen, then switch to PLACEHOLDER.
- PLACEHOLDER: scan for the first ``}``. If it starts ``}}`` and the name is
  non-empty, emit a placeholder and return to LITERAL. Otherwise the span was
  literal text and scanning resumes in LITERAL at that ``}``. Any ``{{``
  between the opening and that ``}`` would stop at the same ``}``, so no
  character is scanned twice.

There is no nesting: ``{{{a}}`` is a placeholder named ``{a``. An
unterminated ``{{`` stays literal text.

Examples:
    extract_variables("docker exec -it {{container name}} {{command}}")
    # ["container name", "command"]

    substitute("ssh {{username}}@{{server address}}", {"username": "al"})
    # "ssh al@{{server address}}"
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

OPEN = "{{"
CLOSE = "}}"


class _State(Enum):
    LITERAL = "literal"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class Literal:
    """Plain text between placeholders."""

    text: str

    @property
    def raw(self) -> str:
        return self.text


@dataclass(frozen=True)
class Placeholder:
    """A ``{{name}}`` span."""

    raw: str  # Full span including braces
    content: str  # Text between the braces, untrimmed

    @property
    def name(self) -> str:
        return self.content.strip()


Token = Literal | Placeholder


def tokenize(body: str) -> list[Token]:
    """Split a body into literal and placeholder tokens.

    Joining ``token.raw`` for every token reproduces ``body`` exactly.
    """
    tokens: list[Token] = []
    state = _State.LITERAL
    literal_start = 0
    open_at = 0
    i = 0
    n = len(body)

    while i < n:
        if state is _State.LITERAL:
            if body.startswith(OPEN, i):
                state = _State.PLACEHOLDER
                open_at = i
                i += len(OPEN)
            else:
                i += 1
            continue

        if body[i] != "}":
            i += 1
            continue

        if i > open_at + len(OPEN) and body.startswith(CLOSE, i):
            if open_at > literal_start:
                tokens.append(Literal(body[literal_start:open_at]))
            end = i + len(CLOSE)
            tokens.append(Placeholder(raw=body[open_at:end], content=body[open_at + len(OPEN) : i]))
            literal_start = i = end
        state = _State.LITERAL

    if literal_start < n:
        tokens.append(Literal(body[literal_start:]))
    return tokens


def extract_variables(body: str) -> list[str]:
    """Distinct placeholder names in order of first occurrence.

    Names are trimmed; placeholders whose name is blank are skipped.
    """
    names: dict[str, None] = {}
    for token in tokenize(body):
        if isinstance(token, Placeholder) and token.name:
            names.setdefault(token.name, None)
    return list(names)


def substitute(body: str, values: Mapping[str, str]) -> str:
    """Replace placeholders whose trimmed name has a value.

    Placeholders without a value are left verbatim, so unresolved variables
    stay visible. Non-placeholder text is never changed.
    """
    parts = []
    for token in tokenize(body):
        if isinstance(token, Placeholder) and token.name in values:
            parts.append(values[token.name])
        else:
            parts.append(token.raw)
    return "".join(parts)


def has_variables(body: str) -> bool:
    """Whether the body contains at least one well-formed placeholder."""
    return any(isinstance(token, Placeholder) for token in tokenize(body))
