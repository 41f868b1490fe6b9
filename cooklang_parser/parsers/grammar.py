"""
Cooklang grammar.

A small set of parsing functions over a single source string. Every rule takes
a position, and either returns a node together with the position after it, or
None when the rule does not match at that position. Nodes only hold offsets
into the source, so a failed alternative costs nothing to throw away.

Grammar (comments are stripped before this runs):

    document     := element (newlines element)* EOF
    element      := metadata | step
    metadata     := '>>' key ':' rest-of-line
    step         := chunk*
    chunk        := ingredient | cookware | timer | text | specifier-text
    ingredient   := '@' (multi-word | one-word)
    cookware     := '#' (multi-word | one-word)
    timer        := '~' (multi-word | one-word | amount)
    multi-word   := word words-until-'{' amount
    one-word     := word amount?
    amount       := '{' [quantity ['%' unit]] '}'
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Union

from ..const import (
    AMOUNT_CLOSE,
    AMOUNT_OPEN,
    COOKWARE,
    INGREDIENT,
    METADATA_OPENER,
    METADATA_SEPARATOR,
    TAG_COOKWARE,
    TAG_INGREDIENT,
    TAG_TIMER,
    TIMER,
    UNIT_SEPARATOR,
)
from .lexical import is_specifier, is_word_break, newline_chars, newline_length

_LOGGER = logging.getLogger(__name__)

COMPONENT_KINDS = {
    INGREDIENT: TAG_INGREDIENT,
    COOKWARE: TAG_COOKWARE,
    TIMER: TAG_TIMER,
}


@dataclass(frozen=True)
class Span:
    """A half-open `[start, end)` range of the source."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class AmountNode:
    """The `{quantity%unit}` field of a component."""

    quantity: Span | None = None
    unit: Span | None = None


@dataclass(frozen=True)
class ComponentNode:
    """An ingredient, cookware or timer reference.

    `name` is empty for anonymous timers and `amount` is None when the
    component has no amount field at all.
    """

    kind: str
    name: Span
    amount: AmountNode | None


@dataclass(frozen=True)
class TextNode:
    span: Span


@dataclass(frozen=True)
class StepNode:
    chunks: tuple[ChunkNode, ...]


@dataclass(frozen=True)
class MetadataNode:
    key: Span
    value: Span


@dataclass(frozen=True)
class DocumentNode:
    elements: tuple[ElementNode, ...]


ChunkNode = Union[ComponentNode, TextNode]
ElementNode = Union[MetadataNode, StepNode]


class CooklangGrammar:
    """Recursive-descent parser for one comment-stripped Cooklang source.

    Args:
        text: The comment-stripped source
        permissive_newlines: Whether Unicode line separators end lines
    """

    def __init__(self, text: str, permissive_newlines: bool = True) -> None:
        self.text = text
        self.length = len(text)
        self.newlines = newline_chars(permissive_newlines)

    def _char(self, pos: int) -> str:
        return self.text[pos] if pos < self.length else ""

    def _run_until(self, pos: int, stop: Callable[[str], bool]) -> int:
        """Advance over characters until `stop` matches, a newline, or EOF."""
        text = self.text
        newlines = self.newlines
        while pos < self.length:
            char = text[pos]
            if char in newlines or stop(char):
                break
            pos += 1
        return pos

    def word(self, pos: int) -> int | None:
        end = self._run_until(pos, is_word_break)
        return end if end > pos else None

    def amount(self, pos: int) -> tuple[AmountNode, int] | None:
        """Parse an amount field starting at an opening brace."""
        if self._char(pos) != AMOUNT_OPEN:
            return None

        start = pos + 1
        qty_end = self._run_until(
            start, lambda c: c in (UNIT_SEPARATOR, AMOUNT_CLOSE))

        if qty_end == start:
            # No quantity, so the field must close immediately
            if self._char(start) == AMOUNT_CLOSE:
                return AmountNode(), start + 1
            return None

        quantity = Span(start, qty_end)
        if self._char(qty_end) == UNIT_SEPARATOR:
            unit_start = qty_end + 1
            unit_end = self._run_until(unit_start, lambda c: c == AMOUNT_CLOSE)
            if unit_end > unit_start and self._char(unit_end) == AMOUNT_CLOSE:
                return AmountNode(quantity, Span(unit_start, unit_end)), unit_end + 1
            return None

        if self._char(qty_end) == AMOUNT_CLOSE:
            return AmountNode(quantity), qty_end + 1
        return None

    def multi_word(self, kind: str, pos: int) -> tuple[ComponentNode, int] | None:
        """Parse a name running up to an amount field, e.g. `frying pan{}`.

        The run of words is rejected if it holds a specifier, so a name can
        never swallow a following component.
        """
        word_end = self.word(pos)
        if word_end is None:
            return None

        words_end = self._run_until(word_end, lambda c: c == AMOUNT_OPEN)
        if words_end == word_end or self._char(words_end) != AMOUNT_OPEN:
            return None

        if any(is_specifier(c) for c in self.text[word_end:words_end]):
            _LOGGER.debug(
                "Rejected multi-word %s at %d: specifier inside name", kind, pos)
            return None

        parsed = self.amount(words_end)
        if parsed is None:
            return None
        amount, end = parsed
        return ComponentNode(kind, Span(pos, words_end), amount), end

    def one_word(self, kind: str, pos: int) -> tuple[ComponentNode, int] | None:
        word_end = self.word(pos)
        if word_end is None:
            return None

        parsed = self.amount(word_end)
        if parsed is None:
            return ComponentNode(kind, Span(pos, word_end), None), word_end
        amount, end = parsed
        return ComponentNode(kind, Span(pos, word_end), amount), end

    def component(self, pos: int) -> tuple[ComponentNode, int] | None:
        """Parse an ingredient, cookware or timer starting at its specifier."""
        kind = COMPONENT_KINDS.get(self._char(pos))
        if kind is None:
            return None

        start = pos + 1
        parsed = self.multi_word(kind, start) or self.one_word(kind, start)
        if parsed is None and kind == TAG_TIMER:
            anonymous = self.amount(start)
            if anonymous is not None:
                amount, end = anonymous
                parsed = ComponentNode(kind, Span(start, start), amount), end
        return parsed

    def text_chunk(self, pos: int) -> tuple[TextNode, int] | None:
        """Parse plain text up to the next specifier.

        A specifier that starts no component is taken as text along with the
        run that follows it.
        """
        start = pos + 1 if is_specifier(self._char(pos)) else pos
        end = self._run_until(start, is_specifier)
        if end == pos:
            return None
        return TextNode(Span(pos, end)), end

    def step(self, pos: int) -> tuple[StepNode, int]:
        chunks: list[ChunkNode] = []
        while True:
            parsed = self.component(pos) or self.text_chunk(pos)
            if parsed is None:
                break
            chunk, pos = parsed
            chunks.append(chunk)
        return StepNode(tuple(chunks)), pos

    def metadata(self, pos: int) -> tuple[MetadataNode, int] | None:
        if not self.text.startswith(METADATA_OPENER, pos):
            return None

        key_start = pos + len(METADATA_OPENER)
        key_end = self._run_until(key_start, lambda c: c == METADATA_SEPARATOR)
        if key_end == key_start or self._char(key_end) != METADATA_SEPARATOR:
            return None

        value_start = key_end + 1
        value_end = self._run_until(value_start, lambda c: False)
        if value_end == value_start:
            return None
        return MetadataNode(Span(key_start, key_end), Span(value_start, value_end)), value_end

    def newline_run(self, pos: int) -> int:
        end = pos
        while True:
            size = newline_length(self.text, end, self.newlines)
            if not size:
                break
            end += size
        return end

    def document(self) -> DocumentNode:
        """Parse the whole source.

        The grammar is total: a step stops only at a newline or the end of
        input, and any character a component cannot take is read as text, so
        every source is consumed.

        Returns:
            The document node
        """
        elements: list[ElementNode] = []
        pos = 0
        while pos < self.length:
            element = self.metadata(pos) or self.step(pos)
            node, pos = element
            elements.append(node)
            if pos == self.length:
                break

            # A step only ends at a newline or EOF
            pos = self.newline_run(pos)

        return DocumentNode(tuple(elements))


def parse_document(text: str, permissive_newlines: bool = True) -> DocumentNode:
    """Parse a comment-stripped source into a document node.

    Args:
        text: The comment-stripped source
        permissive_newlines: Whether Unicode line separators end lines

    Returns:
        The document node
    """
    return CooklangGrammar(text, permissive_newlines).document()
