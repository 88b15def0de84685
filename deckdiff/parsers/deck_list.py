"""
Parser for deck list lines.

Line format:
    <quantity>x <card name> [(<set_code>) <collector_number>] [[<category>, ...]]

Example:
    1x Lightning Bolt
    2x Blasphemous Act (eoc) 86 [Removal]
    1x Sol Ring [Artifact, Ramp]

Blank lines and lines starting with "#" or "//" are comments.

This module handles syntax only. Card lookup happens in the resolver.

The grammar is equivalent to the pattern

    ^(\\d+)x\\s+(.+?)(?:\\s+\\(([^)]+)\\)\\s+(\\S+))?(?:\\s+\\[([^\\]]+)\\])?$

but is scanned by hand in a single pass. A backtracking regex engine
takes quadratic time on lines with many "(" or "[" characters.
"""

from typing import NamedTuple

from deckdiff.models.deck import LineErrorKind, ParsedLine

COMMENT_PREFIXES = ("#", "//")

# Quantities are unsigned 32-bit counts
MAX_QUANTITY = 2**32 - 1


class DeckLineError(Exception):
    """Raised when a single deck list line is rejected."""

    def __init__(self, kind: LineErrorKind, line: str) -> None:
        self.kind = kind
        self.line = line
        super().__init__(f"{kind.value}: {line!r}")


class LineFields(NamedTuple):
    """Raw text of each field of a matched line."""

    quantity: str
    name: str
    set_code: str | None
    collector_number: str | None
    categories: str | None


def is_skippable(line: str) -> bool:
    """True for blank lines and comments, which count as neither entry nor error."""
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_PREFIXES)


def parse_line(line: str) -> ParsedLine:
    """
    Parse one deck list line.

    Args:
        line: A non-blank, non-comment line (surrounding whitespace is ignored)

    Returns:
        ParsedLine with quantity, trimmed name, optional set info and categories

    Raises:
        DeckLineError: With FORMAT_ERROR if the line does not match the
            grammar, INVALID_QUANTITY for zero, non-ASCII or out of range
            quantities, EMPTY_CARD_NAME if the name is blank after trimming.
    """
    stripped = line.strip()

    fields = split_line(stripped)
    if fields is None:
        raise DeckLineError(LineErrorKind.FORMAT_ERROR, stripped)

    quantity = _parse_quantity(fields.quantity)
    if quantity is None:
        raise DeckLineError(LineErrorKind.INVALID_QUANTITY, stripped)

    name = fields.name.strip()
    if not name:
        raise DeckLineError(LineErrorKind.EMPTY_CARD_NAME, stripped)

    return ParsedLine(
        quantity=quantity,
        name=name,
        set_code=fields.set_code,
        collector_number=fields.collector_number,
        categories=_split_categories(fields.categories),
    )


def split_line(line: str) -> LineFields | None:
    """
    Split a trimmed line into its raw fields.

    The name is the shortest text after "<n>x " that leaves a valid
    optional "(set) number" and "[categories]" tail. Returns None if
    the line does not match at all. Runs in time linear in the line.
    """
    n = len(line)

    i = 0
    while i < n and line[i].isdecimal():
        i += 1
    if i == 0 or i >= n or line[i] != "x":
        return None
    quantity = line[:i]

    i += 1
    if i >= n or not line[i].isspace():
        return None
    while i < n and line[i].isspace():
        i += 1
    if i >= n:
        return None
    name_start = i

    scan = _TailScanner(line, name_start)

    # The tail always starts with whitespace, so only whitespace run
    # starts can end the name.
    for p in range(name_start + 1, n):
        if not line[p].isspace() or line[p - 1].isspace():
            continue
        tail = scan.match_tail(p)
        if tail is not None:
            set_code, collector_number, categories = tail
            return LineFields(quantity, line[name_start:p], set_code, collector_number, categories)

    return LineFields(quantity, line[name_start:], None, None, None)


class _TailScanner:
    """
    Matches the optional "(set) number" and "[categories]" tail.

    Lookup tables are built once per line, right to left, so each
    candidate tail start is checked in constant time.
    """

    def __init__(self, line: str, start: int) -> None:
        n = len(line)
        self.line = line
        self.n = n

        # next_nonspace[j]: first non-whitespace index >= j (n if none)
        # word_end[j]: end of the non-whitespace run containing j
        # next_paren[j]: first ")" index >= j (n if none)
        self.next_nonspace = [n] * (n + 1)
        self.word_end = [n] * (n + 1)
        self.next_paren = [n] * (n + 1)
        for j in range(n - 1, start - 1, -1):
            char = line[j]
            if char.isspace():
                self.next_nonspace[j] = self.next_nonspace[j + 1]
                self.word_end[j] = j
            else:
                self.next_nonspace[j] = j
                self.word_end[j] = self.word_end[j + 1]
            self.next_paren[j] = j if char == ")" else self.next_paren[j + 1]

        # "[...]" must close the line and hold no other "]"
        self.ends_with_bracket = line.endswith("]")
        self.inner_bracket = line.rfind("]", 0, n - 1)

    def match_tail(self, p: int) -> tuple[str | None, str | None, str | None] | None:
        """Match line[p:] (which starts with whitespace) as a full tail."""
        k = self.next_nonspace[p]
        if k >= self.n:
            return None
        if self.line[k] == "(":
            return self._match_set(k)
        if self.line[k] == "[" and self._brackets_close_line(k):
            return None, None, self.line[k + 1 : self.n - 1]
        return None

    def _match_set(self, k: int) -> tuple[str | None, str | None, str | None] | None:
        line, n = self.line, self.n

        close = self.next_paren[k + 1]
        if close >= n or close == k + 1:
            return None
        if close + 1 >= n or not line[close + 1].isspace():
            return None

        number_start = self.next_nonspace[close + 1]
        if number_start >= n:
            return None
        number_end = self.word_end[number_start]

        set_code = line[k + 1 : close]
        collector_number = line[number_start:number_end]
        if number_end == n:
            return set_code, collector_number, None

        bracket = self.next_nonspace[number_end]
        if bracket < n and line[bracket] == "[" and self._brackets_close_line(bracket):
            return set_code, collector_number, line[bracket + 1 : n - 1]
        return None

    def _brackets_close_line(self, k: int) -> bool:
        return self.ends_with_bracket and k > self.inner_bracket and k + 1 < self.n - 1


def _parse_quantity(quantity_str: str) -> int | None:
    """Return the quantity, or None if it is zero, non-ASCII or overflows."""
    if not quantity_str.isascii():
        return None
    quantity = int(quantity_str)
    if quantity < 1 or quantity > MAX_QUANTITY:
        return None
    return quantity


def _split_categories(category_text: str | None) -> tuple[str, ...]:
    # "[A,,B]" keeps the empty middle category
    if category_text is None:
        return ()
    return tuple(part.strip() for part in category_text.split(","))
