from dataclasses import dataclass, field
from enum import Enum

from deckdiff.models.card import CardRecord


class LineErrorKind(str, Enum):
    """Why a deck list line was rejected. Values are the reported messages."""

    FORMAT_ERROR = "Failed to parse deck entry format"
    INVALID_QUANTITY = "Invalid quantity"
    EMPTY_CARD_NAME = "Empty card name"


class ChangeKind(str, Enum):
    """How a card changed between two deck lists."""

    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    UNCHANGED = "unchanged"


@dataclass(frozen=True, slots=True)
class ParsedLine:
    """Syntax of one deck list line, before catalog lookup."""

    quantity: int
    name: str
    set_code: str | None = None
    collector_number: str | None = None
    categories: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DeckLineEntry:
    """
    A parsed and resolved deck list line.

    Attributes:
        quantity: Number of copies (always >= 1)
        name: Trimmed card name as written in the list
        set_code: Set code from the "(set) number" group
        collector_number: Collector number following the set code
        categories: Labels from the trailing "[a, b]" group
        card: Catalog record for name, None if the name is unknown
    """

    quantity: int
    name: str
    set_code: str | None = None
    collector_number: str | None = None
    categories: tuple[str, ...] = ()
    card: CardRecord | None = None

    @classmethod
    def from_parsed(cls, parsed: ParsedLine, card: CardRecord | None) -> "DeckLineEntry":
        return cls(
            quantity=parsed.quantity,
            name=parsed.name,
            set_code=parsed.set_code,
            collector_number=parsed.collector_number,
            categories=parsed.categories,
            card=card,
        )

    @property
    def is_resolved(self) -> bool:
        return self.card is not None


@dataclass(frozen=True, slots=True)
class LineError:
    """A deck list line that could not be turned into an entry."""

    line_number: int  # 1-based
    line: str
    error: LineErrorKind


@dataclass(frozen=True)
class ResolveResult:
    """
    A whole deck list after parsing and resolution.

    Entries and errors keep input line order. total_cards is derived
    from entries so it can never drift from them.
    """

    entries: tuple[DeckLineEntry, ...] = ()
    errors: tuple[LineError, ...] = ()
    total_cards: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "total_cards", sum(e.quantity for e in self.entries))


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """One card's comparison outcome across two deck lists."""

    card_name: str
    old_quantity: int
    new_quantity: int
    change_kind: ChangeKind
    card: CardRecord | None = None
    categories: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DeckDiffResult:
    """
    Classified difference between two deck lists.

    Each bucket is sorted by card_name. Errors from each side are kept
    apart and never merged.
    """

    added: tuple[DiffEntry, ...] = ()
    removed: tuple[DiffEntry, ...] = ()
    modified: tuple[DiffEntry, ...] = ()
    unchanged: tuple[DiffEntry, ...] = ()
    errors_deck_1: tuple[LineError, ...] = ()
    errors_deck_2: tuple[LineError, ...] = ()

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed or self.modified)
