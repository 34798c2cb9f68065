"""Line-by-line state machine that turns playlist lines into entries.

Each entry lives in a slot of an ordered arena keyed from 0. A slot is
`BUILDING` from its #EXTINF line until a locator line finalizes it; the
next #EXTINF line then opens the following slot. Transitions are plain
functions of `(slot, line)`; the machine only stores what they return.
"""

from dataclasses import dataclass
from enum import Enum

from ..errors import InvalidPlaylistFormat
from ..groups import GroupIndex
from ..logging import get_logger
from ..models import (
    PlaylistItem,
    PlaylistItemCatchup,
    PlaylistItemGroup,
    PlaylistItemHttp,
    PlaylistItemTvg,
)
from .attributes import (
    EXTGRP,
    EXTINF,
    EXTVLCOPT,
    Attribute,
    Option,
    Parameter,
    get_attribute,
    get_name,
    get_option,
    get_parameter,
    get_url,
    get_value,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParsedLine:
    """A source line and its zero-based position."""

    index: int
    raw: str

    @property
    def text(self) -> str:
        return self.raw.strip()


class LineKind(Enum):
    METADATA = "metadata"
    OPTION = "option"
    GROUP = "group"
    LOCATOR = "locator"
    BLANK = "blank"


class SlotState(Enum):
    BUILDING = "building"
    FINALIZED = "finalized"


@dataclass(frozen=True)
class Slot:
    """An entry together with its position in the build lifecycle."""

    item: PlaylistItem
    state: SlotState = SlotState.BUILDING


def split_lines(raw: str) -> list[ParsedLine]:
    """Split playlist text on newlines, keeping any carriage returns in `raw`."""
    return [ParsedLine(index=i, raw=line) for i, line in enumerate(raw.split("\n"))]


def classify(text: str) -> LineKind:
    """Classify a trimmed line. Directive markers win over locator text."""
    if text.startswith(EXTINF):
        return LineKind.METADATA
    if text.startswith(EXTVLCOPT):
        return LineKind.OPTION
    if text.startswith(EXTGRP):
        return LineKind.GROUP
    if text:
        return LineKind.LOCATOR
    return LineKind.BLANK


def build_item(line: ParsedLine) -> PlaylistItem:
    """Create a fresh entry from an #EXTINF line."""
    raw = line.raw
    return PlaylistItem(
        name=get_name(raw),
        index=line.index + 1,
        tvg=PlaylistItemTvg(
            id=get_attribute(Attribute.TVG_ID, raw),
            name=get_attribute(Attribute.TVG_NAME, raw),
            url=get_attribute(Attribute.TVG_URL, raw),
            logo=get_attribute(Attribute.TVG_LOGO, raw),
            rec=get_attribute(Attribute.TVG_REC, raw),
        ),
        group=PlaylistItemGroup(title=get_attribute(Attribute.GROUP_TITLE, raw)),
        http=PlaylistItemHttp(
            referrer="",
            user_agent=get_attribute(Attribute.USER_AGENT, raw),
        ),
        url=None,
        raw=raw,
        timeshift=get_attribute(Attribute.TIMESHIFT, raw),
        catchup=PlaylistItemCatchup(
            type=get_attribute(Attribute.CATCHUP, raw),
            source=get_attribute(Attribute.CATCHUP_SOURCE, raw),
            days=get_attribute(Attribute.CATCHUP_DAYS, raw),
        ),
    )


def _merge_http(item: PlaylistItem, user_agent: str, referrer: str) -> dict:
    # Only values that are present replace the current ones
    return {
        "referrer": referrer or item.http.referrer,
        "user_agent": user_agent or item.http.user_agent,
    }


def apply_option(item: PlaylistItem, line: ParsedLine) -> PlaylistItem:
    text = line.text
    http = _merge_http(
        item,
        user_agent=get_option(text, Option.HTTP_USER_AGENT),
        referrer=get_option(text, Option.HTTP_REFERRER),
    )
    return item.with_raw(line.raw).revise(http=http)


def apply_group(item: PlaylistItem, line: ParsedLine) -> PlaylistItem:
    title = get_value(line.text) or item.group.title
    return item.with_raw(line.raw).revise(group={"title": title})


def apply_locator(item: PlaylistItem, line: ParsedLine) -> Slot:
    """Attach a locator line. A non-empty URL finalizes the entry."""
    text = line.text
    url = get_url(text)
    if not url:
        return Slot(item.with_raw(line.raw))

    http = _merge_http(
        item,
        user_agent=get_parameter(text, Parameter.USER_AGENT),
        referrer=get_parameter(text, Parameter.REFERER),
    )
    return Slot(item.with_raw(line.raw).revise(url=url, http=http), SlotState.FINALIZED)


def transition(slot: Slot | None, line: ParsedLine) -> Slot | None:
    """Return the slot that results from feeding `line` to `slot`.

    `None` means no entry is being built; lines other than #EXTINF are
    then ignored.

    Raises:
        InvalidPlaylistFormat: If an #EXTINF line arrives before the
            previous entry received its locator line
    """
    kind = classify(line.text)

    if kind is LineKind.METADATA:
        if slot is not None and slot.state is SlotState.BUILDING:
            raise InvalidPlaylistFormat(
                "#EXTINF found before the previous entry's locator line",
                line_number=line.index + 1,
            )
        return Slot(build_item(line))

    if slot is None or slot.state is SlotState.FINALIZED:
        return None

    if kind is LineKind.OPTION:
        return Slot(apply_option(slot.item, line))
    if kind is LineKind.GROUP:
        return Slot(apply_group(slot.item, line))
    if kind is LineKind.LOCATOR:
        return apply_locator(slot.item, line)
    return Slot(slot.item.with_raw(line.raw))


class EntryStateMachine:
    """Consumes the lines after the header and collects entries in order."""

    def __init__(self, groups: GroupIndex | None = None):
        self.items: dict[int, PlaylistItem] = {}
        self.groups = groups if groups is not None else GroupIndex()
        self._key = 0
        self._slot: Slot | None = None

    def feed(self, line: ParsedLine) -> None:
        slot = transition(self._slot, line)
        if slot is None:
            if line.text:
                logger.debug("line_ignored", line_number=line.index + 1)
            return

        self.items[self._key] = slot.item
        if slot.state is SlotState.FINALIZED:
            self.groups.add(slot.item.group.title)
            self._key += 1
            self._slot = None
        else:
            self._slot = slot

    def run(self, lines: list[ParsedLine]) -> dict[int, PlaylistItem]:
        for line in lines:
            self.feed(line)
        if self._slot is not None:
            logger.warning(
                "entry_without_locator",
                line_number=self._slot.item.index,
                name=self._slot.item.name,
            )
        return self.items
