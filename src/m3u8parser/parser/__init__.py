"""Line parsing: header, attribute extraction and the entry state machine."""

from .attributes import Attribute, Option, Parameter
from .header import parse_header
from .machine import EntryStateMachine, ParsedLine, Slot, SlotState, split_lines, transition

__all__ = [
    "Attribute",
    "Option",
    "Parameter",
    "parse_header",
    "EntryStateMachine",
    "ParsedLine",
    "Slot",
    "SlotState",
    "split_lines",
    "transition",
]
