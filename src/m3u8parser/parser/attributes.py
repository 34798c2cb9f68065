"""Value extraction from single playlist lines.

Every lookup here is total: a missing attribute, option or parameter
yields an empty string.
"""

import re
from enum import Enum

# Directive markers
EXTM3U = "#EXTM3U"
EXTINF = "#EXTINF:"
EXTVLCOPT = "#EXTVLCOPT:"
EXTGRP = "#EXTGRP:"


class Attribute(str, Enum):
    """`key="value"` attributes found on #EXTM3U and #EXTINF lines."""

    TVG_ID = "tvg-id"
    X_TVG_URL = "x-tvg-url"
    URL_TVG = "url-tvg"
    TVG_NAME = "tvg-name"
    TVG_LOGO = "tvg-logo"
    TVG_URL = "tvg-url"
    TVG_REC = "tvg-rec"
    GROUP_TITLE = "group-title"
    USER_AGENT = "user-agent"
    CATCHUP = "catchup"
    CATCHUP_DAYS = "catchup-days"
    CATCHUP_SOURCE = "catchup-source"
    TIMESHIFT = "timeshift"


class Option(str, Enum):
    """Options carried by #EXTVLCOPT lines."""

    HTTP_REFERRER = "http-referrer"
    HTTP_USER_AGENT = "http-user-agent"


class Parameter(str, Enum):
    """Pipe-delimited parameters on locator lines."""

    USER_AGENT = "user-agent"
    REFERER = "referer"


HEADER_ATTRIBUTES = (Attribute.X_TVG_URL, Attribute.URL_TVG)


def _attribute_pattern(name: str) -> re.Pattern:
    # Lookbehind keeps `tvg-url` from matching inside `x-tvg-url`
    return re.compile(rf'(?<![\w-]){re.escape(name)}="(.*?)"', re.IGNORECASE)


_ATTRIBUTE_PATTERNS = {attr: _attribute_pattern(attr.value) for attr in Attribute}
_OPTION_PATTERNS = {
    opt: re.compile(rf":{re.escape(opt.value)}=(.*)", re.IGNORECASE) for opt in Option
}
_PARAMETER_PATTERNS = {
    param: re.compile(rf"{re.escape(param.value)}=(\w[^&]*)", re.IGNORECASE) for param in Parameter
}
_VALUE_PATTERN = re.compile(r":(.*)")
_LINE_BREAK = re.compile(r"[\r\n]+")


def get_attribute(name: Attribute | str, line: str) -> str:
    """Return the trimmed value of the first `name="value"` on the line."""
    pattern = _ATTRIBUTE_PATTERNS.get(name) or _attribute_pattern(getattr(name, "value", name))
    match = pattern.search(line)
    return match.group(1).strip() if match else ""


def get_name(line: str) -> str:
    """Return the display name: text after the last comma of the first physical line."""
    first = _LINE_BREAK.split(line, maxsplit=1)[0]
    return first.split(",")[-1].strip()


def get_option(line: str, name: Option) -> str:
    """Return the value of an `#EXTVLCOPT:name=value` line with quotes removed."""
    match = _OPTION_PATTERNS[name].search(line)
    return match.group(1).replace('"', "").strip() if match else ""


def get_value(line: str) -> str:
    """Return everything after the first colon with quotes removed."""
    match = _VALUE_PATTERN.search(line)
    return match.group(1).replace('"', "").strip() if match else ""


def get_url(line: str) -> str:
    """Return the locator segment before the first pipe."""
    return line.split("|", 1)[0]


def get_parameter(line: str, name: Parameter) -> str:
    """Return a `name=value` parameter from the segment after the first pipe."""
    _, pipe, params = line.partition("|")
    if not pipe:
        return ""
    match = _PARAMETER_PATTERNS[name].search(params)
    return match.group(1) if match else ""
