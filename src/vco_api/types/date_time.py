"""Date-times as used on the VCO wire.

The API sends a date-time as either an RFC3339 string or a Unix epoch
integer.  Two reserved strings stand in for values that are not instants:
``"null"`` (nothing was set) and ``"0000-00-00 00:00:00"`` (never).
:class:`DateTime` folds all of these into one immutable value and always
encodes back to the string form.
"""

from __future__ import annotations

import calendar
import datetime
import enum
import logging
import re
from dataclasses import dataclass
from typing import Any

from vco_api.errors import BadEpochError, BadTimestampStringError, NoCanonicalFormError, WireTypeError
from vco_api.types.fields import decode_field, require_object

logger = logging.getLogger(__name__)

NULL_TOKEN = "null"
"""Wire string for a date-time that was never set."""

NEVER_TOKEN = "0000-00-00 00:00:00"
"""Wire string for an explicitly unbounded date-time."""

NEVER_DISPLAY = "never"
"""Human-readable form of :data:`NEVER`.  Not a legal wire token."""

WireToken = str | int | None
"""A date-time as it appears in a JSON document."""

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_UNIX_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.UTC)

# RFC3339 section 5.6 date-time.  [0-9] rather than \d, which also matches
# non-ASCII digits.
_RFC3339_RE = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})"  # full-date
    r"[Tt]"
    r"([0-9]{2}):([0-9]{2}):([0-9]{2})"  # partial-time
    r"(?:\.([0-9]+))?"  # optional time-secfrac
    r"(?:([Zz])|([+-])([0-9]{2}):([0-9]{2}))"  # time-offset
)


class DateTimeKind(enum.Enum):
    """Which of the three date-time variants a :class:`DateTime` holds."""

    ABSENT = "absent"
    INDEFINITE = "indefinite"
    INSTANT = "instant"


def _parse_rfc3339(text: str) -> datetime.datetime:
    """Parse an RFC3339 date-time and normalise it to UTC.

    Fractional seconds beyond microseconds are truncated.  A leap second
    (``:60``) must fall on 23:59:60 UTC on the last day of a month and is
    clamped to the last microsecond of that minute.
    """
    m = _RFC3339_RE.fullmatch(text)
    if m is None:
        raise BadTimestampStringError(text, "not an RFC3339 date-time")

    year, month, day, hour, minute, second, frac, _zulu, sign, off_h, off_m = m.groups()

    offset_hours = int(off_h) if off_h else 0
    offset_minutes = int(off_m) if off_m else 0
    if offset_hours > 23 or offset_minutes > 59:
        raise BadTimestampStringError(text, "offset out of range")
    offset = datetime.timedelta(hours=offset_hours, minutes=offset_minutes)
    if sign == "-":
        offset = -offset

    sec = int(second)
    micro = int(frac[:6].ljust(6, "0")) if frac else 0
    leap = sec == 60
    if leap:
        sec = 59

    try:
        local = datetime.datetime(
            int(year),
            int(month),
            int(day),
            int(hour),
            int(minute),
            sec,
            micro,
            tzinfo=datetime.timezone(offset),
        )
        utc = local.astimezone(datetime.UTC)
    except (ValueError, OverflowError) as exc:
        raise BadTimestampStringError(text, str(exc)) from None

    if leap:
        last_day = calendar.monthrange(utc.year, utc.month)[1]
        if (utc.day, utc.hour, utc.minute) != (last_day, 23, 59):
            raise BadTimestampStringError(
                text, "leap second not at 23:59:60 UTC on the last day of a month"
            )
        utc = utc.replace(microsecond=999_999)
    return utc


def _format_rfc3339(instant: datetime.datetime) -> str:
    """Render a UTC datetime as RFC3339 with a ``Z`` suffix.

    The fractional part is left out when zero and otherwise has its
    trailing zeros trimmed.
    """
    text = (
        f"{instant.year:04d}-{instant.month:02d}-{instant.day:02d}"
        f"T{instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}"
    )
    if instant.microsecond:
        text += "." + f"{instant.microsecond:06d}".rstrip("0")
    return text + "Z"


@dataclass(frozen=True, slots=True)
class DateTime:
    """A VCO date-time: absent, never, or an instant normalised to UTC.

    Equality is structural.  Ordering only exists between two instants:
    every comparison involving :data:`ABSENT` or :data:`NEVER` is false,
    including comparisons with themselves, so do not sort sequences that
    may contain them.

    Build instances with :meth:`decode`, :meth:`from_rfc3339`,
    :meth:`from_unix_timestamp` or :meth:`from_datetime`; use the module
    constants :data:`ABSENT` and :data:`NEVER` for the sentinels.
    """

    kind: DateTimeKind
    instant: datetime.datetime | None = None

    def __post_init__(self) -> None:
        if self.kind is not DateTimeKind.INSTANT:
            if self.instant is not None:
                msg = f"{self.kind.name} date-time cannot carry an instant"
                raise ValueError(msg)
            return
        if self.instant is None:
            msg = "INSTANT date-time requires an instant"
            raise ValueError(msg)
        if self.instant.utcoffset() is None:
            msg = f"Instant must be timezone-aware, got naive {self.instant!r}"
            raise ValueError(msg)
        if self.instant.tzinfo is not datetime.UTC:
            try:
                utc = self.instant.astimezone(datetime.UTC)
            except OverflowError as exc:
                msg = f"Instant {self.instant!r} is out of range in UTC"
                raise ValueError(msg) from exc
            object.__setattr__(self, "instant", utc)

    # -- construction --------------------------------------------------

    @classmethod
    def from_rfc3339(cls, text: str) -> DateTime:
        """Parse an RFC3339 string, converting the result to UTC.

        :param text: Date-time such as ``"2023-01-02T03:04:05.000+05:30"``.
            The offset is mandatory.
        :returns: An instant.
        :raises BadTimestampStringError: If *text* is not valid RFC3339.
        """
        try:
            return cls(DateTimeKind.INSTANT, _parse_rfc3339(text))
        except BadTimestampStringError:
            logger.debug("rejected date-time string %r", text)
            raise

    @classmethod
    def from_unix_timestamp(cls, value: int) -> DateTime:
        """Interpret *value* as seconds since the Unix epoch.

        :param value: Signed 64-bit epoch seconds.
        :returns: An instant.
        :raises BadEpochError: If *value* is outside the signed 64-bit range
            or the resulting instant is not representable.
        :raises WireTypeError: If *value* is not an :class:`int` (``bool``
            included).
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise WireTypeError("an integer epoch timestamp", value)
        if not _I64_MIN <= value <= _I64_MAX:
            logger.debug("rejected epoch %r: outside signed 64-bit range", value)
            raise BadEpochError(value)
        try:
            instant = _UNIX_EPOCH + datetime.timedelta(seconds=value)
        except OverflowError:
            logger.debug("rejected epoch %r: out of range", value)
            raise BadEpochError(value) from None
        return cls(DateTimeKind.INSTANT, instant)

    @classmethod
    def from_datetime(cls, value: datetime.datetime) -> DateTime:
        """Wrap an aware :class:`datetime.datetime`, converting it to UTC."""
        return cls(DateTimeKind.INSTANT, value)

    @classmethod
    def decode(cls, token: WireToken) -> DateTime:
        """Decode a date-time wire token.

        ========================== =========================
        Token                      Result
        ========================== =========================
        ``None`` (JSON null)       :data:`ABSENT`
        ``"null"``                 :data:`ABSENT`
        ``"0000-00-00 00:00:00"``  :data:`NEVER`
        other ``str``              :meth:`from_rfc3339`
        ``int``                    :meth:`from_unix_timestamp`
        ========================== =========================

        :raises BadTimestampStringError: For a string that is not RFC3339.
        :raises BadEpochError: For an out-of-range integer.
        :raises WireTypeError: For any other kind of token, including
            JSON booleans and floats.
        """
        if token is None:
            return ABSENT
        if isinstance(token, str):
            if token == NULL_TOKEN:
                return ABSENT
            if token == NEVER_TOKEN:
                return NEVER
            return cls.from_rfc3339(token)
        # bool is an int subclass; true/false are not timestamps.
        if isinstance(token, int) and not isinstance(token, bool):
            return cls.from_unix_timestamp(token)
        logger.debug("rejected date-time token %r", token)
        raise WireTypeError("an RFC3339 date string or an epoch timestamp", token)

    # -- inspection ----------------------------------------------------

    @property
    def is_absent(self) -> bool:
        return self.kind is DateTimeKind.ABSENT

    @property
    def is_never(self) -> bool:
        return self.kind is DateTimeKind.INDEFINITE

    @property
    def is_instant(self) -> bool:
        return self.kind is DateTimeKind.INSTANT

    # -- encoding ------------------------------------------------------

    def to_rfc3339(self) -> str:
        """Render the instant as RFC3339 in UTC, e.g. ``"2023-01-01T21:34:05Z"``.

        :raises NoCanonicalFormError: For :data:`ABSENT` and :data:`NEVER`,
            which have no RFC3339 equivalent.
        """
        if self.instant is None:
            raise NoCanonicalFormError(self)
        return _format_rfc3339(self.instant)

    def encode(self) -> str:
        """Encode to the canonical wire string.  Never fails."""
        if self.kind is DateTimeKind.ABSENT:
            return NULL_TOKEN
        if self.kind is DateTimeKind.INDEFINITE:
            return NEVER_TOKEN
        return self.to_rfc3339()

    def __str__(self) -> str:
        if self.kind is DateTimeKind.ABSENT:
            return NULL_TOKEN
        if self.kind is DateTimeKind.INDEFINITE:
            return NEVER_DISPLAY
        return self.to_rfc3339()

    # -- ordering ------------------------------------------------------

    def compare(self, other: DateTime) -> int | None:
        """Three-way compare two date-times.

        :returns: ``-1``, ``0`` or ``1`` when both are instants, otherwise
            ``None`` (no ordering).
        """
        if self.instant is None or other.instant is None:
            return None
        if self.instant < other.instant:
            return -1
        if self.instant > other.instant:
            return 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.compare(other) == -1

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        cmp = self.compare(other)
        return cmp is not None and cmp <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.compare(other) == 1

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        cmp = self.compare(other)
        return cmp is not None and cmp >= 0


ABSENT = DateTime(DateTimeKind.ABSENT)
"""No date-time was set.  Wire ``"null"``."""

NEVER = DateTime(DateTimeKind.INDEFINITE)
"""Explicitly never / unbounded.  Wire ``"0000-00-00 00:00:00"``."""


@dataclass(frozen=True, slots=True)
class Interval:
    """A start date-time and an optional end, as sent in metric queries.

    No relation between the two is enforced; the API does not guarantee
    ``start <= end``.
    """

    start: DateTime
    end: DateTime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire object, leaving ``end`` out when unset."""
        result: dict[str, Any] = {"start": self.start.encode()}
        if self.end is not None:
            result["end"] = self.end.encode()
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Interval:
        """Decode the wire object.  A missing or null ``end`` becomes ``None``."""
        data = require_object(data)
        return cls(
            start=decode_field(data, "start", DateTime.decode),
            end=decode_field(data, "end", DateTime.decode, optional=True),
        )
