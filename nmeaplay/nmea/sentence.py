"""Sentence classification.

NMEA 0183 sentences start with a ``$``, a 2-letter talker ID and a 3-letter
sentence-type code, followed by comma-separated fields::

    $GPGGA,020659.21,4937.8509,N,12401.4384,W,2,9,0.83,,M,,M*44
    ^^ ^^^                                                 ^^
    |  |                                                   +-- checksum (ignored)
    |  +-- sentence type (characters 3..6 of the tag)
    +-- talker ID

Only the sentence type selects a decoder; the talker ID is kept for logging.
"""

from nmeaplay.nmea.types import RawSentence, SentenceType

# "$" + 2 talker characters + 3 type characters
_MINIMUM_TAG_LENGTH = 6

_CHECKSUM_DELIMITER = "*"


def _extract_fields(line: str) -> list[str]:
    """Split a line into fields, dropping any ``*hh`` checksum suffix.

    The checksum is not validated; it is removed only so the last data field
    parses cleanly.

    Example:
        Input: "$GPZDA,234626.99,22,02,2021*6A"
        Output: ["$GPZDA", "234626.99", "22", "02", "2021"]
    """
    content, _, _ = line.partition(_CHECKSUM_DELIMITER)
    return content.split(",")


def sentence_type_of(tag: str) -> SentenceType | None:
    """Return the sentence type encoded in a ``$``-prefixed tag.

    Returns:
        The matching ``SentenceType``, or None if the tag is too short, lacks
        the ``$`` prefix, or carries an unsupported type code.

    Example:
        >>> sentence_type_of("$WIVWR")
        <SentenceType.VWR: 'VWR'>
        >>> sentence_type_of("$XXFOO")
        None
    """
    if not tag.startswith("$") or len(tag) < _MINIMUM_TAG_LENGTH:
        return None
    try:
        return SentenceType(tag[3:6])
    except ValueError:
        return None


def classify(line: str) -> RawSentence | None:
    """Classify one log line.

    Args:
        line: One line of the log, without its line terminator.

    Returns:
        RawSentence for a supported sentence type, or None for anything
        else (blank lines, other sentence types, non-NMEA text).
    """
    fields = _extract_fields(line.strip())
    sentence_type = sentence_type_of(fields[0])
    if sentence_type is None:
        return None
    return RawSentence(
        sentence_type=sentence_type,
        talker_id=fields[0][1:3],
        fields=tuple(fields),
    )
