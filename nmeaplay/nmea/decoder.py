"""Line-level decoding entry point.

Classifies a line once, then hands its fields to the decoder registered for
that sentence type. Unsupported and truncated sentences decode to None; real
logs mix many sentence types and partial corruption, so neither is an error.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from nmeaplay.nmea.dpt import decode_dpt
from nmeaplay.nmea.gga import decode_gga
from nmeaplay.nmea.sentence import classify
from nmeaplay.nmea.types import NavigationUpdate, RawSentence, SentenceType
from nmeaplay.nmea.vtg import decode_vtg
from nmeaplay.nmea.vwr import decode_vwr
from nmeaplay.nmea.zda import decode_zda

__all__ = ["decode_sentence", "decode_raw"]

logger = logging.getLogger(__name__)

_FieldDecoder = Callable[[tuple[str, ...]], NavigationUpdate | None]

_DECODERS: dict[SentenceType, _FieldDecoder] = {
    SentenceType.GGA: decode_gga,
    SentenceType.VTG: decode_vtg,
    SentenceType.VWR: decode_vwr,
    SentenceType.DPT: decode_dpt,
}


def decode_raw(sentence: RawSentence, time_fallback: datetime) -> NavigationUpdate | None:
    """Decode an already classified sentence.

    Args:
        sentence: Output of ``classify``.
        time_fallback: Value used for unparseable ZDA date/time parts.

    Returns:
        The navigation update, or None if the sentence is truncated.
    """
    if sentence.sentence_type is SentenceType.ZDA:
        update: NavigationUpdate | None = decode_zda(sentence.fields, time_fallback)
    else:
        update = _DECODERS[sentence.sentence_type](sentence.fields)

    if update is None:
        logger.debug(
            "Ignoring truncated %s sentence with %d fields",
            sentence.sentence_type.value,
            len(sentence.fields),
        )
    return update


def decode_sentence(line: str, time_fallback: datetime) -> NavigationUpdate | None:
    """Decode one log line into a navigation update.

    Args:
        line: One log line without its terminator.
        time_fallback: Value used for unparseable ZDA date/time parts.

    Returns:
        The navigation update, or None if the line is not a supported,
        complete sentence.

    Example:
        >>> decode_sentence("$SDDPT,10.38,0,*6F", datetime.now())
        DepthUpdate(depth=10.38)
        >>> decode_sentence("$XXFOO,garbage", datetime.now())
        None
    """
    sentence = classify(line)
    if sentence is None:
        return None
    return decode_raw(sentence, time_fallback)
