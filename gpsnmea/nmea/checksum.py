"""NMEA checksum validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit hexadecimal number after the '*'.

Example sentence structure:
    $GPRMC,162254.00,A,3723.02837,N,12159.39853,W,0.820,188.36,110706,,,A*74
    ^                        checksum content                            ^^
    start                                                  checksum (0x74 = 116)

The '*' must be the third character from the end: anything else (missing
delimiters, a one-digit or three-digit trailer, a non-hex trailer) is simply
an invalid checksum.
"""

import string

# '$' + at least an empty body + '*' + two hex digits
_MINIMUM_SENTENCE_LENGTH = 4

_HEX_DIGITS = frozenset(string.hexdigits)


def _extract_checksum_parts(sentence: str) -> tuple[str, str] | None:
    """Extract the payload content and provided checksum from an NMEA sentence.

    Args:
        sentence: Stripped NMEA sentence string (e.g., "$GPGLL,...*1D")

    Returns:
        A tuple of (content, checksum_hex) if the sentence has valid structure,
        or None if:
        - It is shorter than 4 characters
        - Missing '$' start delimiter
        - The third-from-last character is not '*'

    Example:
        >>> _extract_checksum_parts("$GPGLL,4916.45*1D")
        ('GPGLL,4916.45', '1D')
    """
    if len(sentence) < _MINIMUM_SENTENCE_LENGTH:
        return None

    if not sentence.startswith("$") or sentence[-3] != "*":
        return None

    return sentence[1:-3], sentence[-2:]


def compute_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the ASCII value of each character
    in the content.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> format(compute_checksum("GPAAM,A,A,0.10,N,WPTNME"), "02X")
        '32'
    """
    result = 0
    for character in content:
        result ^= ord(character)
    return result


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
                  May include trailing whitespace/newlines (will be stripped).

    Returns:
        True if the checksum is valid, False if:
        - Sentence is malformed (missing delimiters, too short)
        - Checksum is truncated or non-hexadecimal
        - Calculated checksum doesn't match provided checksum

    Example:
        >>> validate_checksum("$GPAAM,A,A,0.10,N,WPTNME*32")
        True
        >>> validate_checksum("$GPAAM,A,A,0.10,N,WPTNME*33")
        False
    """
    parts = _extract_checksum_parts(sentence.strip())
    if parts is None:
        return False

    content, provided = parts

    # int(..., 16) also accepts signs and underscores
    if not _HEX_DIGITS.issuperset(provided):
        return False

    return compute_checksum(content) == int(provided, 16)
