"""Splitting of checksum-validated NMEA sentences into fields."""

# "*XX" trailer
_CHECKSUM_SUFFIX_LENGTH = 3


def split_fields(sentence: str) -> list[str]:
    """Split a checksum-validated sentence into its comma-separated fields.

    The trailing "*XX" checksum is dropped. Empty fields are preserved:
    consecutive commas mean "no data", not an error. Field 0 is the sentence
    tag and keeps its leading '$' so it can be matched verbatim against the
    sentence registry.

    Args:
        sentence: NMEA sentence that already passed ``validate_checksum``.

    Returns:
        List of field strings.

    Example:
        >>> split_fields("$GPGLL,4916.45,N,12311.12,W,225444,A,*1D")
        ['$GPGLL', '4916.45', 'N', '12311.12', 'W', '225444', 'A', '']
    """
    content = sentence.strip()[:-_CHECKSUM_SUFFIX_LENGTH]
    return content.split(",")
