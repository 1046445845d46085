"""Parsing of crypto transaction longcodes.

A longcode is a comma-separated description such as
"Address: 1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa, transaction: 3a1b...". The
hash values follow a colon and a space in the first two segments.
"""

import re

from cashfmt.domain.models import LongcodeParts

SEGMENT_SEPARATOR = re.compile(r",\s")

ADDRESS_HASH_PATTERN = re.compile(r":\s([0-9a-zA-Z]+.{25,28})")

BLOCKCHAIN_HASH_PATTERN = re.compile(r":\s([0-9a-zA-Z]+.{25,34})")


def _extract(pattern: re.Pattern[str], segment: str | None) -> str | None:
    if segment is None:
        return None
    match = pattern.search(segment)
    return match.group(1) if match else None


def parse_crypto_longcode(longcode: str) -> LongcodeParts:
    """Extract the address hash and blockchain hash from a longcode.

    Args:
        longcode: The longcode string to parse.

    Returns:
        LongcodeParts with the address hash (from the first segment), the
        blockchain hash (from the second segment) and all segments. A hash
        that cannot be found is None.
    """
    split_longcode = tuple(SEGMENT_SEPARATOR.split(longcode))
    blockchain_segment = split_longcode[1] if len(split_longcode) > 1 else None

    return LongcodeParts(
        address_hash=_extract(ADDRESS_HASH_PATTERN, split_longcode[0]),
        blockchain_hash=_extract(BLOCKCHAIN_HASH_PATTERN, blockchain_segment),
        split_longcode=split_longcode,
    )
