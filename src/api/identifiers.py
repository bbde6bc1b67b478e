# This file owns the hierarchical record identifier conventions.
# VAAs are keyed `chain/emitter/sequence`; observations append `signer/hash` to the VAA key.
# A partial run of leading segments becomes a prefix filter and a complete run becomes an exact lookup.

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from src.api.filters import ID_SEPARATOR, Equality, Filter, MatchAll, Negation, Prefix

VAA_ID_SEGMENTS: Final[int] = 3
OBSERVATION_ID_SEGMENTS: Final[int] = 5
PYTHNET_CHAIN_ID: Final[str] = "26"


def build_record_id(*segments: str) -> str:
    return ID_SEPARATOR.join(segments)


def id_filter(segments: Sequence[str], *, full_length: int) -> Filter:
    """Build the filter for a leading run of identifier segments.

    No segments matches everything, fewer than `full_length` matches by prefix,
    and exactly `full_length` matches a single identifier. Segment content is
    not normalized or validated.
    """

    if len(segments) > full_length:
        raise ValueError(
            f"Identifier has at most {full_length} segments, got {len(segments)}."
        )
    if not segments:
        return MatchAll()
    if len(segments) == full_length:
        return Equality(build_record_id(*segments))
    return Prefix(tuple(segments))


def chain_exclusion_filter(chain_id: str = PYTHNET_CHAIN_ID) -> Filter:
    return Negation(Prefix((chain_id,)))
