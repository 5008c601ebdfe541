"""whenever Instant type with Pydantic serialization support."""

from typing import Annotated

from pydantic import PlainSerializer, PlainValidator
from whenever import Instant

InstantType = Annotated[
    Instant,
    PlainValidator(lambda v: Instant.parse_iso(v) if isinstance(v, str) else v),
    PlainSerializer(lambda v: v.format_iso()),
]
