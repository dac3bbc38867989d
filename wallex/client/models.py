from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class NormalizedError:
    """Uniform view of a non-2xx Wallex response, whatever its body looked like.

    ``fields`` is a read-only mapping of every top-level key to the text of its
    value(s).
    """

    status_code: int
    message: str
    success: bool = False
    code: int | None = None
    result: bytes | None = None
    fields: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
