"""Output format negotiation.

An explicit ``f`` override always wins over the Accept header. Accept entries
are tried in the order the client sent them; quality weights are not used to
reorder them. When nothing acceptable is found the document kind's default
format is returned instead of failing.
"""

import logging
from collections.abc import Sequence

from wfsapi.errors import UnsupportedFormatError
from wfsapi.formats import DocumentKind, FormatRegistry, normalize_format

logger = logging.getLogger(__name__)


def parse_accept(header: str | None) -> list[str]:
    if not header:
        return []
    # basic support for complex types (i.e. with "q=0.x"), media types are case-insensitive
    media_types = (item.split(";")[0].strip().lower() for item in header.split(","))
    return [media_type for media_type in media_types if media_type]


class ContentNegotiator:
    def __init__(self, registry: FormatRegistry) -> None:
        self.registry = registry

    @staticmethod
    def resolve(
        explicit_format: str | None,
        accepted: Sequence[str],
        supported: Sequence[str],
        default: str,
    ) -> str:
        requested = (explicit_format or "").strip()
        if requested:
            output_format = normalize_format(requested)
            if output_format not in supported:
                raise UnsupportedFormatError(requested, supported)
            return output_format

        for candidate in accepted:
            if candidate in supported:
                return candidate

        return default

    def negotiate(self, kind: DocumentKind, explicit_format: str | None, accept_header: str | None) -> str:
        output_format = self.resolve(
            explicit_format,
            parse_accept(accept_header),
            self.registry.supported_formats(kind),
            self.registry.default_format(kind),
        )
        logger.debug("Negotiated %s for %s (f=%r, accept=%r)", output_format, kind, explicit_format, accept_header)
        return output_format
