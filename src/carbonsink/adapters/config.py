"""Sink configuration parsed from the sink URI.

The sink is configured by a single URI such as
``https://collectors.sumologic.com/receiver/v1/http/TOKEN?dimensions=cluster=prod``.
Scheme, host and path form the endpoint; the query carries static tags.
"""

from dataclasses import dataclass, field
from urllib.parse import parse_qs, urlsplit, urlunsplit

from carbonsink.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class SinkConfig:
    """Immutable sink configuration.

    Attributes:
        url: Endpoint receiving the POST (query string removed).
        dimensions: Tags merged into both tag maps of every record.
        metadata: Parsed and stored, not merged into records.
    """

    url: str
    dimensions: dict[str, str] = field(default_factory=dict)
    metadata: dict[str, str] = field(default_factory=dict)


def _get_param(params: dict[str, list[str]], name: str) -> str:
    """Return the first value of a query parameter, or "" if missing."""
    values = params.get(name, [""])
    return values[0] if values else ""


def _parse_pairs(raw: str, param: str) -> dict[str, str]:
    """Parse a comma-separated list of key=value pairs.

    Args:
        raw: Raw parameter value (e.g., "cluster=prod,env=dev").
        param: Parameter name, used in error messages.

    Returns:
        Mapping of keys to values. Empty for an empty parameter. When an
        entry holds several "=", the text between the first two is the value.

    Raises:
        ConfigurationError: If an entry has no "=".
    """
    pairs: dict[str, str] = {}
    if raw == "":
        return pairs
    for entry in raw.split(","):
        parts = entry.split("=")
        if len(parts) < 2:
            raise ConfigurationError(
                f"invalid {param} entry {entry!r}: expected key=value"
            )
        pairs[parts[0]] = parts[1]
    return pairs


def parse_sink_uri(uri: str) -> SinkConfig:
    """Build a SinkConfig from a sink URI.

    Metadata is only read when dimensions are given.

    Args:
        uri: Sink URI with optional "dimensions" and "metadata" parameters.

    Returns:
        SinkConfig for the URI.

    Raises:
        ConfigurationError: If the URI has no scheme or host, or a
            dimensions or metadata entry is malformed.
    """
    parts = urlsplit(uri)
    if not parts.scheme or not parts.netloc:
        raise ConfigurationError(f"invalid sink URI {uri!r}: missing scheme or host")

    params = parse_qs(parts.query)
    dimensions_param = _get_param(params, "dimensions")
    dimensions = _parse_pairs(dimensions_param, "dimensions")
    metadata: dict[str, str] = {}
    if dimensions_param != "":
        metadata = _parse_pairs(_get_param(params, "metadata"), "metadata")

    host = parts.netloc.rpartition("@")[2]
    url = urlunsplit((parts.scheme, host, parts.path, "", ""))
    return SinkConfig(url=url, dimensions=dimensions, metadata=metadata)
