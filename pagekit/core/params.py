"""Read optional integers out of request parameters."""

from typing import Mapping, Protocol

from pagekit.core.logging import get_logger

log = get_logger(__name__)


class ParameterSource(Protocol):
    def get_optional_int(self, key: str) -> int | None:
        ...


class QueryParameters:
    """ParameterSource over a str -> str mapping (Starlette QueryParams, dict)."""

    def __init__(self, values: Mapping[str, str]):
        self.values = values

    def get_optional_int(self, key: str) -> int | None:
        raw = self.values.get(key)
        if raw is None:
            return None
        raw = str(raw).strip()
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            # Unparseable values count as absent
            log.debug("ignored_parameter", key=key, value=raw)
            return None
