"""
Bidirectional mapping between FilterState and the flat address parameters.

Decoding is best-effort: anything that does not parse degrades to an absent
field so a hand-edited or truncated URL can never break the search page.
"""
import re
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from urllib.parse import parse_qsl, urlencode

from src.domain.entities.filter_state import FilterState

PARAM_QUERY = "q"
PARAM_CATEGORY = "mainCategoryId"
PARAM_MIN_PRICE = "minPrice"
PARAM_MAX_PRICE = "maxPrice"
PARAM_LOCATION = "location"
PARAM_PAGE = "page"

# Canonical key order for encoded addresses
PARAM_ORDER = (
    PARAM_QUERY,
    PARAM_CATEGORY,
    PARAM_MIN_PRICE,
    PARAM_MAX_PRICE,
    PARAM_LOCATION,
    PARAM_PAGE,
)

_CATEGORY_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")

# Prices written with a larger magnitude exponent (either sign) are rejected
_MAX_PRICE_EXPONENT = 15


def _text(params: Mapping[str, str], key: str) -> str | None:
    value = params.get(key)
    if value is None or value == "":
        return None
    return value


def _price(params: Mapping[str, str], key: str) -> Decimal | None:
    raw = _text(params, key)
    if raw is None:
        return None
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        return None
    if not value.is_finite() or value < 0:
        return None
    if abs(value.adjusted()) > _MAX_PRICE_EXPONENT:
        return None
    return value


def _category_id(params: Mapping[str, str]) -> str | None:
    raw = _text(params, PARAM_CATEGORY)
    if raw is None or not _CATEGORY_ID_RE.match(raw):
        return None
    return raw


def _page(params: Mapping[str, str]) -> int:
    raw = _text(params, PARAM_PAGE)
    if raw is None:
        return 1
    try:
        page = int(raw.strip())
    except ValueError:
        return 1
    return page if page >= 1 else 1


def _format_price(value: Decimal) -> str:
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class FilterStateCodec:
    """Encodes a FilterState to address parameters and back."""

    def decode(self, params: Mapping[str, str]) -> FilterState:
        return FilterState(
            text_query=_text(params, PARAM_QUERY) or "",
            category_id=_category_id(params),
            min_price=_price(params, PARAM_MIN_PRICE),
            max_price=_price(params, PARAM_MAX_PRICE),
            location=_text(params, PARAM_LOCATION),
            page=_page(params),
        )

    def encode(self, state: FilterState) -> dict[str, str]:
        params: dict[str, str] = {}
        if state.text_query:
            params[PARAM_QUERY] = state.text_query
        if state.category_id:
            params[PARAM_CATEGORY] = state.category_id
        if state.min_price is not None:
            params[PARAM_MIN_PRICE] = _format_price(state.min_price)
        if state.max_price is not None:
            params[PARAM_MAX_PRICE] = _format_price(state.max_price)
        if state.location:
            params[PARAM_LOCATION] = state.location
        # page 1 is the canonical default and is left out of the address
        if state.page != 1:
            params[PARAM_PAGE] = str(state.page)
        return params

    def to_query_string(self, state: FilterState) -> str:
        params = self.encode(state)
        return urlencode([(key, params[key]) for key in PARAM_ORDER if key in params])

    def from_query_string(self, query_string: str) -> FilterState:
        params: dict[str, str] = {}
        for key, value in parse_qsl(query_string.lstrip("?"), keep_blank_values=True):
            # first occurrence wins, as with URLSearchParams.get()
            params.setdefault(key, value)
        return self.decode(params)
