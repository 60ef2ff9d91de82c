from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any


class InvalidListingPayloadError(Exception):
    """Raised when a remote payload lacks the fields the search core inspects."""


@dataclass(frozen=True)
class ListingRecord:
    """
    A single job posting or freelance service offering.

    Only id, price and location are inspected by the search core; everything
    else in the remote payload is carried untouched in ``attributes``.
    """

    id: str
    price: Decimal
    location: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "ListingRecord":
        try:
            listing_id = payload["id"]
        except KeyError as exc:
            raise InvalidListingPayloadError("Listing payload has no 'id'.") from exc

        raw_price = payload.get("price")
        if raw_price is None:
            # Job postings carry a salary floor instead of a price
            raw_price = payload.get("salaryMin")
        try:
            price = Decimal(str(raw_price)) if raw_price is not None else Decimal("0")
        except InvalidOperation as exc:
            raise InvalidListingPayloadError(
                f"Listing {listing_id} has a non-numeric price: {raw_price!r}"
            ) from exc
        if not price.is_finite():
            raise InvalidListingPayloadError(
                f"Listing {listing_id} has a non-finite price: {raw_price!r}"
            )

        location = payload.get("location")
        return cls(
            id=str(listing_id),
            price=price,
            location=str(location) if location is not None else None,
            attributes=dict(payload),
        )

    def to_payload(self) -> dict[str, Any]:
        """Return the remote payload this record was built from."""
        payload = dict(self.attributes)
        payload.setdefault("id", self.id)
        payload.setdefault("price", float(self.price))
        if self.location is not None:
            payload.setdefault("location", self.location)
        return payload
