"""
Display helpers for enum codes and property addresses.
"""

import json
import logging
from dataclasses import asdict
from typing import Any, Mapping, Optional, Union

from rentlib.schema.entities import Address
from rentlib.schema.enums import ContractStatus, PropertyType

logger = logging.getLogger(__name__)

AddressLike = Union[Address, Mapping[str, Any], str, None]


def format_property_type(code: Union[str, PropertyType, None]) -> str:
    """Display name of a property type; unknown codes are returned unchanged."""
    member = PropertyType.parse(code)
    if member is not None:
        return member.label
    return "" if code is None else str(code)


def format_contract_status(code: Union[str, ContractStatus, None]) -> str:
    """Display name of a contract status; unknown codes are returned unchanged."""
    member = ContractStatus.parse(code)
    if member is not None:
        return member.label
    return "" if code is None else str(code)


def _address_fields(address: AddressLike) -> Optional[Mapping[str, Any]]:
    if address is None:
        return None
    if isinstance(address, Address):
        return asdict(address)
    if isinstance(address, str):
        if not address.strip():
            return None
        # Properties store the address as a JSON document
        try:
            loaded = json.loads(address)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Address is not valid JSON: {address!r}") from exc
        if not isinstance(loaded, Mapping):
            raise ValueError(f"Address JSON must be an object: {address!r}")
        return loaded
    if isinstance(address, Mapping):
        return address
    raise TypeError(f"Unsupported type for address: {type(address)}")


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def format_property_address(address: AddressLike) -> str:
    """
    Build a single address line.

    Parts are street, number, complement, '- neighborhood' and 'city/state';
    missing parts are skipped and city/state only appear together.
    """
    fields = _address_fields(address)
    if not fields:
        return ""

    street = _clean(fields.get("street"))
    number = _clean(fields.get("number"))
    complement = _clean(fields.get("complement"))
    neighborhood = _clean(fields.get("neighborhood"))
    city = _clean(fields.get("city"))
    state = _clean(fields.get("state"))

    parts = [
        street,
        number,
        complement,
        f"- {neighborhood}" if neighborhood else "",
        f"{city}/{state}" if city and state else "",
    ]
    if (city or state) and not (city and state):
        logger.debug("Dropping incomplete city/state pair: %r/%r", city, state)
    return ", ".join(part for part in parts if part)
