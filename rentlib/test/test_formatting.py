"""Tests for display formatting helpers."""

import json
from decimal import Decimal

import pytest

from rentlib.formatting import (
    format_cents,
    format_contract_status,
    format_currency,
    format_property_address,
    format_property_type,
)
from rentlib.schema import Address, ContractStatus, PropertyType


class TestCurrency:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1234.5, "R$ 1.234,50"),
            (0, "R$ 0,00"),
            (1000000, "R$ 1.000.000,00"),
            (Decimal("99.999"), "R$ 100,00"),
            (0.005, "R$ 0,01"),
            (-1234.5, "-R$ 1.234,50"),
        ],
    )
    def test_pt_br_convention(self, value, expected):
        assert format_currency(value) == expected

    def test_cents(self):
        assert format_cents(123450) == "R$ 1.234,50"

    def test_amounts_beyond_default_decimal_precision(self):
        assert format_currency(1e26) == "R$ 100.000.000.000.000.000.000.000.000,00"
        assert format_cents(10**30) == "R$ 10.000.000.000.000.000.000.000.000.000,00"
        assert (
            format_currency(Decimal("99999999999999999999999999999.995"))
            == "R$ 100.000.000.000.000.000.000.000.000.000,00"
        )

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), "abc"])
    def test_rejects_non_finite(self, value):
        with pytest.raises(ValueError):
            format_currency(value)


class TestEnumLabels:
    def test_property_types(self):
        assert format_property_type("apartamento") == "Apartamento"
        assert format_property_type("terreno") == "Terreno"
        assert format_property_type(PropertyType.CASA) == "Casa"

    def test_unknown_property_type_is_returned_unchanged(self):
        assert format_property_type("unknown_code") == "unknown_code"

    def test_contract_statuses(self):
        assert format_contract_status("ativo") == "Ativo"
        assert format_contract_status("pendente") == "Pendente"
        assert format_contract_status("encerrado") == "Encerrado"
        assert format_contract_status("renovado") == "Renovado"
        assert format_contract_status(ContractStatus.ATIVO) == "Ativo"

    def test_unknown_status_is_returned_unchanged(self):
        assert format_contract_status("suspenso") == "suspenso"

    def test_missing_codes_render_empty(self):
        assert format_property_type(None) == ""
        assert format_contract_status(None) == ""

    def test_parse_returns_none_for_unknown_codes(self):
        assert PropertyType.parse("castelo") is None
        assert PropertyType.parse(None) is None
        assert PropertyType.parse("Casa") is PropertyType.CASA
        assert ContractStatus.parse("ativo") is ContractStatus.ATIVO

    def test_enum_value_is_the_stored_code(self):
        assert PropertyType.COMERCIAL.value == "comercial"
        assert PropertyType("comercial").label == "Comercial"


class TestAddress:
    def test_street_number_city_state(self):
        address = {"street": "Rua A", "number": "10", "city": "São Paulo", "state": "SP"}
        assert format_property_address(address) == "Rua A, 10, São Paulo/SP"

    def test_full_address(self):
        address = Address(
            street="Rua A",
            number="10",
            complement="Apto 12",
            neighborhood="Centro",
            city="Campinas",
            state="SP",
        )
        assert format_property_address(address) == "Rua A, 10, Apto 12, - Centro, Campinas/SP"

    @pytest.mark.parametrize(
        "address",
        [
            {"street": "Rua A", "number": "10", "city": "São Paulo"},
            {"street": "Rua A", "number": "10", "state": "SP"},
            {"street": "Rua A", "number": "10", "city": "São Paulo", "state": ""},
        ],
    )
    def test_city_and_state_only_together(self, address):
        assert format_property_address(address) == "Rua A, 10"

    def test_skips_empty_parts(self):
        address = {"street": "Rua B", "number": "", "complement": None, "neighborhood": "  "}
        assert format_property_address(address) == "Rua B"

    def test_json_string(self):
        stored = json.dumps({"street": "Rua C", "number": 5, "city": "Recife", "state": "PE"})
        assert format_property_address(stored) == "Rua C, 5, Recife/PE"

    @pytest.mark.parametrize("address", [None, "", {}])
    def test_missing_address(self, address):
        assert format_property_address(address) == ""

    def test_rejects_invalid_json(self):
        with pytest.raises(ValueError):
            format_property_address("{not json")
