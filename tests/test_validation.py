"""Unit tests for core/validation.py -- vehicle and administrator field rules.

Covers:
- Each vehicle rule fires on its own and only on its own input
- Rules are independent: all violations are reported together
- Year boundary (1950 accepted, 1949 rejected)
- Administrator presence rules; unknown roles are not a validation error
"""

from types import SimpleNamespace

import pytest

from api.models import AdministradorDTO, VeiculoDTO
from core.validation import (
    MAX_BRAND_LENGTH,
    MAX_NAME_LENGTH,
    MAX_VEHICLE_YEAR,
    MSG_BRAND_EMPTY,
    MSG_BRAND_TOO_LONG,
    MSG_EMAIL_EMPTY,
    MSG_NAME_EMPTY,
    MSG_NAME_TOO_LONG,
    MSG_PASSWORD_EMPTY,
    MSG_ROLE_EMPTY,
    MSG_VEHICLE_TOO_OLD,
    MSG_YEAR_OUT_OF_RANGE,
    validate_administrator,
    validate_vehicle,
)


def _vehicle(name="Fusca", brand="Volkswagen", year=1973) -> VeiculoDTO:
    return VeiculoDTO(name=name, brand=brand, year=year)


class TestValidateVehicle:
    def test_valid_vehicle_has_no_messages(self):
        assert validate_vehicle(_vehicle()) == []

    def test_year_boundary_1950_accepted(self):
        assert validate_vehicle(_vehicle(year=1950)) == []

    @pytest.mark.parametrize(
        "name, brand",
        [("Fusca", "Volkswagen"), ("", "Volkswagen"), ("Fusca", ""), ("", "")],
    )
    def test_too_old_reported_regardless_of_name_and_brand(self, name, brand):
        messages = validate_vehicle(_vehicle(name=name, brand=brand, year=1949))
        assert MSG_VEHICLE_TOO_OLD in messages

    def test_all_three_rules_reported_together(self):
        messages = validate_vehicle(_vehicle(name="", brand="", year=1900))
        assert len(messages) == 3
        assert set(messages) == {MSG_NAME_EMPTY, MSG_BRAND_EMPTY, MSG_VEHICLE_TOO_OLD}

    def test_whitespace_name_is_empty(self):
        assert validate_vehicle(_vehicle(name="   ")) == [MSG_NAME_EMPTY]

    def test_missing_fields_reported(self):
        """A body with no fields at all breaks every rule."""
        messages = validate_vehicle(VeiculoDTO())
        assert messages == [MSG_NAME_EMPTY, MSG_BRAND_EMPTY, MSG_VEHICLE_TOO_OLD]

    def test_works_on_any_object_with_the_attributes(self):
        assert validate_vehicle(SimpleNamespace(name="Gol", brand="", year=2000)) == [MSG_BRAND_EMPTY]

    def test_too_old_message_mentions_limit(self):
        assert "1950" in MSG_VEHICLE_TOO_OLD

    def test_length_limits_are_inclusive(self):
        assert validate_vehicle(_vehicle(name="n" * MAX_NAME_LENGTH, brand="b" * MAX_BRAND_LENGTH)) == []

    def test_over_long_name_and_brand_reported(self):
        messages = validate_vehicle(_vehicle(name="n" * (MAX_NAME_LENGTH + 1), brand="b" * (MAX_BRAND_LENGTH + 1)))
        assert messages == [MSG_NAME_TOO_LONG, MSG_BRAND_TOO_LONG]

    def test_year_above_column_range_reported(self):
        assert validate_vehicle(_vehicle(year=MAX_VEHICLE_YEAR)) == []
        assert validate_vehicle(_vehicle(year=MAX_VEHICLE_YEAR + 1)) == [MSG_YEAR_OUT_OF_RANGE]


class TestValidateAdministrator:
    def test_valid_administrator(self):
        dto = AdministradorDTO(email="a@b.com", password="x", role="Adm")
        assert validate_administrator(dto) == []

    def test_all_missing(self):
        messages = validate_administrator(AdministradorDTO())
        assert messages == [MSG_EMAIL_EMPTY, MSG_PASSWORD_EMPTY, MSG_ROLE_EMPTY]

    def test_unknown_role_is_not_an_error(self):
        dto = AdministradorDTO(email="a@b.com", password="x", role="Gerente")
        assert validate_administrator(dto) == []

    def test_dto_reads_wire_names(self):
        dto = AdministradorDTO.model_validate({"Email": "a@b.com", "Senha": "x", "Perfil": "Editor"})
        assert (dto.email, dto.password, dto.role) == ("a@b.com", "x", "Editor")
