"""
Unit tests for value objects.
"""

import dataclasses

import pytest

from src.domain.value_objects.address import UNKNOWN_REGION, Address
from src.domain.value_objects.job_status import JobStatus
from src.domain.value_objects.technician_role import TechnicianRole


class TestJobStatus:
    """Test JobStatus value object."""

    def test_enum_values(self):
        """Test that all expected enum values exist."""
        expected_values = [
            "unassigned",
            "scheduled",
            "in_progress",
            "waiting_pickup",
            "completed",
        ]
        assert [status.value for status in JobStatus] == expected_values

    def test_is_assignable(self):
        assert JobStatus.UNASSIGNED.is_assignable() is True

        assert JobStatus.SCHEDULED.is_assignable() is False
        assert JobStatus.IN_PROGRESS.is_assignable() is False
        assert JobStatus.COMPLETED.is_assignable() is False

    def test_is_final(self):
        assert JobStatus.COMPLETED.is_final() is True
        assert JobStatus.SCHEDULED.is_final() is False
        assert JobStatus.WAITING_PICKUP.is_final() is False

    def test_is_field_update(self):
        """Only on-site progress statuses can be set by technicians."""
        assert JobStatus.IN_PROGRESS.is_field_update() is True
        assert JobStatus.WAITING_PICKUP.is_field_update() is True
        assert JobStatus.COMPLETED.is_field_update() is True

        assert JobStatus.UNASSIGNED.is_field_update() is False
        assert JobStatus.SCHEDULED.is_field_update() is False

    def test_enum_comparison(self):
        assert JobStatus.SCHEDULED == "scheduled"
        assert JobStatus("in_progress") is JobStatus.IN_PROGRESS


class TestTechnicianRole:
    """Test TechnicianRole value object."""

    def test_can_lead(self):
        assert TechnicianRole.LEAD_TECH.can_lead() is True
        assert TechnicianRole.ASSISTANT_TECH.can_lead() is False
        assert TechnicianRole.ADMIN.can_lead() is False

    def test_can_assist(self):
        assert TechnicianRole.LEAD_TECH.can_assist() is True
        assert TechnicianRole.ASSISTANT_TECH.can_assist() is True
        assert TechnicianRole.ADMIN.can_assist() is False

    def test_is_field_role(self):
        assert TechnicianRole.ADMIN.is_field_role() is False
        assert TechnicianRole.ASSISTANT_TECH.is_field_role() is True


class TestAddress:
    """Test Address value object."""

    def test_valid_address_creation(self):
        address = Address(
            street="123 Main St", city="Anytown", state="CA", zip_code="12345"
        )

        assert address.street == "123 Main St"
        assert address.city == "Anytown"
        assert address.state == "CA"
        assert address.zip_code == "12345"

    def test_normalizes_fields(self):
        address = Address(
            street="1 Elm St", city="  Macon ", state="ga", zip_code=" 31201 "
        )

        assert address.city == "Macon"
        assert address.state == "GA"
        assert address.zip_code == "31201"

    def test_missing_street(self):
        with pytest.raises(ValueError, match="Street is required"):
            Address(street="  ", city="Anytown", state="CA", zip_code="12345")

    def test_missing_zip_code(self):
        with pytest.raises(ValueError, match="ZIP code is required"):
            Address(street="123 Main St", city="Anytown", state="CA", zip_code="")

    def test_invalid_state_length(self):
        with pytest.raises(ValueError, match="State must be 2 characters"):
            Address(street="123 Main St", city="Anytown", state="CAL", zip_code="12345")

    def test_region_and_locality(self):
        address = Address(street="9 Oak Ave", city="Savannah", state="GA", zip_code="31401")

        assert address.region == "GA"
        assert address.locality == "Savannah"

    def test_missing_region_falls_back_to_unknown(self):
        address = Address(street="9 Oak Ave", city="", state="", zip_code="31401")

        assert address.region == UNKNOWN_REGION
        assert address.locality == UNKNOWN_REGION

    def test_full_address(self):
        address = Address(
            street="123 Main St", city="Anytown", state="CA", zip_code="12345"
        )

        assert address.full_address == "123 Main St, Anytown, CA 12345"

    def test_to_dict(self):
        address = Address(
            street="123 Main St", city="Anytown", state="CA", zip_code="12345"
        )

        assert address.to_dict() == {
            "street": "123 Main St",
            "city": "Anytown",
            "state": "CA",
            "zip_code": "12345",
        }

    def test_immutability(self):
        address = Address(
            street="123 Main St", city="Anytown", state="CA", zip_code="12345"
        )

        with pytest.raises(dataclasses.FrozenInstanceError):
            address.street = "456 Oak Ave"
