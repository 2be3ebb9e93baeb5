"""
Unit tests for request validation.
"""

import pytest

from clientdesk.application.dto.client_dto import ClientInputDTO, ArchiveClientsRequestDTO, ListClientsRequestDTO
from clientdesk.application.dto.project_dto import ProjectInputDTO, CreateProjectRequestDTO
from clientdesk.domain.models.base import ValidationError
from clientdesk.infrastructure.validation.validators import DataValidator, BusinessValidator


class TestClientInput:
    def test_normalizes_values(self, client_payload):
        client_payload.update(name="  Acme  ", notes="   ")

        data = ClientInputDTO.parse(client_payload)

        assert data.name == "Acme"
        assert data.email == "contact@acme.com"
        assert data.notes is None
        assert data.website_url == "acme.com"

    def test_collects_every_failing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            ClientInputDTO.parse({"name": "", "email": "not-an-email", "phone": "abc"})

        errors = exc_info.value.field_errors
        assert errors["name"] == "Name is required"
        assert errors["email"] == "Please enter a valid email address"
        assert errors["phone"].startswith("Please enter a valid phone number")

    def test_missing_fields_are_required(self):
        with pytest.raises(ValidationError) as exc_info:
            ClientInputDTO.parse({})

        assert exc_info.value.field_errors["email"] == "Email is required"

    @pytest.mark.parametrize("phone", ["+1 (555) 010-1", "555 0101", "+44-20-7946-0958"])
    def test_valid_phones(self, phone):
        assert DataValidator.validate_phone(phone) == phone

    @pytest.mark.parametrize("phone", ["abc", "555-CALL", "555.0101", "\u0663\u0663\u0663-0101"])
    def test_invalid_phones(self, phone):
        with pytest.raises(ValueError, match="valid phone number"):
            DataValidator.validate_phone(phone)

    def test_phone_length(self):
        assert DataValidator.validate_phone("1" * 50) == "1" * 50
        with pytest.raises(ValueError, match="Phone must be at most 50 characters"):
            DataValidator.validate_phone("1" * 51)

    def test_name_length_boundary(self):
        assert DataValidator.validate_name("a" * 255) == "a" * 255
        with pytest.raises(ValueError, match="Name must be at most 255 characters"):
            DataValidator.validate_name("a" * 256)

    @pytest.mark.parametrize("url", ["example.com", "https://example.com/path", "http://localhost:8080"])
    def test_valid_urls(self, url):
        assert DataValidator.validate_url(url) == url

    @pytest.mark.parametrize("url", ["not a url", "ftp://example.com", "https://", "http://host:99999"])
    def test_invalid_urls(self, url):
        with pytest.raises(ValueError, match="valid URL"):
            DataValidator.validate_url(url)

    def test_blank_url_becomes_none(self):
        assert DataValidator.validate_url("  ") is None

    def test_unknown_status_rejected(self, client_payload):
        client_payload["status"] = "archived"

        with pytest.raises(ValidationError) as exc_info:
            ClientInputDTO.parse(client_payload)

        assert "status" in exc_info.value.field_errors

    def test_unknown_field_rejected(self, client_payload):
        client_payload["owner"] = "someone"

        with pytest.raises(ValidationError) as exc_info:
            ClientInputDTO.parse(client_payload)

        assert exc_info.value.field_errors == {"owner": "Unknown field"}


class TestProjectInput:
    def test_normalizes_values(self, project_payload):
        project_payload.update(description="", budget="")

        data = ProjectInputDTO.parse(project_payload)

        assert data.currency == "USD"
        assert data.description is None
        assert data.budget is None

    def test_end_before_start_fails_on_end_date(self, project_payload):
        project_payload.update(start_date="2024-05-01", end_date="2024-04-01")

        with pytest.raises(ValidationError) as exc_info:
            ProjectInputDTO.parse(project_payload)

        assert exc_info.value.field_errors == {
            "end_date": "End date must be after or equal to start date"
        }

    def test_equal_dates_pass(self, project_payload):
        project_payload.update(start_date="2024-05-01", end_date="2024-05-01")

        data = ProjectInputDTO.parse(project_payload)

        assert data.start_date == data.end_date

    def test_timestamps_keep_date_part(self, project_payload):
        project_payload.update(start_date="2024-05-01T10:00:00Z", end_date=None)

        data = ProjectInputDTO.parse(project_payload)

        assert data.start_date.isoformat() == "2024-05-01"
        assert data.end_date is None

    @pytest.mark.parametrize("budget", [0, -5, "abc", True, float("inf")])
    def test_budget_must_be_positive(self, budget):
        with pytest.raises(ValueError, match="Budget must be a positive number"):
            BusinessValidator.validate_budget(budget)

    def test_budget_string_is_parsed(self):
        assert BusinessValidator.validate_budget(" 1500.50 ") == 1500.5

    def test_currency_too_long(self, project_payload):
        project_payload["currency"] = "EURO"

        with pytest.raises(ValidationError) as exc_info:
            ProjectInputDTO.parse(project_payload)

        assert exc_info.value.field_errors["currency"] == "Currency code must be 3 characters"

    def test_create_requires_client(self, project_payload):
        with pytest.raises(ValidationError) as exc_info:
            CreateProjectRequestDTO.parse({**project_payload, "client_id": " "})

        assert exc_info.value.field_errors == {"client_id": "Client is required"}

    def test_store_values(self, project_payload):
        data = CreateProjectRequestDTO.parse({**project_payload, "client_id": "c1"})

        assert data.to_store_values() == {
            "client_id": "c1",
            "name": "Website Redesign",
            "description": "New marketing site",
            "budget": 5000.0,
            "currency": "USD",
            "status": "non_completed",
            "start_date": "2024-01-15",
            "end_date": "2024-03-01",
        }


class TestListAndArchiveInput:
    def test_archive_ids_deduplicated(self):
        data = ArchiveClientsRequestDTO.parse({"ids": ["c1", "c2", "c1", ""]})

        assert data.ids == ["c1", "c2"]

    def test_table_query_rejects_unknown_sort_column(self):
        with pytest.raises(ValidationError) as exc_info:
            ListClientsRequestDTO.parse({"sort_by": "password"})

        assert "sort_by" in exc_info.value.field_errors

    def test_table_query_parses_strings(self):
        query = ListClientsRequestDTO.parse({"page": "2", "page_size": "10", "search": ""})

        assert query.page == 2
        assert query.page_size == 10
        assert query.search is None
