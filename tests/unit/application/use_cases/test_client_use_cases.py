"""
Unit tests for client use cases, run against in-memory repositories.
"""

import pytest
from unittest.mock import AsyncMock

from clientdesk.application.use_cases.client_use_cases import (
    ArchiveClientsUseCase, CreateClientUseCase, ExportClientsUseCase, GetClientDetailUseCase,
    ListClientsWithStatsUseCase, UpdateClientCommand, UpdateClientStatusCommand,
    UpdateClientStatusUseCase, UpdateClientUseCase
)
from clientdesk.domain.models.base import ConfigurationError, DataAccessError


async def add_client(client_repository, n, **values):
    row = {
        "name": f"Client {n}",
        "email": f"client{n}@example.com",
        "phone": f"555-01{n:02d}",
        "status": "active",
        **values,
    }
    return await client_repository.create(row)


async def add_project(project_repository, client_id, **values):
    row = {
        "client_id": client_id,
        "name": "Project",
        "currency": "USD",
        "status": "non_completed",
        **values,
    }
    return await project_repository.create(row)


class TestCreateClientUseCase:
    @pytest.mark.asyncio
    async def test_creates_normalized_client(self, client_repository, client_payload):
        use_case = CreateClientUseCase(client_repository)

        result = await use_case.execute(client_payload)

        assert result.success is True
        assert result.id is not None
        stored = client_repository.rows[result.id]
        assert stored["email"] == "contact@acme.com"
        assert stored["website_url"] == "acme.com"
        assert stored["status"] == "active"

    @pytest.mark.asyncio
    async def test_invalid_input_never_reaches_store(self, client_payload):
        repository = AsyncMock()
        use_case = CreateClientUseCase(repository)

        result = await use_case.execute({**client_payload, "phone": "abc", "email": "nope"})

        assert result.success is False
        assert result.error_code == "VALIDATION_ERROR"
        assert set(result.field_errors) == {"phone", "email"}
        repository.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_email(self, client_repository, client_payload):
        use_case = CreateClientUseCase(client_repository)
        await use_case.execute(client_payload)

        result = await use_case.execute({**client_payload, "phone": "555-9999"})

        assert result.success is False
        assert result.error == "A client with this email already exists. Please use a different email."
        assert "email" in result.field_errors

    @pytest.mark.asyncio
    async def test_duplicate_phone(self, client_repository, client_payload):
        use_case = CreateClientUseCase(client_repository)
        await use_case.execute(client_payload)

        result = await use_case.execute({**client_payload, "email": "other@acme.com"})

        assert result.error == (
            "A client with this phone number already exists. Please use a different phone number."
        )

    @pytest.mark.asyncio
    async def test_store_error_message_passes_through(self, store, client_repository, client_payload):
        store.fail_with = DataAccessError("permission denied for table clients")

        result = await CreateClientUseCase(client_repository).execute(client_payload)

        assert result.success is False
        assert result.error == "permission denied for table clients"

    @pytest.mark.asyncio
    async def test_missing_configuration_is_raised(self, store, client_repository, client_payload):
        store.fail_with = ConfigurationError("Missing Supabase environment variables: SUPABASE_URL")

        with pytest.raises(ConfigurationError):
            await CreateClientUseCase(client_repository).execute(client_payload)


class TestUpdateClientUseCases:
    @pytest.mark.asyncio
    async def test_update_client(self, client_repository, client_payload):
        client = await add_client(client_repository, 1)
        use_case = UpdateClientUseCase(client_repository)

        result = await use_case.execute(UpdateClientCommand(client.id, client_payload))

        assert result.success is True
        assert result.id == client.id
        assert result.data.name == "Acme Corporation"

    @pytest.mark.asyncio
    async def test_update_missing_client(self, client_repository, client_payload):
        use_case = UpdateClientUseCase(client_repository)

        result = await use_case.execute(UpdateClientCommand("missing", client_payload))

        assert result.success is False
        assert result.is_not_found

    @pytest.mark.asyncio
    async def test_update_to_taken_email(self, client_repository, client_payload):
        await add_client(client_repository, 1, email="contact@acme.com")
        other = await add_client(client_repository, 2)

        result = await UpdateClientUseCase(client_repository).execute(
            UpdateClientCommand(other.id, client_payload)
        )

        assert result.error_code == "DUPLICATE_ENTITY"

    @pytest.mark.asyncio
    async def test_update_status(self, client_repository):
        client = await add_client(client_repository, 1)

        result = await UpdateClientStatusUseCase(client_repository).execute(
            UpdateClientStatusCommand(client.id, "non_active")
        )

        assert result.success is True
        assert client_repository.rows[client.id]["status"] == "non_active"

    @pytest.mark.asyncio
    async def test_update_status_rejects_unknown_status(self, client_repository):
        client = await add_client(client_repository, 1)

        result = await UpdateClientStatusUseCase(client_repository).execute(
            UpdateClientStatusCommand(client.id, "deleted")
        )

        assert result.success is False
        assert "status" in result.field_errors


class TestArchiveClientsUseCase:
    @pytest.mark.asyncio
    async def test_archives_in_one_call(self, client_repository):
        first = await add_client(client_repository, 1)
        second = await add_client(client_repository, 2)

        result = await ArchiveClientsUseCase(client_repository).execute([first.id, second.id, first.id])

        assert result.success is True
        assert result.data == 2
        assert client_repository.archive_calls == [[first.id, second.id]]
        assert await client_repository.list_clients() == []

    @pytest.mark.asyncio
    async def test_empty_list_is_a_no_op(self):
        repository = AsyncMock()

        result = await ArchiveClientsUseCase(repository).execute([])

        assert result.success is True
        assert result.data == 0
        repository.archive_many.assert_not_called()

    @pytest.mark.asyncio
    async def test_failure_reports_whole_batch(self, store, client_repository):
        client = await add_client(client_repository, 1)
        store.fail_with = DataAccessError("statement timeout")

        result = await ArchiveClientsUseCase(client_repository).execute({"ids": [client.id]})

        assert result.success is False
        assert result.error == "statement timeout"


class TestListClientsWithStatsUseCase:
    @pytest.mark.asyncio
    async def test_lists_active_clients_newest_first_with_stats(self, client_repository, project_repository):
        older = await add_client(client_repository, 1)
        newer = await add_client(client_repository, 2)
        await add_client(client_repository, 3, status="non_active")
        await add_project(project_repository, older.id, budget=100)
        await add_project(project_repository, older.id, budget=200, archived_at="2024-02-01T00:00:00+00:00")

        use_case = ListClientsWithStatsUseCase(client_repository, project_repository)
        result = await use_case.execute(None)

        page = result.data
        assert result.success is True
        assert [item.id for item in page.items] == [newer.id, older.id]
        assert page.items[1].projects_count == 1
        assert page.items[1].total_budget == 100
        assert page.total == 2

    @pytest.mark.asyncio
    async def test_projects_fetched_in_one_batch(self, client_repository, project_repository):
        for n in range(3):
            await add_client(client_repository, n)

        await ListClientsWithStatsUseCase(client_repository, project_repository).execute({"status": "all"})

        assert len(project_repository.list_calls) == 1
        assert len(project_repository.list_calls[0]) == 3

    @pytest.mark.asyncio
    async def test_no_clients_skips_project_query(self, client_repository, project_repository):
        result = await ListClientsWithStatsUseCase(client_repository, project_repository).execute({})

        assert result.data.items == []
        assert project_repository.list_calls == []

    @pytest.mark.asyncio
    async def test_invalid_query(self, client_repository, project_repository):
        result = await ListClientsWithStatsUseCase(client_repository, project_repository).execute(
            {"page": "0"}
        )

        assert result.success is False
        assert "page" in result.field_errors


class TestExportClientsUseCase:
    @pytest.mark.asyncio
    async def test_exports_all_matching_rows(self, client_repository, project_repository):
        for n in range(30):
            await add_client(client_repository, n)

        list_use_case = ListClientsWithStatsUseCase(client_repository, project_repository)
        result = await ExportClientsUseCase(list_use_case).execute({"page_size": "10", "sort_by": "name"})

        export = result.data
        assert result.success is True
        assert export.count == 30
        assert export.filename.startswith("clients_") and export.filename.endswith(".csv")
        lines = export.content.splitlines()
        assert len(lines) == 31
        assert lines[1].startswith('"Client 0"')


class TestGetClientDetailUseCase:
    @pytest.mark.asyncio
    async def test_detail_with_projects_and_tasks(
        self, client_repository, project_repository, task_repository
    ):
        client = await add_client(client_repository, 1)
        old = await add_project(project_repository, client.id, name="Old", start_date="2023-01-01", budget=10)
        new = await add_project(project_repository, client.id, name="New", start_date="2024-06-01", budget=20)
        await task_repository.create({"project_id": old.id, "name": "Kickoff", "status": "completed", "priority": "low"})
        await task_repository.create({"project_id": new.id, "name": "Design", "status": "open", "priority": "high"})
        await task_repository.create({
            "project_id": new.id, "name": "Dropped", "status": "open", "priority": "low",
            "archived_at": "2024-06-02T00:00:00+00:00",
        })

        use_case = GetClientDetailUseCase(client_repository, project_repository, task_repository)
        result = await use_case.execute(client.id)

        detail = result.data
        assert result.success is True
        assert detail.client.projects_count == 2
        assert detail.client.total_budget == 30
        assert [p.name for p in detail.projects] == ["New", "Old"]
        assert [t.name for t in detail.projects[0].tasks] == ["Design"]
        assert [t.name for t in detail.projects[1].tasks] == ["Kickoff"]
        assert task_repository.list_calls == [[new.id, old.id]]

    @pytest.mark.asyncio
    async def test_archived_client_is_not_found(self, client_repository, project_repository, task_repository):
        client = await add_client(client_repository, 1)
        await ArchiveClientsUseCase(client_repository).execute([client.id])

        use_case = GetClientDetailUseCase(client_repository, project_repository, task_repository)
        result = await use_case.execute(client.id)

        assert result.success is False
        assert result.is_not_found

    @pytest.mark.asyncio
    async def test_blank_id(self, client_repository, project_repository, task_repository):
        use_case = GetClientDetailUseCase(client_repository, project_repository, task_repository)

        result = await use_case.execute("  ")

        assert result.error_code == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_client_error_reported_after_both_loads_finish(self, task_repository):
        clients = AsyncMock()
        clients.get_by_id.side_effect = DataAccessError("clients unavailable", "08006")
        projects = AsyncMock()
        projects.list_for_client.side_effect = DataAccessError("projects unavailable", "08006")

        use_case = GetClientDetailUseCase(clients, projects, task_repository)
        result = await use_case.execute("c1")

        assert result.error_code == "DATA_ACCESS_ERROR"
        assert result.error == "clients unavailable"
        projects.list_for_client.assert_awaited_once_with("c1")
        assert task_repository.list_calls == []

    @pytest.mark.asyncio
    async def test_project_error_fails_detail(self, client_repository, task_repository):
        client = await add_client(client_repository, 1)
        projects = AsyncMock()
        projects.list_for_client.side_effect = DataAccessError("projects unavailable", "08006")

        use_case = GetClientDetailUseCase(client_repository, projects, task_repository)
        result = await use_case.execute(client.id)

        assert result.success is False
        assert result.error == "projects unavailable"
