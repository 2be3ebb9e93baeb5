"""Client statistics service.
Derives per-client figures (project count, budget, date span) from project rows.
"""

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from clientdesk.domain.models.client import Client, ClientWithStats, DEFAULT_CURRENCY
from clientdesk.domain.models.project import Project


@dataclass(frozen=True)
class ClientStats:
    """Statistics for one client's set of non-archived projects."""

    projects_count: int = 0
    total_budget: float = 0
    primary_currency: str = DEFAULT_CURRENCY
    earliest_start: Optional[date] = None
    latest_end: Optional[date] = None

    def as_dict(self) -> Dict[str, object]:
        return {
            "projects_count": self.projects_count,
            "total_budget": self.total_budget,
            "primary_currency": self.primary_currency,
            "earliest_start": self.earliest_start,
            "latest_end": self.latest_end,
        }


class ClientStatsService:
    """
    Domain service for client aggregation.

    Budgets are only ever summed within one currency: the primary currency is
    the one used by the most budgeted projects, and projects in any other
    currency are left out of the total rather than converted.
    """

    def __init__(self, default_currency: str = DEFAULT_CURRENCY):
        self.default_currency = default_currency

    def primary_currency(self, projects: Iterable[Project]) -> str:
        """
        Most frequent currency among projects that have both a currency and a budget.
        Ties go to the currency seen first in input order.
        """
        counts: Dict[str, int] = {}
        for project in projects:
            if project.has_budget:
                counts[project.currency] = counts.get(project.currency, 0) + 1

        if not counts:
            return self.default_currency

        # max() keeps the first maximal key, and dicts keep insertion order
        return max(counts, key=counts.get)

    def compute_stats(self, projects: Sequence[Project]) -> ClientStats:
        """Aggregate a client's projects into ClientStats."""
        if not projects:
            return ClientStats(primary_currency=self.default_currency)

        currency = self.primary_currency(projects)
        total_budget = sum(
            project.budget
            for project in projects
            if project.has_budget and project.currency == currency
        )

        start_dates = [p.start_date for p in projects if p.start_date is not None]
        end_dates = [p.end_date for p in projects if p.end_date is not None]

        return ClientStats(
            projects_count=len(projects),
            total_budget=total_budget,
            primary_currency=currency,
            earliest_start=min(start_dates) if start_dates else None,
            latest_end=max(end_dates) if end_dates else None,
        )

    def with_stats(self, client: Client, projects: Sequence[Project]) -> ClientWithStats:
        """Attach statistics computed from `projects` to a client."""
        stats = self.compute_stats(projects)
        return ClientWithStats.from_client(client, **stats.as_dict())

    def build_clients_with_stats(
        self,
        clients: Sequence[Client],
        projects: Iterable[Project]
    ) -> List[ClientWithStats]:
        """
        Group a flat project list by client and aggregate each group.
        Client order is preserved; projects of unknown clients are ignored.
        """
        projects_by_client: Dict[str, List[Project]] = {client.id: [] for client in clients}
        for project in projects:
            if project.client_id in projects_by_client:
                projects_by_client[project.client_id].append(project)

        return [
            self.with_stats(client, projects_by_client[client.id])
            for client in clients
        ]
