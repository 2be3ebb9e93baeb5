"""
CSV export of the clients table.
"""

import csv
import io
import logging
from datetime import date, datetime, timezone
from typing import Iterable, List, Optional, Union

from clientdesk.domain.models.client import ClientWithStats


logger = logging.getLogger(__name__)

CSV_HEADERS = [
    "Name",
    "Status",
    "Email",
    "Phone",
    "Website",
    "Projects",
    "Total Budget",
    "Currency",
    "Created",
    "Earliest Project",
    "Latest Project",
    "Notes",
]


def format_csv_date(value: Optional[Union[date, datetime]]) -> str:
    """YYYY-MM-DD, taking timestamps in UTC; empty when missing."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    return value.isoformat()


def format_number(value: Union[int, float]) -> str:
    """Shortest form: whole amounts without a trailing .0."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def client_row(client: ClientWithStats) -> List[str]:
    return [
        client.name,
        client.status.value,
        client.email,
        client.phone,
        client.website_url or "",
        format_number(client.projects_count),
        format_number(client.total_budget),
        client.primary_currency,
        format_csv_date(client.created_at),
        format_csv_date(client.earliest_start),
        format_csv_date(client.latest_end),
        client.notes or "",
    ]


def export_clients_csv(clients: Iterable[ClientWithStats]) -> str:
    """
    Render clients as CSV text.
    Every data cell is double-quoted with inner quotes doubled; lines end with \\n.
    """
    output = io.StringIO()
    output.write(",".join(CSV_HEADERS) + "\n")

    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    count = 0
    for client in clients:
        writer.writerow(client_row(client))
        count += 1

    logger.info("Exported %d clients to CSV", count)
    return output.getvalue()


def export_filename(today: Optional[date] = None) -> str:
    today = today or datetime.now(timezone.utc).date()
    return f"clients_{today.isoformat()}.csv"
