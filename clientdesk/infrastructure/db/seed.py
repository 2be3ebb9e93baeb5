"""
Demo data for a fresh Supabase project.
Rows are written through the repositories, so store errors surface as the
same domain exceptions the API sees.
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from clientdesk.domain.models.base import DuplicateEntityError
from clientdesk.domain.repositories import ClientRepository, ProjectRepository, TaskRepository


logger = logging.getLogger(__name__)


SEED_CLIENTS: List[Dict[str, Any]] = [
    {
        "name": "Acme Corporation",
        "email": "contact@acme.com",
        "phone": "+1-555-0101",
        "website_url": "https://acme.com",
        "status": "active",
        "notes": "Large enterprise client. Prefers monthly check-ins.",
    },
    {
        "name": "TechStart Inc.",
        "email": "hello@techstart.io",
        "phone": "+1-555-0102",
        "website_url": "https://techstart.io",
        "status": "active",
        "notes": "Startup company. Fast-moving projects.",
    },
    {
        "name": "Global Solutions Ltd.",
        "email": "info@globalsolutions.com",
        "phone": "+1-555-0103",
        "website_url": "https://globalsolutions.com",
        "status": "active",
        "notes": "International company with multiple offices.",
    },
    {
        "name": "Digital Innovations",
        "email": "contact@digitalinnov.com",
        "phone": "+1-555-0104",
        "website_url": None,
        "status": "active",
        "notes": "New client. Initial consultation completed.",
    },
    {
        "name": "Creative Agency",
        "email": "hello@creativeagency.com",
        "phone": "+1-555-0105",
        "website_url": "https://creativeagency.com",
        "status": "non_active",
        "notes": "Client on hold due to budget constraints.",
    },
    {
        "name": "Retail Plus",
        "email": "info@retailplus.com",
        "phone": "+1-555-0106",
        "website_url": "https://retailplus.com",
        "status": "active",
        "notes": "Retail chain looking to expand online presence.",
    },
    {
        "name": "FinanceHub",
        "email": "contact@financehub.com",
        "phone": "+1-555-0107",
        "website_url": "https://financehub.com",
        "status": "active",
        "notes": "Financial services company. Security is top priority.",
    },
    {
        "name": "HealthCare Systems",
        "email": "hello@healthcare.com",
        "phone": "+1-555-0108",
        "website_url": "https://healthcare.com",
        "status": "active",
        "notes": "Healthcare provider. HIPAA compliance required.",
    },
]

# (name, description, budget, status, start offset, end offset); offsets in days from today
SEED_PROJECTS = {
    "contact@acme.com": [
        ("Website Redesign", "Complete redesign of company website with modern UI/UX", 50000, "completed", -120, -30),
        ("Mobile App Development", "Native iOS and Android app for customer engagement", 75000, "non_completed", -60, 60),
        ("E-commerce Platform", "Build online store with payment integration", 45000, "non_completed", -30, 90),
    ],
    "hello@techstart.io": [
        ("Brand Identity Design", "Create new brand identity and marketing materials", 25000, "completed", -90, -20),
        ("Marketing Campaign", "Digital marketing campaign for product launch", 35000, "non_completed", -15, 45),
    ],
    "info@globalsolutions.com": [
        ("Enterprise Portal", "Internal portal for employee management", 100000, "non_completed", -45, 120),
        ("API Integration", "Integrate third-party APIs for data synchronization", 30000, "completed", -75, -10),
    ],
    "contact@digitalinnov.com": [
        ("Website Development", "Build new company website from scratch", 40000, "non_completed", -20, 60),
    ],
}

TASK_STATUSES = ["open", "in_progress", "on_hold", "completed"]
TASK_PRIORITIES = ["low", "medium", "high"]
TASKED_PROJECTS = 5


@dataclass
class SeedSummary:
    clients: int = 0
    skipped_clients: int = 0
    projects: int = 0
    tasks: int = 0


def project_rows(client_id: str, client: Dict[str, Any], index: int, today: date) -> List[Dict[str, Any]]:
    """Projects for one seeded client; clients without a fixed plan get one generic project."""
    plan = SEED_PROJECTS.get(client["email"])
    if plan is None:
        plan = [(
            f"Project for {client['name']}",
            f"Main project for {client['name']}",
            20000 + 5000 * index,
            "completed" if index % 2 else "non_completed",
            -30,
            30,
        )]

    return [
        {
            "client_id": client_id,
            "name": name,
            "description": description,
            "budget": budget,
            "currency": "USD",
            "status": status,
            "start_date": (today + timedelta(days=start)).isoformat(),
            "end_date": (today + timedelta(days=end)).isoformat(),
        }
        for name, description, budget, status, start, end in plan
    ]


def task_rows(project: Any, count: int) -> List[Dict[str, Any]]:
    rows = []
    for i in range(count):
        rows.append({
            "project_id": project.id,
            "name": f"Task {i + 1} for {project.name}",
            "description": f"Description for task {i + 1} of {project.name}",
            "status": TASK_STATUSES[i % len(TASK_STATUSES)],
            "priority": TASK_PRIORITIES[i % len(TASK_PRIORITIES)],
            "estimated_hours": 8 + 4 * i,
            "actual_hours": 6 + 5 * i if i % 2 == 0 else None,
            "start_date": project.start_date.isoformat() if project.start_date else None,
            "end_date": project.end_date.isoformat() if project.end_date else None,
        })
    return rows


async def seed_database(
    clients: ClientRepository,
    projects: ProjectRepository,
    tasks: TaskRepository,
    today: Optional[date] = None
) -> SeedSummary:
    """
    Insert the demo clients, their projects and tasks for the first projects.
    Clients whose email or phone already exists are skipped with their projects.
    """
    today = today or date.today()
    summary = SeedSummary()
    created_projects = []

    for index, values in enumerate(SEED_CLIENTS):
        try:
            client = await clients.create(dict(values))
        except DuplicateEntityError:
            logger.info("Client %s already exists, skipping", values["email"])
            summary.skipped_clients += 1
            continue
        summary.clients += 1

        for row in project_rows(client.id, values, index, today):
            created_projects.append(await projects.create(row))
            summary.projects += 1

    for position, project in enumerate(created_projects[:TASKED_PROJECTS]):
        for row in task_rows(project, 3 + position % 5):
            await tasks.create(row)
            summary.tasks += 1

    logger.info(
        "Seeded %d clients (%d skipped), %d projects, %d tasks",
        summary.clients, summary.skipped_clients, summary.projects, summary.tasks
    )
    return summary
