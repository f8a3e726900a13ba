"""
Movement catalog: what can you do?

Catalog loading, muscle-group browsing and name search.
"""

from tonal_mcp.api.model import Movement
from tonal_mcp.sdk.client import TonalClient
from tonal_mcp.sdk import movements as sdk_movements

MAX_PER_GROUP = 10
MAX_SEARCH_RESULTS = 25


def load_catalog(client: TonalClient) -> list[Movement]:
    """Fetch the movement catalog as Movement objects."""
    return [Movement.from_payload(m) for m in sdk_movements.get_movements(client)]


def get_movements(client: TonalClient, muscle_groups: list[str] = None) -> dict:
    """Movements grouped by primary muscle, optionally filtered.

    A movement matches a filter term when any of its muscle groups contains
    the term (case-insensitive). Each group lists at most MAX_PER_GROUP
    movements, sorted by name, and reports how many were left out.
    """
    catalog = load_catalog(client)
    terms = [t.lower() for t in (muscle_groups or [])]

    if terms:
        filtered = [
            m for m in catalog
            if any(term in mg.lower() for term in terms for mg in m.muscle_groups)
        ]
    else:
        filtered = catalog

    grouped = {}
    for m in filtered:
        primary = m.muscle_groups[0] if m.muscle_groups else "Other"
        grouped.setdefault(primary, []).append(m)

    groups = []
    for muscle in sorted(grouped):
        members = sorted(grouped[muscle], key=lambda m: m.name)
        groups.append({
            "muscle_group": muscle,
            "count": len(members),
            "movements": [
                {"name": m.name, "also_works": list(m.muscle_groups[1:])}
                for m in members[:MAX_PER_GROUP]
            ],
            "more": max(0, len(members) - MAX_PER_GROUP),
        })

    return {
        "filter": muscle_groups or [],
        "total": len(catalog),
        "matched": len(filtered),
        "groups": groups,
    }


def search_movements(client: TonalClient, query: str) -> dict:
    """Movements whose name contains the query (case-insensitive).

    Exact matches sort first. Each result reports whether the movement is
    prescribed by reps or by duration, which decides what create/update
    need for it.
    """
    wanted = query.lower()
    matches = [m for m in load_catalog(client) if wanted in m.name.lower()]
    matches.sort(key=lambda m: (m.name.lower() != wanted, m.name))

    return {
        "query": query,
        "count": len(matches),
        "movements": [
            {
                "name": m.name,
                "muscle_groups": list(m.muscle_groups),
                "type": "duration" if m.is_duration_based else "reps",
            }
            for m in matches[:MAX_SEARCH_RESULTS]
        ],
        "more": max(0, len(matches) - MAX_SEARCH_RESULTS),
    }
