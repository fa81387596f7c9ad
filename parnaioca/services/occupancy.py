"""
Occupancy reconciliation.

Decides, for a set of accommodations, which ones hold a checked-in stay and
who the occupant is. Works on any objects exposing the attributes used below,
so it is shared by the parking, check-in, dashboard and report loaders.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List

from parnaioca.models.stay import StayStatus
from parnaioca.schemas.occupancy import AccommodationOccupancy, OccupancySummary

logger = logging.getLogger(__name__)


def occupancy_percentage(occupied: int, total: int) -> int:
    """occupied/total as a whole percentage, rounded half up; 0 when total is 0."""
    if total <= 0:
        return 0
    ratio = Decimal(occupied * 100) / Decimal(total)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def reconcile(
    accommodations: Iterable[Any], checked_in_stays: Iterable[Any]
) -> List[AccommodationOccupancy]:
    """
    Label every accommodation as occupied or free.

    Stays need ``id``, ``accommodation_id``, ``status`` and a loaded
    ``customer``. Stays in any status other than checked-in are ignored.
    Should two checked-in stays reference the same accommodation, the last
    one wins and the clash is logged.
    """
    stays_by_accommodation: Dict[str, Any] = {}
    for stay in checked_in_stays:
        if stay.status != StayStatus.CHECKED_IN:
            continue
        if stay.accommodation_id in stays_by_accommodation:
            logger.warning(
                f"Accommodation {stay.accommodation_id} has more than one "
                f"checked-in stay, keeping stay {stay.id}"
            )
        stays_by_accommodation[stay.accommodation_id] = stay

    records = []
    for accommodation in accommodations:
        stay = stays_by_accommodation.get(accommodation.id)
        records.append(
            AccommodationOccupancy(
                accommodation_id=accommodation.id,
                accommodation_name=accommodation.name,
                accommodation_number=accommodation.number,
                occupied=stay is not None,
                occupant_name=stay.customer.name if stay is not None else None,
                stay_id=stay.id if stay is not None else None,
            )
        )
    return records


def summarize(records: List[AccommodationOccupancy]) -> OccupancySummary:
    occupied = sum(1 for record in records if record.occupied)
    total = len(records)
    return OccupancySummary(
        total=total,
        occupied=occupied,
        free=total - occupied,
        occupancy_percentage=occupancy_percentage(occupied, total),
    )
