import logging
from types import SimpleNamespace

import pytest

from parnaioca.models.stay import StayStatus
from parnaioca.services.occupancy import occupancy_percentage, reconcile, summarize


def make_accommodation(accommodation_id, number):
    return SimpleNamespace(
        id=accommodation_id, name=f"Suíte {number}", number=number
    )


def make_stay(stay_id, accommodation_id, customer_name, status=StayStatus.CHECKED_IN):
    return SimpleNamespace(
        id=stay_id,
        accommodation_id=accommodation_id,
        status=status,
        customer=SimpleNamespace(name=customer_name),
    )


@pytest.mark.parametrize(
    "occupied, total, expected",
    [
        (0, 0, 0),
        (0, 3, 0),
        (1, 2, 50),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),  # 12.5 rounds half up
        (3, 3, 100),
    ],
)
def test_occupancy_percentage(occupied, total, expected):
    assert occupancy_percentage(occupied, total) == expected


class TestReconcile:
    def test_marks_occupied_and_free_units(self):
        accommodations = [
            make_accommodation("a1", "101"),
            make_accommodation("a2", "102"),
        ]
        stays = [make_stay("s1", "a2", "João Silva")]

        records = reconcile(accommodations, stays)

        assert [record.occupied for record in records] == [False, True]
        assert records[0].occupant_name is None
        assert records[0].stay_id is None
        assert records[1].occupant_name == "João Silva"
        assert records[1].stay_id == "s1"
        assert records[1].accommodation_number == "102"

    def test_keeps_accommodation_order(self):
        accommodations = [make_accommodation(f"a{i}", str(100 + i)) for i in range(5)]
        records = reconcile(accommodations, [])
        assert [record.accommodation_number for record in records] == [
            "100", "101", "102", "103", "104",
        ]

    def test_ignores_stays_that_are_not_checked_in(self):
        accommodations = [make_accommodation("a1", "101")]
        stays = [
            make_stay("s1", "a1", "Maria Santos", StayStatus.CHECKED_OUT),
            make_stay("s2", "a1", "Maria Santos", StayStatus.CANCELLED),
        ]

        records = reconcile(accommodations, stays)

        assert records[0].occupied is False

    def test_ignores_stays_for_unknown_accommodations(self):
        records = reconcile(
            [make_accommodation("a1", "101")], [make_stay("s1", "zz", "João Silva")]
        )
        assert len(records) == 1
        assert records[0].occupied is False

    def test_last_stay_wins_on_duplicates(self, caplog):
        accommodations = [make_accommodation("a1", "101")]
        stays = [
            make_stay("s1", "a1", "João Silva"),
            make_stay("s2", "a1", "Maria Santos"),
        ]

        with caplog.at_level(logging.WARNING):
            records = reconcile(accommodations, stays)

        assert records[0].stay_id == "s2"
        assert records[0].occupant_name == "Maria Santos"
        assert "more than one checked-in stay" in caplog.text


class TestSummarize:
    def test_counts_add_up(self):
        accommodations = [make_accommodation(f"a{i}", str(i)) for i in range(3)]
        records = reconcile(accommodations, [make_stay("s1", "a0", "João Silva")])

        summary = summarize(records)

        assert summary.total == 3
        assert summary.occupied == 1
        assert summary.free == 2
        assert summary.occupied + summary.free == summary.total
        assert summary.occupancy_percentage == 33

    def test_empty_input(self):
        summary = summarize([])
        assert summary.total == 0
        assert summary.occupancy_percentage == 0
