import os

import pytest

from schooladmin.mock_data import demo_store
from schooladmin.storage import EntityStore

# Widgets are built without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture()
def store():
    """A store seeded with the demo records."""
    return demo_store()


@pytest.fixture()
def empty_store():
    return EntityStore()


@pytest.fixture()
def make_route(empty_store):
    def _make(route_name="Route A", capacity=30, students=None, **extra):
        data = {
            "route_name": route_name,
            "driver_name": "Tom Driver",
            "vehicle_number": "BUS-001",
            "capacity": capacity,
            "schedule": "Mon-Fri 07:30",
            "students": list(students or []),
        }
        data.update(extra)
        return empty_store.add_transport(data)

    return _make
