import pytest

QtWidgets = pytest.importorskip("PySide6.QtWidgets")
QtCore = pytest.importorskip("PySide6.QtCore")
pytest.importorskip("PySide6.QtCharts")

from schooladmin.logger import ErrorLogger  # noqa: E402
from schooladmin.qt_app import MainWindow  # noqa: E402
from schooladmin.qt_pages import RecordDialog  # noqa: E402
from schooladmin.session import AppSession  # noqa: E402
from schooladmin.settings_store import SettingsStore  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture()
def window(qapp, store, tmp_path):
    session = AppSession()
    session.login("admin@school.edu", "admin123")
    w = MainWindow(
        store,
        session=session,
        settings_store=SettingsStore(tmp_path / "settings.json"),
        err_logger=ErrorLogger(tmp_path / "error_log.txt"),
    )
    yield w
    w.close()


def test_pages_show_demo_records(window):
    assert window.models["student"].rowCount() == 2
    assert window.models["teacher"].rowCount() == 2
    assert window.models["payment"].rowCount() == 2
    assert window.models["grade"].rowCount() == 0
    assert window.page_dashboard.card_students.lbl_value.text() == "2"
    assert window.page_dashboard.card_revenue.lbl_value.text() == "$3,000"


def test_search_box_filters_table(window):
    page = window.entity_pages["student"]
    page.search.setText("jane")
    assert window.models["student"].rowCount() == 1
    assert window.models["student"].row_record(0).name == "Jane Smith"
    page.search.setText("nobody")
    assert window.models["student"].rowCount() == 0
    assert not page.empty.isHidden()
    assert page.empty.text() == "Try adjusting your search or filters"


def test_payment_summary_and_mark_paid(window):
    page = window.entity_pages["payment"]
    assert "Pending: $1,500.00" in page.summary.text()
    model = window.models["payment"]
    proxy = window.proxies["payment"]
    row = next(r for r in range(model.rowCount()) if model.row_record(r).status == "pending")
    page.table.selectRow(proxy.mapFromSource(model.index(row, 0)).row())
    window.mark_selected_paid()
    assert window.store.get("payment", "PAY-0002").status == "paid"
    assert "Pending: $0.00" in page.summary.text()


def test_record_dialog_shows_field_errors(window):
    dlg = RecordDialog(window, store=window.store, kind="teacher", title="Add Teacher")
    dlg._on_ok()
    assert dlg.result_record is None
    assert not dlg._errors["name"].isHidden()
    assert dlg._errors["name"].text() == "Name must be at least 2 characters"
    assert len(window.store.teachers) == 2


def test_record_dialog_edits_existing_record(window):
    student = window.store.get("student", "STU-0001")
    dlg = RecordDialog(window, store=window.store, kind="student", title="Edit Student", record=student)
    data = dlg.get_data()
    assert data["class_name"] == "10A"
    assert data["parent_id"] == "PAR-0001"
    dlg._widgets["name"].setText("Johnny Doe")
    dlg._on_ok()
    assert dlg.result_record is not None
    assert window.store.get("student", "STU-0001").name == "Johnny Doe"


def test_transport_dialog_collects_stops(window):
    dlg = RecordDialog(window, store=window.store, kind="transport", title="Add Route")
    dlg._widgets["route_name"].setText("North Loop")
    dlg._widgets["driver_name"].setText("Tom Driver")
    dlg._widgets["vehicle_number"].setText("BUS-001")
    dlg._widgets["capacity"].setValue(30)
    dlg._widgets["schedule"].setText("Mon-Fri 07:30")
    stops = dlg._widgets["stops"]
    stops.set_stops([{"name": "Main Gate", "address": "1 School Road", "time": "07:30"}])
    dlg._on_ok()
    assert dlg.result_record is not None
    assert [s.name for s in dlg.result_record.stops] == ["Main Gate"]


def test_toggle_theme_and_settings(window):
    assert not window.session.dark_mode
    window.toggle_theme()
    assert window.session.dark_mode
    window.page_settings.school_name.setText("Hillside High")
    window.page_settings.load_settings(window.settings)
    assert window.page_settings.school_name.text() == "SchoolAdmin Academy"


def test_dashboard_lists_recent_payments(window):
    table = window.page_dashboard.recent_payments
    assert table.rowCount() == 2
    assert table.item(0, 0).text() == "John Doe"
    assert table.item(1, 2).text() == "$1,500.00"
    assert table.item(1, 3).text() == "pending"


def _column(window, kind, header):
    model = window.models[kind]
    return next(i for i in range(model.columnCount()) if model.headerData(i, QtCore.Qt.Horizontal) == header)


def _shown(window, kind, col):
    proxy = window.proxies[kind]
    return [proxy.index(r, col).data() for r in range(proxy.rowCount())]


def test_amount_column_sorts_numerically(window):
    window.store.update_payment("PAY-0001", {"amount": 900})
    window.store.update_payment("PAY-0002", {"amount": 10000})
    window.refresh_entity("payment")
    col = _column(window, "payment", "Amount")
    window.proxies["payment"].sort(col, QtCore.Qt.AscendingOrder)
    assert _shown(window, "payment", col) == ["$900.00", "$10,000.00"]
    window.proxies["payment"].sort(col, QtCore.Qt.DescendingOrder)
    assert _shown(window, "payment", col) == ["$10,000.00", "$900.00"]


def test_salary_column_sorts_numerically(window):
    window.store.add_staff(
        {
            "name": "Ben Porter",
            "email": "ben.porter@school.edu",
            "phone": "+1234567895",
            "position": "Janitor",
            "department": "Maintenance",
            "salary": 9000,
        }
    )
    window.refresh_entity("staff")
    col = _column(window, "staff", "Salary")
    window.proxies["staff"].sort(col, QtCore.Qt.AscendingOrder)
    assert _shown(window, "staff", col) == ["$9,000", "$75,000"]
