from __future__ import annotations

from typing import Any, Optional

from PySide6 import QtCore, QtGui, QtWidgets
from PySide6.QtCharts import QBarCategoryAxis, QBarSeries, QBarSet, QChart, QChartView, QPieSeries, QValueAxis

from . import filters, stats
from .constants import (
    APP_NAME,
    DEPARTMENTS,
    PAYMENT_STATUSES,
    PAYMENT_TYPES,
    PERSON_STATUSES,
    UNKNOWN_STUDENT,
)
from .logger import ErrorLogger, configure_logging
from .mock_data import demo_store
from .qt_pages import (
    ActivityPage,
    Column,
    EntityPage,
    FilterSpec,
    LoginDialog,
    PageSpec,
    RecordDialog,
    SettingsPage,
    _plain,
    _titled,
)
from .session import AppSession
from .settings_store import SettingsStore, export_data, import_data
from .storage import EntityStore

SORT_ROLE = QtCore.Qt.UserRole + 1

PAYMENT_STATUS_COLORS = {"paid": (16, 185, 129), "pending": (245, 158, 11), "overdue": (239, 68, 68)}

THEMES = {
    "Dark": {
        "window": "#0c0e12", "panel": "#0b0d11", "card": "#0f1218", "input": "#10131a",
        "border": "#222733", "text": "#e7edf4", "muted": "#aab3c2", "hover": "#131722",
        "active": "#1a1f2b", "grid": "#1f2431", "accent": "#ffb100", "on_accent": "#0b0d11",
    },
    "Light": {
        "window": "#f5f6f8", "panel": "#ffffff", "card": "#ffffff", "input": "#ffffff",
        "border": "#dfe3ea", "text": "#111827", "muted": "#6b7280", "hover": "#eef1f6",
        "active": "#e6eaf2", "grid": "#e5e7eb", "accent": "#2563eb", "on_accent": "#ffffff",
    },
}


def _app_dark_palette() -> QtGui.QPalette:
    p = QtGui.QPalette()
    p.setColor(QtGui.QPalette.Window, QtGui.QColor(12, 14, 18))
    p.setColor(QtGui.QPalette.WindowText, QtGui.QColor(236, 240, 244))
    p.setColor(QtGui.QPalette.Base, QtGui.QColor(18, 21, 27))
    p.setColor(QtGui.QPalette.AlternateBase, QtGui.QColor(14, 16, 21))
    p.setColor(QtGui.QPalette.ToolTipBase, QtGui.QColor(40, 44, 52))
    p.setColor(QtGui.QPalette.ToolTipText, QtGui.QColor(236, 240, 244))
    p.setColor(QtGui.QPalette.Text, QtGui.QColor(236, 240, 244))
    p.setColor(QtGui.QPalette.Button, QtGui.QColor(22, 25, 32))
    p.setColor(QtGui.QPalette.ButtonText, QtGui.QColor(236, 240, 244))
    p.setColor(QtGui.QPalette.BrightText, QtGui.QColor(255, 90, 90))
    p.setColor(QtGui.QPalette.Highlight, QtGui.QColor(255, 177, 0))
    p.setColor(QtGui.QPalette.HighlightedText, QtGui.QColor(12, 14, 18))
    return p


def _qss(mode: str) -> str:
    c = THEMES.get(mode, THEMES["Light"])
    return f"""
    QWidget {{ font-size: 12px; }}

    QFrame#Sidebar {{ background: {c['panel']}; border-right: 1px solid {c['border']}; }}
    QLabel#AppTitle {{ font-size: 16px; font-weight: 700; color: {c['text']}; }}
    QLabel#SectionTitle {{ font-size: 12px; font-weight: 700; color: {c['muted']}; }}
    QLabel#FieldError {{ color: #ef4444; }}

    QPushButton.NavBtn {{
        text-align: left;
        padding: 10px 12px;
        border-radius: 10px;
        border: 1px solid transparent;
        color: {c['text']};
        background: transparent;
    }}
    QPushButton.NavBtn:hover {{ background: {c['hover']}; }}
    QPushButton.NavBtn[active="true"] {{
        background: {c['active']};
        border: 1px solid {c['border']};
    }}

    QFrame#TopBar {{ background: {c['panel']}; border-bottom: 1px solid {c['border']}; }}
    QLabel#TopTitle {{ font-size: 14px; font-weight: 700; color: {c['text']}; }}

    QFrame#Card {{
        background: {c['card']};
        border: 1px solid {c['border']};
        border-radius: 14px;
    }}
    QLabel#CardValue {{ font-size: 18px; font-weight: 800; color: {c['text']}; }}
    QLabel#CardLabel {{ color: {c['muted']}; }}

    QLineEdit, QComboBox, QPlainTextEdit, QSpinBox, QDoubleSpinBox {{
        background: {c['input']};
        border: 1px solid {c['border']};
        border-radius: 10px;
        padding: 8px 10px;
    }}
    QComboBox::drop-down {{ border: 0px; }}

    QPushButton.Primary {{
        background: {c['accent']};
        color: {c['on_accent']};
        border: 0px;
        padding: 10px 12px;
        border-radius: 10px;
        font-weight: 700;
    }}

    QPushButton.Danger {{
        background: #e11d48;
        color: white;
        border: 0px;
        padding: 10px 12px;
        border-radius: 10px;
        font-weight: 700;
    }}
    QPushButton.Danger:hover {{ background: #fb2c61; }}

    QTableView {{
        background: {c['card']};
        border: 1px solid {c['border']};
        border-radius: 14px;
        gridline-color: {c['grid']};
        selection-background-color: {c['accent']};
        selection-color: {c['on_accent']};
    }}
    QHeaderView::section {{
        background: {c['panel']};
        color: {c['muted']};
        border: 0px;
        padding: 8px;
        font-weight: 700;
    }}
    """


def apply_theme(app: QtWidgets.QApplication, dark: bool) -> None:
    app.setPalette(_app_dark_palette() if dark else app.style().standardPalette())
    app.setStyleSheet(_qss("Dark" if dark else "Light"))


class RecordTableModel(QtCore.QAbstractTableModel):
    """Read-only table over a list of records with computed columns."""

    def __init__(self, columns: list[Column], rows: list[Any] | None = None):
        super().__init__()
        self.columns = columns
        self._rows: list[Any] = rows or []

    def set_rows(self, rows: list[Any]) -> None:
        self.beginResetModel()
        self._rows = rows
        self.endResetModel()

    def rowCount(self, parent: QtCore.QModelIndex = QtCore.QModelIndex()) -> int:  # noqa: N802
        return 0 if parent.isValid() else len(self._rows)

    def columnCount(self, parent: QtCore.QModelIndex = QtCore.QModelIndex()) -> int:  # noqa: N802
        return 0 if parent.isValid() else len(self.columns)

    def headerData(self, section: int, orientation: QtCore.Qt.Orientation, role: int = QtCore.Qt.DisplayRole):  # noqa: N802
        if role != QtCore.Qt.DisplayRole:
            return None
        if orientation == QtCore.Qt.Horizontal and 0 <= section < len(self.columns):
            return self.columns[section][0]
        return None

    def data(self, index: QtCore.QModelIndex, role: int = QtCore.Qt.DisplayRole):
        if not index.isValid() or not (0 <= index.row() < len(self._rows)):
            return None
        rec = self._rows[index.row()]
        if role == QtCore.Qt.UserRole:
            return rec
        if not (0 <= index.column() < len(self.columns)):
            return None
        column = self.columns[index.column()]
        if role == SORT_ROLE:
            return column[2](rec) if len(column) > 2 else column[1](rec)
        if role == QtCore.Qt.DisplayRole:
            value = column[1](rec)
            return "" if value is None else str(value)
        return None

    def row_record(self, row: int) -> Any:
        if 0 <= row < len(self._rows):
            return self._rows[row]
        return None


class Card(QtWidgets.QFrame):
    def __init__(self, title: str, value: str = "0", *, accent: str | None = None):
        super().__init__()
        self.setObjectName("Card")
        self.setFrameShape(QtWidgets.QFrame.NoFrame)

        lay = QtWidgets.QVBoxLayout(self)
        lay.setContentsMargins(16, 16, 16, 16)
        lay.setSpacing(6)

        self.lbl_value = QtWidgets.QLabel(value)
        self.lbl_value.setObjectName("CardValue")

        self.lbl_title = QtWidgets.QLabel(title)
        self.lbl_title.setObjectName("CardLabel")

        if accent:
            line = QtWidgets.QFrame()
            line.setFixedHeight(3)
            line.setStyleSheet(f"background:{accent}; border-radius:2px;")
            lay.addWidget(line)

        lay.addWidget(self.lbl_value)
        lay.addWidget(self.lbl_title)
        lay.addStretch(1)

    def set_value(self, v: str) -> None:
        self.lbl_value.setText(v)


class DashboardPage(QtWidgets.QWidget):
    def __init__(self, parent: QtWidgets.QWidget):
        super().__init__(parent)
        root = QtWidgets.QVBoxLayout(self)
        root.setContentsMargins(16, 16, 16, 16)
        root.setSpacing(14)

        cards_row = QtWidgets.QHBoxLayout()
        cards_row.setSpacing(14)
        self.card_students = Card("Total Students", "0", accent="#3B82F6")
        self.card_teachers = Card("Total Teachers", "0", accent="#10B981")
        self.card_parents = Card("Total Parents", "0", accent="#F59E0B")
        self.card_staff = Card("Staff Members", "0", accent="#8B5CF6")
        self.card_revenue = Card("Total Payments", "$0", accent="#EF4444")
        for c in [self.card_students, self.card_teachers, self.card_parents, self.card_staff, self.card_revenue]:
            cards_row.addWidget(c, 1)
        root.addLayout(cards_row)

        charts_row = QtWidgets.QHBoxLayout()
        charts_row.setSpacing(14)

        self.chart_payments = QChartView()
        self.chart_payments.setRenderHint(QtGui.QPainter.Antialiasing)
        self.chart_payments.setMinimumHeight(320)

        self.chart_classes = QChartView()
        self.chart_classes.setRenderHint(QtGui.QPainter.Antialiasing)
        self.chart_classes.setMinimumHeight(320)

        for title, view in [("Payment Status", self.chart_payments), ("Students by Class", self.chart_classes)]:
            wrap = QtWidgets.QFrame()
            wrap.setObjectName("Card")
            wl = QtWidgets.QVBoxLayout(wrap)
            wl.setContentsMargins(12, 12, 12, 12)
            wl.addWidget(QtWidgets.QLabel(title))
            wl.addWidget(view)
            charts_row.addWidget(wrap, 1)

        root.addLayout(charts_row, 1)

        recent = QtWidgets.QFrame()
        recent.setObjectName("Card")
        rl = QtWidgets.QVBoxLayout(recent)
        rl.setContentsMargins(12, 12, 12, 12)
        rl.addWidget(QtWidgets.QLabel("Recent Payments"))
        self.recent_payments = QtWidgets.QTableWidget(0, 4)
        self.recent_payments.setHorizontalHeaderLabels(["Student", "Description", "Amount", "Status"])
        self.recent_payments.horizontalHeader().setStretchLastSection(True)
        self.recent_payments.verticalHeader().setVisible(False)
        self.recent_payments.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.recent_payments.setMinimumHeight(180)
        rl.addWidget(self.recent_payments)
        root.addWidget(recent)

    def set_summary(self, summary: stats.DashboardSummary) -> None:
        self.card_students.set_value(str(summary.students))
        self.card_teachers.set_value(str(summary.teachers))
        self.card_parents.set_value(str(summary.parents))
        self.card_staff.set_value(str(summary.staff))
        self.card_revenue.set_value(f"${summary.total_payments:,.0f}")
        self.set_payments_chart(summary.payment_counts)
        items = sorted(summary.class_counts.items(), key=lambda kv: (-kv[1], kv[0]))[:10]
        self.set_classes_chart(dict(items))
        self.set_recent_payments(summary.recent_payments)

    def set_recent_payments(self, payments: list[stats.RecentPayment]) -> None:
        self.recent_payments.setRowCount(len(payments))
        for row, p in enumerate(payments):
            status = QtWidgets.QTableWidgetItem(p.status)
            if p.status in PAYMENT_STATUS_COLORS:
                status.setForeground(QtGui.QColor(*PAYMENT_STATUS_COLORS[p.status]))
            cells = [
                QtWidgets.QTableWidgetItem(p.student),
                QtWidgets.QTableWidgetItem(p.description),
                QtWidgets.QTableWidgetItem(f"${p.amount:,.2f}"),
                status,
            ]
            for col, item in enumerate(cells):
                self.recent_payments.setItem(row, col, item)
        self.recent_payments.resizeColumnsToContents()

    def set_payments_chart(self, counts: dict[str, int]) -> None:
        series = QPieSeries()
        for status in PAYMENT_STATUSES:
            sl = series.append(status.capitalize(), max(counts.get(status, 0), 0))
            sl.setBrush(QtGui.QColor(*PAYMENT_STATUS_COLORS[status]))
            sl.setLabelVisible(counts.get(status, 0) > 0)

        chart = QChart()
        chart.addSeries(series)
        chart.setBackgroundVisible(False)
        chart.legend().setAlignment(QtCore.Qt.AlignBottom)
        self.chart_payments.setChart(chart)

    def set_classes_chart(self, class_counts: dict[str, int]) -> None:
        cats = list(class_counts.keys())
        vals = [class_counts[k] for k in cats]

        barset = QBarSet("Students")
        barset.append(vals)
        barset.setColor(QtGui.QColor(59, 130, 246))

        series = QBarSeries()
        series.append(barset)

        chart = QChart()
        chart.addSeries(series)
        chart.setBackgroundVisible(False)
        chart.legend().setVisible(False)

        axis_x = QBarCategoryAxis()
        axis_x.append(cats or ["-"])
        chart.addAxis(axis_x, QtCore.Qt.AlignBottom)
        series.attachAxis(axis_x)

        axis_y = QValueAxis()
        axis_y.setLabelFormat("%d")
        chart.addAxis(axis_y, QtCore.Qt.AlignLeft)
        series.attachAxis(axis_y)

        self.chart_classes.setChart(chart)


def _join(values) -> str:
    return ", ".join(values)


def _fmt_avg(values) -> str:
    avg = stats.component_average(values)
    return "N/A" if avg is None else f"{avg:.1f}"


def _avg_key(values) -> float:
    avg = stats.component_average(values)
    return -1.0 if avg is None else avg


def build_page_specs(store: EntityStore) -> list[PageSpec]:
    statuses = FilterSpec("status", "All statuses", lambda: _titled(PERSON_STATUSES))
    return [
        PageSpec(
            kind="teacher",
            title="Teachers",
            add_label="Add Teacher",
            placeholder="Search teachers by name, email or subject",
            columns=[
                ("ID", lambda t: t.id),
                ("Name", lambda t: t.name),
                ("Email", lambda t: t.email),
                ("Phone", lambda t: t.phone),
                ("Subjects", lambda t: _join(t.subjects)),
                ("Classes", lambda t: _join(t.classes)),
                ("Joined", lambda t: t.join_date),
                ("Status", lambda t: t.status),
            ],
            query=lambda s, term, status=None: filters.filter_teachers(s, term, status=status),
            filters=[statuses],
        ),
        PageSpec(
            kind="student",
            title="Students",
            add_label="Add Student",
            placeholder="Search students by name, email or class",
            columns=[
                ("ID", lambda s: s.id),
                ("Name", lambda s: s.name),
                ("Email", lambda s: s.email or ""),
                ("Class", lambda s: s.class_name),
                ("Parent", lambda s: store.parent_name(s.parent_id)),
                ("Enrolled", lambda s: s.enrollment_date),
                ("Status", lambda s: s.status),
            ],
            query=lambda s, term, class_name=None, status=None: filters.filter_students(
                s, term, class_name=class_name, status=status
            ),
            filters=[FilterSpec("class_name", "All classes", lambda: _plain(filters.available_classes(store))), statuses],
        ),
        PageSpec(
            kind="parent",
            title="Parents",
            add_label="Add Parent",
            placeholder="Search parents by name, email or phone",
            columns=[
                ("ID", lambda p: p.id),
                ("Name", lambda p: p.name),
                ("Email", lambda p: p.email),
                ("Phone", lambda p: p.phone),
                ("Address", lambda p: p.address),
                ("Children", lambda p: _join(store.student_names(p.children))),
            ],
            query=lambda s, term: filters.filter_parents(s, term),
        ),
        PageSpec(
            kind="staff",
            title="Staff",
            add_label="Add Staff",
            placeholder="Search staff by name, email, position or department",
            columns=[
                ("ID", lambda m: m.id),
                ("Name", lambda m: m.name),
                ("Email", lambda m: m.email),
                ("Position", lambda m: m.position),
                ("Department", lambda m: m.department),
                ("Salary", lambda m: f"${m.salary:,.0f}", lambda m: m.salary),
                ("Status", lambda m: m.status),
            ],
            query=lambda s, term, department=None, status=None: filters.filter_staff(
                s, term, department=department, status=status
            ),
            filters=[FilterSpec("department", "All departments", lambda: _plain(DEPARTMENTS)), statuses],
        ),
        PageSpec(
            kind="subject",
            title="Subjects",
            add_label="Add Subject",
            placeholder="Search subjects by name, code or description",
            columns=[
                ("ID", lambda s: s.id),
                ("Code", lambda s: s.code),
                ("Name", lambda s: s.name),
                ("Teacher", lambda s: store.teacher_name(s.teacher_id)),
                ("Classes", lambda s: _join(s.classes)),
                ("Credits", lambda s: s.credits),
            ],
            query=lambda s, term: filters.filter_subjects(s, term),
        ),
        PageSpec(
            kind="payment",
            title="Payments",
            add_label="Add Payment",
            placeholder="Search payments by student, description or period",
            columns=[
                ("ID", lambda p: p.id),
                ("Student", lambda p: store.student_name(p.student_id, fallback=UNKNOWN_STUDENT)),
                ("Type", lambda p: p.type),
                ("Period", lambda p: p.period),
                ("Amount", lambda p: f"${p.amount:,.2f}", lambda p: p.amount),
                ("Due", lambda p: p.due_date),
                ("Paid on", lambda p: p.paid_date or "-"),
                ("Status", lambda p: p.status),
            ],
            query=lambda s, term, status=None, payment_type=None: filters.filter_payments(
                s, term, status=status, payment_type=payment_type
            ),
            filters=[
                FilterSpec("status", "All statuses", lambda: _titled(PAYMENT_STATUSES)),
                FilterSpec("payment_type", "All types", lambda: _titled(PAYMENT_TYPES)),
            ],
            extra_buttons=["Mark as Paid"],
        ),
        PageSpec(
            kind="grade",
            title="Grades",
            add_label="Add Grade",
            placeholder="Search grades by student or subject",
            columns=[
                ("ID", lambda g: g.id),
                ("Student", lambda g: store.student_name(g.student_id, fallback=UNKNOWN_STUDENT)),
                ("Subject", lambda g: store.subject_name(g.subject_id)),
                ("Semester", lambda g: g.semester),
                ("Assignments", lambda g: _fmt_avg(g.assignments), lambda g: _avg_key(g.assignments)),
                ("Exams", lambda g: _fmt_avg(g.exams), lambda g: _avg_key(g.exams)),
                ("Participation", lambda g: g.participation),
                ("Average", lambda g: f"{g.average:.1f}", lambda g: g.average),
                ("Grade", lambda g: stats.letter_grade(g.average)),
                ("Result", lambda g: "Pass" if stats.is_passing(g.average) else "Fail"),
            ],
            query=lambda s, term, class_name=None, subject_id=None: filters.filter_grades(
                s, term, class_name=class_name, subject_id=subject_id
            ),
            filters=[
                FilterSpec("class_name", "All classes", lambda: _plain(filters.available_classes(store))),
                FilterSpec("subject_id", "All subjects", lambda: [(s.name, s.id) for s in store.subjects]),
            ],
        ),
        PageSpec(
            kind="transport",
            title="Transport",
            add_label="Add Route",
            placeholder="Search routes by name, driver or vehicle",
            columns=[
                ("ID", lambda t: t.id),
                ("Route", lambda t: t.route_name),
                ("Driver", lambda t: t.driver_name),
                ("Vehicle", lambda t: t.vehicle_number),
                ("Schedule", lambda t: t.schedule),
                ("Riders", lambda t: f"{len(t.students)}/{t.capacity}", lambda t: len(t.students)),
                ("Utilization", lambda t: f"{stats.route_utilization(t)}%", stats.route_utilization),
                ("Stops", lambda t: len(t.stops)),
                ("Students", lambda t: _join(store.student_names(t.students[:3]))
                    + (f" +{len(t.students) - 3} more" if len(t.students) > 3 else "")),
            ],
            query=lambda s, term: filters.filter_transports(s, term),
        ),
    ]


class MainWindow(QtWidgets.QMainWindow):
    def __init__(
        self,
        store: Optional[EntityStore] = None,
        *,
        session: Optional[AppSession] = None,
        settings_store: Optional[SettingsStore] = None,
        err_logger: Optional[ErrorLogger] = None,
    ):
        super().__init__()
        self.err_logger = err_logger or ErrorLogger()
        self.settings_store = settings_store or SettingsStore()
        self.settings = self.settings_store.load()
        self.store = store if store is not None else demo_store()
        self.session = session or AppSession(dark_mode=self.settings.dark_mode)

        self.setWindowTitle(f"{APP_NAME} - {self.settings.school_name}")
        self.resize(1360, 820)

        self._build_ui()
        self._wire()
        self.refresh_all()
        self.show_page("dashboard")

    # ---------- UI ----------
    def _build_ui(self) -> None:
        root = QtWidgets.QWidget()
        self.setCentralWidget(root)

        outer = QtWidgets.QHBoxLayout(root)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.setSpacing(0)

        self.sidebar = QtWidgets.QFrame()
        self.sidebar.setObjectName("Sidebar")
        self.sidebar.setFixedWidth(240)
        sbl = QtWidgets.QVBoxLayout(self.sidebar)
        sbl.setContentsMargins(14, 14, 14, 14)
        sbl.setSpacing(10)

        title = QtWidgets.QLabel("SchoolAdmin\nDashboard")
        title.setObjectName("AppTitle")
        sbl.addWidget(title)
        sbl.addSpacing(6)

        self.pages = QtWidgets.QStackedWidget()
        self.page_dashboard = DashboardPage(self.pages)
        self.entity_pages: dict[str, EntityPage] = {}
        self.models: dict[str, RecordTableModel] = {}
        self.proxies: dict[str, QtCore.QSortFilterProxyModel] = {}

        self._page_index: dict[str, int] = {"dashboard": self.pages.addWidget(self.page_dashboard)}
        self._page_titles: dict[str, str] = {"dashboard": "Dashboard"}

        for spec in build_page_specs(self.store):
            page = EntityPage(self.pages, spec)
            model = RecordTableModel(spec.columns)
            proxy = QtCore.QSortFilterProxyModel()
            proxy.setSourceModel(model)
            proxy.setSortRole(SORT_ROLE)
            page.table.setModel(proxy)
            self.entity_pages[spec.kind] = page
            self.models[spec.kind] = model
            self.proxies[spec.kind] = proxy
            self._page_index[spec.kind] = self.pages.addWidget(page)
            self._page_titles[spec.kind] = spec.title

        self.page_activity = ActivityPage(self.pages)
        self.page_settings = SettingsPage(self.pages)
        self._page_index["activity"] = self.pages.addWidget(self.page_activity)
        self._page_index["settings"] = self.pages.addWidget(self.page_settings)
        self._page_titles["activity"] = "Activity Log"
        self._page_titles["settings"] = "Settings"

        self.nav_buttons: dict[str, QtWidgets.QPushButton] = {}
        for key in ["dashboard", "teacher", "student", "parent", "staff", "subject", "payment", "grade", "transport", "activity", "settings"]:
            b = QtWidgets.QPushButton(self._page_titles[key])
            b.setProperty("class", "NavBtn")
            b.setProperty("active", "false")
            b.setCursor(QtGui.QCursor(QtCore.Qt.PointingHandCursor))
            b.setMinimumHeight(40)
            self.nav_buttons[key] = b
            sbl.addWidget(b)

        sbl.addStretch(1)
        self.lbl_user = QtWidgets.QLabel("")
        sbl.addWidget(self.lbl_user)

        # Content
        content = QtWidgets.QFrame()
        content_lay = QtWidgets.QVBoxLayout(content)
        content_lay.setContentsMargins(0, 0, 0, 0)
        content_lay.setSpacing(0)

        self.topbar = QtWidgets.QFrame()
        self.topbar.setObjectName("TopBar")
        tlay = QtWidgets.QHBoxLayout(self.topbar)
        tlay.setContentsMargins(16, 12, 16, 12)
        tlay.setSpacing(10)

        self.top_title = QtWidgets.QLabel("Dashboard")
        self.top_title.setObjectName("TopTitle")
        tlay.addWidget(self.top_title)
        tlay.addStretch(1)

        self.btn_notifications = QtWidgets.QPushButton("Notifications")
        self.notifications_menu = QtWidgets.QMenu(self)
        self.btn_notifications.setMenu(self.notifications_menu)
        self.btn_theme = QtWidgets.QPushButton("")
        self.btn_logout = QtWidgets.QPushButton("Log out")
        for a in [self.btn_notifications, self.btn_theme, self.btn_logout]:
            a.setMinimumHeight(34)
            tlay.addWidget(a)

        content_lay.addWidget(self.topbar)
        content_lay.addWidget(self.pages, 1)

        outer.addWidget(self.sidebar)
        outer.addWidget(content, 1)

        self.statusBar().showMessage("Ready")

    def _wire(self) -> None:
        for key, b in self.nav_buttons.items():
            b.clicked.connect(lambda _=False, k=key: self.show_page(k))

        for kind, page in self.entity_pages.items():
            page.search.textChanged.connect(lambda _=None, k=kind: self.refresh_entity(k))
            for combo in page.filter_combos.values():
                combo.currentIndexChanged.connect(lambda _=None, k=kind: self.refresh_entity(k))
            page.btn_add.clicked.connect(lambda _=False, k=kind: self.add_record(k))
            page.btn_edit.clicked.connect(lambda _=False, k=kind: self.edit_record(k))
            page.btn_del.clicked.connect(lambda _=False, k=kind: self.delete_record(k))
            page.table.doubleClicked.connect(lambda _=None, k=kind: self.edit_record(k))

        self.entity_pages["payment"].extra["Mark as Paid"].clicked.connect(lambda _=False: self.mark_selected_paid())

        self.page_activity.filter_action.currentTextChanged.connect(lambda _=None: self.refresh_activity())
        self.page_activity.search.textChanged.connect(lambda _=None: self.refresh_activity())

        self.page_settings.btn_save.clicked.connect(lambda _=False: self.save_settings())
        self.page_settings.btn_export.clicked.connect(lambda _=False: export_data())
        self.page_settings.btn_import.clicked.connect(lambda _=False: import_data())

        self.btn_theme.clicked.connect(lambda _=False: self.toggle_theme())
        self.btn_logout.clicked.connect(lambda _=False: self.logout())
        self.notifications_menu.aboutToShow.connect(self._fill_notifications)

    def _show_error(self, title: str, exc: BaseException) -> None:
        QtWidgets.QMessageBox.critical(self, title, str(exc))

    # ---------- Navigation ----------
    def show_page(self, key: str) -> None:
        self.pages.setCurrentIndex(self._page_index.get(key, 0))
        self.top_title.setText(self._page_titles.get(key, "Dashboard"))

        for k, b in self.nav_buttons.items():
            b.setProperty("active", "true" if k == key else "false")
            b.style().unpolish(b)
            b.style().polish(b)

        if key == "dashboard":
            self.refresh_dashboard()
        elif key in self.entity_pages:
            self.refresh_entity(key)
        elif key == "activity":
            self.refresh_activity()
        elif key == "settings":
            self.page_settings.load_settings(self.settings)

    # ---------- Data refresh ----------
    def refresh_all(self) -> None:
        self.refresh_dashboard()
        for kind, page in self.entity_pages.items():
            page.refill_filters()
            self.refresh_entity(kind)
        self.refresh_activity()
        self.refresh_header()

    def refresh_header(self) -> None:
        user = self.session.user
        self.lbl_user.setText(f"{user.name}\n{user.email}" if user else "Not signed in")
        unread = len(self.store.unread_notifications())
        self.btn_notifications.setText(f"Notifications ({unread})" if unread else "Notifications")
        self.btn_theme.setText("Light mode" if self.session.dark_mode else "Dark mode")

    def refresh_dashboard(self) -> None:
        try:
            self.page_dashboard.set_summary(stats.dashboard_summary(self.store))
        except Exception as e:
            self.err_logger.log_exception(e, "qt_refresh_dashboard")

    def refresh_entity(self, kind: str) -> None:
        try:
            page = self.entity_pages[kind]
            rows = page.rows(self.store)
            self.models[kind].set_rows(rows)
            page.set_empty_state(len(rows), len(self.store.collection(kind)))
            page.summary.setText(self._summary_text(kind, rows))
            self.statusBar().showMessage(f"{page.spec.title}: {len(rows)} shown")
        except Exception as e:
            self.err_logger.log_exception(e, f"qt_refresh_{kind}")

    def _summary_text(self, kind: str, rows: list[Any]) -> str:
        if kind == "payment":
            t = stats.payment_totals(rows)
            return f"Total: ${t.total:,.2f} | Paid: ${t.paid:,.2f} | Pending: ${t.pending:,.2f}"
        if kind == "grade":
            g = stats.grade_summary(self.store.grades)
            return (
                f"Total grades: {g.count} | Class average: {g.class_average:.1f} | "
                f"Excellent (90+): {g.excellent} | Needs attention (<70): {g.needs_attention}"
            )
        if kind == "transport":
            f = stats.fleet_summary(self.store.transports)
            return (
                f"Routes: {f.routes} | Students: {f.students} | "
                f"Capacity: {f.capacity} | Utilization: {f.utilization}%"
            )
        return f"{len(rows)} of {len(self.store.collection(kind))} {self.entity_pages[kind].spec.title.lower()}"

    def refresh_activity(self) -> None:
        try:
            self.page_activity.refresh_activity(self.store.activity)
        except Exception as e:
            self.err_logger.log_exception(e, "qt_refresh_activity")

    # ---------- CRUD ----------
    def selected_record(self, kind: str) -> Any:
        page = self.entity_pages[kind]
        idxs = page.table.selectionModel().selectedRows()
        if not idxs:
            return None
        src = self.proxies[kind].mapToSource(idxs[0])
        return self.models[kind].row_record(src.row())

    def add_record(self, kind: str) -> None:
        try:
            spec = self.entity_pages[kind].spec
            dlg = RecordDialog(self, store=self.store, kind=kind, title=spec.add_label)
            if dlg.exec() != QtWidgets.QDialog.Accepted:
                return
            self.refresh_all()
        except Exception as e:
            self.err_logger.log_exception(e, f"qt_add_{kind}")
            self._show_error(f"Add {kind} failed", e)

    def edit_record(self, kind: str) -> None:
        try:
            rec = self.selected_record(kind)
            if rec is None:
                return
            dlg = RecordDialog(self, store=self.store, kind=kind, title=f"Edit {kind.capitalize()}", record=rec)
            if dlg.exec() != QtWidgets.QDialog.Accepted:
                return
            self.refresh_all()
        except Exception as e:
            self.err_logger.log_exception(e, f"qt_edit_{kind}")
            self._show_error(f"Edit {kind} failed", e)

    def delete_record(self, kind: str) -> None:
        try:
            rec = self.selected_record(kind)
            if rec is None:
                return
            if QtWidgets.QMessageBox.question(self, "Confirm", f"Delete {kind} {rec.id}?") != QtWidgets.QMessageBox.Yes:
                return
            getattr(self.store, f"delete_{kind}")(rec.id)
            self.refresh_all()
        except Exception as e:
            self.err_logger.log_exception(e, f"qt_delete_{kind}")
            self._show_error(f"Delete {kind} failed", e)

    def mark_selected_paid(self) -> None:
        try:
            rec = self.selected_record("payment")
            if rec is None:
                QtWidgets.QMessageBox.warning(self, "No selection", "Please select a payment first.")
                return
            if rec.status == "paid":
                return
            self.store.mark_payment_paid(rec.id)
            self.refresh_all()
        except Exception as e:
            self.err_logger.log_exception(e, "qt_mark_paid")
            self._show_error("Mark as paid failed", e)

    # ---------- Header actions ----------
    def _fill_notifications(self) -> None:
        self.notifications_menu.clear()
        items = self.store.notifications[-5:]
        if not items:
            act = self.notifications_menu.addAction("No notifications")
            act.setEnabled(False)
            return
        for n in reversed(items):
            text = f"{'' if n.read else '* '}{n.title}: {n.message}"
            act = self.notifications_menu.addAction(text)
            act.triggered.connect(lambda _=False, nid=n.id: self._read_notification(nid))

    def _read_notification(self, notification_id: str) -> None:
        self.store.mark_notification_read(notification_id)
        self.refresh_header()

    def toggle_theme(self) -> None:
        dark = self.session.toggle_theme()
        app = QtWidgets.QApplication.instance()
        if app is not None:
            apply_theme(app, dark)
        self.refresh_header()

    def logout(self) -> None:
        self.session.logout()
        self.hide()
        dlg = LoginDialog(None, session=self.session)
        if dlg.exec() == QtWidgets.QDialog.Accepted:
            self.refresh_header()
            self.show()
        else:
            self.close()

    # ---------- Settings ----------
    def save_settings(self) -> None:
        try:
            new_settings = self.page_settings.get_settings()
            self.settings_store.save(new_settings)
            self.settings = new_settings
            if self.session.dark_mode != new_settings.dark_mode:
                self.toggle_theme()
            self.setWindowTitle(f"{APP_NAME} - {new_settings.school_name}")
            QtWidgets.QMessageBox.information(self, "Success", "Settings saved successfully!")
        except Exception as e:
            self.err_logger.log_exception(e, "qt_save_settings")
            self._show_error("Save settings failed", e)


def run_qt_app() -> None:
    configure_logging()

    app = QtWidgets.QApplication([])
    app.setApplicationName(APP_NAME)
    app.setStyle("Fusion")

    settings_store = SettingsStore()
    session = AppSession(dark_mode=settings_store.load().dark_mode)
    apply_theme(app, session.dark_mode)

    if LoginDialog(None, session=session).exec() != QtWidgets.QDialog.Accepted:
        return

    w = MainWindow(session=session, settings_store=settings_store)
    w.show()
    app.exec()


if __name__ == "__main__":
    run_qt_app()
