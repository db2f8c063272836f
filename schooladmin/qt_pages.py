"""Qt dialogs and page widgets: entity forms, list pages, activity and settings."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from PySide6 import QtCore, QtWidgets

from .constants import ALL, CLASSES, DEPARTMENTS, PAYMENT_STATUSES, PAYMENT_TYPES, PERSON_STATUSES, POSITIONS, SUBJECTS
from .forms import FORM_ERROR, FormResult, submit
from .logger import ActivityLog
from .settings_store import BACKUP_FREQUENCIES, Settings
from .storage import EntityStore

Choices = list[tuple[str, Any]]
# (header, display getter[, sort key getter]); without a sort key the display value sorts.
Column = tuple


def _titled(values) -> Choices:
    return [(str(v).capitalize(), v) for v in values]


def _plain(values) -> Choices:
    return [(str(v), v) for v in values]


# ---------- Form fields ----------
@dataclass
class FieldSpec:
    name: str
    label: str
    kind: str = "text"  # text | multiline | int | float | choice | multi | scores | stops
    choices: Callable[[], Choices] | None = None
    minimum: float = 0
    maximum: float = 1_000_000


def form_fields(kind: str, store: EntityStore) -> list[FieldSpec]:
    students = lambda: [(f"{s.name} ({s.class_name})", s.id) for s in store.students]  # noqa: E731
    statuses = lambda: _titled(PERSON_STATUSES)  # noqa: E731
    classes = lambda: _plain(CLASSES)  # noqa: E731

    if kind == "teacher":
        return [
            FieldSpec("name", "Full name *"),
            FieldSpec("email", "Email *"),
            FieldSpec("phone", "Phone *"),
            FieldSpec("subjects", "Subjects *", "multi", lambda: _plain(SUBJECTS)),
            FieldSpec("classes", "Classes *", "multi", classes),
            FieldSpec("status", "Status", "choice", statuses),
        ]
    if kind == "student":
        return [
            FieldSpec("name", "Full name *"),
            FieldSpec("email", "Email (optional)"),
            FieldSpec("phone", "Phone (optional)"),
            FieldSpec("class_name", "Class *", "choice", classes),
            FieldSpec("parent_id", "Parent/Guardian *", "choice", lambda: [(p.name, p.id) for p in store.parents]),
            FieldSpec("status", "Status", "choice", statuses),
        ]
    if kind == "parent":
        return [
            FieldSpec("name", "Full name *"),
            FieldSpec("email", "Email *"),
            FieldSpec("phone", "Phone *"),
            FieldSpec("address", "Address *", "multiline"),
            FieldSpec("children", "Children *", "multi", students),
        ]
    if kind == "staff":
        return [
            FieldSpec("name", "Full name *"),
            FieldSpec("email", "Email *"),
            FieldSpec("phone", "Phone *"),
            FieldSpec("position", "Position *", "choice", lambda: _plain(POSITIONS)),
            FieldSpec("department", "Department *", "choice", lambda: _plain(DEPARTMENTS)),
            FieldSpec("salary", "Annual salary ($) *", "float"),
            FieldSpec("status", "Status", "choice", statuses),
        ]
    if kind == "subject":
        return [
            FieldSpec("name", "Subject name *"),
            FieldSpec("code", "Subject code *"),
            FieldSpec("description", "Description *", "multiline"),
            FieldSpec("teacher_id", "Teacher *", "choice", lambda: [(t.name, t.id) for t in store.teachers]),
            FieldSpec("classes", "Classes *", "multi", classes),
            FieldSpec("credits", "Credits", "int", maximum=100),
        ]
    if kind == "payment":
        return [
            FieldSpec("student_id", "Student *", "choice", students),
            FieldSpec("amount", "Amount ($) *", "float"),
            FieldSpec("type", "Payment type", "choice", lambda: _titled(PAYMENT_TYPES)),
            FieldSpec("status", "Status", "choice", lambda: _titled(PAYMENT_STATUSES)),
            FieldSpec("period", "Period *"),
            FieldSpec("due_date", "Due date (YYYY-MM-DD) *"),
            FieldSpec("description", "Description *", "multiline"),
        ]
    if kind == "grade":
        return [
            FieldSpec("student_id", "Student *", "choice", students),
            FieldSpec("subject_id", "Subject *", "choice", lambda: [(s.name, s.id) for s in store.subjects]),
            FieldSpec("semester", "Semester *"),
            FieldSpec("assignments", "Assignment grades, 40% (comma separated) *", "scores"),
            FieldSpec("exams", "Exam grades, 50% (comma separated) *", "scores"),
            FieldSpec("participation", "Participation grade, 10%", "float", maximum=1000),
        ]
    if kind == "transport":
        return [
            FieldSpec("route_name", "Route name *"),
            FieldSpec("driver_name", "Driver name *"),
            FieldSpec("vehicle_number", "Vehicle number *"),
            FieldSpec("capacity", "Capacity *", "int", maximum=1000),
            FieldSpec("schedule", "Schedule *"),
            FieldSpec("students", "Students", "multi", students),
            FieldSpec("stops", "Stops *", "stops"),
        ]
    raise ValueError(f"No form for {kind}")


def _parse_scores(text: str) -> list[Any]:
    out: list[Any] = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            out.append(float(part))
        except ValueError:
            out.append(part)
    return out


def _fmt_number(v: Any) -> str:
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


class StopsEditor(QtWidgets.QWidget):
    def __init__(self, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        lay = QtWidgets.QVBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)

        self.table = QtWidgets.QTableWidget(0, 3)
        self.table.setHorizontalHeaderLabels(["Stop name", "Address", "Time"])
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.verticalHeader().setVisible(False)
        self.table.setMinimumHeight(140)
        lay.addWidget(self.table)

        row = QtWidgets.QHBoxLayout()
        self.btn_add = QtWidgets.QPushButton("Add Stop")
        self.btn_remove = QtWidgets.QPushButton("Remove Stop")
        row.addWidget(self.btn_add)
        row.addWidget(self.btn_remove)
        row.addStretch(1)
        lay.addLayout(row)

        self.btn_add.clicked.connect(lambda: self.add_stop())
        self.btn_remove.clicked.connect(self._remove_selected)

    def add_stop(self, name: str = "", address: str = "", time: str = "") -> None:
        r = self.table.rowCount()
        self.table.insertRow(r)
        for col, val in enumerate([name, address, time]):
            self.table.setItem(r, col, QtWidgets.QTableWidgetItem(val))

    def _remove_selected(self) -> None:
        # At least one stop row stays so the form is never empty.
        r = self.table.currentRow()
        if r >= 0 and self.table.rowCount() > 1:
            self.table.removeRow(r)

    def set_stops(self, stops: list[dict[str, Any]]) -> None:
        self.table.setRowCount(0)
        for s in stops:
            self.add_stop(str(s.get("name", "")), str(s.get("address", "")), str(s.get("time", "")))
        if not stops:
            self.add_stop()

    def stops(self) -> list[dict[str, str]]:
        out: list[dict[str, str]] = []
        for r in range(self.table.rowCount()):
            vals = [(self.table.item(r, c).text() if self.table.item(r, c) else "") for c in range(3)]
            out.append({"name": vals[0], "address": vals[1], "time": vals[2]})
        return out


class RecordDialog(QtWidgets.QDialog):
    """Add/edit dialog for any entity; submission goes through the form layer."""

    def __init__(
        self,
        parent: QtWidgets.QWidget,
        *,
        store: EntityStore,
        kind: str,
        title: str,
        record: Any = None,
    ):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)
        self.setMinimumWidth(560)

        self.store = store
        self.kind = kind
        self.entity_id: Optional[str] = getattr(record, "id", None) if record is not None else None
        self.initial: dict[str, Any] = dataclasses.asdict(record) if record is not None else {}
        self.result_record: Any = None
        self.fields = form_fields(kind, store)

        root = QtWidgets.QVBoxLayout(self)

        hdr = QtWidgets.QLabel(title)
        hdr.setObjectName("TopTitle")
        root.addWidget(hdr)
        if self.entity_id:
            root.addWidget(QtWidgets.QLabel(f"ID: {self.entity_id}"))

        self.lbl_form_error = QtWidgets.QLabel("")
        self.lbl_form_error.setObjectName("FieldError")
        self.lbl_form_error.setVisible(False)
        root.addWidget(self.lbl_form_error)

        form = QtWidgets.QFormLayout()
        self._widgets: dict[str, QtWidgets.QWidget] = {}
        self._errors: dict[str, QtWidgets.QLabel] = {}
        for spec in self.fields:
            w = self._make_widget(spec, self.initial.get(spec.name))
            err = QtWidgets.QLabel("")
            err.setObjectName("FieldError")
            err.setWordWrap(True)
            err.setVisible(False)
            box = QtWidgets.QWidget()
            bl = QtWidgets.QVBoxLayout(box)
            bl.setContentsMargins(0, 0, 0, 0)
            bl.setSpacing(2)
            bl.addWidget(w)
            bl.addWidget(err)
            form.addRow(spec.label, box)
            self._widgets[spec.name] = w
            self._errors[spec.name] = err
        root.addLayout(form)

        btns = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        btns.button(QtWidgets.QDialogButtonBox.Ok).setText("Update" if self.entity_id else "Add")
        btns.accepted.connect(self._on_ok)
        btns.rejected.connect(self.reject)
        root.addWidget(btns)

    def _make_widget(self, spec: FieldSpec, value: Any) -> QtWidgets.QWidget:
        if spec.kind == "multiline":
            w = QtWidgets.QPlainTextEdit(str(value or ""))
            w.setFixedHeight(64)
            return w
        if spec.kind == "int":
            w = QtWidgets.QSpinBox()
            w.setRange(int(spec.minimum), int(spec.maximum))
            w.setValue(int(value) if value not in (None, "") else (3 if spec.name == "credits" else 0))
            return w
        if spec.kind == "float":
            w = QtWidgets.QDoubleSpinBox()
            w.setRange(spec.minimum, spec.maximum)
            w.setDecimals(2)
            w.setValue(float(value) if value not in (None, "") else 0.0)
            return w
        if spec.kind == "choice":
            w = QtWidgets.QComboBox()
            w.addItem("Select...", "")
            for label, v in spec.choices() if spec.choices else []:
                w.addItem(label, v)
            idx = w.findData(value) if value not in (None, "") else -1
            if idx < 0 and spec.name == "status":
                idx = w.findData(self._default_status())
            if idx < 0 and spec.name == "type":
                idx = w.findData("tuition")
            w.setCurrentIndex(max(idx, 0))
            return w
        if spec.kind == "multi":
            w = QtWidgets.QListWidget()
            w.setMaximumHeight(120)
            selected = set(value or [])
            for label, v in spec.choices() if spec.choices else []:
                item = QtWidgets.QListWidgetItem(label)
                item.setData(QtCore.Qt.UserRole, v)
                item.setFlags(item.flags() | QtCore.Qt.ItemIsUserCheckable)
                item.setCheckState(QtCore.Qt.Checked if v in selected else QtCore.Qt.Unchecked)
                w.addItem(item)
            return w
        if spec.kind == "scores":
            values = value if value else [0]
            return QtWidgets.QLineEdit(", ".join(_fmt_number(v) for v in values))
        if spec.kind == "stops":
            w = StopsEditor(self)
            w.set_stops(list(value or []))
            return w
        return QtWidgets.QLineEdit("" if value is None else str(value))

    def _default_status(self) -> str:
        return "pending" if self.kind == "payment" else "active"

    def get_data(self) -> dict[str, Any]:
        d: dict[str, Any] = {}
        for spec in self.fields:
            w = self._widgets[spec.name]
            if isinstance(w, QtWidgets.QPlainTextEdit):
                d[spec.name] = w.toPlainText()
            elif isinstance(w, (QtWidgets.QSpinBox, QtWidgets.QDoubleSpinBox)):
                d[spec.name] = w.value()
            elif isinstance(w, QtWidgets.QComboBox):
                d[spec.name] = w.currentData() or ""
            elif isinstance(w, QtWidgets.QListWidget):
                d[spec.name] = [
                    w.item(i).data(QtCore.Qt.UserRole)
                    for i in range(w.count())
                    if w.item(i).checkState() == QtCore.Qt.Checked
                ]
            elif isinstance(w, StopsEditor):
                d[spec.name] = w.stops()
            elif spec.kind == "scores":
                d[spec.name] = _parse_scores(w.text())
            else:
                d[spec.name] = w.text()
        return d

    def show_errors(self, result: FormResult) -> None:
        for lbl in self._errors.values():
            lbl.setVisible(False)
            lbl.setText("")
        grouped: dict[str, list[str]] = {}
        for path, msgs in result.errors.items():
            grouped.setdefault(path.split(".", 1)[0], []).extend(msgs)
        for name, msgs in grouped.items():
            lbl = self._errors.get(name)
            if lbl is not None:
                lbl.setText("\n".join(dict.fromkeys(msgs)))
                lbl.setVisible(True)
        form_msgs = grouped.get(FORM_ERROR, [])
        self.lbl_form_error.setText("\n".join(form_msgs))
        self.lbl_form_error.setVisible(bool(form_msgs))

    def _on_ok(self) -> None:
        result = submit(self.store, self.kind, self.get_data(), self.entity_id)
        if not result.ok:
            self.show_errors(result)
            return
        self.result_record = result.record
        self.accept()


class LoginDialog(QtWidgets.QDialog):
    def __init__(self, parent: QtWidgets.QWidget | None, *, session):
        super().__init__(parent)
        self.setWindowTitle("Sign in")
        self.setModal(True)
        self.setMinimumWidth(380)
        self.session = session

        root = QtWidgets.QVBoxLayout(self)
        hdr = QtWidgets.QLabel("SchoolAdmin")
        hdr.setObjectName("TopTitle")
        root.addWidget(hdr)
        root.addWidget(QtWidgets.QLabel("Sign in to your admin account"))

        form = QtWidgets.QFormLayout()
        self.email = QtWidgets.QLineEdit()
        self.email.setPlaceholderText("admin@school.edu")
        self.password = QtWidgets.QLineEdit()
        self.password.setEchoMode(QtWidgets.QLineEdit.Password)
        form.addRow("Email", self.email)
        form.addRow("Password", self.password)
        root.addLayout(form)

        self.lbl_error = QtWidgets.QLabel("")
        self.lbl_error.setObjectName("FieldError")
        self.lbl_error.setVisible(False)
        root.addWidget(self.lbl_error)

        btns = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        btns.button(QtWidgets.QDialogButtonBox.Ok).setText("Sign in")
        btns.accepted.connect(self._on_ok)
        btns.rejected.connect(self.reject)
        root.addWidget(btns)

    def _on_ok(self) -> None:
        if self.session.login(self.email.text(), self.password.text()):
            self.accept()
            return
        self.lbl_error.setText("Invalid email or password")
        self.lbl_error.setVisible(True)
        self.password.clear()
        self.password.setFocus()


# ---------- List pages ----------
@dataclass
class FilterSpec:
    key: str
    all_label: str
    options: Callable[[], Choices]


@dataclass
class PageSpec:
    kind: str
    title: str
    add_label: str
    placeholder: str
    columns: list[Column]
    query: Callable[..., list[Any]]
    filters: list[FilterSpec] = field(default_factory=list)
    extra_buttons: list[str] = field(default_factory=list)


class EntityPage(QtWidgets.QWidget):
    def __init__(self, parent: QtWidgets.QWidget, spec: PageSpec):
        super().__init__(parent)
        self.spec = spec
        root = QtWidgets.QVBoxLayout(self)
        root.setContentsMargins(16, 16, 16, 16)
        root.setSpacing(12)

        self.summary = QtWidgets.QLabel("")
        self.summary.setObjectName("CardLabel")
        summary_card = QtWidgets.QFrame()
        summary_card.setObjectName("Card")
        sl = QtWidgets.QHBoxLayout(summary_card)
        sl.setContentsMargins(12, 12, 12, 12)
        sl.addWidget(self.summary)
        root.addWidget(summary_card)

        tools = QtWidgets.QFrame()
        tools.setObjectName("Card")
        tlay = QtWidgets.QHBoxLayout(tools)
        tlay.setContentsMargins(12, 12, 12, 12)
        tlay.setSpacing(10)

        self.search = QtWidgets.QLineEdit()
        self.search.setPlaceholderText(spec.placeholder)
        tlay.addWidget(self.search, 2)

        self.filter_combos: dict[str, QtWidgets.QComboBox] = {}
        for f in spec.filters:
            combo = QtWidgets.QComboBox()
            combo.addItem(f.all_label, ALL)
            self.filter_combos[f.key] = combo
            tlay.addWidget(combo)

        tlay.addStretch(1)
        self.btn_add = QtWidgets.QPushButton(spec.add_label)
        self.btn_add.setProperty("class", "Primary")
        self.btn_edit = QtWidgets.QPushButton("Edit")
        self.btn_del = QtWidgets.QPushButton("Delete")
        self.btn_del.setProperty("class", "Danger")
        self.extra: dict[str, QtWidgets.QPushButton] = {}
        for label in spec.extra_buttons:
            self.extra[label] = QtWidgets.QPushButton(label)
            tlay.addWidget(self.extra[label])
        tlay.addWidget(self.btn_add)
        tlay.addWidget(self.btn_edit)
        tlay.addWidget(self.btn_del)
        root.addWidget(tools)

        self.table = QtWidgets.QTableView()
        self.table.setSortingEnabled(True)
        self.table.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QtWidgets.QAbstractItemView.SingleSelection)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.verticalHeader().setVisible(False)
        root.addWidget(self.table, 1)

        self.empty = QtWidgets.QLabel("")
        self.empty.setAlignment(QtCore.Qt.AlignCenter)
        self.empty.setVisible(False)
        root.addWidget(self.empty)

    def refill_filters(self) -> None:
        for f in self.spec.filters:
            combo = self.filter_combos[f.key]
            cur = combo.currentData()
            combo.blockSignals(True)
            combo.clear()
            combo.addItem(f.all_label, ALL)
            for label, value in f.options():
                combo.addItem(label, value)
            idx = combo.findData(cur)
            combo.setCurrentIndex(idx if idx >= 0 else 0)
            combo.blockSignals(False)

    def filter_values(self) -> dict[str, Any]:
        return {key: combo.currentData() for key, combo in self.filter_combos.items()}

    def rows(self, store: EntityStore) -> list[Any]:
        return self.spec.query(store, self.search.text(), **self.filter_values())

    def set_empty_state(self, shown: int, total: int) -> None:
        if shown:
            self.empty.setVisible(False)
            return
        searching = bool(self.search.text().strip()) or any(v != ALL for v in self.filter_values().values())
        self.empty.setText(
            "Try adjusting your search or filters" if searching and total else f"No {self.spec.title.lower()} yet"
        )
        self.empty.setVisible(True)


class ActivityPage(QtWidgets.QWidget):
    """Activity log with filtering."""

    def __init__(self, parent: QtWidgets.QWidget):
        super().__init__(parent)
        root = QtWidgets.QVBoxLayout(self)
        root.setContentsMargins(16, 16, 16, 16)
        root.setSpacing(12)

        controls = QtWidgets.QFrame()
        controls.setObjectName("Card")
        cly = QtWidgets.QHBoxLayout(controls)
        cly.setContentsMargins(12, 12, 12, 12)

        cly.addWidget(QtWidgets.QLabel("Filter action:"))
        self.filter_action = QtWidgets.QComboBox()
        self.filter_action.addItem("All")
        cly.addWidget(self.filter_action)

        self.search = QtWidgets.QLineEdit()
        self.search.setPlaceholderText("Search activity (entity ID, details)")
        cly.addWidget(self.search, 2)

        cly.addStretch(1)
        root.addWidget(controls)

        self.table = QtWidgets.QTableWidget()
        self.table.setColumnCount(5)
        self.table.setHorizontalHeaderLabels(["Timestamp", "Action", "Entity Type", "Entity ID", "Details"])
        self.table.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectRows)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        root.addWidget(self.table, 1)

    def refresh_activity(self, activity: ActivityLog) -> None:
        cur = self.filter_action.currentText()
        self.filter_action.blockSignals(True)
        self.filter_action.clear()
        self.filter_action.addItem("All")
        self.filter_action.addItems(activity.actions())
        self.filter_action.setCurrentText(cur if cur else "All")
        self.filter_action.blockSignals(False)

        filter_action = self.filter_action.currentText()
        search_text = self.search.text().strip().lower()

        filtered = []
        for ev in reversed(activity.list_events()):
            if filter_action != "All" and ev.action != filter_action:
                continue
            if search_text and search_text not in f"{ev.entity_id} {ev.details}".lower():
                continue
            filtered.append(ev)

        self.table.setRowCount(len(filtered))
        for row_idx, ev in enumerate(filtered):
            for col, val in enumerate([ev.timestamp, ev.action, ev.entity_type, ev.entity_id, ev.details]):
                self.table.setItem(row_idx, col, QtWidgets.QTableWidgetItem(str(val)))
        self.table.resizeColumnsToContents()


class SettingsPage(QtWidgets.QWidget):
    """Settings editor: school profile, preferences, notifications, system."""

    def __init__(self, parent: QtWidgets.QWidget):
        super().__init__(parent)
        root = QtWidgets.QVBoxLayout(self)
        root.setContentsMargins(16, 16, 16, 16)
        root.setSpacing(12)

        scroll = QtWidgets.QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QtWidgets.QFrame.NoFrame)

        scroll_widget = QtWidgets.QWidget()
        scroll_layout = QtWidgets.QVBoxLayout(scroll_widget)
        scroll_layout.setSpacing(16)

        def card(title: str) -> QtWidgets.QFormLayout:
            frame = QtWidgets.QFrame()
            frame.setObjectName("Card")
            lay = QtWidgets.QVBoxLayout(frame)
            lay.setContentsMargins(16, 16, 16, 16)
            lbl = QtWidgets.QLabel(title)
            lbl.setObjectName("TopTitle")
            lay.addWidget(lbl)
            form = QtWidgets.QFormLayout()
            lay.addLayout(form)
            scroll_layout.addWidget(frame)
            return form

        general = card("School Information")
        self.school_name = QtWidgets.QLineEdit()
        self.school_address = QtWidgets.QLineEdit()
        self.school_phone = QtWidgets.QLineEdit()
        self.school_email = QtWidgets.QLineEdit()
        self.academic_year = QtWidgets.QLineEdit()
        general.addRow("School name", self.school_name)
        general.addRow("Address", self.school_address)
        general.addRow("Phone", self.school_phone)
        general.addRow("Email", self.school_email)
        general.addRow("Academic year", self.academic_year)

        prefs = card("Preferences")
        self.currency = QtWidgets.QComboBox()
        self.currency.addItems(["USD", "EUR", "GBP", "CAD"])
        self.language = QtWidgets.QComboBox()
        self.language.addItems(["en", "es", "fr", "de"])
        self.timezone = QtWidgets.QComboBox()
        self.timezone.addItems(["America/New_York", "America/Chicago", "America/Denver", "America/Los_Angeles"])
        self.dark_mode = QtWidgets.QCheckBox("Dark mode")
        prefs.addRow("Currency", self.currency)
        prefs.addRow("Language", self.language)
        prefs.addRow("Timezone", self.timezone)
        prefs.addRow("Appearance", self.dark_mode)

        notif = card("Notifications")
        self.email_notifications = QtWidgets.QCheckBox("Email notifications")
        self.sms_notifications = QtWidgets.QCheckBox("SMS notifications")
        self.push_notifications = QtWidgets.QCheckBox("Push notifications")
        notif.addRow(self.email_notifications)
        notif.addRow(self.sms_notifications)
        notif.addRow(self.push_notifications)

        system = card("System")
        self.auto_backup = QtWidgets.QCheckBox("Automatic backup")
        self.backup_frequency = QtWidgets.QComboBox()
        self.backup_frequency.addItems(list(BACKUP_FREQUENCIES))
        self.maintenance_mode = QtWidgets.QCheckBox("Maintenance mode")
        system.addRow(self.auto_backup)
        system.addRow("Backup frequency", self.backup_frequency)
        system.addRow(self.maintenance_mode)

        data_row = QtWidgets.QHBoxLayout()
        self.btn_export = QtWidgets.QPushButton("Export Data")
        self.btn_import = QtWidgets.QPushButton("Import Data")
        data_row.addWidget(self.btn_export)
        data_row.addWidget(self.btn_import)
        data_row.addStretch(1)
        system.addRow(data_row)

        self.btn_save = QtWidgets.QPushButton("Save Settings")
        self.btn_save.setProperty("class", "Primary")
        self.btn_save.setMinimumHeight(44)
        scroll_layout.addWidget(self.btn_save)

        scroll_layout.addStretch(1)
        scroll.setWidget(scroll_widget)
        root.addWidget(scroll)

    def load_settings(self, settings: Settings) -> None:
        self.school_name.setText(settings.school_name)
        self.school_address.setText(settings.school_address)
        self.school_phone.setText(settings.school_phone)
        self.school_email.setText(settings.school_email)
        self.academic_year.setText(settings.academic_year)
        self.currency.setCurrentText(settings.currency)
        self.language.setCurrentText(settings.language)
        self.timezone.setCurrentText(settings.timezone)
        self.dark_mode.setChecked(settings.dark_mode)
        self.email_notifications.setChecked(settings.email_notifications)
        self.sms_notifications.setChecked(settings.sms_notifications)
        self.push_notifications.setChecked(settings.push_notifications)
        self.auto_backup.setChecked(settings.auto_backup)
        self.backup_frequency.setCurrentText(settings.backup_frequency)
        self.maintenance_mode.setChecked(settings.maintenance_mode)

    def get_settings(self) -> Settings:
        return Settings(
            school_name=self.school_name.text().strip(),
            school_address=self.school_address.text().strip(),
            school_phone=self.school_phone.text().strip(),
            school_email=self.school_email.text().strip(),
            academic_year=self.academic_year.text().strip(),
            currency=self.currency.currentText(),
            language=self.language.currentText(),
            timezone=self.timezone.currentText(),
            email_notifications=self.email_notifications.isChecked(),
            sms_notifications=self.sms_notifications.isChecked(),
            push_notifications=self.push_notifications.isChecked(),
            auto_backup=self.auto_backup.isChecked(),
            backup_frequency=self.backup_frequency.currentText(),
            maintenance_mode=self.maintenance_mode.isChecked(),
            appearance_mode="Dark" if self.dark_mode.isChecked() else "Light",
        )
