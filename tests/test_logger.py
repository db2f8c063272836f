from schooladmin.logger import ActivityLog, AppEvent, ErrorLogger


def _event(i, action="add_student"):
    return AppEvent(timestamp=f"2024-01-01T00:00:{i:02d}", action=action, entity_type="student", entity_id=f"STU-{i:04d}")


def test_activity_log_keeps_most_recent_entries():
    log = ActivityLog(limit=3)
    for i in range(5):
        log.add_event(_event(i))
    assert len(log) == 3
    assert [e.entity_id for e in log.list_events()] == ["STU-0002", "STU-0003", "STU-0004"]
    assert [e.entity_id for e in log.list_events(limit=1)] == ["STU-0004"]


def test_activity_log_actions_are_distinct_and_sorted():
    log = ActivityLog()
    log.add_event(_event(1, "edit_student"))
    log.add_event(_event(2, "add_student"))
    log.add_event(_event(3, "edit_student"))
    assert log.actions() == ["add_student", "edit_student"]


def test_error_logger_appends_traceback(tmp_path):
    path = tmp_path / "logs" / "error_log.txt"
    logger = ErrorLogger(path)
    try:
        raise RuntimeError("boom")
    except RuntimeError as e:
        logger.log_exception(e, "qt_add_student")
    logger.log_exception(ValueError("second"), "qt_delete_student")
    text = path.read_text(encoding="utf-8")
    assert "qt_add_student" in text
    assert "RuntimeError: boom" in text
    assert "ValueError: second" in text
