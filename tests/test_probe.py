from firestore_check.core.probe import ProbeResult, ProbeStatus, probe_subcollection


def test_probe_counts_documents(fake_db):
    fake_db.add_many("users/u1/bookmarks", 3)

    result = probe_subcollection(fake_db, "u1", "bookmarks")

    assert result.status == ProbeStatus.SUCCESS
    assert result.count == 3
    assert result.reportable
    assert fake_db.reads == ["users/u1/bookmarks"]


def test_missing_subcollection_is_empty_success(fake_db):
    result = probe_subcollection(fake_db, "u1", "history")

    assert result == ProbeResult.success("history", 0)
    assert not result.reportable


def test_failed_read_becomes_failure_result(fake_db):
    error = RuntimeError("permission denied")
    fake_db.fail("users/u1/passwords", error)

    result = probe_subcollection(fake_db, "u1", "passwords")

    assert result.status == ProbeStatus.FAILED
    assert result.error is error
    assert not result.reportable


def test_parent_collection_can_be_changed(fake_db):
    fake_db.add_many("accounts/a1/settings", 1)

    result = probe_subcollection(fake_db, "a1", "settings", parent_collection="accounts")

    assert result.count == 1
