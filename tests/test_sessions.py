from datetime import timedelta

from pizzeria.auth.sessions import SessionStore


def test_create_and_get(session_store):
    record = session_store.create()
    assert record.admin is True
    assert session_store.get(record.session_id) == record
    assert len(session_store) == 1


def test_tokens_are_unique(session_store):
    tokens = {session_store.create().session_id for _ in range(50)}
    assert len(tokens) == 50


def test_expiry_is_absolute(session_store, clock):
    record = session_store.create()

    clock.advance(minutes=30)
    assert session_store.get(record.session_id) is not None

    # reading the session did not extend it
    clock.advance(minutes=30)
    assert session_store.get(record.session_id) is None
    assert len(session_store) == 0


def test_missing_ids(session_store):
    assert session_store.get(None) is None
    assert session_store.get('') is None
    assert session_store.get('unknown') is None


def test_destroy_is_idempotent(session_store):
    record = session_store.create()
    session_store.destroy(record.session_id)
    session_store.destroy(record.session_id)
    session_store.destroy(None)
    assert session_store.get(record.session_id) is None


def test_purge_expired(clock):
    store = SessionStore(lifetime=timedelta(minutes=10), clock=clock)
    old = store.create()
    clock.advance(minutes=5)
    fresh = store.create()
    clock.advance(minutes=6)

    assert store.purge_expired() == 1
    assert store.get(old.session_id) is None
    assert store.get(fresh.session_id) is not None


def test_create_drops_expired_sessions(session_store, clock):
    first = session_store.create()
    clock.advance(minutes=30)
    recent = [session_store.create() for _ in range(3)]
    clock.advance(minutes=45)

    fresh = session_store.create()
    assert len(session_store) == 4
    assert session_store.get(first.session_id) is None
    assert all(session_store.get(r.session_id) is not None for r in recent)
    assert session_store.get(fresh.session_id) is not None
