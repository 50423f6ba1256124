"""RSVP creation and withdrawal."""
from weddingplanner.models.user import User
from weddingplanner.models.wedding import Wedding
from weddingplanner.models.commitment import Commitment
from tests.conftest import register, create_wedding, commit


def _wedding_with_guest_client(client, make_client):
    """Alice plans a wedding; returns Bob's client and the wedding."""
    register(client, email="a@x.com", first_name="Alice")
    create_wedding(client)
    guest = make_client()
    register(guest, email="b@x.com", first_name="Bob")
    return guest, Wedding.get()


def test_commit_creates_row_for_session_user(client, make_client):
    guest, wedding = _wedding_with_guest_client(client, make_client)
    resp = commit(guest, wedding.id)
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/weddings")

    commitment = Commitment.get()
    assert commitment.user_id == User.get(User.email == "b@x.com").id
    assert commitment.wedding_id == wedding.id


def test_commit_ignores_client_supplied_user(client, make_client):
    guest, wedding = _wedding_with_guest_client(client, make_client)
    alice = User.get(User.email == "a@x.com")
    guest.post("/commitments/create", data={"wedding_id": str(wedding.id), "user_id": str(alice.id)})
    assert Commitment.get().user_id != alice.id


def test_second_commit_is_rejected(client, make_client):
    guest, wedding = _wedding_with_guest_client(client, make_client)
    commit(guest, wedding.id)
    resp = commit(guest, wedding.id)
    assert resp.status_code == 200
    assert b"The commitment must not exist already." in resp.data
    assert Commitment.select().count() == 1


def test_commit_to_missing_wedding(client):
    register(client)
    resp = commit(client, 9999)
    assert b"The wedding must exist in order to RSVP." in resp.data
    assert Commitment.select().count() == 0


def test_commit_to_out_of_range_wedding_id(client):
    register(client)
    resp = commit(client, "9" * 25)
    assert resp.status_code == 200
    assert b"The wedding must exist in order to RSVP." in resp.data
    assert Commitment.select().count() == 0


def test_withdraw_out_of_range_commitment_id(client):
    register(client)
    resp = client.post(f"/commitments/{'9' * 25}/destroy")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/weddings")


def test_store_rejects_duplicate_that_slips_past_validation(client, make_client, monkeypatch):
    guest, wedding = _wedding_with_guest_client(client, make_client)
    commit(guest, wedding.id)
    # Simulate a concurrent RSVP landing between the check and the insert
    monkeypatch.setattr("weddingplanner.routes.commitments.validate_commitment",
                        lambda user_id, wedding_id, db: [])
    resp = commit(guest, wedding.id)
    assert resp.status_code == 200
    assert b"The commitment must not exist already." in resp.data
    assert Commitment.select().count() == 1


def test_commit_without_wedding_id(client):
    register(client)
    resp = client.post("/commitments/create", data={})
    assert b"Commitment isn&#39;t fully initialized" in resp.data
    resp = client.post("/commitments/create", data={"wedding_id": "abc"})
    assert b"Commitment isn&#39;t fully initialized" in resp.data
    assert Commitment.select().count() == 0


def test_listing_offers_withdrawal_after_commit(client, make_client):
    guest, wedding = _wedding_with_guest_client(client, make_client)
    commit(guest, wedding.id)
    commitment = Commitment.get()
    resp = guest.get("/weddings")
    assert f"/commitments/{commitment.id}/destroy".encode() in resp.data


def test_guest_withdraws_own_commitment(client, make_client):
    guest, wedding = _wedding_with_guest_client(client, make_client)
    commit(guest, wedding.id)
    commitment = Commitment.get()

    resp = guest.post(f"/commitments/{commitment.id}/destroy")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/weddings")
    assert Commitment.select().count() == 0


def test_other_user_cannot_withdraw_commitment(client, make_client):
    guest, wedding = _wedding_with_guest_client(client, make_client)
    commit(guest, wedding.id)
    commitment = Commitment.get()

    # Even the wedding's creator cannot remove someone else's RSVP
    denied = client.post(f"/commitments/{commitment.id}/destroy")
    missing = client.post("/commitments/9999/destroy")
    assert Commitment.select().count() == 1
    assert denied.status_code == missing.status_code == 302
    assert denied.headers["Location"] == missing.headers["Location"]


def test_recommit_after_withdrawal(client, make_client):
    guest, wedding = _wedding_with_guest_client(client, make_client)
    commit(guest, wedding.id)
    guest.post(f"/commitments/{Commitment.get().id}/destroy")
    assert commit(guest, wedding.id).status_code == 302
    assert Commitment.select().count() == 1
