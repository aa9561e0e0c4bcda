from tests.conftest import OTHER_USER_ID, add_scan


def test_list_newest_first(client, supabase):
    first = add_scan(supabase, product_name="first")
    second = add_scan(supabase, product_name="second")
    add_scan(supabase, user_id=OTHER_USER_ID, product_name="theirs")

    names = [s["product_name"] for s in client.get("/api/v1/history").json()]
    assert names == ["second", "first"]
    assert first["created_at"] < second["created_at"]


def test_list_respects_limit(client, supabase):
    for i in range(5):
        add_scan(supabase, product_name=f"scan-{i}")
    scans = client.get("/api/v1/history", params={"limit": 2}).json()
    assert [s["product_name"] for s in scans] == ["scan-4", "scan-3"]


def test_limit_must_be_positive(client):
    assert client.get("/api/v1/history", params={"limit": 0}).status_code == 422


def test_list_without_limit_returns_every_scan(client, supabase):
    for i in range(60):
        add_scan(supabase, product_name=f"scan-{i}")
    scans = client.get("/api/v1/history").json()
    assert len(scans) == 60
    assert scans[0]["product_name"] == "scan-59"
    assert scans[-1]["product_name"] == "scan-0"


def test_get_own_scan(client, supabase):
    row = add_scan(supabase, product_name="granola", has_matches=True)
    body = client.get(f"/api/v1/history/{row['id']}").json()
    assert body["product_name"] == "granola"
    assert body["has_matches"] is True
    assert body["ingredients"] == ["flour", "sugar"]


def test_foreign_scan_indistinguishable_from_missing(client, supabase):
    theirs = add_scan(supabase, user_id=OTHER_USER_ID)
    foreign = client.get(f"/api/v1/history/{theirs['id']}")
    missing = client.get("/api/v1/history/00000000-0000-0000-0000-000000000000")
    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json()
