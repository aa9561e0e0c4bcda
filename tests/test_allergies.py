from tests.conftest import OTHER_USER_ID, USER_ID, add_allergy


def test_create_then_list_round_trip(client):
    created = client.post(
        "/api/v1/allergies",
        json={"name": "Peanut", "severity": "severe", "notes": "carries epipen"},
    )
    assert created.status_code == 201
    body = created.json()
    assert body["user_id"] == USER_ID
    assert body["severity"] == "severe"

    listed = client.get("/api/v1/allergies").json()
    assert listed == [body]


def test_severity_defaults_to_mild_and_blank_notes_become_null(client):
    body = client.post("/api/v1/allergies", json={"name": "  Milk ", "notes": "   "}).json()
    assert body["name"] == "Milk"
    assert body["severity"] == "mild"
    assert body["notes"] is None


def test_blank_name_rejected_before_store_call(client, supabase):
    response = client.post("/api/v1/allergies", json={"name": "   "})
    assert response.status_code == 422
    assert "Allergy name is required" in response.text
    assert supabase.count("allergies", "insert") == 0


def test_unknown_severity_rejected(client):
    assert client.post("/api/v1/allergies", json={"name": "Soy", "severity": "deadly"}).status_code == 422


def test_duplicate_names_allowed(client):
    client.post("/api/v1/allergies", json={"name": "Egg"})
    client.post("/api/v1/allergies", json={"name": "Egg"})
    assert len(client.get("/api/v1/allergies").json()) == 2


def test_list_sorted_by_name_and_scoped_to_user(client, supabase):
    add_allergy(supabase, "Wheat")
    add_allergy(supabase, "Celery")
    add_allergy(supabase, "Mustard")
    add_allergy(supabase, "Almond", user_id=OTHER_USER_ID)

    names = [a["name"] for a in client.get("/api/v1/allergies").json()]
    assert names == ["Celery", "Mustard", "Wheat"]


def test_update_changes_only_supplied_fields(client, supabase):
    row = add_allergy(supabase, "Shrimp", severity="moderate", notes="hives")
    response = client.put(f"/api/v1/allergies/{row['id']}", json={"severity": "severe"})
    assert response.status_code == 200
    body = response.json()
    assert body["severity"] == "severe"
    assert body["name"] == "Shrimp"
    assert body["notes"] == "hives"


def test_update_can_clear_notes(client, supabase):
    row = add_allergy(supabase, "Shrimp", notes="hives")
    body = client.put(f"/api/v1/allergies/{row['id']}", json={"notes": ""}).json()
    assert body["notes"] is None


def test_update_with_blank_name_rejected(client, supabase):
    row = add_allergy(supabase, "Shrimp")
    assert client.put(f"/api/v1/allergies/{row['id']}", json={"name": " "}).status_code == 422


def test_update_other_users_allergy_is_not_found(client, supabase):
    row = add_allergy(supabase, "Sesame", user_id=OTHER_USER_ID)
    response = client.put(f"/api/v1/allergies/{row['id']}", json={"severity": "severe"})
    assert response.status_code == 404
    assert supabase.tables["allergies"][0]["severity"] == "mild"


def test_delete(client, supabase):
    row = add_allergy(supabase, "Lupin")
    assert client.delete(f"/api/v1/allergies/{row['id']}").status_code == 204
    assert client.get("/api/v1/allergies").json() == []
    assert client.delete(f"/api/v1/allergies/{row['id']}").status_code == 404


def test_store_failure_is_generic(client, supabase):
    supabase.failing_tables.add("allergies")
    response = client.get("/api/v1/allergies")
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to fetch your allergies. Please try again."
