import pytest
from fastapi.testclient import TestClient

from allergyscan.core.dependencies import (
    get_analysis_client, get_current_session, get_text_extractor, get_user_supabase
)
from allergyscan.core.rate_limit import limiter
from allergyscan.core.session import Session
from allergyscan.database.supabase_client import get_supabase
from allergyscan.main import app
from tests.fakes import FakeAnalyzer, FakeSupabase, FakeTextExtractor

limiter.enabled = False

USER_ID = "11111111-1111-1111-1111-111111111111"
OTHER_USER_ID = "22222222-2222-2222-2222-222222222222"


@pytest.fixture
def supabase():
    return FakeSupabase()


@pytest.fixture
def extractor():
    return FakeTextExtractor(text="Ingredients: Milk, Sugar; Cocoa: Salt")


@pytest.fixture
def analyzer():
    return FakeAnalyzer(reply="Looks fine to me.")


@pytest.fixture
def session():
    return Session(user_id=USER_ID, email="eater@example.com", access_token="token-test")


@pytest.fixture
def anonymous_client(supabase, extractor, analyzer):
    """Client with real token resolution against the fake auth provider."""
    app.dependency_overrides[get_supabase] = lambda: supabase
    app.dependency_overrides[get_user_supabase] = lambda: supabase
    app.dependency_overrides[get_text_extractor] = lambda: extractor
    app.dependency_overrides[get_analysis_client] = lambda: analyzer
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def client(anonymous_client, session):
    app.dependency_overrides[get_current_session] = lambda: session
    return anonymous_client


def add_allergy(supabase, name, user_id=USER_ID, severity="mild", notes=None):
    return supabase.table("allergies").insert({
        "user_id": user_id,
        "name": name,
        "severity": severity,
        "notes": notes,
    }).execute().data[0]


def add_scan(supabase, user_id=USER_ID, product_name="Cookies", has_matches=False):
    return supabase.table("scan_history").insert({
        "user_id": user_id,
        "product_name": product_name,
        "ingredients": ["flour", "sugar"],
        "matched_allergies": [],
        "has_matches": has_matches,
        "analysis": "ok",
    }).execute().data[0]
