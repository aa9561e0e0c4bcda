from supabase import create_client, Client
from allergyscan.config import settings
import logging

logger = logging.getLogger(__name__)


class SupabaseClient:
    _client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def get_client_for_token(cls, access_token: str) -> Client:
        """Fresh client whose table queries run as the token's user, so row-level policies apply."""
        client = create_client(settings.supabase_url, settings.supabase_key)
        client.postgrest.auth(access_token)
        return client

    @staticmethod
    def close_client(client: Client) -> None:
        """Release the HTTP connection pool held by a per-token client."""
        session = getattr(client.postgrest, "session", None)
        if session is None:
            return
        try:
            session.close()
        except Exception as e:
            logger.warning(f"Error closing Supabase client session: {e}")

    @classmethod
    def reset_client(cls):
        cls._client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()
