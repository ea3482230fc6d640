"""Chatbot queries against the Supabase ``chatbots`` table.

Every method is a direct pass-through: errors reported by PostgREST are
raised unchanged as ``RemoteError`` and nothing is retried or cached.
"""
from typing import Any, Dict, List, Union

from postgrest.exceptions import APIError as RemoteError
from supabase import Client

from hi_supabase.models.chatbot import Chatbot, NewChatbot

CHATBOTS_TABLE = "chatbots"


class ChatbotRepository:
    """CRUD operations for chatbot records."""

    def __init__(self, client: Client, table: str = CHATBOTS_TABLE):
        self.client = client
        self.table = table

    def _query(self):
        return self.client.table(self.table)

    def create(self, data: Union[NewChatbot, Dict[str, Any]]) -> Chatbot:
        """Insert a chatbot and return the stored row.

        Raises:
            RemoteError: If the insert is rejected (e.g. duplicate slug)
        """
        if not isinstance(data, NewChatbot):
            data = NewChatbot.model_validate(data)
        response = self._query().insert(data.to_row()).execute()
        return Chatbot.model_validate(response.data[0])

    def list_by_user(self, user_id: str) -> List[Chatbot]:
        """Return a user's chatbots, newest first."""
        response = (
            self._query()
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [Chatbot.model_validate(row) for row in response.data]

    def get_by_slug(self, slug: str) -> Chatbot:
        """Fetch the chatbot with the given slug.

        Raises:
            RemoteError: If no row (or more than one) matches
        """
        response = self._query().select("*").eq("bot_slug", slug).single().execute()
        return Chatbot.model_validate(response.data)

    def delete(self, chatbot_id: str) -> bool:
        self._query().delete().eq("id", chatbot_id).execute()
        return True
