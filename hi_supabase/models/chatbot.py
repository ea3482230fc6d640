"""Chatbot records stored in the Supabase ``chatbots`` table."""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class ChatbotStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class NewChatbot(BaseModel):
    """A chatbot as submitted for insert.

    Optional display fields are sent only when explicitly set, so the
    database defaults apply to anything left out.
    """

    model_config = ConfigDict(extra='ignore')

    user_id: str
    org_name: str
    org_type: str
    description: str
    bot_name: str
    greeting: str
    tone: str
    enable_booking: bool
    enable_top_five: bool
    enable_map: bool
    top_five_items: List[str]
    booking_link: str
    map_embed_url: str
    bot_slug: str

    # Optional display/config fields
    users: Optional[int] = None
    qr_code_url: Optional[str] = None
    enable_form: Optional[bool] = None
    status: Optional[ChatbotStatus] = None
    last_active: Optional[datetime] = None
    interactions: Optional[int] = None

    def to_row(self) -> Dict[str, Any]:
        """Serialize for insert, omitting optional fields that were never set."""
        return self.model_dump(mode='json', exclude_unset=True)


class Chatbot(NewChatbot):
    """A stored chatbot row."""

    id: str
    created_at: datetime
