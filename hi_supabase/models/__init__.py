"""Record models for the data-access layer."""

from .chatbot import Chatbot, ChatbotStatus, NewChatbot

__all__ = ["Chatbot", "ChatbotStatus", "NewChatbot"]
