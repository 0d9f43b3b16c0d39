"""
Custom UI widgets for the askbox application.
"""
from .input_area import InputArea
from .chat_log import ChatLog
from .history_list import HistoryList, HistoryPicked

__all__ = ["InputArea", "ChatLog", "HistoryList", "HistoryPicked"]
