from .client import GenerateClient
from .conversation import ConversationLog
from .history import HistoryStore
from .orchestrator import ERROR_MESSAGE, QueryPipeline
from .parser import parse_answer
from .storage import JsonFileStore, KeyValueStore, MemoryStore

__all__ = [
    "ERROR_MESSAGE",
    "ConversationLog",
    "GenerateClient",
    "HistoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "QueryPipeline",
    "parse_answer",
]
