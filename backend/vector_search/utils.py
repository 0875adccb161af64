# utils.py
import json


def sanitize_query(query: str) -> str:
    """
    Trim the query and flatten embedded newlines to spaces.
    The prompt template uses newlines as delimiters, so the question block is
    built from this text and a query cannot open new lines inside the prompt.
    """
    return query.strip().replace("\n", " ")


def to_log_json(obj) -> str:
    """
    Best-effort JSON rendering of error payloads for log lines.
    """
    return json.dumps(obj, ensure_ascii=False, default=str)
