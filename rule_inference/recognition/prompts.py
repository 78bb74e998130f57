"""
Prompt text for the column pattern classifier.

SYSTEM_PROMPT is fixed for every call; build_user_prompt() embeds the
model name, field name and the sampled values.
"""

import json
from typing import Any, List

SYSTEM_PROMPT = """You are a data engineer reviewing a sample of values taken from one database column.
Infer the validation pattern and, where one applies, the standard data format of the column.

You receive:
1. The model (table) name
2. The field (column) name
3. Sample values from that column as a JSON array

Reply with a JSON object containing:
- pattern: a regular expression that matches every value in the sample and plausible future values.
  Prefer specific but robust expressions. Use null when the values follow no clear pattern.
- format: one of email, uuid, cuid, url, ipv4, ipv6, date, datetime, phone, hex. Omit it when none applies.
- description: a short description of the values (for example "Alphanumeric code starting with 'usr_'").

Examples:
Input: ["usr_101", "usr_202", "usr_303"]
Output: {"pattern": "^usr_\\\\d+$", "description": "Prefix 'usr_' followed by digits"}

Input: ["ana@example.com", "li@test.io"]
Output: {"format": "email", "pattern": "^[^@\\\\s]+@[^@\\\\s]+\\\\.[^@\\\\s]+$", "description": "Email address"}

Input: ["X9K2", "P4Q7", "Z1M8"]
Output: {"pattern": "^[A-Z0-9]{4}$", "description": "Four-character uppercase alphanumeric code"}
"""


def build_user_prompt(model: str, field: str, values: List[Any]) -> str:
    return (
        f"Model: {model}\n"
        f"Field: {field}\n"
        f"Values: {json.dumps(values, default=str, ensure_ascii=False)}\n"
    )
