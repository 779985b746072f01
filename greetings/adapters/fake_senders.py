"""Fake sender adapters for local smoke tests.

Mental model refresher:
- This is outbound adapter code.
- In production, this is where provider SDK/API calls live (SMTP, Slack, etc).
- Handlers call these through injected functions; they do not know which
  provider implementation is underneath.
"""

from __future__ import annotations


def send_email_via_console(*, to_email: str, subject: str, body: str) -> None:
    print("[EMAIL]")
    print(f"to={to_email}")
    print(f"subject={subject}")
    print(f"body={body}")


def send_chat_via_console(*, to_handle: str, message: str) -> None:
    print("[CHAT]")
    print(f"to={to_handle}")
    print(f"message={message}")
