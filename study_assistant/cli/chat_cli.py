"""Interactive tutor chat for one task via the HTTP API."""

from __future__ import annotations

import argparse

import requests


def main() -> int:
    parser = argparse.ArgumentParser(description="Chat with the JEdu tutor about a task")
    parser.add_argument("task_id", help="Task to discuss")
    parser.add_argument(
        "--url",
        default="http://127.0.0.1:8000",
        help="API base URL",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=60,
        help="Request timeout in seconds",
    )
    args = parser.parse_args()

    endpoint = f"{args.url.rstrip('/')}/tasks/{args.task_id}/chat"
    history: list[dict] = []
    print("Type your messages. Ctrl+D or 'exit' to quit.")

    while True:
        try:
            user_input = input("> ").strip()
        except EOFError:
            print()
            break

        if not user_input:
            continue
        if user_input.lower() in {"exit", "quit"}:
            break

        payload = {"history": history, "message": user_input}
        resp = requests.post(endpoint, json=payload, timeout=args.timeout)
        if resp.status_code != 200:
            print(f"Error {resp.status_code}: {resp.text}")
            continue

        data = resp.json()
        history = data.get("history", history)
        print(data.get("reply", ""))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
