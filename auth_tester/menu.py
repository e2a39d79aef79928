#!/usr/bin/env python3
"""
Interactive menu for manually exercising the auth API
"""

import sys
from typing import Optional

from auth_tester import actions
from auth_tester.actions import Prompt
from auth_tester.client import AuthApiClient
from auth_tester.config import settings
from auth_tester.session import SessionState
from auth_tester.utils.logger import get_logger, setup_logger

logger = get_logger("menu")

EXIT_CHOICE = "7"

MENU_OPTIONS = [
    "Register new user",
    "Verify email with code",
    "Login as user",
    "Login as admin",
    "Get user profile",
    "Test API key",
    "Exit",
]

ACTIONS = {
    "1": lambda client, state, prompt: actions.register_user(client, state, prompt=prompt),
    "2": lambda client, state, prompt: actions.verify_email(client, state, prompt=prompt),
    "3": lambda client, state, prompt: actions.login_user(client, state, prompt=prompt),
    "4": lambda client, state, prompt: actions.login_admin(client, state, prompt=prompt),
    "5": lambda client, state, prompt: actions.get_user_profile(client, state.user_token),
    "6": lambda client, state, prompt: actions.check_api_key(client, state, prompt=prompt),
}


def show_menu():
    print("\n=== Auth Testing Tool ===")
    for number, label in enumerate(MENU_OPTIONS, start=1):
        print(f"{number}. {label}")


def run_session(
    client: AuthApiClient,
    state: Optional[SessionState] = None,
    prompt: Optional[Prompt] = None,
) -> SessionState:
    """Show the menu and run actions until the operator picks Exit"""
    state = state or SessionState()
    prompt = prompt or input

    while True:
        show_menu()
        choice = prompt(f"\nEnter your choice (1-{EXIT_CHOICE}): ").strip()

        if choice == EXIT_CHOICE:
            print("Exiting...")
            return state

        action = ACTIONS.get(choice)
        if action is None:
            print("Invalid choice. Try again.")
            continue

        logger.debug(f"Running menu action {choice}")
        action(client, state, prompt)


def main() -> int:
    setup_logger(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)
    client = AuthApiClient()
    try:
        run_session(client)
    except (EOFError, KeyboardInterrupt):
        # Input closed mid-session
        print("\nExiting...")
    except Exception as e:
        logger.error(f"Unhandled error: {str(e)}", exc_info=True)
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
