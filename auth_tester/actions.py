"""
Menu actions for the auth testing tool

Each action prompts for its inputs, makes one call through AuthApiClient,
prints the outcome and hands control back to the menu loop. API and
transport failures are printed, never raised.
"""

import json
import sys
from typing import Any, Callable, Optional

from auth_tester.client import AuthApiClient
from auth_tester.exceptions import ApiError, AuthTesterError
from auth_tester.session import SessionState

Prompt = Callable[[str], str]


def format_payload(payload: Any) -> str:
    if isinstance(payload, str):
        return payload
    return json.dumps(payload, indent=2)


def describe_error(error: AuthTesterError) -> str:
    """
    Pick the text to show for a failed call

    API errors show the server's `message` field, then its `error` field,
    otherwise the whole error body. Transport errors, and API errors with
    an empty body, show the exception message.
    """
    if isinstance(error, ApiError) and error.payload is not None:
        payload = error.payload
        if isinstance(payload, dict):
            for key in ("message", "error"):
                if isinstance(payload.get(key), str):
                    return payload[key]
        return format_payload(payload)
    return error.message


def report_failure(action: str, error: AuthTesterError) -> None:
    print(f"\n{action} failed: {describe_error(error)}", file=sys.stderr)


def print_response(label: str, payload: Any) -> None:
    print(f"{label}: {format_payload(payload)}")


def response_field(payload: Any, key: str) -> Optional[str]:
    if isinstance(payload, dict) and isinstance(payload.get(key), str) and payload[key]:
        return payload[key]
    return None


def prompt_with_default(prompt: Prompt, label: str, default: Optional[str]) -> str:
    if default:
        return prompt(f"{label} [{default}]: ") or default
    return prompt(f"{label}: ")


def register_user(client: AuthApiClient, state: SessionState, prompt: Prompt = input) -> Optional[str]:
    name = prompt("Enter name: ")
    email = prompt("Enter email: ")
    password = prompt("Enter password: ")

    print("\nRegistering user...")
    try:
        payload = client.register(name, email, password)
    except AuthTesterError as e:
        report_failure("Registration", e)
        return None

    print("\nRegistration successful!")
    print_response("Response", payload)
    print("\nCheck your email for the verification code.")

    state.registered_email = email
    return email


def verify_email(
    client: AuthApiClient,
    state: SessionState,
    email: Optional[str] = None,
    prompt: Prompt = input,
) -> Optional[str]:
    if not email:
        email = prompt_with_default(prompt, "Enter your email", state.registered_email)

    code = prompt("Enter the 6-digit verification code from your email: ")

    print("\nVerifying email...")
    try:
        payload = client.verify_email(email, code)
    except AuthTesterError as e:
        report_failure("Verification", e)
        return None

    print("\nEmail verification successful!")
    print_response("Response", payload)

    token = response_field(payload, "token")
    if token:
        state.user_token = token
    api_key = response_field(payload, "apiKey")
    if not api_key and isinstance(payload, dict):
        api_key = response_field(payload.get("user"), "apiKey")
    if api_key:
        state.api_key = api_key

    print(f"\nJWT Token: {token}")
    print(f"API Key: {api_key}")
    return token


def login_user(client: AuthApiClient, state: SessionState, prompt: Prompt = input) -> Optional[str]:
    email = prompt("Enter email: ")
    password = prompt("Enter password: ")

    print("\nLogging in...")
    try:
        payload = client.login_user(email, password)
    except AuthTesterError as e:
        report_failure("Login", e)
        return None

    print("\nLogin successful!")
    print_response("Response", payload)

    token = response_field(payload, "token")
    if token:
        state.user_token = token
    print(f"\nToken: {token}")
    return token


def login_admin(client: AuthApiClient, state: SessionState, prompt: Prompt = input) -> Optional[str]:
    email = prompt("Enter admin email: ")
    password = prompt("Enter admin password: ")

    print("\nLogging in as admin...")
    try:
        payload = client.login_admin(email, password)
    except AuthTesterError as e:
        report_failure("Admin login", e)
        return None

    print("\nAdmin login successful!")
    print_response("Response", payload)

    token = response_field(payload, "token")
    if token:
        state.admin_token = token
    print(f"\nAdmin Token: {token}")
    return token


def get_user_profile(client: AuthApiClient, token: Optional[str]) -> Any:
    if not token:
        print("No token available. Please login first.")
        return None

    print("\nGetting user profile...")
    try:
        payload = client.get_profile(token)
    except AuthTesterError as e:
        report_failure("Profile retrieval", e)
        return None

    print("\nProfile retrieved successfully!")
    print_response("Profile", payload)
    return payload


def check_api_key(client: AuthApiClient, state: SessionState, prompt: Prompt = input) -> Any:
    api_key = prompt_with_default(prompt, "Enter API key", state.api_key)

    print("\nTesting API key...")
    try:
        payload = client.get_api_user(api_key)
    except AuthTesterError as e:
        report_failure("API key test", e)
        return None

    print("\nAPI key test successful!")
    print_response("Response", payload)
    return payload
