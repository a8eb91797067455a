"""Interactive prompts and help text for the client and server."""

from __future__ import annotations

import random
import sys

MALICIOUS_LOGS = (
    "Never interrupt your enemy when he is making a mistake.",
    "The hardest thing of all for a soldier is to retreat.",
    "A soldier will fight long and hard for a bit of colored ribbon.",
    "It is well that war is so terrible, otherwise we should grow too fond of it.",
    "The art of war is simple enough. Find out where your enemy is. Get at him as soon as "
    "you can. Strike him as hard as you can, and keep moving on.",
    "All warfare is based on deception.",
)

QUIT_MESSAGE = "I hate this game! (╯°□°)╯︵ ┻━┻"

_CLIENT_HELP_LINES = (
    "Possible commands:",
    "* move <location> <unitID> <unitID> <unitID>...",
    "    example:",
    "    move asia 1",
    "* spawn <location> <rank>",
    "    example:",
    "    spawn europe infantry",
    "* status",
    "* spam <n>",
    "    example:",
    "    spam 5",
    "* quit",
    "* help",
)

_SERVER_HELP_LINES = (
    "Possible commands:",
    "* pause",
    "* resume",
    "* quit",
    "* help",
)


def _emit(lines: tuple[str, ...]) -> str:
    """Write the lines to standard output and return the text written."""
    text = "".join(f"{line}\n" for line in lines)
    sys.stdout.write(text)
    sys.stdout.flush()
    return text


def print_client_help() -> str:
    """Print the client's command list and return it."""
    return _emit(_CLIENT_HELP_LINES)


def print_server_help() -> str:
    """Print the server's command list and return it."""
    return _emit(_SERVER_HELP_LINES)


def get_input() -> list[str]:
    """Prompt and return the words of one line of standard input; empty at end of input."""
    print("> ", end="", flush=True)
    line = sys.stdin.readline()
    return line.split()


def client_welcome() -> str:
    """Greet the player and ask for a username."""
    print("Welcome to the Peril client!")
    print("Please enter your username:")
    words = get_input()
    if not words:
        raise ValueError("you must enter a username. goodbye")
    username = words[0]
    print(f"Welcome, {username}!")
    print_client_help()
    return username


def get_malicious_log() -> str:
    return random.choice(MALICIOUS_LOGS)


def print_quit() -> str:
    """Print the quitting message and return it."""
    return _emit((QUIT_MESSAGE,))