"""
Main entrypoint for the dating app demo.

This module builds a ``DatingService``, replays a short scenario
(three users, their profiles and interests, a couple of messages) and
prints the results to standard output.  ``main`` parses command line
options, configures logging and runs the scenario; it backs
``run.py``, ``python -m dating_app`` and the ``dating-app-demo``
console script.
"""

import argparse
import logging
from typing import List, Optional, TextIO

from .core.config import settings
from .core.logging_config import setup_logging
from .services.dating_service import DatingService

logger = logging.getLogger(__name__)


def build_demo_service() -> DatingService:
    """Create a service populated with the demo users and profiles."""
    service = DatingService()

    alice = service.create_user("Alice", "alice@example.com", "password123")
    bob = service.create_user("Bob", "bob@example.com", "password456")
    charlie = service.create_user("Charlie", "charlie@example.com", "password789")

    alice_profile = service.create_profile(alice, 28, "I love hiking and reading.")
    bob_profile = service.create_profile(bob, 32, "Passionate about music and travel.")
    charlie_profile = service.create_profile(charlie, 30, "Foodie and movie enthusiast.")

    for interest in ("hiking", "reading", "travel"):
        alice_profile.add_interest(interest)
    for interest in ("music", "travel", "food"):
        bob_profile.add_interest(interest)
    for interest in ("food", "movies", "reading"):
        charlie_profile.add_interest(interest)

    return service


def run_demo(service: DatingService, min_score: int, out: Optional[TextIO] = None) -> None:
    """Play the demo scenario against ``service`` and print the results.

    ``service`` must contain the users built by ``build_demo_service``
    (Alice, Bob and Charlie with ids 1, 2 and 3).  Output goes to
    ``out``, or to standard output when it is ``None``.
    """
    alice, bob, charlie = service.list_users()[:3]
    alice_profile = service.list_profiles()[0]

    print("Matches for Alice:", file=out)
    for profile, score in service.find_scored_matches(alice_profile, min_score):
        print(f"- {profile.user.name} (Score: {score})", file=out)

    service.send_message(alice, bob.id, "Hi Bob, I noticed we both like traveling!")
    service.send_message(bob, charlie.id, "Hey Charlie, want to grab dinner sometime?")

    print("\nMessages for Bob:", file=out)
    for message in service.get_messages(bob.id):
        print(message, file=out)

    print(f"\nIs Alice's password correct? {alice.verify_password('password123')}", file=out)


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse demo options; defaults come from ``settings``.

    Level names are case insensitive.  Unknown names are rejected by
    argparse, which exits with status 2.
    """
    ap = argparse.ArgumentParser(description=f"{settings.project_name} demo.")
    ap.add_argument(
        "--min-score",
        type=int,
        default=settings.match_min_score,
        help="Minimum number of shared interests for a match (default: %(default)s)",
    )
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Logging level name (default: %(default)s); DEBUG=1 forces DEBUG",
    )
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Parse options, set up logging and run the demo."""
    args = parse_args(argv)
    setup_logging(settings, args.log_level)
    logger.debug("Starting %s %s", settings.project_name, settings.app_version)
    run_demo(build_demo_service(), args.min_score)
