"""
LedgerView CLI

Command-line interface for test-vector generation and verification.

Usage:
    ledgerview generate --output vectors.json
    ledgerview check --old vectors.json
    ledgerview stats --profile wide

Environment:
    LEDGERVIEW_SEED       Default for --seed
    LEDGERVIEW_LOG_LEVEL  Default for --log-level
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from .exceptions import LedgerViewError
from .profiles import DEFAULT_PROFILE, DisplayProfile, load_profile
from .vectors import (
    DEFAULT_SEED,
    SampleGenerator,
    TestVector,
    build_vectors,
    diff_vectors,
    dumps_vectors,
    read_vectors,
    vector_set_fingerprint,
    write_vectors,
)

logger = logging.getLogger("ledgerview")

SEED_ENV = "LEDGERVIEW_SEED"
LOG_LEVEL_ENV = "LEDGERVIEW_LOG_LEVEL"


def configure_logging(level: str) -> None:
    """Attach a stderr handler to the package logger."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(level.upper())


def generate_vectors(seed: str, profile: DisplayProfile) -> list[TestVector]:
    """
    Generate all samples and render them under a profile.

    Args:
        seed: Hex seed for the sample generator
        profile: Display profile supplying geometry and thresholds

    Returns:
        Test vectors in publication order
    """
    samples = SampleGenerator(seed=seed).generate()
    return build_vectors(samples, profile.geometry, profile.thresholds)


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args: argparse.Namespace) -> int:
    """Generate vectors command."""
    profile = load_profile(args.profile)
    vectors = generate_vectors(args.seed, profile)

    if args.output:
        write_vectors(vectors, args.output)
        print(
            f"Wrote {len(vectors)} vectors to {args.output} "
            f"(profile {profile.name}, fingerprint {vector_set_fingerprint(vectors)[:12]})"
        )
    else:
        sys.stdout.write(dumps_vectors(vectors))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Regenerate vectors and compare them with an older generation."""
    profile = load_profile(args.profile)
    old = read_vectors(args.old)
    new = generate_vectors(args.seed, profile)
    diff = diff_vectors(old, new)

    if diff.is_empty:
        print(f"No differences ({len(new)} vectors, fingerprint {vector_set_fingerprint(new)[:12]})")
        return 0

    print("DIFFERENCES FOUND")
    print("-" * 40)
    for label, names in (("changed", diff.changed), ("added", diff.added), ("removed", diff.removed)):
        for name in names:
            print(f"  {label:<8} {name}")
    print("-" * 40)
    print(f"  {len(diff.changed)} changed, {len(diff.added)} added, {len(diff.removed)} removed")
    return 1


def cmd_stats(args: argparse.Namespace) -> int:
    """Show per-kind sample counts and validity tallies."""
    profile = load_profile(args.profile)
    vectors = generate_vectors(args.seed, profile)

    tallies: dict[str, list[int]] = {}
    for vector in vectors:
        kind = vector.name.split("-", 1)[0]
        row = tallies.setdefault(kind, [0, 0, 0])
        row[0] += 1
        row[1] += vector.valid_regular
        row[2] += vector.valid_expert

    print(f"TEST VECTOR SUMMARY (profile {profile.name})")
    print("=" * 60)
    print(f"{'Kind':<20} {'Count':>10} {'Regular ok':>12} {'Expert ok':>12}")
    print("-" * 60)
    for kind, (count, regular_ok, expert_ok) in tallies.items():
        print(f"{kind:<20} {count:>10} {regular_ok:>12} {expert_ok:>12}")
    print("-" * 60)
    print(f"{'TOTAL':<20} {len(vectors):>10}")
    return 0


# =============================================================================
# Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="LedgerView test-vector CLI",
        prog="ledgerview",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--seed",
        default=os.environ.get(SEED_ENV, DEFAULT_SEED),
        help=f"Hex seed for sample generation (default: ${SEED_ENV} or built-in)",
    )
    common.add_argument(
        "--profile",
        default=DEFAULT_PROFILE,
        help="Packaged profile name or path to a profile file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    gen_parser = subparsers.add_parser("generate", parents=[common], help="Generate test vectors")
    gen_parser.add_argument("--output", "-o", help="Write vectors to this file instead of stdout")
    gen_parser.set_defaults(func=cmd_generate)

    check_parser = subparsers.add_parser(
        "check", parents=[common], help="Compare regenerated vectors with an older file"
    )
    check_parser.add_argument("--old", required=True, help="Previously generated vector file")
    check_parser.set_defaults(func=cmd_check)

    stats_parser = subparsers.add_parser("stats", parents=[common], help="Show vector statistics")
    stats_parser.set_defaults(func=cmd_stats)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        configure_logging(args.log_level)
    except ValueError:
        print(f"Unknown log level: {args.log_level}", file=sys.stderr)
        return 2

    try:
        return args.func(args)
    except LedgerViewError as e:
        logger.debug("Command failed: %s", e.to_dict())
        print(str(e), file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
