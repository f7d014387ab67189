"""octopulls command line: get, list or create pull requests.

Usage: octopulls [-c config.yaml] get|list|create OWNER REPO ...
Prints decoded pull requests as JSON.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from octopulls.client import PullRequestClient
from octopulls.config import load_config
from octopulls.errors import GitHubError
from octopulls.logging import OctopullsLogging
from octopulls.models import Openness, SortDirection, SortType


def _bool(value: str) -> bool:
    v = value.strip().lower()
    if v in ("true", "yes", "1"):
        return True
    if v in ("false", "no", "0"):
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="octopulls",
        description="GitHub pull requests - get one, list, or create",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    sub = parser.add_subparsers(dest="command")

    get = sub.add_parser("get", help="Fetch one pull request")
    get.add_argument("owner")
    get.add_argument("repo")
    get.add_argument("number", type=int)

    lst = sub.add_parser("list", help="List pull requests")
    lst.add_argument("owner")
    lst.add_argument("repo")
    lst.add_argument("--base", default=None, help="Filter by base branch")
    lst.add_argument("--state", choices=[o.value for o in Openness], default=Openness.OPEN.value)
    lst.add_argument("--sort", choices=[s.value for s in SortType], default=SortType.CREATED.value)
    lst.add_argument(
        "--direction", choices=[d.value for d in SortDirection], default=SortDirection.DESC.value
    )

    create = sub.add_parser("create", help="Open a pull request")
    create.add_argument("owner")
    create.add_argument("repo")
    create.add_argument("--title", required=True)
    create.add_argument("--head", required=True, help="Branch with the changes")
    create.add_argument("--base", required=True, help="Branch to merge into")
    create.add_argument("--body", default=None)
    create.add_argument("--maintainer-can-modify", type=_bool, default=None)
    return parser


def run_command(client: PullRequestClient, args: argparse.Namespace) -> object:
    """Execute the parsed subcommand and return JSON-ready data."""
    if args.command == "get":
        return client.pull_request(args.owner, args.repo, args.number).to_api()
    if args.command == "list":
        prs = client.pull_requests(
            args.owner,
            args.repo,
            base=args.base,
            state=Openness(args.state),
            sort=SortType(args.sort),
            direction=SortDirection(args.direction),
        )
        return [pr.to_api() for pr in prs]
    pr = client.create_pull_request(
        args.owner,
        args.repo,
        title=args.title,
        head=args.head,
        base=args.base,
        body=args.body,
        maintainer_can_modify=args.maintainer_can_modify,
    )
    return pr.to_api()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    OctopullsLogging(config.logging).setup()
    log = logging.getLogger("octopulls")

    if args.check:
        print("Config OK:", config.github.api_url)
        return 0
    if not args.command:
        parser.print_usage(sys.stderr)
        return 2

    try:
        with PullRequestClient(config.github_with_token()) as client:
            data = run_command(client, args)
    except ValueError as e:
        log.error("Invalid arguments: %s", e)
        return 2
    except GitHubError as e:
        log.error("%s", e)
        return 1
    print(json.dumps(data, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
