"""CLI demo that exercises the :class:`gitdata.GitHub` tag object helpers.

Run with the virtual environment activated::

    python examples/demo_tags.py octocat Hello-World 940bd336248efae0f9ee5bc7b2d5c985887b16ac

Set ``GITHUB_TOKEN`` to authenticate. Set ``GITHUB_API_URL`` for GitHub
Enterprise. Pass ``--create`` with ``--object`` to create a new tag object
instead of fetching one.
"""

import argparse
import logging
import os
import sys
from pprint import pprint

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from gitdata import GitHub, GitDataError

logging.basicConfig(level=logging.INFO)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("owner")
    parser.add_argument("repo")
    parser.add_argument("sha", nargs="?")
    parser.add_argument("--create", metavar="TAG", help="Create a tag object with this name")
    parser.add_argument("--object", help="SHA of the object to tag")
    parser.add_argument("--type", default="commit")
    parser.add_argument("--message", default="")
    args = parser.parse_args()

    github = GitHub(owner=args.owner, repo=args.repo)
    try:
        if args.create:
            tag = github.git_data.tags.create(
                None,
                None,
                tag=args.create,
                message=args.message,
                object=args.object,
                type=args.type,
            )
            print(f"Created tag object. Remember to create refs/tags/{args.create} to publish it.")
        else:
            tag = github.git_data.tags.get(None, None, args.sha)
    except GitDataError as exc:
        print(f"Invalid input: {exc}")
        return 2

    pprint(tag)
    return 0


if __name__ == "__main__":
    sys.exit(main())
