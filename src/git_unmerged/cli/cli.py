import json
import logging
from typing import NoReturn

import click

from git_unmerged.cli.context import UnmergedContext, create_context
from git_unmerged.cli.report import build_json_report, render_overview, render_specifics
from git_unmerged.core.branches import BranchCollection, BranchScope
from git_unmerged.core.config import load_config, resolve_config
from git_unmerged.core.describe import CommitDescriber

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

EPILOG = """\b
Examples:
  git-unmerged                          check local branches for unmerged commits
  git-unmerged -a                       also show commits merged with a different SHA
  git-unmerged --upstream otherbranch   use a different upstream than master
  git-unmerged --remote                 compare remote branches against origin/master
"""


def _fail(message: str) -> NoReturn:
    click.echo(click.style("Error: ", fg="red") + message, err=True)
    raise SystemExit(1)


@click.command(name="git-unmerged", context_settings=CONTEXT_SETTINGS, epilog=EPILOG)
@click.version_option(package_name="git-unmerged")
@click.option(
    "-a",
    "show_equivalent",
    is_flag=True,
    help="Also show commits with equivalent changes upstream but different SHAs",
)
@click.option(
    "--upstream",
    metavar="BRANCH",
    help="Branch to compare against (default: master, or origin/master with --remote)",
)
@click.option("--remote", is_flag=True, help="Compare remote branches instead of local ones")
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    show_equivalent: bool,
    upstream: str | None,
    remote: bool,
    as_json: bool,
    debug: bool,
) -> None:
    """Report commits on branches that have not been merged into an upstream branch.

    Relies on "git cherry". Commits shown in yellow have not been merged;
    commits shown in green have equivalent changes in the upstream branch but
    different SHAs (for example after a rebase or cherry-pick).

    Upstream defaults can be set per repository in .git-unmerged.toml
    (keys: upstream, remote_upstream, show_equivalent).
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    unmerged_ctx: UnmergedContext = ctx.obj

    repo_root = unmerged_ctx.git.get_repo_root(unmerged_ctx.cwd)
    if repo_root is None:
        _fail("Not in a git repository")

    scope: BranchScope = "remote" if remote else "local"

    try:
        config = resolve_config(
            load_config(repo_root),
            scope=scope,
            upstream=upstream,
            show_equivalent=show_equivalent,
        )
        logger.debug("config=%s", config)

        collection = BranchCollection(
            unmerged_ctx.git, repo_root, upstream=config.upstream, scope=config.scope
        )
        collection.load()

        if as_json:
            click.echo(json.dumps(build_json_report(collection), indent=2))
            return

        describer = CommitDescriber(unmerged_ctx.git, repo_root)
        render_overview(collection)
        click.echo()
        render_specifics(collection, describer, show_equivalent=config.show_equivalent)
    except (RuntimeError, ValueError) as e:
        click.echo(click.style("Error: ", fg="red") + str(e), err=True)
        raise SystemExit(1) from e


def main() -> None:
    """CLI entry point used by the `git-unmerged` console script."""
    cli()
