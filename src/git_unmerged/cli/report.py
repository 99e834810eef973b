"""Human-facing and JSON rendering of a loaded BranchCollection.

Unmerged commits are shown in yellow, equivalent commits in green.
"""

from typing import Any

import click

from git_unmerged.core.branches import BranchCollection
from git_unmerged.core.describe import CommitDescriber

UNMERGED_COLOR = "yellow"
EQUIVALENT_COLOR = "green"


def render_overview(collection: BranchCollection) -> None:
    """Print one summary line per branch with pending commits."""
    if not collection.has_pending_commits():
        return

    click.echo(
        f"The following branches possibly have commits not merged to {collection.upstream}:"
    )
    for branch in collection.branches_with_pending_commits():
        num_unmerged = click.style(str(len(branch.unmerged_commits())), fg=UNMERGED_COLOR)
        num_equivalent = click.style(str(len(branch.equivalent_commits())), fg=EQUIVALENT_COLOR)
        click.echo(f"  {branch.name} ({num_unmerged}/{num_equivalent} commits)")


def render_legend(upstream: str, *, show_equivalent: bool) -> None:
    click.echo("  " + click.style("yellow", fg=UNMERGED_COLOR) + " commits have not been merged")
    if show_equivalent:
        click.echo(
            "  "
            + click.style("green", fg=EQUIVALENT_COLOR)
            + f" commits have equivalent changes in {upstream} but different SHAs"
        )


def render_specifics(
    collection: BranchCollection, describer: CommitDescriber, *, show_equivalent: bool
) -> None:
    """Print the per-branch breakdown, or a note that nothing is out of sync."""
    if not collection.has_pending_commits():
        click.echo(
            f"There are no {collection.scope} branches out of sync with {collection.upstream}"
        )
        return

    click.echo("Below is a breakdown for each branch. Here's a legend:")
    click.echo()
    render_legend(collection.upstream, show_equivalent=show_equivalent)

    for branch in collection.branches_with_pending_commits():
        unmerged = branch.unmerged_commits()
        click.echo()
        if not unmerged and not show_equivalent:
            click.echo(
                f"{branch.name}: "
                "(no unmerged commits, must have merged commits with different SHAs)"
            )
        else:
            click.echo(f"{branch.name}:")

        for commit in unmerged:
            click.echo(click.style(describer.describe(commit), fg=UNMERGED_COLOR))

        if show_equivalent:
            for commit in branch.equivalent_commits():
                click.echo(click.style(describer.describe(commit), fg=EQUIVALENT_COLOR))


def build_json_report(collection: BranchCollection) -> dict[str, Any]:
    """Build a JSON-serializable summary of branches with pending commits."""
    return {
        "upstream": collection.upstream,
        "scope": collection.scope,
        "branches": [
            {
                "name": branch.name,
                "unmerged": [commit.sha for commit in branch.unmerged_commits()],
                "equivalent": [commit.sha for commit in branch.equivalent_commits()],
            }
            for branch in collection.branches_with_pending_commits()
        ],
    }
