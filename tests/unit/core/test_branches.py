"""Tests for BranchCollection loading and aggregate queries."""

import subprocess
from pathlib import Path

import pytest

from git_unmerged.core.branches import (
    BranchCollection,
    BranchCollectionNotLoadedError,
    clean_branch_output,
    load_branch_record,
)
from git_unmerged.core.commit import UnrecognizedCommitMarkerError
from git_unmerged.gateway.git.fake import FakeGit

REPO = Path("/repo")


def _collection(
    git: FakeGit, *, upstream: str = "master", remote: bool = False
) -> BranchCollection:
    return BranchCollection(git, REPO, upstream=upstream, scope="remote" if remote else "local")


# ============================================================================
# clean_branch_output
# ============================================================================


def test_clean_branch_output_excludes_upstream() -> None:
    output = "  feature-a\n  feature-b\n* master\n"
    assert clean_branch_output(output, "master") == ["feature-a", "feature-b"]


def test_clean_branch_output_strips_current_branch_marker() -> None:
    output = "* feature-b\n  feature-a\n  master\n"
    assert clean_branch_output(output, "master") == ["feature-a", "feature-b"]


def test_clean_branch_output_strips_other_worktree_marker() -> None:
    output = "+ feature-wt\n  master\n"
    assert clean_branch_output(output, "master") == ["feature-wt"]


def test_clean_branch_output_sorts_names() -> None:
    output = "  zeta\n  alpha\n  mid\n"
    assert clean_branch_output(output, "master") == ["alpha", "mid", "zeta"]


def test_clean_branch_output_skips_blank_lines() -> None:
    output = "\n  feature-a\n\n   \n"
    assert clean_branch_output(output, "master") == ["feature-a"]


def test_clean_branch_output_skips_detached_head() -> None:
    output = "* (HEAD detached at 1a2b3c4)\n  feature-a\n  master\n"
    assert clean_branch_output(output, "master") == ["feature-a"]


def test_clean_branch_output_remote_skips_symbolic_head() -> None:
    output = "  origin/HEAD -> origin/main\n  origin/feature-a\n  origin/master\n"
    assert clean_branch_output(output, "origin/master") == ["origin/feature-a"]


def test_clean_branch_output_excludes_names_with_upstream_as_token() -> None:
    """Upstream matched as a word-delimited token, not only as the whole name."""
    output = "  master-hotfix\n  feature-a\n  masterful\n"
    assert clean_branch_output(output, "master") == ["feature-a", "masterful"]


# ============================================================================
# load_branch_record
# ============================================================================


def test_load_branch_record_scenario() -> None:
    git = FakeGit(
        cherry_output={("master", "feature-a"): "+ abc123 add widget\n- def456 fix typo\n"}
    )

    branch = load_branch_record(git, REPO, "master", "feature-a")

    assert branch.name == "feature-a"
    assert [c.sha for c in branch.unmerged_commits()] == ["abc123"]
    assert [c.sha for c in branch.equivalent_commits()] == ["def456"]


def test_load_branch_record_empty_output() -> None:
    git = FakeGit()

    branch = load_branch_record(git, REPO, "master", "feature-a")

    assert branch.commits == ()


# ============================================================================
# BranchCollection.load
# ============================================================================


def test_load_excludes_upstream_branch() -> None:
    git = FakeGit(local_branches="  feature-a\n  feature-b\n* master\n")
    collection = _collection(git)

    collection.load()

    assert [b.name for b in collection.branches] == ["feature-a", "feature-b"]
    assert git.cherry_calls == [("master", "feature-a"), ("master", "feature-b")]


def test_load_local_scope_uses_local_listing() -> None:
    git = FakeGit(local_branches="  feature-a\n", remote_branches="  origin/feature-r\n")
    collection = _collection(git)

    collection.load()

    assert git.listing_calls == ["local"]
    assert [b.name for b in collection.branches] == ["feature-a"]


def test_load_remote_scope_uses_remote_listing() -> None:
    git = FakeGit(
        local_branches="  feature-a\n",
        remote_branches="  origin/HEAD -> origin/master\n  origin/feature-r\n  origin/master\n",
        cherry_output={("origin/master", "origin/feature-r"): "+ abc123 remote work\n"},
    )
    collection = _collection(git, upstream="origin/master", remote=True)

    collection.load()

    assert git.listing_calls == ["remote"]
    assert [b.name for b in collection.branches] == ["origin/feature-r"]
    assert collection.has_pending_commits()


def test_load_is_idempotent() -> None:
    git = FakeGit(
        local_branches="  feature-a\n  master\n",
        cherry_output={("master", "feature-a"): "+ abc123 add widget\n"},
    )
    collection = _collection(git)

    collection.load()
    first = collection.branches
    collection.load()

    assert collection.branches == first
    assert git.listing_calls == ["local"]
    assert git.cherry_calls == [("master", "feature-a")]


def test_queries_before_load_raise() -> None:
    collection = _collection(FakeGit())

    assert not collection.is_loaded
    with pytest.raises(BranchCollectionNotLoadedError):
        collection.has_pending_commits()
    with pytest.raises(BranchCollectionNotLoadedError):
        collection.branches_with_pending_commits()


def test_load_fails_fast_on_git_failure() -> None:
    git = FakeGit(
        local_branches="  alpha\n  beta\n  gamma\n",
        cherry_failures={"beta": "fatal: bad revision 'beta'"},
    )
    collection = _collection(git)

    with pytest.raises(RuntimeError) as exc_info:
        collection.load()

    assert isinstance(exc_info.value.__cause__, subprocess.CalledProcessError)
    assert "fatal: bad revision 'beta'" in str(exc_info.value)
    # gamma is never queried once beta fails
    assert git.cherry_calls == [("master", "alpha"), ("master", "beta")]
    assert not collection.is_loaded


def test_load_fails_on_unrecognized_marker() -> None:
    git = FakeGit(
        local_branches="  feature-a\n",
        cherry_output={("master", "feature-a"): "? abc123 mystery\n"},
    )
    collection = _collection(git)

    with pytest.raises(UnrecognizedCommitMarkerError):
        collection.load()

    assert not collection.is_loaded


def test_load_with_no_candidate_branches() -> None:
    git = FakeGit(local_branches="* master\n")
    collection = _collection(git)

    collection.load()

    assert collection.branches == ()
    assert not collection.has_pending_commits()
    assert collection.branches_with_pending_commits() == []


# ============================================================================
# Aggregate queries
# ============================================================================


def test_branches_with_pending_commits_sorted_by_name() -> None:
    git = FakeGit(
        local_branches="  zeta\n  alpha\n",
        cherry_output={
            ("master", "zeta"): "+ z1 zeta work\n",
            ("master", "alpha"): "- a1 alpha work\n",
        },
    )
    collection = _collection(git)
    collection.load()

    pending = collection.branches_with_pending_commits()

    assert [b.name for b in pending] == ["alpha", "zeta"]


def test_branches_with_pending_commits_excludes_empty_branches() -> None:
    git = FakeGit(
        local_branches="  feature-a\n  merged\n",
        cherry_output={("master", "feature-a"): "+ abc123 add widget\n"},
    )
    collection = _collection(git)
    collection.load()

    assert [b.name for b in collection.branches_with_pending_commits()] == ["feature-a"]
    assert [b.name for b in collection.branches] == ["feature-a", "merged"]


def test_has_pending_commits_matches_pending_list() -> None:
    git = FakeGit(local_branches="  merged\n")
    collection = _collection(git)
    collection.load()

    assert collection.has_pending_commits() == bool(collection.branches_with_pending_commits())
    assert not collection.has_pending_commits()


def test_has_pending_commits_true_for_equivalent_only_branch() -> None:
    git = FakeGit(
        local_branches="  rebased\n",
        cherry_output={("master", "rebased"): "- def456 fix typo\n"},
    )
    collection = _collection(git)
    collection.load()

    assert collection.has_pending_commits()


def test_custom_upstream_is_used_for_filtering_and_comparison() -> None:
    git = FakeGit(
        local_branches="  develop\n  feature-a\n* master\n",
        cherry_output={("develop", "master"): "+ m1 master only\n"},
    )
    collection = _collection(git, upstream="develop")

    collection.load()

    assert [b.name for b in collection.branches] == ["feature-a", "master"]
    assert git.cherry_calls == [("develop", "feature-a"), ("develop", "master")]
    assert [b.name for b in collection.branches_with_pending_commits()] == ["master"]
