"""git-unmerged: report branch commits that have not been merged upstream.

Classifies each commit reported by `git cherry` as unmerged or as equivalent
to a change already on the upstream branch. See `git-unmerged --help`.
"""
