from __future__ import annotations

from typing import Sequence

from ghcard.core.models import ContributionStats, Repository

# language sizes are only summed over the most recently pushed repos
LANGUAGE_SAMPLE_SIZE = 20
RECENT_REPOS_LIMIT = 10


def aggregate_contributions(repos: Sequence[Repository]) -> ContributionStats:
    """Totals over all repos, language sizes over the first few.

    The caller passes repositories already sorted by most recent push.
    """
    languages: dict[str, int] = {}
    for repo in repos[:LANGUAGE_SAMPLE_SIZE]:
        if repo.language:
            languages[repo.language] = languages.get(repo.language, 0) + repo.size

    return ContributionStats(
        total_stars=sum(r.stargazers_count for r in repos),
        total_forks=sum(r.forks_count for r in repos),
        total_repos=len(repos),
        languages=languages,
        recent_repos=list(repos[:RECENT_REPOS_LIMIT]),
    )
