"""Per-source user adapters and the lookup used by the aggregator."""

from userhub.adapters.base import BaseUserAdapter, UserAdapter
from userhub.adapters.github import GithubUserAdapter, github_user_adapter
from userhub.adapters.internal import InternalUserAdapter, internal_user_adapter
from userhub.adapters.jsonplaceholder import JsonplaceholderUserAdapter, jsonplaceholder_user_adapter
from userhub.adapters.twitter import TwitterUserAdapter, twitter_user_adapter
from userhub.schemas.normalized import UserSource


def get_adapter(source: UserSource) -> BaseUserAdapter:
    """Default adapter instance for a source."""
    if source is UserSource.INTERNAL:
        return internal_user_adapter
    if source is UserSource.GITHUB:
        return github_user_adapter
    if source is UserSource.JSONPLACEHOLDER:
        return jsonplaceholder_user_adapter
    if source is UserSource.TWITTER:
        return twitter_user_adapter
    raise ValueError(f"Unsupported source: {source}")


__all__ = [
    "BaseUserAdapter",
    "UserAdapter",
    "GithubUserAdapter",
    "InternalUserAdapter",
    "JsonplaceholderUserAdapter",
    "TwitterUserAdapter",
    "get_adapter",
    "github_user_adapter",
    "internal_user_adapter",
    "jsonplaceholder_user_adapter",
    "twitter_user_adapter",
]
