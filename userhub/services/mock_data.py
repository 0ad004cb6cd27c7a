"""Static per-source user batches standing in for the upstream APIs."""

from __future__ import annotations

from typing import List

from userhub.adapters import (
    github_user_adapter,
    internal_user_adapter,
    jsonplaceholder_user_adapter,
    twitter_user_adapter,
)
from userhub.schemas.batch import SourceBatch
from userhub.schemas.normalized import UserSource
from userhub.schemas.raw import GithubUserDto, InternalUserDto, JsonplaceholderUserDto, TwitterUserDto


class MockUserDataProvider:
    """Returns fresh DTO lists on every call."""

    def github_users(self) -> List[GithubUserDto]:
        return [
            GithubUserDto(
                id=1,
                login="octocat",
                name="The Octocat",
                email="octocat@github.com",
                avatar_url="https://avatars.githubusercontent.com/u/583231",
                created_at="2011-01-25T18:44:36Z",
            ),
        ]

    def internal_users(self) -> List[InternalUserDto]:
        return [
            InternalUserDto(
                userId="101",
                fullName="María González",
                emailAddress="maria@company.com",
                profileImage="https://i.pravatar.cc/150?img=5",
                registeredAt="2023-06-15T10:30:00Z",
            ),
        ]

    def jsonplaceholder_users(self) -> List[JsonplaceholderUserDto]:
        return [
            JsonplaceholderUserDto(
                id=1,
                name="Leanne Graham",
                username="Bret",
                email="leanne@example.com",
            ),
        ]

    def twitter_users(self) -> List[TwitterUserDto]:
        return [
            TwitterUserDto(
                id_str="783214",
                screen_name="elonmusk",
                name="Elon Musk",
                profile_image_url_https="https://pbs.twimg.com/profile_images/1683325380441128960/yRsRRjGO_normal.jpg",
                created_at="Tue Jun 02 20:12:29 +0000 2009",
                verified=True,
                followers_count=150000000,
            ),
        ]

    def batches(self) -> List[SourceBatch]:
        """All sources in load order: GitHub, Internal, JSONPlaceholder, Twitter."""
        return [
            SourceBatch.for_source(UserSource.GITHUB, self.github_users(), github_user_adapter),
            SourceBatch.for_source(UserSource.INTERNAL, self.internal_users(), internal_user_adapter),
            SourceBatch.for_source(
                UserSource.JSONPLACEHOLDER, self.jsonplaceholder_users(), jsonplaceholder_user_adapter
            ),
            SourceBatch.for_source(UserSource.TWITTER, self.twitter_users(), twitter_user_adapter),
        ]

