"""Per-source adapter tests"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from userhub.adapters import (
    GithubUserAdapter,
    InternalUserAdapter,
    JsonplaceholderUserAdapter,
    TwitterUserAdapter,
    UserAdapter,
    get_adapter,
    github_user_adapter,
    internal_user_adapter,
    jsonplaceholder_user_adapter,
    twitter_user_adapter,
)
from userhub.core.errors import ValidationError
from userhub.schemas.normalized import DEFAULT_AVATAR, UserSource
from userhub.schemas.raw import GithubUserDto, InternalUserDto, JsonplaceholderUserDto, TwitterUserDto


def _future_iso(days=365):
    return (datetime.now(timezone.utc) + timedelta(days=days)).strftime("%Y-%m-%dT%H:%M:%SZ")


class TestAdapterContract:
    """Test the shared adapter contract"""

    @pytest.mark.parametrize(
        "adapter",
        [internal_user_adapter, github_user_adapter, jsonplaceholder_user_adapter, twitter_user_adapter],
    )
    def test_default_adapters_satisfy_protocol(self, adapter):
        assert isinstance(adapter, UserAdapter)

    @pytest.mark.parametrize("source", list(UserSource))
    def test_get_adapter_covers_every_source(self, source):
        assert get_adapter(source).source is source

    def test_get_adapter_rejects_unknown(self):
        with pytest.raises(ValueError):
            get_adapter("myspace")

    @pytest.mark.parametrize(
        "adapter",
        [internal_user_adapter, github_user_adapter, jsonplaceholder_user_adapter, twitter_user_adapter],
    )
    def test_missing_dto_is_required_field_failure(self, adapter):
        with pytest.raises(ValidationError, match=r"Missing or invalid required field: dto"):
            adapter.adapt(None)

    def test_unsupported_dto_type(self):
        with pytest.raises(TypeError):
            internal_user_adapter.adapt(["101", "X"])


class TestInternalUserAdapter:
    """Test internal API adapter"""

    @pytest.fixture
    def dto(self):
        return InternalUserDto(
            userId="101",
            fullName="María González",
            emailAddress="maria@company.com",
            profileImage="https://i.pravatar.cc/150?img=5",
            registeredAt="2023-06-15T10:30:00Z",
        )

    def test_adapts_valid_user(self, dto):
        user = internal_user_adapter.adapt(dto)
        assert user.id == 101
        assert user.name == "María González"
        assert user.email == "maria@company.com"
        assert user.avatar == "https://i.pravatar.cc/150?img=5"
        assert user.joined_date == datetime(2023, 6, 15, 10, 30, tzinfo=timezone.utc)
        assert user.source == UserSource.INTERNAL

    def test_accepts_plain_mapping(self):
        user = internal_user_adapter.adapt({"userId": "7", "fullName": "X", "emailAddress": "x@x.com"})
        assert user.id == 7
        assert user.avatar == DEFAULT_AVATAR
        assert user.joined_date is not None

    def test_zero_id_rejected(self):
        with pytest.raises(ValidationError, match=r"\[InternalUserAdapter\] userId must be positive: 0"):
            internal_user_adapter.adapt({"userId": "0", "fullName": "X", "emailAddress": "x@x.com"})

    def test_negative_id_rejected(self):
        with pytest.raises(ValidationError, match="must be positive: -5"):
            internal_user_adapter.adapt({"userId": "-5", "fullName": "X", "emailAddress": "x@x.com"})

    def test_non_numeric_id_rejected(self):
        with pytest.raises(ValidationError, match="Invalid number format for field: userId: abc"):
            internal_user_adapter.adapt({"userId": "abc", "fullName": "X", "emailAddress": "x@x.com"})

    @pytest.mark.parametrize("field", ["userId", "fullName", "emailAddress"])
    def test_required_fields(self, field):
        data = {"userId": "1", "fullName": "X", "emailAddress": "x@x.com"}
        data[field] = "   "
        with pytest.raises(ValidationError, match=f"Missing or invalid required field: {field}"):
            internal_user_adapter.adapt(data)

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError, match="Invalid email format: not-an-email"):
            internal_user_adapter.adapt({"userId": "1", "fullName": "X", "emailAddress": "not-an-email"})

    @pytest.mark.parametrize("user_id", ["1.5", "inf"])
    def test_non_integral_id_rejected(self, user_id):
        with pytest.raises(ValidationError, match=rf"\[InternalUserAdapter\] Invalid number format for field: userId: {user_id}$"):
            internal_user_adapter.adapt({"userId": user_id, "fullName": "X", "emailAddress": "x@x.com"})

    def test_integral_float_id_accepted(self):
        user = internal_user_adapter.adapt({"userId": "12.0", "fullName": "X", "emailAddress": "x@x.com"})
        assert user.id == 12
        assert isinstance(user.id, int)

    def test_email_with_trailing_newline_rejected(self):
        with pytest.raises(ValidationError, match="Invalid email format"):
            internal_user_adapter.adapt({"userId": "1", "fullName": "X", "emailAddress": "x@x.com\n"})

    def test_email_normalized(self):
        user = internal_user_adapter.adapt({"userId": "1", "fullName": "X", "emailAddress": "MARIA@Company.COM"})
        assert user.email == "maria@company.com"

    def test_name_trimmed_and_capped(self):
        user = internal_user_adapter.adapt({"userId": "1", "fullName": "  " + "A" * 200, "emailAddress": "x@x.com"})
        assert user.name == "A" * 150 + "..."

    def test_empty_profile_image_uses_default(self):
        user = internal_user_adapter.adapt(
            {"userId": "1", "fullName": "X", "emailAddress": "x@x.com", "profileImage": ""}
        )
        assert user.avatar == DEFAULT_AVATAR

    def test_future_registration_date_clamped(self, log_records):
        user = internal_user_adapter.adapt(
            {"userId": "1", "fullName": "X", "emailAddress": "x@x.com", "registeredAt": _future_iso()}
        )
        assert user.joined_date <= datetime.now(timezone.utc)
        assert any("Future registration date" in r["message"] for r in log_records)

    def test_clamp_can_be_disabled(self):
        adapter = InternalUserAdapter(clamp_future_dates=False)
        user = adapter.adapt({"userId": "1", "fullName": "X", "emailAddress": "x@x.com", "registeredAt": _future_iso()})
        assert user.joined_date > datetime.now(timezone.utc)

    def test_invalid_registration_date_falls_back_to_now(self):
        before = datetime.now(timezone.utc)
        user = internal_user_adapter.adapt(
            {"userId": "1", "fullName": "X", "emailAddress": "x@x.com", "registeredAt": "not-a-date"}
        )
        assert user.joined_date >= before

    def test_adapt_is_pure(self, dto):
        assert internal_user_adapter.adapt(dto) == internal_user_adapter.adapt(dto)

    def test_result_is_immutable(self, dto):
        user = internal_user_adapter.adapt(dto)
        with pytest.raises(PydanticValidationError):
            user.name = "Changed"


class TestGithubUserAdapter:
    """Test GitHub adapter"""

    @pytest.fixture
    def dto(self):
        return GithubUserDto(
            id=1,
            login="octocat",
            name="The Octocat",
            email="octocat@github.com",
            avatar_url="https://avatars.githubusercontent.com/u/583231",
            created_at="2011-01-25T18:44:36Z",
        )

    def test_adapts_valid_user(self, dto):
        user = github_user_adapter.adapt(dto)
        assert user.model_dump(exclude={"joined_date"}) == {
            "id": 1,
            "name": "The Octocat",
            "email": "octocat@github.com",
            "avatar": "https://avatars.githubusercontent.com/u/583231",
            "source": UserSource.GITHUB,
        }
        assert user.joined_date == datetime(2011, 1, 25, 18, 44, 36, tzinfo=timezone.utc)

    def test_name_falls_back_to_login(self):
        user = github_user_adapter.adapt({"id": 2, "login": "hubot", "name": None})
        assert user.name == "hubot"

    def test_blank_name_falls_back_to_login(self):
        user = github_user_adapter.adapt({"id": 2, "login": "hubot", "name": "   "})
        assert user.name == "hubot"

    @pytest.mark.parametrize("email", [None, "", "not-valid", "hubot@example.com\n"])
    def test_email_synthesized_from_login(self, email):
        user = github_user_adapter.adapt({"id": 2, "login": "HuBot", "email": email})
        assert user.email == "hubot@github.com"

    def test_valid_email_normalized(self):
        user = github_user_adapter.adapt({"id": 2, "login": "hubot", "email": "HuBot@GitHub.com"})
        assert user.email == "hubot@github.com"

    def test_missing_avatar_uses_default(self):
        user = github_user_adapter.adapt({"id": 2, "login": "hubot"})
        assert user.avatar == DEFAULT_AVATAR

    def test_joined_date_unset_without_created_at(self):
        user = github_user_adapter.adapt({"id": 2, "login": "hubot"})
        assert user.has_joined_date is False
        assert "joined_date" not in user.model_dump(exclude_unset=True)

    def test_id_not_checked_for_positivity(self):
        assert github_user_adapter.adapt({"id": 0, "login": "ghost"}).id == 0

    def test_positivity_check_opt_in(self):
        adapter = GithubUserAdapter(require_positive_id=True)
        with pytest.raises(ValidationError, match=r"\[GithubUserAdapter\] id must be positive: 0"):
            adapter.adapt({"id": 0, "login": "ghost"})

    def test_future_created_at_not_clamped_by_default(self):
        user = github_user_adapter.adapt({"id": 2, "login": "hubot", "created_at": _future_iso()})
        assert user.joined_date > datetime.now(timezone.utc)

    def test_future_created_at_clamped_when_enabled(self):
        adapter = GithubUserAdapter(clamp_future_dates=True)
        user = adapter.adapt({"id": 2, "login": "hubot", "created_at": _future_iso()})
        assert user.joined_date <= datetime.now(timezone.utc)

    @pytest.mark.parametrize("missing", ["id", "login"])
    def test_required_fields(self, missing):
        data = {"id": 2, "login": "hubot"}
        del data[missing]
        with pytest.raises(ValidationError, match=f"Missing or invalid required field: {missing}"):
            github_user_adapter.adapt(data)

    def test_adapt_is_pure(self, dto):
        assert github_user_adapter.adapt(dto) == github_user_adapter.adapt(dto)


class TestJsonplaceholderUserAdapter:
    """Test JSONPlaceholder adapter"""

    @pytest.fixture
    def dto(self):
        return JsonplaceholderUserDto(id=1, name="Leanne Graham", username="Bret", email="leanne@example.com")

    def test_adapts_valid_user(self, dto):
        user = jsonplaceholder_user_adapter.adapt(dto)
        assert user.id == 1
        assert user.name == "Leanne Graham"
        assert user.email == "leanne@example.com"
        assert user.avatar == DEFAULT_AVATAR
        assert user.source == UserSource.JSONPLACEHOLDER

    def test_joined_date_never_set(self, dto):
        user = jsonplaceholder_user_adapter.adapt(dto)
        assert user.joined_date is None
        assert user.has_joined_date is False

    def test_name_capped_at_100(self):
        user = jsonplaceholder_user_adapter.adapt({"id": 1, "name": "B" * 120, "email": "b@example.com"})
        assert user.name == "B" * 100 + "..."

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError, match=r"\[JsonplaceholderUserAdapter\] Invalid email format: nope"):
            jsonplaceholder_user_adapter.adapt({"id": 1, "name": "X", "email": "nope"})

    def test_email_with_trailing_newline_rejected(self):
        with pytest.raises(ValidationError, match=r"Invalid email format"):
            jsonplaceholder_user_adapter.adapt({"id": 1, "name": "X", "email": "x@example.com\n"})

    @pytest.mark.parametrize("missing", ["id", "name", "email"])
    def test_required_fields(self, missing):
        data = {"id": 1, "name": "X", "email": "x@example.com"}
        del data[missing]
        with pytest.raises(ValidationError, match=f"Missing or invalid required field: {missing}"):
            jsonplaceholder_user_adapter.adapt(data)


class TestTwitterUserAdapter:
    """Test Twitter adapter"""

    @pytest.fixture
    def dto(self):
        return TwitterUserDto(
            id_str="783214",
            screen_name="elonmusk",
            name="Elon Musk",
            profile_image_url_https="https://pbs.twimg.com/profile_images/1683325380441128960/yRsRRjGO_normal.jpg",
            created_at="Tue Jun 02 20:12:29 +0000 2009",
            verified=True,
            followers_count=150000000,
        )

    def test_adapts_valid_user(self, dto):
        user = twitter_user_adapter.adapt(dto)
        assert user.id == 783214
        assert user.name == "Elon Musk"
        assert user.email == "elonmusk@twitter.com"
        assert user.avatar == "https://pbs.twimg.com/profile_images/1683325380441128960/yRsRRjGO_400x400.jpg"
        assert user.joined_date == datetime(2009, 6, 2, 20, 12, 29, tzinfo=timezone.utc)
        assert user.source == UserSource.TWITTER

    def test_email_always_synthesized(self):
        user = twitter_user_adapter.adapt({"id_str": "1", "screen_name": "Jack", "email": "other@example.com"})
        assert user.email == "jack@twitter.com"

    def test_name_falls_back_to_handle(self):
        user = twitter_user_adapter.adapt({"id_str": "1", "screen_name": "jack", "name": ""})
        assert user.name == "@jack"

    @pytest.mark.parametrize("url", [None, "", "   "])
    def test_blank_avatar_uses_default(self, url):
        user = twitter_user_adapter.adapt({"id_str": "1", "screen_name": "jack", "profile_image_url_https": url})
        assert user.avatar == DEFAULT_AVATAR

    def test_avatar_without_normal_suffix_unchanged(self):
        url = "https://pbs.twimg.com/profile_images/1/photo.jpg"
        user = twitter_user_adapter.adapt({"id_str": "1", "screen_name": "jack", "profile_image_url_https": url})
        assert user.avatar == url

    def test_non_numeric_id_rejected(self):
        with pytest.raises(ValidationError, match=r"\[TwitterUserAdapter\] Invalid number format for field: id_str: abc"):
            twitter_user_adapter.adapt({"id_str": "abc", "screen_name": "jack"})

    @pytest.mark.parametrize("id_str", ["1.5", "inf"])
    def test_non_integral_id_rejected(self, id_str):
        with pytest.raises(ValidationError, match=rf"\[TwitterUserAdapter\] Invalid number format for field: id_str: {id_str}$"):
            twitter_user_adapter.adapt({"id_str": id_str, "screen_name": "jack"})

    def test_zero_id_accepted_by_default(self):
        assert twitter_user_adapter.adapt({"id_str": "0", "screen_name": "jack"}).id == 0

    def test_positivity_check_opt_in(self):
        adapter = TwitterUserAdapter(require_positive_id=True)
        with pytest.raises(ValidationError, match="id_str must be positive: 0"):
            adapter.adapt({"id_str": "0", "screen_name": "jack"})

    def test_missing_created_at_falls_back_to_now(self):
        before = datetime.now(timezone.utc)
        user = twitter_user_adapter.adapt({"id_str": "1", "screen_name": "jack"})
        assert user.joined_date >= before

    def test_future_created_at_not_clamped_by_default(self):
        user = twitter_user_adapter.adapt({"id_str": "1", "screen_name": "jack", "created_at": _future_iso()})
        assert user.joined_date > datetime.now(timezone.utc)

    @pytest.mark.parametrize("missing", ["id_str", "screen_name"])
    def test_required_fields(self, missing):
        data = {"id_str": "1", "screen_name": "jack"}
        del data[missing]
        with pytest.raises(ValidationError, match=f"Missing or invalid required field: {missing}"):
            twitter_user_adapter.adapt(data)

    def test_adapt_is_pure(self, dto):
        assert twitter_user_adapter.adapt(dto) == twitter_user_adapter.adapt(dto)
