"""Tests for UserType field resolvers and id parsing."""

import pytest

from graphql_api.types_user import UserType, parse_user_id
from domain.user.core.exceptions.user_errors import UserNotFoundError
from domain.user.core.value_objects.user_id import UserId


def test_user_type_maps_contract_field_names(make_user):
    user = make_user("user_2abc", username="jane", full_name="Jane Doe", bio="hi")
    user.follower_count = 3
    user.following_count = 2
    user.post_count = 7
    user_type = UserType()

    assert user_type.id(root=user) == str(user.user_id)
    assert user_type.clerk_id(root=user) == "user_2abc"
    assert user_type.username(root=user) == "jane"
    assert user_type.fullname(root=user) == "Jane Doe"
    assert user_type.email(root=user) == "user_2abc@example.com"
    assert user_type.image(root=user) == "https://img.example.com/user_2abc.png"
    assert user_type.bio(root=user) == "hi"
    assert user_type.followers(root=user) == 3
    assert user_type.following(root=user) == 2
    assert user_type.posts(root=user) == 7
    assert user_type.created_at(root=user) == user.created_at
    assert user_type.updated_at(root=user) == user.updated_at


def test_parse_user_id_valid():
    user_id = UserId.generate()

    assert parse_user_id(str(user_id)) == user_id


@pytest.mark.parametrize("value", ["", "abc", "12345"])
def test_parse_user_id_malformed_reports_not_found(value):
    with pytest.raises(UserNotFoundError):
        parse_user_id(value)
